"""
Utility functions shared across yazlang tests.
"""
from yazlang.interpreter import Interpreter
from yazlang.lexer import TokenStream
from yazlang.parser import Parser


def parse_source(source: str):
    """
    Parse source code and return the program block.
    """
    parser = Parser(TokenStream.from_source(source), "<test>")
    return parser.parse()


def run_source(source: str) -> Interpreter:
    """
    Run source code and return the interpreter instance after execution.
    """
    interpreter = Interpreter("<test>")
    interpreter.run(parse_source(source))
    return interpreter
