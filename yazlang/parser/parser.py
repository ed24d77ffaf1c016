"""Main parser entry point for yazlang.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`yazlang.parser.expressions` and `yazlang.parser.statements`.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from yazlang import nodes
from yazlang.exceptions import UnexpectedTokenException
from yazlang.lexer import Token, TokenStream, TokenType

from . import expressions as _expr
from . import statements as _stmt


class Parser:
    """yazlang parser."""

    def __init__(self, tokens, file: str = '<stdin>'):
        """
        Initialize the parser over a token stream.

        Parameters:
            tokens (TokenStream | list[Token]): The tokens to parse. A plain
                list is wrapped in a new stream.
            file (str): The name of the script.
        """
        self.stream = tokens if isinstance(tokens, TokenStream) else TokenStream(tokens)
        self.curr_token = self.stream.current
        self.source_file = file

    def advance(self) -> bool:
        """
        Move to the next token and refresh ``curr_token``.

        Returns:
            bool: False if the stream was already on its final token.
        """
        moved = self.stream.advance()
        self.curr_token = self.stream.current
        return moved

    def peek(self) -> Token:
        """
        Return the token after the current one without consuming anything.
        """
        return self.stream.peek()

    def eat(self, token_type: TokenType, expected: str | None = None) -> Token:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (TokenType): The expected token type.
            expected (str): Optional description used in the diagnostic.

        Returns:
            Token: The consumed token.

        Raises:
            UnexpectedTokenException: If the token does not match the expected type.
        """
        tok = self.curr_token
        if tok.type != token_type:
            self.error(expected or str(token_type))
        self.advance()
        return tok

    def error(self, expected: str):
        """
        Raise an expectation failure for the current token.
        """
        raise UnexpectedTokenException(
            expected, self.curr_token.describe(), self.curr_token.line, self.source_file
        )


    # Expression wrappers
    def arithmetic(self) -> float:
        """
        Parse a ``;``-terminated arithmetic expression and fold it to a number.
        """
        return _expr.parse_arithmetic(self)


    # Statement wrappers
    def statements(self) -> list:
        """
        Parse statements until end of input or a closing brace.
        """
        return _stmt.parse_statements(self)

    def statement(self) -> tuple:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def block(self) -> tuple:
        """
        Parse a block of statements enclosed in braces.
        """
        return _stmt.parse_block(self)

    def parse_number_declaration(self) -> tuple:
        """
        Parse a ``number`` declaration.
        """
        return _stmt.parse_number_declaration(self)

    def parse_string_declaration(self) -> tuple:
        """
        Parse a ``string`` declaration.
        """
        return _stmt.parse_string_declaration(self)

    def parse_bool_declaration(self) -> tuple:
        """
        Parse a ``bool`` declaration.
        """
        return _stmt.parse_bool_declaration(self)

    def parse_if(self) -> tuple:
        """
        Parse an 'if' conditional statement.
        """
        return _stmt.parse_if(self)

    def parse_call(self) -> tuple:
        """
        Parse a function call statement.
        """
        return _stmt.parse_call(self)


    def parse(self) -> tuple:
        """
        Parse the full input into a program block.

        Returns:
            tuple: ('block', statements, line) ending with an ('eof', line) node.
        """
        first = self.curr_token
        statements = self.statements()
        if self.curr_token.type == TokenType.RBRACE:
            self.error('a statement')
        return nodes.block(statements, first.line)
