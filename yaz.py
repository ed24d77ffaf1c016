"""
yazlang Interpreter

This is the main entry point for the yazlang interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer tokenizes the source code into meaningful tokens.
3. The Parser processes tokens into an AST following the language grammar.
4. The Interpreter walks the AST, evaluating expressions and executing statements.

Set ``YAZDEBUG`` in the environment to dump the tokens and AST before running.
"""
import os
import sys

from yazlang.exceptions import UnexpectedTokenException, YazException
from yazlang.interpreter import Interpreter
from yazlang.lexer import TokenStream
from yazlang.nodes import format_node
from yazlang.parser import Parser


def print_usage():
    """
    Print usage.
    """
    print()
    print("yazlang Interpreter")
    print()
    print("Usage:")
    print("    yaz <script>")
    print()
    print("Arguments:")
    print("    <script>")
    print("        Path to a yazlang source file to execute.")
    print()
    print("Example:")
    print("    yaz hello.yaz")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")


def debug_print_tokens_ast(stream, ast):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n", file=sys.stderr)
    print(list(stream.tokens), file=sys.stderr)
    print("\nAST:\n", file=sys.stderr)
    print(format_node(ast), file=sys.stderr)
    print(" ", file=sys.stderr)


def run_source(code: str, name: str = "<stdin>", interpreter: Interpreter | None = None) -> Interpreter:
    """
    Tokenize, parse and execute a complete program text.
    """
    interpreter = interpreter or Interpreter(name)
    stream = TokenStream.from_source(code)
    parser = Parser(stream, name)
    ast = parser.parse()

    if os.environ.get('YAZDEBUG'):
        debug_print_tokens_ast(stream, ast)

    interpreter.run(ast)
    return interpreter


def run_script(script_name: str) -> int:
    """
    Run a yazlang script
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        print(f"Could not read {script_name}: {e.strerror or e}", file=sys.stderr)
        return 1

    try:
        run_source(code, script_name)
    except YazException as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1
    return 0


def run_repl():
    """
    Run the interactive REPL
    """
    print("yazlang Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    interpreter = Interpreter("<stdin>")
    buffer: list[str] = []
    while True:
        try:
            prompt = ">>> " if not buffer else "... "
            line = input(prompt)
            if line.strip() in {"exit", "quit"}:
                break
            buffer.append(line)
            source = "\n".join(buffer)
            try:
                run_source(source, "<stdin>", interpreter)
                buffer.clear()
            except UnexpectedTokenException as e:
                # Input that runs out mid-statement is incomplete, keep buffering
                if e.actual == "EOF":
                    continue
                print(f"{type(e).__name__}: {e}", file=sys.stderr)
                buffer.clear()
            except YazException as e:
                print(f"{type(e).__name__}: {e}", file=sys.stderr)
                buffer.clear()
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    args = argv[1:]
    if not args:
        run_repl()
        return 0
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1:
        return run_script(args[0])
    print_usage()
    return 1


def cli():
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
