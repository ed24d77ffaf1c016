"""Errors.

Every fatal condition raised while lexing, parsing or evaluating a program is
a subclass of :class:`YazException`. Recoverable conditions (unknown variable
inside ``yaz``, bad ``oku`` argument, unimplemented statement) are reported by
the interpreter and never raised.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


def _located(message, line=None, file=None):
    if line is not None:
        message += f" on line {line}"
    if file is not None:
        message += f" in {file}"
    return message


class YazException(Exception):
    """
    Base class for fatal errors.
    """


class LexicalException(YazException):
    """
    Error for characters the lexer cannot classify.
    """
    def __init__(self, char, index, line, column, reason="Unexpected character"):
        self.char = char
        self.index = index
        self.line = line
        self.column = column
        super().__init__(
            f"{reason} {char!r} at line {line}, column {column} (offset {index})"
        )


class ParseException(YazException):
    """
    Base class for parse errors.
    """


class UnexpectedTokenException(ParseException):
    """
    Error for a token that does not match what the grammar expects.
    """
    def __init__(self, expected, actual, line=None, file=None):
        self.expected = expected
        self.actual = actual
        self.line = line
        message = f"Expected {expected}, but got {actual}"
        super().__init__(_located(message, line, file))


class ExpressionException(ParseException):
    """
    Error for malformed arithmetic expressions.
    """
    def __init__(self, reason, line=None, file=None):
        self.reason = reason
        self.line = line
        super().__init__(_located(f"Malformed expression: {reason}", line, file))


class EvalException(YazException):
    """
    Base class for evaluation errors.
    """


class UndefinedVariableException(EvalException):
    """
    Error for undefined variables.
    """
    def __init__(self, varname, line=None, file=None):
        self.varname = varname
        self.line = line
        super().__init__(_located(f"Undefined variable '{varname}'", line, file))


class UnimplementedException(EvalException):
    """
    Error for node shapes or value types the interpreter cannot evaluate.
    """
    def __init__(self, feature, line=None, file=None):
        self.feature = feature
        self.line = line
        super().__init__(_located(f"Unimplemented: {feature}", line, file))


class UnknownOpException(EvalException):
    """
    Error for unknown operations.
    """
    def __init__(self, op, line=None, file=None):
        self.op = op
        self.line = line
        super().__init__(_located(f"Unknown operation '{op}'", line, file))
