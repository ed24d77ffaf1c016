"""Shared definitions for AST node tags and arithmetic operators.

This module centralizes the identifiers used by the parser and interpreter
to label nodes in the abstract syntax tree, together with the arithmetic
operators the expression parser understands. Keeping them in one place
prevents the two components from drifting apart.

Arithmetic follows IEEE-754 double semantics: dividing by zero produces an
infinity or NaN rather than raising, and ``%`` behaves like C's ``fmod``.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math
from enum import Enum

from yazlang.exceptions import UnknownOpException


class NodeType(str, Enum):
    """
    Enumeration of AST node tags.
    """

    BLOCK = "block"
    BINARY = "binary"
    VARIABLE = "variable"
    CONSTANT = "constant"
    ASSIGN = "assign"
    IF = "if"
    CALL = "call"
    LITERAL = "literal"
    EOF = "eof"
    NIL = "nil"

    def __str__(self) -> str:
        return self.value


class ConstType(str, Enum):
    """
    Enumeration of typed constant kinds, also used for runtime values.
    """

    TEXT = "text"
    NUMBER = "number"
    BOOL = "bool"

    def __str__(self) -> str:
        return self.value


class Op(str, Enum):
    """
    Enumeration of supported arithmetic operators.
    """

    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    MOD = "mod"

    @property
    def precedence(self) -> int:
        """
        Binding strength used by the Shunting-Yard conversion.
        """
        return PRECEDENCE[self]

    @property
    def symbol(self) -> str:
        """
        Source spelling of the operator.
        """
        return SYMBOLS[self]

    def __str__(self) -> str:
        return self.value


PRECEDENCE = {
    Op.MUL: 3,
    Op.DIV: 3,
    Op.MOD: 3,
    Op.ADD: 2,
    Op.SUB: 2,
}

SYMBOLS = {
    Op.ADD: '+',
    Op.SUB: '-',
    Op.MUL: '*',
    Op.DIV: '/',
    Op.MOD: '%',
}


def _divide(lhs: float, rhs: float) -> float:
    if rhs == 0:
        if lhs == 0 or math.isnan(lhs):
            return math.nan
        return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)
    return lhs / rhs


def _remainder(lhs: float, rhs: float) -> float:
    if rhs == 0 or math.isinf(lhs):
        return math.nan
    return math.fmod(lhs, rhs)


def apply(op: Op, lhs: float, rhs: float) -> float:
    """
    Apply a binary arithmetic operator to two floats.

    Raises:
        UnknownOpException: If ``op`` is not an arithmetic operator.
    """
    match op:
        case Op.ADD:
            return lhs + rhs
        case Op.SUB:
            return lhs - rhs
        case Op.MUL:
            return lhs * rhs
        case Op.DIV:
            return _divide(lhs, rhs)
        case Op.MOD:
            return _remainder(lhs, rhs)
        case _:
            raise UnknownOpException(op)


__all__ = ["NodeType", "ConstType", "Op", "PRECEDENCE", "apply"]
