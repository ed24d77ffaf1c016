"""Expression parsing utilities for yazlang.

Arithmetic right-hand sides are converted to Reverse Polish order with the
Shunting-Yard algorithm and folded to a single number at parse time. Only
numeric literals and the operators ``+ - * / %`` take part; there are no
parentheses and no variable references.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from yazlang.exceptions import ExpressionException
from yazlang.lexer import TokenType
from yazlang.operations import Op, apply

if TYPE_CHECKING:
    from yazlang.parser import Parser


OPERATORS = {
    TokenType.PLUS: Op.ADD,
    TokenType.MINUS: Op.SUB,
    TokenType.MUL: Op.MUL,
    TokenType.DIV: Op.DIV,
    TokenType.MOD: Op.MOD,
}


def to_rpn(parser: 'Parser') -> list:
    """
    Consume an infix expression and its terminating ``;``.

    Args:
        parser: The parser instance, positioned on the first operand.

    Returns:
        list: Operands (floats) and operators (Op) in postfix order.
    """
    output = []
    operators = []
    last_op = None
    expect_operand = True

    while True:
        tok = parser.curr_token
        if tok.type == TokenType.NUMBER:
            output.append(float(tok.value))
            expect_operand = False
        elif tok.type in OPERATORS:
            op = OPERATORS[tok.type]
            while operators and operators[-1].precedence >= op.precedence:
                output.append(operators.pop())
            operators.append(op)
            last_op = op
            expect_operand = True
        else:
            break
        parser.advance()

    if expect_operand:
        if last_op is None:
            parser.error('NUMBER')
        raise ExpressionException(
            f"expected a number after '{last_op.symbol}', "
            f"but got {parser.curr_token.describe()}",
            parser.curr_token.line,
            parser.source_file,
        )

    while operators:
        output.append(operators.pop())
    parser.eat(TokenType.SEMICOLON)
    return output


def evaluate_rpn(queue: list, line: int | None = None, file: str | None = None) -> float:
    """
    Evaluate a postfix queue with a value stack.

    The first value popped for an operator is its right-hand operand.

    Raises:
        ExpressionException: On stack underflow or when anything other than
            exactly one value remains.
    """
    stack = []
    for item in queue:
        if isinstance(item, Op):
            if len(stack) < 2:
                raise ExpressionException(
                    f"operator '{item.symbol}' is missing an operand", line, file
                )
            rhs = stack.pop()
            lhs = stack.pop()
            stack.append(apply(item, lhs, rhs))
        else:
            stack.append(float(item))

    if len(stack) != 1:
        raise ExpressionException(
            f"expected a single value but {len(stack)} remain", line, file
        )
    return stack[0]


def parse_arithmetic(parser: 'Parser') -> float:
    """Parse a ``;``-terminated arithmetic expression and return its value."""
    line = parser.curr_token.line
    queue = to_rpn(parser)
    return evaluate_rpn(queue, line, parser.source_file)
