"""AST node shapes for yazlang.

Nodes are plain tuples whose first element is a :class:`NodeType` tag and
whose last element is the source line, e.g.
``('assign', 'x', ('constant', 'number', 1.0, 3), 3)``. Children are owned
outright; the tree has no sharing and no cycles.

Shapes:
    ('block', [statement, ...], line)
    ('binary', Op, lhs, rhs, line)
    ('variable', name, line)
    ('constant', ConstType, value, line)
    ('assign', name, value_node, line)
    ('if', condition, then_block, else_block | None, line)
    ('call', callee, [argument, ...], line)
    ('literal', int, line)
    ('eof', line)
    ('nil', line)


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from yazlang.operations import ConstType, NodeType, Op


def block(statements: list, line: int) -> tuple:
    return (NodeType.BLOCK, statements, line)


def binary(op: Op, lhs: tuple, rhs: tuple, line: int) -> tuple:
    return (NodeType.BINARY, op, lhs, rhs, line)


def variable(name: str, line: int) -> tuple:
    return (NodeType.VARIABLE, name, line)


def constant(kind: ConstType, value, line: int) -> tuple:
    return (NodeType.CONSTANT, kind, value, line)


def text(value: str, line: int) -> tuple:
    return constant(ConstType.TEXT, value, line)


def number(value: float, line: int) -> tuple:
    return constant(ConstType.NUMBER, float(value), line)


def boolean(value: bool, line: int) -> tuple:
    return constant(ConstType.BOOL, bool(value), line)


def assign(name: str, value: tuple, line: int) -> tuple:
    return (NodeType.ASSIGN, name, value, line)


def conditional(condition: tuple, then_block: tuple, else_block, line: int) -> tuple:
    return (NodeType.IF, condition, then_block, else_block, line)


def call(callee: str, args: list, line: int) -> tuple:
    return (NodeType.CALL, callee, args, line)


def literal(value: int, line: int) -> tuple:
    return (NodeType.LITERAL, value, line)


def eof(line: int) -> tuple:
    return (NodeType.EOF, line)


def nil(line: int) -> tuple:
    return (NodeType.NIL, line)


def render_number(value: float) -> str:
    """
    Render a float in canonical form; integral values drop the fraction.
    """
    if value.is_integer():
        return str(int(value))
    return repr(value)


def render_constant(kind: ConstType, value) -> str:
    """
    Textual rendering of a typed value as ``yaz`` prints it.
    """
    match kind:
        case ConstType.TEXT:
            return value
        case ConstType.NUMBER:
            return render_number(value)
        case ConstType.BOOL:
            return 'true' if value else 'false'
    raise ValueError(f"Unknown constant kind: {kind}")


def format_node(node, indent: int = 0) -> str:
    """
    Convert a node back to readable, source-like text for debugging.
    """
    pad = '    ' * indent
    kind = node[0]
    match kind:
        case NodeType.BLOCK:
            return '\n'.join(format_node(stmt, indent) for stmt in node[1])
        case NodeType.BINARY:
            _, op, lhs, rhs, _ = node
            return f"({format_node(lhs)} {op.symbol} {format_node(rhs)})"
        case NodeType.VARIABLE:
            return node[1]
        case NodeType.CONSTANT:
            _, const_kind, value, _ = node
            if const_kind == ConstType.TEXT:
                return f'"{value}"'
            return render_constant(const_kind, value)
        case NodeType.ASSIGN:
            return f"{pad}{node[1]} = {format_node(node[2])};"
        case NodeType.IF:
            _, cond, then_block, else_block, _ = node
            out = f"{pad}if ({format_node(cond)}) {{\n"
            out += format_node(then_block, indent + 1)
            out += f"\n{pad}}}"
            if else_block is not None:
                out += " else {\n"
                out += format_node(else_block, indent + 1)
                out += f"\n{pad}}}"
            return out
        case NodeType.CALL:
            _, callee, args, _ = node
            return f"{pad}{callee}({', '.join(format_node(arg) for arg in args)});"
        case NodeType.LITERAL:
            return str(node[1])
        case NodeType.EOF:
            return f"{pad}<eof>"
        case NodeType.NIL:
            return f"{pad}<nil>"
    return f"<node {kind}>"
