"""Interpreter.

This is a tree-walk interpreter for the program block produced by the parser.
It supports typed assignments, the ``yaz`` (print) and ``oku`` (read)
builtins, and ``if``/``else`` on boolean variables.

1. Execution Model
The interpreter walks the AST top-down. Statements are executed via
`execute()`; a block executes its children in source order until the
end-of-program marker halts the run.

2. Environment
A single dictionary `vars` maps variable names to ``(ConstType, value)``
pairs. Entries are created on first assignment, overwritten on reassignment
and never deleted. Numbers are always floats.

3. Error Handling
Fatal problems (an unset condition variable, a right-hand side that is not a
constant, a non-boolean condition) raise typed exceptions from
`yazlang.exceptions`. Recoverable ones (printing an unknown variable, a
non-variable argument to ``oku``, a statement kind without a handler, an
unknown builtin) are reported on stderr and execution continues.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import os
import sys

from yazlang.exceptions import (
    EvalException,
    UndefinedVariableException,
    UnimplementedException,
)
from yazlang.nodes import format_node, render_constant
from yazlang.operations import ConstType, NodeType


PRINT_BUILTINS = ('yaz', 'print')
READ_BUILTINS = ('oku', 'get')


class Interpreter:
    """Tree-walk interpreter for yazlang."""

    def __init__(self, file: str = '<stdin>'):
        """Initialize the interpreter."""
        self.vars = {}
        self.file = file
        self.halted = False

    def notice(self, message: str, line: int | None = None):
        """
        Report a recoverable condition on stderr.
        """
        if line is not None:
            message += f" on line {line}"
        print(message, file=sys.stderr)

    def lookup(self, name: str):
        """
        Return the raw value bound to ``name``.

        Raises:
            UndefinedVariableException: If the variable was never assigned.
        """
        if name not in self.vars:
            raise UndefinedVariableException(name, file=self.file)
        return self.vars[name][1]

    def run(self, program: tuple) -> bool:
        """
        Execute a parsed program.

        Returns:
            bool: True if execution reached the end-of-program marker.
        """
        self.halted = False
        self.execute(program)
        if self.halted and os.environ.get('YAZDEBUG'):
            self.notice(f"Program {self.file} finished")
        return self.halted

    def execute(self, node: tuple):
        """
        Execute a single statement node.

        Parameters:
            node (tuple): A statement node, see `yazlang.nodes`.
        """
        kind = node[0]
        line = node[-1]

        if kind == NodeType.BLOCK:
            for stmt in node[1]:
                if self.halted:
                    break
                self.execute(stmt)

        elif kind == NodeType.ASSIGN:
            _, name, value_node, _ = node
            self.vars[name] = self.eval_value(value_node)

        elif kind == NodeType.CALL:
            self.call(node)

        elif kind == NodeType.IF:
            _, cond_node, then_block, else_block, _ = node
            if self.eval_condition(cond_node):
                self.execute(then_block)
            elif else_block is not None:
                self.execute(else_block)

        elif kind == NodeType.EOF:
            self.halted = True

        else:
            self.notice(f"Unimplemented statement: {format_node(node)}", line)

    def eval_value(self, node: tuple) -> tuple:
        """
        Evaluate the right-hand side of an assignment.

        Returns:
            tuple: ``(ConstType, value)``

        Raises:
            UnimplementedException: If the node is not a typed constant.
        """
        if node[0] == NodeType.CONSTANT:
            _, kind, value, _ = node
            return (ConstType(kind), value)
        raise UnimplementedException(
            f"assignment from {node[0]} '{format_node(node)}'", node[-1], self.file
        )

    def eval_condition(self, node: tuple) -> bool:
        """
        Resolve a condition variable to a boolean.

        Raises:
            UndefinedVariableException: If the variable was never assigned.
            UnimplementedException: For non-variable conditions or
                non-boolean values.
        """
        line = node[-1]
        if node[0] != NodeType.VARIABLE:
            raise UnimplementedException(
                f"condition '{format_node(node)}'", line, self.file
            )
        name = node[1]
        if name not in self.vars:
            raise UndefinedVariableException(name, line, self.file)
        kind, value = self.vars[name]
        if kind != ConstType.BOOL:
            raise UnimplementedException(
                f"condition on {kind} variable '{name}'", line, self.file
            )
        return value

    def call(self, node: tuple):
        """
        Dispatch a call statement to its builtin.
        """
        _, callee, args, line = node
        name = callee.lower()
        if name in PRINT_BUILTINS:
            self.builtin_print(args)
        elif name in READ_BUILTINS:
            self.builtin_read(args)
        else:
            self.notice(f"Unimplemented function '{callee}'", line)

    def builtin_print(self, args: list):
        """
        Render every argument into one buffer and emit it as a single line.
        Unknown variables are reported and skipped.
        """
        buffer = []
        for arg in args:
            if arg[0] == NodeType.CONSTANT:
                _, kind, value, _ = arg
                buffer.append(render_constant(kind, value))
            elif arg[0] == NodeType.VARIABLE:
                name = arg[1]
                if name in self.vars:
                    buffer.append(render_constant(*self.vars[name]))
                else:
                    self.notice(f"Variable '{name}' not found", arg[-1])
            else:
                self.notice(f"Unimplemented argument: {format_node(arg)}", arg[-1])
        print(''.join(buffer))

    def builtin_read(self, args: list):
        """
        Read one line of standard input into each variable argument.

        Raises:
            EvalException: If standard input is exhausted.
        """
        for arg in args:
            if arg[0] != NodeType.VARIABLE:
                self.notice(
                    f"Usage: oku expects variable names, got {format_node(arg)}", arg[-1]
                )
                continue
            name = arg[1]
            try:
                value = input()
            except EOFError as e:
                raise EvalException(
                    f"Unexpected end of input while reading '{name}' "
                    f"on line {arg[-1]} in {self.file}"
                ) from e
            self.vars[name] = (ConstType.TEXT, value)
