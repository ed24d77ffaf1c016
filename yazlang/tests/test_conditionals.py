"""Tests for if/else conditionals."""

import pytest

from yazlang.exceptions import (
    UndefinedVariableException,
    UnexpectedTokenException,
    UnimplementedException,
)
from yazlang.operations import NodeType
from yazlang.tests.utils import parse_source, run_source


PROGRAM = (
    'bool flag = {value};\n'
    'if (flag) {{ string x = "A"; }} else {{ string x = "B"; }}\n'
    'yaz(x);\n'
)


@pytest.mark.parametrize("value, expected", [("true", "A"), ("false", "B")])
def test_if_else_selects_branch(value, expected, capsys):
    run_source(PROGRAM.format(value=value))
    assert capsys.readouterr().out == f"{expected}\n"


def test_if_ast_shape():
    ast = parse_source(PROGRAM.format(value="true"))
    if_stmt = ast[1][1]
    assert if_stmt[0] == NodeType.IF
    assert if_stmt[1] == ('variable', 'flag', 2)
    assert if_stmt[2][0] == NodeType.BLOCK
    assert if_stmt[2][1] == [('assign', 'x', ('constant', 'text', 'A', 2), 2)]
    assert if_stmt[3][1] == [('assign', 'x', ('constant', 'text', 'B', 2), 2)]


def test_if_without_else(capsys):
    run_source(
        'bool f = false;\n'
        'if (f) { yaz("then"); }\n'
        'yaz("after");\n'
    )
    assert capsys.readouterr().out == "after\n"
    ast = parse_source('bool f = false; if (f) { yaz("then"); }')
    assert ast[1][1][3] is None


def test_nested_conditionals(capsys):
    run_source(
        'bool outer = true;\n'
        'bool inner = false;\n'
        'if (outer) {\n'
        '    // nested\n'
        '    if (inner) { yaz("both"); } else { yaz("outer only"); }\n'
        '}\n'
    )
    assert capsys.readouterr().out == "outer only\n"


def test_keywords_if_else_ignore_case(capsys):
    run_source('bool f = FALSE; IF (f) { yaz("a"); } Else { yaz("b"); }')
    assert capsys.readouterr().out == "b\n"


def test_empty_branches():
    interpreter = run_source('bool f = true; if (f) { } else { }')
    assert interpreter.halted


def test_undefined_condition_is_fatal():
    with pytest.raises(UndefinedVariableException) as exc:
        run_source('if (missing) { yaz("x"); }')
    assert exc.value.varname == 'missing'


def test_non_boolean_condition_is_fatal():
    with pytest.raises(UnimplementedException):
        run_source('string s = "yes"; if (s) { yaz("x"); }')


def test_missing_closing_brace():
    with pytest.raises(UnexpectedTokenException) as exc:
        parse_source('bool f = true; if (f) { yaz("x");')
    assert exc.value.expected == 'RBRACE'
    assert exc.value.actual == 'EOF'


def test_condition_must_be_identifier():
    with pytest.raises(UnexpectedTokenException) as exc:
        parse_source('if (true) { yaz("x"); }')
    assert exc.value.expected == 'identifier'


def test_statements_after_branch_run(capsys):
    run_source(
        'bool f = true;\n'
        'if (f) { yaz("1"); }\n'
        'if (f) { yaz("2"); } else { yaz("x"); }\n'
        'yaz("3");\n'
    )
    assert capsys.readouterr().out.splitlines() == ['1', '2', '3']
