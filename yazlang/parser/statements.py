"""Statement parsing utilities for yazlang.

These functions operate on a `yazlang.parser.parser.Parser` instance and
handle the statement forms of the language: typed declarations,
conditionals and builtin calls.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from yazlang import nodes
from yazlang.lexer import TokenType

if TYPE_CHECKING:
    from yazlang.parser import Parser


NUMBER_KEYWORDS = ('number', 'int')


def parse_statements(parser: 'Parser') -> list:
    """
    Parse statements in source order.

    Comments are skipped. Parsing stops without consuming anything on a
    closing brace, and after appending an ('eof', line) node at end of input.

    Args:
        parser: The parser instance.

    Returns:
        list: The parsed statement nodes.
    """
    statements = []
    while True:
        tok = parser.curr_token
        if tok.type == TokenType.COMMENT:
            parser.advance()
            continue
        if tok.type == TokenType.EOF:
            statements.append(nodes.eof(tok.line))
            return statements
        if tok.type == TokenType.RBRACE:
            return statements
        statements.append(parser.statement())


def parse_statement(parser: 'Parser') -> tuple:
    """
    Parse a single statement.

    Args:
        parser: The parser instance.

    Returns:
        tuple: representing the AST node.
    """
    tok = parser.curr_token
    if tok.type == TokenType.KEYWORD:
        if tok.value in NUMBER_KEYWORDS:
            return parser.parse_number_declaration()
        if tok.value == 'string':
            return parser.parse_string_declaration()
        if tok.value == 'bool':
            return parser.parse_bool_declaration()
    elif tok.type == TokenType.ID:
        if tok.value.lower() == 'if':
            return parser.parse_if()
        return parser.parse_call()
    parser.error('a statement')


def parse_block(parser: 'Parser') -> tuple:
    """
    Parse a block of statements enclosed in braces.

    Syntax:
        { <statement>* }

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('block', list_of_statements, line_number)
    """
    tok = parser.eat(TokenType.LBRACE)
    statements = parser.statements()
    parser.eat(TokenType.RBRACE)
    return nodes.block(statements, tok.line)


def _declaration_target(parser: 'Parser') -> tuple:
    """Consume ``<type> <identifier> =`` and return the keyword and identifier tokens."""
    keyword = parser.eat(TokenType.KEYWORD)
    name = parser.eat(TokenType.ID, 'identifier')
    parser.eat(TokenType.ASSIGN)
    return keyword, name


def parse_number_declaration(parser: 'Parser') -> tuple:
    """
    Parse a number declaration. The right-hand side is folded to a
    constant here; nothing is left for the interpreter to compute.

    Syntax:
        number <identifier> = <num> (<op> <num>)* ;

    Returns:
        tuple: ('assign', name, ('constant', 'number', value, line), line)
    """
    keyword, name = _declaration_target(parser)
    value = parser.arithmetic()
    return nodes.assign(name.value, nodes.number(value, name.line), keyword.line)


def parse_string_declaration(parser: 'Parser') -> tuple:
    """
    Parse a string declaration.

    Syntax:
        string <identifier> = "<text>" ;
    """
    keyword, name = _declaration_target(parser)
    value = parser.eat(TokenType.STRING)
    parser.eat(TokenType.SEMICOLON)
    return nodes.assign(name.value, nodes.text(value.value, value.line), keyword.line)


def parse_bool_declaration(parser: 'Parser') -> tuple:
    """
    Parse a bool declaration.

    Syntax:
        bool <identifier> = true | false ;
    """
    keyword, name = _declaration_target(parser)
    tok = parser.curr_token
    if tok.type not in (TokenType.TRUE, TokenType.FALSE):
        parser.error('TRUE or FALSE')
    parser.advance()
    parser.eat(TokenType.SEMICOLON)
    return nodes.assign(name.value, nodes.boolean(tok.type == TokenType.TRUE, tok.line), keyword.line)


def parse_if(parser: 'Parser') -> tuple:
    """
    Parse a conditional with an optional else block.

    The condition is a bare variable reference resolved at evaluation time.

    Syntax:
        if ( <identifier> ) { <statement>* } [ else { <statement>* } ]

    Returns:
        tuple: ('if', ('variable', name, line), then_block, else_block | None, line)
    """
    tok = parser.eat(TokenType.ID)
    parser.eat(TokenType.LPAREN)
    cond_tok = parser.eat(TokenType.ID, 'identifier')
    parser.eat(TokenType.RPAREN)
    then_block = parser.block()

    else_block = None
    if parser.curr_token.type == TokenType.ID and parser.curr_token.value.lower() == 'else':
        parser.advance()
        else_block = parser.block()

    condition = nodes.variable(cond_tok.value, cond_tok.line)
    return nodes.conditional(condition, then_block, else_block, tok.line)


def _parse_argument(parser: 'Parser') -> tuple:
    tok = parser.curr_token
    if tok.type == TokenType.STRING:
        node = nodes.text(tok.value, tok.line)
    elif tok.type == TokenType.ID:
        node = nodes.variable(tok.value, tok.line)
    elif tok.type == TokenType.NUMBER:
        node = nodes.number(float(tok.value), tok.line)
    elif tok.type in (TokenType.TRUE, TokenType.FALSE):
        node = nodes.boolean(tok.type == TokenType.TRUE, tok.line)
    else:
        parser.error('STRING or identifier argument')
    parser.advance()
    return node


def parse_call(parser: 'Parser') -> tuple:
    """
    Parse a call statement. At least one argument is required.

    Syntax:
        <identifier> ( <argument> (, <argument>)* ) ;

    Returns:
        tuple: ('call', callee, [argument, ...], line)
    """
    callee = parser.eat(TokenType.ID)
    parser.eat(TokenType.LPAREN)
    args = [_parse_argument(parser)]
    while parser.curr_token.type == TokenType.COMMA:
        parser.advance()
        args.append(_parse_argument(parser))
    parser.eat(TokenType.RPAREN)
    parser.eat(TokenType.SEMICOLON)
    return nodes.call(callee.value, args, callee.line)
