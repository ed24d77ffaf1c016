"""Lexer for yazlang.

This lexer performs a single left-to-right pass over the source code using a
combined regular expression of named groups. Each match yields a
:class:`Token` containing its type, value, source line and ``(start, end)``
offset span.

Words are classified after case-folding: the reserved keywords (``main``,
``number``, ``int``, ``string``, ``bool``, ``return``) and the literals
``true``/``false`` match regardless of case, every other word becomes an
identifier that keeps its original spelling. ``//`` comments are emitted as
``COMMENT`` tokens and left for the parser to skip. Whitespace is dropped.

The token list is consumed through a :class:`TokenStream`, a forward-only
cursor over the immutable sequence.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re
from enum import Enum

from yazlang.exceptions import LexicalException


class TokenType(str, Enum):
    """
    Enumeration of token kinds.
    """

    KEYWORD = "KEYWORD"
    ID = "ID"
    CHAR = "CHAR"
    STRING = "STRING"
    NUMBER = "NUMBER"
    TRUE = "TRUE"
    FALSE = "FALSE"
    ASSIGN = "ASSIGN"
    PLUS = "PLUS"
    MINUS = "MINUS"
    MUL = "MUL"
    DIV = "DIV"
    MOD = "MOD"
    GT = "GT"
    LT = "LT"
    GE = "GE"
    LE = "LE"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    LBRACE = "LBRACE"
    RBRACE = "RBRACE"
    LBRACKET = "LBRACKET"
    RBRACKET = "RBRACKET"
    COMMA = "COMMA"
    SEMICOLON = "SEMICOLON"
    COMMENT = "COMMENT"
    EOF = "EOF"

    def __str__(self) -> str:
        return self.value


KEYWORDS = frozenset({'main', 'number', 'int', 'string', 'bool', 'return'})

SYMBOLS = {
    TokenType.ASSIGN: '=',
    TokenType.PLUS: '+',
    TokenType.MINUS: '-',
    TokenType.MUL: '*',
    TokenType.DIV: '/',
    TokenType.MOD: '%',
    TokenType.GT: '>',
    TokenType.LT: '<',
    TokenType.GE: '>=',
    TokenType.LE: '<=',
    TokenType.LPAREN: '(',
    TokenType.RPAREN: ')',
    TokenType.LBRACE: '{',
    TokenType.RBRACE: '}',
    TokenType.LBRACKET: '[',
    TokenType.RBRACKET: ']',
    TokenType.COMMA: ',',
    TokenType.SEMICOLON: ';',
}

TOKEN_SPECIFICATION = [
    # Comments (must precede DIV)
    ('COMMENT',      r'//[^\n]*\n?'),

    # Literals and words
    ('WORD',         r'[^\W\d_][^\W_]*'),
    ('NUMBER',       r'\d+'),
    ('STRING',       r'"[^"]*"'),
    ('UNTERMINATED', r'"'),
    ('CHAR',         r"'(?s:.)'"),
    ('BAD_CHAR',     r"'"),

    # Comparison operators
    ('GE',           r'>='),
    ('LE',           r'<='),
    ('GT',           r'>'),
    ('LT',           r'<'),

    # Assignment and arithmetic operators
    ('ASSIGN',       r'='),
    ('PLUS',         r'\+'),
    ('MINUS',        r'-'),
    ('MUL',          r'\*'),
    ('DIV',          r'/'),
    ('MOD',          r'%'),

    # Delimiters
    ('LPAREN',       r'\('),
    ('RPAREN',       r'\)'),
    ('LBRACE',       r'\{'),
    ('RBRACE',       r'\}'),
    ('LBRACKET',     r'\['),
    ('RBRACKET',     r'\]'),
    ('COMMA',        r','),
    ('SEMICOLON',    r';'),

    # Miscellaneous
    ('SKIP',         r'\s+'),
    ('MISMATCH',     r'.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in TOKEN_SPECIFICATION)
)


class Token:
    """
    Represents a lexical token with a type, value and source location.
    """
    def __init__(self, type_, value, line, span=None):
        """
        Initialize a new token.

        Parameters:
            type_ (TokenType): The token type.
            value (str | None): The token value.
            line (int): 1-based source line the token starts on.
            span (tuple[int, int] | None): Start and end source offsets.
        """
        self.type = type_
        self.value = value
        self.line = line
        self.span = span

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.value!r}, line={self.line})"

    def __str__(self) -> str:
        """
        Return the source spelling of the token.
        """
        if self.type == TokenType.STRING:
            return f'"{self.value}"'
        if self.type == TokenType.CHAR:
            return f"'{self.value}'"
        if self.type == TokenType.TRUE:
            return 'true'
        if self.type == TokenType.FALSE:
            return 'false'
        if self.type == TokenType.EOF:
            return ''
        if self.type in SYMBOLS:
            return SYMBOLS[self.type]
        return self.value

    def describe(self) -> str:
        """
        Describe the token for diagnostics, e.g. ``ID 'x'`` or ``SEMICOLON``.
        """
        if self.type in (TokenType.KEYWORD, TokenType.ID, TokenType.NUMBER,
                         TokenType.STRING, TokenType.CHAR):
            return f"{self.type} {self.value!r}"
        return str(self.type)


def locate(code: str, index: int) -> tuple[int, int]:
    """
    Compute the 1-based line and column of ``index`` by counting the
    newlines that precede it.
    """
    line = code.count('\n', 0, index) + 1
    column = index - (code.rfind('\n', 0, index) + 1) + 1
    return line, column


def _fail(code: str, index: int, reason: str):
    line, column = locate(code, index)
    char = code[index] if index < len(code) else 'end of input'
    raise LexicalException(char, index, line, column, reason)


def tokenize(code: str) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.

    Returns:
        list[Token]: Token instances terminated by a single EOF token.

    Raises:
        LexicalException: If an unexpected character, a malformed character
            literal or an unterminated string is encountered.
    """
    tokens = []
    line_num = 1

    for match_obj in TOKEN_REGEX.finditer(code):
        kind = match_obj.lastgroup
        value = match_obj.group()
        span = match_obj.span()
        start_line = line_num
        line_num += value.count('\n')

        if kind == 'SKIP':
            continue
        if kind == 'MISMATCH':
            _fail(code, span[0], 'Unexpected character')
        elif kind == 'UNTERMINATED':
            _fail(code, span[0], 'Unterminated string literal starting with')
        elif kind == 'BAD_CHAR':
            # A character literal is exactly one character between quotes,
            # report whatever sits where the closing quote should be.
            _fail(code, min(span[0] + 2, len(code)), 'Malformed character literal, found')

        elif kind == 'WORD':
            folded = value.lower()
            if folded in KEYWORDS:
                tokens.append(Token(TokenType.KEYWORD, folded, start_line, span))
            elif folded == 'true':
                tokens.append(Token(TokenType.TRUE, True, start_line, span))
            elif folded == 'false':
                tokens.append(Token(TokenType.FALSE, False, start_line, span))
            else:
                tokens.append(Token(TokenType.ID, value, start_line, span))
        elif kind in ('STRING', 'CHAR'):
            tokens.append(Token(TokenType(kind), value[1:-1], start_line, span))
        elif kind == 'COMMENT':
            tokens.append(Token(TokenType.COMMENT, value.rstrip('\n'), start_line, span))
        else:
            tokens.append(Token(TokenType(kind), value, start_line, span))

    tokens.append(Token(TokenType.EOF, None, line_num, (len(code), len(code))))
    return tokens


class TokenStream:
    """
    Forward-only cursor over an immutable token sequence.

    The sequence always ends with exactly one EOF token and the cursor never
    moves past it.
    """
    def __init__(self, tokens):
        tokens = list(tokens)
        if not tokens or tokens[-1].type != TokenType.EOF:
            line = tokens[-1].line if tokens else 1
            tokens.append(Token(TokenType.EOF, None, line))
        if any(tok.type == TokenType.EOF for tok in tokens[:-1]):
            raise ValueError("EOF token may only appear at the end of a token stream")
        self.tokens = tuple(tokens)
        self.position = 0

    @classmethod
    def from_source(cls, code: str) -> 'TokenStream':
        """
        Tokenize ``code`` and wrap the result in a stream.
        """
        return cls(tokenize(code))

    def __len__(self) -> int:
        return len(self.tokens)

    @property
    def current(self) -> Token:
        """
        The token under the cursor.
        """
        return self.tokens[self.position]

    def peek(self, offset: int = 1) -> Token:
        """
        Look ahead without moving; looking past the end yields EOF.
        """
        index = min(self.position + offset, len(self.tokens) - 1)
        return self.tokens[index]

    def advance(self) -> bool:
        """
        Move the cursor forward one token.

        Returns:
            bool: False if the cursor already sits on the final token.
        """
        if self.position >= len(self.tokens) - 1:
            return False
        self.position += 1
        return True

    @property
    def at_end(self) -> bool:
        """
        True when the cursor sits on the EOF token.
        """
        return self.current.type == TokenType.EOF
