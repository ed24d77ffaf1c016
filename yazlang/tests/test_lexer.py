"""Tests for the yazlang lexer and token stream."""

import pytest

from yazlang.exceptions import LexicalException
from yazlang.lexer import Token, TokenStream, TokenType, locate, tokenize


def types(source: str) -> list:
    return [tok.type for tok in tokenize(source)]


def test_declaration_tokens():
    tokens = tokenize("number x = 42;")
    assert [tok.type for tok in tokens] == [
        TokenType.KEYWORD,
        TokenType.ID,
        TokenType.ASSIGN,
        TokenType.NUMBER,
        TokenType.SEMICOLON,
        TokenType.EOF,
    ]
    assert tokens[0].value == 'number'
    assert tokens[1].value == 'x'
    assert tokens[3].value == '42'


def test_keywords_fold_case_identifiers_do_not():
    tokens = tokenize("NUMBER Total String BOOL Int main RETURN")
    assert [tok.type for tok in tokens[:-1]] == [TokenType.KEYWORD, TokenType.ID] + [TokenType.KEYWORD] * 5
    assert tokens[0].value == 'number'
    assert tokens[1].value == 'Total'
    assert [tok.value for tok in tokens[2:-1]] == ['string', 'bool', 'int', 'main', 'return']


def test_boolean_literals():
    tokens = tokenize("true FALSE True")
    assert [tok.type for tok in tokens[:-1]] == [TokenType.TRUE, TokenType.FALSE, TokenType.TRUE]
    assert tokens[0].value is True
    assert tokens[1].value is False


def test_string_and_char_literals():
    tokens = tokenize("\"hello world\" 'a'")
    assert tokens[0].type == TokenType.STRING
    assert tokens[0].value == 'hello world'
    assert tokens[1].type == TokenType.CHAR
    assert tokens[1].value == 'a'


def test_string_has_no_escapes():
    tokens = tokenize(r'"a\n"')
    assert tokens[0].value == 'a\\n'


def test_comment_is_emitted_and_consumes_newline():
    tokens = tokenize("// note\nyaz(\"x\");")
    assert [tok.type for tok in tokens] == [
        TokenType.COMMENT,
        TokenType.ID,
        TokenType.LPAREN,
        TokenType.STRING,
        TokenType.RPAREN,
        TokenType.SEMICOLON,
        TokenType.EOF,
    ]
    assert tokens[0].value == '// note'
    assert tokens[1].line == 2


def test_divide_is_not_a_comment():
    assert types("10 / 2") == [TokenType.NUMBER, TokenType.DIV, TokenType.NUMBER, TokenType.EOF]


def test_comparison_operators():
    assert types(">= <= > <") == [
        TokenType.GE, TokenType.LE, TokenType.GT, TokenType.LT, TokenType.EOF
    ]


def test_punctuation():
    assert types("= + - * / % ( ) { } [ ] , ;") == [
        TokenType.ASSIGN,
        TokenType.PLUS,
        TokenType.MINUS,
        TokenType.MUL,
        TokenType.DIV,
        TokenType.MOD,
        TokenType.LPAREN,
        TokenType.RPAREN,
        TokenType.LBRACE,
        TokenType.RBRACE,
        TokenType.LBRACKET,
        TokenType.RBRACKET,
        TokenType.COMMA,
        TokenType.SEMICOLON,
        TokenType.EOF,
    ]


def test_spans_and_lines():
    tokens = tokenize("bool b\n  = true;")
    assert tokens[0].span == (0, 4)
    assert tokens[1].span == (5, 6)
    assert tokens[2].line == 2
    assert tokens[-1].type == TokenType.EOF
    assert tokens[-1].span == (16, 16)


def test_whitespace_only_source():
    tokens = tokenize("  \n\t ")
    assert len(tokens) == 1
    assert tokens[0].type == TokenType.EOF


def test_unexpected_character_reports_line_and_column():
    with pytest.raises(LexicalException) as exc:
        tokenize("number x = 1;\n  @")
    assert exc.value.line == 2
    assert exc.value.column == 3
    assert exc.value.char == '@'


def test_underscore_is_not_part_of_a_word():
    with pytest.raises(LexicalException):
        tokenize("my_var")


def test_malformed_char_literal():
    with pytest.raises(LexicalException) as exc:
        tokenize("'ab'")
    assert "Malformed character literal" in str(exc.value)
    assert exc.value.char == 'b'


def test_unterminated_string():
    with pytest.raises(LexicalException):
        tokenize('"abc')


def test_locate():
    assert locate("ab\ncd", 0) == (1, 1)
    assert locate("ab\ncd", 4) == (2, 2)


def test_rendering_is_deterministic():
    source = 'number x = 2 + 3; string s = "hi"; // done'
    first = ''.join(str(tok) for tok in tokenize(source))
    second = ''.join(str(tok) for tok in tokenize(source))
    assert first == second
    assert first == 'numberx=2+3;strings="hi";// done'


def test_stream_cursor_moves_forward_only():
    stream = TokenStream.from_source("a b")
    assert stream.current.value == 'a'
    assert stream.peek().value == 'b'
    assert stream.advance() is True
    assert stream.current.value == 'b'
    assert stream.advance() is True
    assert stream.at_end
    assert stream.advance() is False
    assert stream.position == len(stream) - 1
    assert stream.peek(5).type == TokenType.EOF


def test_stream_always_ends_with_eof():
    stream = TokenStream([])
    assert len(stream) == 1
    assert stream.at_end

    stream = TokenStream(tokenize("x")[:-1])
    assert stream.tokens[-1].type == TokenType.EOF
    assert len(stream) == 2


def test_stream_rejects_inner_eof():
    tokens = [Token(TokenType.EOF, None, 1), Token(TokenType.ID, 'x', 1)]
    with pytest.raises(ValueError):
        TokenStream(tokens)
