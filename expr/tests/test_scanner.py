import pytest

from expr.error import LexError, LexErrorKind
from expr.location import Span
from expr.scanner import Scanner, lex
from expr.scanner.scanner import U64_MAX
from expr.scanner.token import Token, TokenKind


def kinds(tokens):
    return [(t.kind, t.value) for t in tokens]


def test_lex_full_expression():
    assert lex("1 + 2 * 3 - - 10") == [
        Token.number(1, Span(0, 1)),
        Token.plus(Span(2, 3)),
        Token.number(2, Span(4, 5)),
        Token.asterisk(Span(6, 7)),
        Token.number(3, Span(8, 9)),
        Token.minus(Span(10, 11)),
        Token.minus(Span(12, 13)),
        Token.number(10, Span(14, 16)),
    ]


def test_lex_single_byte_tokens():
    assert lex("+-*/()") == [
        Token.plus(Span(0, 1)),
        Token.minus(Span(1, 2)),
        Token.asterisk(Span(2, 3)),
        Token.slash(Span(3, 4)),
        Token.lparen(Span(4, 5)),
        Token.rparen(Span(5, 6)),
    ]


def test_lex_number_is_maximal_munch():
    assert lex("1235()") == [
        Token.number(1235, Span(0, 4)),
        Token.lparen(Span(4, 5)),
        Token.rparen(Span(5, 6)),
    ]


def test_lex_leading_zeros():
    assert lex("007") == [Token.number(7, Span(0, 3))]


def test_lex_empty_and_blank():
    assert lex("") == []
    assert lex(" \t\n ") == []


@pytest.mark.parametrize(
    "source",
    ["1+2*(3-4)/5", "1 + 2 * ( 3 - 4 ) / 5", "\t1\n+2 *(3\t\t-  4)/\n\n5  "],
)
def test_whitespace_does_not_change_values(source):
    assert kinds(lex(source)) == kinds(lex("1+2*(3-4)/5"))


def test_whitespace_shifts_spans():
    assert lex("  42") == [Token.number(42, Span(2, 4))]


def test_invalid_char():
    with pytest.raises(LexError) as excinfo:
        lex("3 & 2")
    assert excinfo.value.kind == LexErrorKind.INVALID_CHAR
    assert excinfo.value.char == "&"
    assert excinfo.value.span == Span(2, 3)


@pytest.mark.parametrize("source, char", [("x", "x"), ("1.5", "."), ("1\r", "\r")])
def test_invalid_char_stops_lexing(source, char):
    with pytest.raises(LexError) as excinfo:
        lex(source)
    assert excinfo.value.char == char


def test_invalid_multibyte_char():
    with pytest.raises(LexError) as excinfo:
        lex("é + 1")
    assert excinfo.value.char == "é"
    assert excinfo.value.span == Span(0, 1)

    with pytest.raises(LexError) as excinfo:
        lex("12 é $")
    assert excinfo.value.char == "é"
    assert excinfo.value.span == Span(3, 4)


def test_u64_max_lexes():
    assert lex(str(U64_MAX)) == [Token.number(U64_MAX, Span(0, 20))]


def test_u64_overflow():
    with pytest.raises(LexError) as excinfo:
        lex("1 + " + str(U64_MAX + 1))
    assert excinfo.value.kind == LexErrorKind.OVERFLOW
    assert excinfo.value.span == Span(4, 24)


def test_very_long_literal_overflows():
    with pytest.raises(LexError) as excinfo:
        lex("9" * 5000)
    assert excinfo.value.kind == LexErrorKind.OVERFLOW


def test_zero_padded_max_fits():
    assert lex("000" + str(U64_MAX))[0].value == U64_MAX


def test_expect():
    scanner = Scanner("123")
    scanner.index = 2
    assert scanner.expect(ord("3")) == ord("3")
    assert scanner.index == 3

    scanner.index = 2
    with pytest.raises(LexError) as excinfo:
        scanner.expect(ord("1"))
    assert excinfo.value.kind == LexErrorKind.INVALID_CHAR
    assert excinfo.value.char == "3"
    assert excinfo.value.span == Span(2, 3)

    scanner.index = 3
    with pytest.raises(LexError) as excinfo:
        scanner.expect(ord("3"))
    assert excinfo.value.kind == LexErrorKind.EOF
    assert excinfo.value.span == Span(3, 3)


def test_scanner_is_iterable():
    tokens = [token.kind for token in Scanner("(1)")]
    assert tokens == [TokenKind.LPAREN, TokenKind.NUMBER, TokenKind.RPAREN]


def test_lone_surrogate_is_invalid_char():
    with pytest.raises(LexError) as excinfo:
        lex("1 + \udcff")
    assert excinfo.value.kind == LexErrorKind.INVALID_CHAR
    assert excinfo.value.char == "\udcff"
    assert excinfo.value.span == Span(4, 5)
