import logging
from typing import List, Optional

from ..error import LexError
from ..location import Span, encode_source
from .token import Token, TokenKind

U64_MAX = 2**64 - 1


class Scanner:
    BYTE_TOKEN_MAP = {
        ord(k.value): k for k in TokenKind if k != TokenKind.NUMBER
    }
    WHITESPACE = b" \n\t"

    def __init__(self, source: str):
        self.source = source
        self.bytes = encode_source(source)
        self.length = len(self.bytes)
        self.index = 0

    def __iter__(self):
        return self

    def __next__(self):
        token = self.next_token
        if token is None:
            raise StopIteration()
        return token

    @property
    def current(self) -> Optional[int]:
        if self.index >= self.length:
            return None
        return self.bytes[self.index]

    def advance(self) -> Optional[int]:
        current = self.current
        if current is not None:
            self.index += 1
        return current

    def expect(self, expected: int) -> int:
        """Consume exactly one byte, which must be ``expected``."""
        if self.current is None:
            raise LexError.eof(Span(self.index, self.index))
        if self.current != expected:
            raise self.invalid_char()
        return self.advance()

    def invalid_char(self) -> LexError:
        char = self.bytes[self.index :].decode("utf-8", errors="surrogatepass")[0]
        return LexError.invalid_char(char, Span(self.index, self.index + 1))

    @property
    def next_token(self) -> Optional[Token]:
        while True:
            c = self.current
            if c is None:
                return None

            start = self.index

            match c:
                case c if c in self.WHITESPACE:
                    self.skip_whitespace()
                    continue

                case c if ord("0") <= c <= ord("9"):
                    token = self.scan_numeric()

                case c if c in self.BYTE_TOKEN_MAP:
                    self.expect(c)
                    token = Token(self.BYTE_TOKEN_MAP[c], Span(start, self.index))

                case _:
                    raise self.invalid_char()

            logging.debug(f"scanned {token}")
            return token

    def skip_whitespace(self):
        while self.current is not None and self.current in self.WHITESPACE:
            self.advance()

    def scan_numeric(self) -> Token:
        start = self.index
        while self.current is not None and ord("0") <= self.current <= ord("9"):
            self.advance()

        span = Span(start, self.index)
        lexeme = self.bytes[start : self.index].decode("ascii")
        # int() refuses very long digit strings, so reject by length first
        digits = lexeme.lstrip("0") or "0"
        if len(digits) > len(str(U64_MAX)) or int(digits) > U64_MAX:
            raise LexError.overflow(lexeme, span)

        return Token.number(int(digits), span)


def lex(source: str) -> List[Token]:
    """Tokenize ``source``, stopping at the first invalid byte."""
    try:
        return list(Scanner(source))
    except LexError as err:
        err.source = source
        raise
