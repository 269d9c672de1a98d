import enum
from dataclasses import dataclass
from typing import Optional

from ..location import Span


class TokenKind(enum.Enum):
    # --- Literals ---
    NUMBER = "NUMBER"

    # --- Operators ---
    PLUS = "+"
    MINUS = "-"
    ASTERISK = "*"
    SLASH = "/"

    # --- Delimiters ---
    LPAREN = "("
    RPAREN = ")"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    span: Span
    value: Optional[int] = None

    @classmethod
    def number(cls, n: int, span: Span) -> "Token":
        return cls(TokenKind.NUMBER, span, n)

    @classmethod
    def plus(cls, span: Span) -> "Token":
        return cls(TokenKind.PLUS, span)

    @classmethod
    def minus(cls, span: Span) -> "Token":
        return cls(TokenKind.MINUS, span)

    @classmethod
    def asterisk(cls, span: Span) -> "Token":
        return cls(TokenKind.ASTERISK, span)

    @classmethod
    def slash(cls, span: Span) -> "Token":
        return cls(TokenKind.SLASH, span)

    @classmethod
    def lparen(cls, span: Span) -> "Token":
        return cls(TokenKind.LPAREN, span)

    @classmethod
    def rparen(cls, span: Span) -> "Token":
        return cls(TokenKind.RPAREN, span)

    def describe(self) -> str:
        if self.kind == TokenKind.NUMBER:
            return f"number {self.value}"
        return f"'{self.kind.value}'"

    def __str__(self):
        lexeme = self.value if self.kind == TokenKind.NUMBER else self.kind.value
        return f"{self.span!r:<10} {self.kind.name:<10} {lexeme}"
