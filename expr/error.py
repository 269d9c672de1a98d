import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from colorama import Fore, Style

from .location import Location, Span, encode_source

if TYPE_CHECKING:
    from .scanner.token import Token


@dataclass
class CompileError(Exception):
    message: str
    span: Optional[Span] = None
    source: Optional[str] = None

    @property
    def location(self) -> Optional[Location]:
        if self.span is None or self.source is None:
            return None
        return Location.of(encode_source(self.source), self.span.start)

    def __str__(self):
        loc = ""
        if location := self.location:
            loc = f"[line {location.line}, col {location.col}] "
        elif self.span is not None:
            loc = f"[byte {self.span.start}] "
        return f"{loc}{self.message}"


class LexErrorKind(enum.Enum):
    INVALID_CHAR = "invalid character"
    EOF = "unexpected end of input"
    OVERFLOW = "integer literal out of range"


@dataclass
class LexError(CompileError):
    kind: LexErrorKind = LexErrorKind.INVALID_CHAR
    char: Optional[str] = None

    @classmethod
    def invalid_char(cls, char: str, span: Span) -> "LexError":
        return cls(f"invalid character {char!r}", span, kind=LexErrorKind.INVALID_CHAR, char=char)

    @classmethod
    def eof(cls, span: Span) -> "LexError":
        return cls("unexpected end of input", span, kind=LexErrorKind.EOF)

    @classmethod
    def overflow(cls, lexeme: str, span: Span) -> "LexError":
        return cls(
            f"integer literal {lexeme} does not fit in 64 bits",
            span,
            kind=LexErrorKind.OVERFLOW,
        )


class ParseErrorKind(enum.Enum):
    UNEXPECTED_TOKEN = "unexpected token"
    NOT_EXPRESSION = "expected an expression"
    NOT_OPERATOR = "expected an operator"
    UNCLOSED_OPEN_PAREN = "unclosed '('"
    REDUNDANT_EXPRESSION = "unexpected trailing token"
    NESTING_TOO_DEEP = "parentheses nested too deeply"
    EOF = "unexpected end of input"


@dataclass
class ParseError(CompileError):
    kind: ParseErrorKind = ParseErrorKind.UNEXPECTED_TOKEN
    token: Optional["Token"] = None

    @classmethod
    def at(cls, kind: ParseErrorKind, token: "Token") -> "ParseError":
        return cls(f"{kind.value}, got {token.describe()}", token.span, kind=kind, token=token)

    @classmethod
    def unclosed_open_paren(cls, lparen: "Token") -> "ParseError":
        return cls(
            ParseErrorKind.UNCLOSED_OPEN_PAREN.value,
            lparen.span,
            kind=ParseErrorKind.UNCLOSED_OPEN_PAREN,
            token=lparen,
        )

    @classmethod
    def nesting_too_deep(cls, lparen: "Token", limit: int) -> "ParseError":
        return cls(
            f"parentheses nested more than {limit} deep",
            lparen.span,
            kind=ParseErrorKind.NESTING_TOO_DEEP,
            token=lparen,
        )

    @classmethod
    def eof(cls, span: Span) -> "ParseError":
        return cls(ParseErrorKind.EOF.value, span, kind=ParseErrorKind.EOF)


def format_error(err: CompileError) -> str:
    red = Fore.RED + Style.BRIGHT
    reset = Style.RESET_ALL
    parts = []

    if err.span is not None and err.source is not None:
        source = encode_source(err.source)
        start = Location.of(source, err.span.start)
        end = Location.of(source, max(err.span.start, err.span.end))
        lines = err.source.split("\n")
        line = lines[start.line - 1] if start.line <= len(lines) else ""
        # lone surrogates cannot be written to a UTF-8 terminal
        line = "".join("\ufffd" if "\ud800" <= c <= "\udfff" else c for c in line)
        width = end.col - start.col if end.line == start.line else len(line) - start.col + 1
        caret_line = " " * (start.col - 1) + f"{red}{'^' * max(1, width)}{reset}"
        parts.append(line)
        parts.append(caret_line)

    parts.append(f"{red}{str(err)}{reset}")
    return "\n".join(parts)
