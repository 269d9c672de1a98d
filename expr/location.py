from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def encode_source(source: str) -> bytes:
    # lone surrogates (e.g. undecodable argv bytes) must still map to byte offsets
    return source.encode("utf-8", errors="surrogatepass")


@dataclass(frozen=True)
class Span:
    """Half-open byte range ``[start, end)`` into the UTF-8 encoded source."""

    start: int
    end: int

    def merge(self, other: "Span") -> "Span":
        return Span(min(self.start, other.start), max(self.end, other.end))

    def __repr__(self):
        return f"{self.start}..{self.end}"


@dataclass(frozen=True)
class Annotation(Generic[T]):
    value: T
    span: Span


@dataclass
class Location:
    index: int
    line: int
    col: int

    @classmethod
    def of(cls, source: bytes, index: int) -> "Location":
        line_start = source.rfind(b"\n", 0, index) + 1
        line = source.count(b"\n", 0, index) + 1
        # columns count UTF-8 lead bytes, never continuation bytes
        col = sum(1 for b in source[line_start:index] if b & 0xC0 != 0x80) + 1
        return cls(index, line, col)

    def __repr__(self):
        return f"{self.line}:{self.col}"
