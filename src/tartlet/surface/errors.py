"""Source positions and parse errors for tartlet programs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Span:
    """Half-open character range ``[start, end)`` into a program's source."""

    start: int
    end: int

    @staticmethod
    def at_end(source: str) -> Span:
        return Span(len(source), len(source))

    def extract(self, source: str) -> str:
        return source[self.start : self.end]

    def line_col(self, source: str) -> tuple[int, int]:
        """1-based line and column of ``start``."""

        line = source.count("\n", 0, self.start) + 1
        column = self.start - (source.rfind("\n", 0, self.start) + 1) + 1
        return line, column

    def source_line(self, source: str) -> str:
        """The full line of ``source`` containing ``start``."""

        begin = source.rfind("\n", 0, self.start) + 1
        end = source.find("\n", self.start)
        return source[begin:] if end == -1 else source[begin:end]


@dataclass
class SurfaceError(Exception):
    """A program could not be read.

    With ``source`` available the message names the line and column and
    underlines the offending text.
    """

    message: str
    span: Span
    source: str | None = None

    def __str__(self) -> str:
        if self.source is None:
            return f"{self.message} @ {self.span.start}:{self.span.end}"
        line, column = self.span.line_col(self.source)
        text = self.span.source_line(self.source)
        marker = " " * (column - 1) + "^" * max(1, self.span.end - self.span.start)
        return f"{self.message} at line {line}, column {column}:\n  {text}\n  {marker}"
