"""Error types with formatted source context."""

from __future__ import annotations

from ansimark.tokens import Span


class MarkupError(Exception):
    """Raised on the first markup error, with span and source context."""

    def __init__(self, message: str, span: Span, source: str) -> None:
        self.message = message
        self.span = span
        self.source = source
        super().__init__(self.format())

    def format(self, filename: str = "<input>") -> str:
        start, end = self.span.start, self.span.end
        text = self._line_text(start.line)

        # Multi-line chunks are underlined to the end of their first line
        stop = end.column if end.line == start.line else len(text) + 1
        carets = "^" * max(1, stop - start.column)

        number = str(start.line)
        margin = " " * (len(number) + 1)
        return "\n".join(
            [
                f"error: {self.message}",
                f"{margin}--> {filename}:{start.line}:{start.column}",
                f"{margin}|",
                f"{number} | {text}",
                f"{margin}| {' ' * (start.column - 1)}{carets}",
            ]
        )

    def _line_text(self, line: int) -> str:
        lines = self.source.split("\n")
        return lines[line - 1].rstrip("\r") if 0 < line <= len(lines) else ""


class PaletteIndexError(MarkupError):
    """A color select named an index with no palette entry."""

    def __init__(self, index: int, span: Span, source: str) -> None:
        self.index = index
        super().__init__(f"unknown color index {index} (expected 0-15)", span, source)


class ArgumentError(MarkupError):
    """A numeric argument could not be converted to an integer."""
