"""ansimark lexer — splits source text into delimiter and content chunks."""

from __future__ import annotations

from ansimark.tokens import DELIMITER, Chunk, ChunkType, Position, Span


class Lexer:
    """Split markup source on maximal runs of the delimiter character.

    Every run of ``%`` becomes one DELIMITER chunk. The text before the first
    run, between two runs and after the last run becomes one CONTENT chunk
    each, possibly empty, so chunks always alternate CONTENT, DELIMITER, ...,
    CONTENT: ``"%%"`` lexes to CONTENT(""), DELIMITER("%%"), CONTENT("").
    Concatenating the text of all chunks gives back the source.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._col = 1
        self._chunks: list[Chunk] = []

    def tokenize(self) -> list[Chunk]:
        """Split the full source and return the chunk list."""
        self._lex_content()
        while self._pos < len(self._source):
            self._lex_delimiter()
            self._lex_content()
        return self._chunks

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _current_pos(self) -> Position:
        return Position(self._line, self._col, self._pos)

    def _peek(self) -> str:
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def _emit(self, ct: ChunkType, start: Position) -> Chunk:
        end = self._current_pos()
        chunk = Chunk(ct, self._source[start.offset : end.offset], Span(start, end))
        self._chunks.append(chunk)
        return chunk

    # ------------------------------------------------------------------
    # Chunks
    # ------------------------------------------------------------------

    def _lex_delimiter(self) -> None:
        start = self._current_pos()
        while self._peek() == DELIMITER:
            self._advance()
        self._emit(ChunkType.DELIMITER, start)

    def _lex_content(self) -> None:
        start = self._current_pos()
        while self._pos < len(self._source) and self._peek() != DELIMITER:
            self._advance()
        self._emit(ChunkType.CONTENT, start)


def tokenize(source: str) -> list[Chunk]:
    """Convenience function: split source text and return the chunk list."""
    return Lexer(source).tokenize()
