"""Chunk and token types, source positions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

DELIMITER = "%"


class ChunkType(Enum):
    DELIMITER = auto()  # maximal run of %
    CONTENT = auto()  # everything between delimiter runs, possibly empty


class TokenType(Enum):
    # Style toggles
    BOLD = auto()  # b
    NORMAL = auto()  # n
    FAINT = auto()  # f
    ITALIC = auto()  # i
    UNDERLINE = auto()  # u
    BLINK = auto()  # bl
    NEGATIVE = auto()  # no keyword, sink-only
    STRIKETHROUGH = auto()  # s
    NOSTYLE = auto()  # r

    # Color select, args = (index,)
    FOREGROUND = auto()  # f<dd>
    BACKGROUND = auto()  # b<dd>

    # Screen ops
    ERASE_DISPLAY = auto()  # c
    ERASE_DISPLAY_UP = auto()  # eu
    ERASE_DISPLAY_DOWN = auto()  # ed
    ERASE_LINE = auto()  # el
    ERASE_LINE_TO_END = auto()  # ee
    ERASE_LINE_TO_START = auto()  # es
    LINE_FEED = auto()  # lf

    # Cursor, args = (amount,) or (row, col)
    CURSOR_BACK = auto()  # cb<ddd>
    CURSOR_FORWARD = auto()  # cf<ddd>
    CURSOR_DOWN = auto()  # cd<ddd>
    CURSOR_UP = auto()  # cu<ddd>
    CURSOR_POSITION = auto()  # xy<ddd>,<ddd>

    TEXT = auto()  # anything else, verbatim


class Direction(Enum):
    BACK = "back"
    FORWARD = "forward"
    DOWN = "down"
    UP = "up"


CURSOR_DIRECTIONS: dict[TokenType, Direction] = {
    TokenType.CURSOR_BACK: Direction.BACK,
    TokenType.CURSOR_FORWARD: Direction.FORWARD,
    TokenType.CURSOR_DOWN: Direction.DOWN,
    TokenType.CURSOR_UP: Direction.UP,
}


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Chunk:
    """A contiguous slice of the source produced by the lexer."""

    type: ChunkType
    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class Token:
    """A classified content chunk with its extracted numeric arguments."""

    type: TokenType
    text: str
    args: tuple[int, ...]
    span: Span
