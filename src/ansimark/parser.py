"""ansimark parser — classifies content chunks and dispatches them to a sink."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator

from ansimark.errors import ArgumentError, PaletteIndexError
from ansimark.lexer import tokenize
from ansimark.palette import ColorMode, PaletteSet, SgrColor
from ansimark.sink import CommandSink
from ansimark.tokens import CURSOR_DIRECTIONS, Chunk, ChunkType, Token, TokenType

logger = logging.getLogger(__name__)


def _exact(keyword: str) -> re.Pattern[str]:
    return re.compile(re.escape(keyword))


def _prefixed(prefix: str, digits: str) -> re.Pattern[str]:
    return re.compile(prefix + digits, re.IGNORECASE | re.ASCII)


_AMOUNT = r"([0-9]{1,3})"
_INDEX = r"([0-9]{1,2})"

# Priority order: first full match wins. Exact keywords are case-sensitive,
# parameterized prefixes are not.
RULES: tuple[tuple[re.Pattern[str], TokenType], ...] = (
    (_exact("b"), TokenType.BOLD),
    (_exact("n"), TokenType.NORMAL),
    (_exact("f"), TokenType.FAINT),
    (_exact("i"), TokenType.ITALIC),
    (_exact("u"), TokenType.UNDERLINE),
    (_exact("bl"), TokenType.BLINK),
    (_exact("s"), TokenType.STRIKETHROUGH),
    (_prefixed("f", _INDEX), TokenType.FOREGROUND),
    (_prefixed("b", _INDEX), TokenType.BACKGROUND),
    (_exact("r"), TokenType.NOSTYLE),
    (_exact("c"), TokenType.ERASE_DISPLAY),
    (_exact("eu"), TokenType.ERASE_DISPLAY_UP),
    (_exact("ed"), TokenType.ERASE_DISPLAY_DOWN),
    (_exact("el"), TokenType.ERASE_LINE),
    (_exact("ee"), TokenType.ERASE_LINE_TO_END),
    (_exact("es"), TokenType.ERASE_LINE_TO_START),
    (_prefixed("cb", _AMOUNT), TokenType.CURSOR_BACK),
    (_prefixed("cf", _AMOUNT), TokenType.CURSOR_FORWARD),
    (_prefixed("cd", _AMOUNT), TokenType.CURSOR_DOWN),
    (_prefixed("cu", _AMOUNT), TokenType.CURSOR_UP),
    (_prefixed("xy", _AMOUNT + "," + _AMOUNT), TokenType.CURSOR_POSITION),
    (_exact("lf"), TokenType.LINE_FEED),
)


def classify(chunk: Chunk, source: str = "") -> Token:
    """Classify one non-empty content chunk into a Token.

    Chunks matching no rule become TEXT tokens carrying the chunk verbatim.
    *source* is only used for error context.
    """
    for pattern, tt in RULES:
        m = pattern.fullmatch(chunk.text)
        if m is not None:
            args = tuple(_to_int(g, chunk, source) for g in m.groups())
            return Token(tt, chunk.text, args, chunk.span)
    return Token(TokenType.TEXT, chunk.text, (), chunk.span)


def _to_int(digits: str, chunk: Chunk, source: str) -> int:
    try:
        return int(digits)
    except ValueError:
        raise ArgumentError(
            f"malformed numeric argument '{digits}' in '{chunk.text}'", chunk.span, source
        ) from None


def scan(source: str) -> Iterator[Token]:
    """Yield the classified token for every non-empty content chunk, in order."""
    for chunk in tokenize(source):
        if chunk.type is ChunkType.DELIMITER or not chunk.text:
            continue
        yield classify(chunk, source)


class Parser:
    """Single-pass dispatcher from markup source to CommandSink calls.

    The color mode and palettes are fixed at construction. Given explicit
    palettes, the mode is the one whose palettes they are, or None for a
    custom set; a mode that disagrees with them is rejected. Parsing stops at
    the first MarkupError; commands for earlier chunks have already reached
    the sink, the offending chunk sends nothing.
    """

    def __init__(
        self,
        sink: CommandSink,
        mode: ColorMode | None = None,
        palettes: PaletteSet | None = None,
    ) -> None:
        self._sink = sink
        if palettes is None:
            self._mode: ColorMode | None = mode or ColorMode.DIRECT
            self._palettes = PaletteSet.for_mode(self._mode)
            return

        derived = next((m for m in ColorMode if PaletteSet.for_mode(m) == palettes), None)
        if mode is not None and mode is not derived:
            raise ValueError(f"palettes do not match color mode '{mode.value}'")
        self._mode = derived
        self._palettes = palettes

    @property
    def mode(self) -> ColorMode | None:
        return self._mode

    def parse(self, source: str) -> None:
        """Classify every chunk of *source* and call the sink once per chunk."""
        for token in scan(source):
            self._dispatch(token, source)

    def resolve_color(self, token: Token, source: str = "") -> SgrColor:
        """Look up a FOREGROUND/BACKGROUND token's index in the active palette."""
        palette = (
            self._palettes.foreground
            if token.type is TokenType.FOREGROUND
            else self._palettes.background
        )
        index = token.args[0]
        try:
            return palette[index]
        except IndexError:
            raise PaletteIndexError(index, token.span, source) from None

    def _dispatch(self, token: Token, source: str) -> None:
        sink = self._sink
        logger.debug("dispatch %s %r", token.type.name, token.args or token.text)

        match token.type:
            case TokenType.BOLD:
                sink.bold()
            case TokenType.NORMAL:
                sink.normal()
            case TokenType.FAINT:
                sink.faint()
            case TokenType.ITALIC:
                sink.italic()
            case TokenType.UNDERLINE:
                sink.underline()
            case TokenType.BLINK:
                sink.blink()
            case TokenType.NEGATIVE:
                sink.negative()
            case TokenType.STRIKETHROUGH:
                sink.strikethrough()
            case TokenType.NOSTYLE:
                sink.nostyle()
            case TokenType.FOREGROUND | TokenType.BACKGROUND:
                sink.color(self.resolve_color(token, source))
            case TokenType.ERASE_DISPLAY:
                sink.erase_display()
            case TokenType.ERASE_DISPLAY_UP:
                sink.erase_display_up()
            case TokenType.ERASE_DISPLAY_DOWN:
                sink.erase_display_down()
            case TokenType.ERASE_LINE:
                sink.erase_line()
            case TokenType.ERASE_LINE_TO_END:
                sink.erase_line_to_eol()
            case TokenType.ERASE_LINE_TO_START:
                sink.erase_line_to_sol()
            case (
                TokenType.CURSOR_BACK
                | TokenType.CURSOR_FORWARD
                | TokenType.CURSOR_DOWN
                | TokenType.CURSOR_UP
            ):
                sink.cursor_move(CURSOR_DIRECTIONS[token.type], token.args[0])
            case TokenType.CURSOR_POSITION:
                row, col = token.args
                sink.cursor_position(row, col)
            case TokenType.LINE_FEED:
                sink.lf()
            case TokenType.TEXT:
                sink.text(token.text)


def parse(source: str, sink: CommandSink, mode: ColorMode = ColorMode.DIRECT) -> None:
    """Convenience function: parse source into *sink* using the given color mode."""
    Parser(sink, mode).parse(source)
