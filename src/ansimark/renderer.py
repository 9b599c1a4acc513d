"""ANSI renderer — a CommandSink that produces ECMA-48 control sequences."""

from __future__ import annotations

from ansimark.palette import ColorMode, SgrColor
from ansimark.sgr import Sgr
from ansimark.tokens import Direction

CSI = "\033["

# CUB/CUF/CUD/CUU final bytes
_CURSOR_FINAL = {
    Direction.BACK: "D",
    Direction.FORWARD: "C",
    Direction.DOWN: "B",
    Direction.UP: "A",
}


def control_sequence(final: str, *params: int) -> str:
    """Return CSI, the ';'-joined parameters, then the final byte."""
    return CSI + ";".join(str(int(p)) for p in params) + final


def sgr(*params: int) -> str:
    return control_sequence("m", *params)


class AnsiRenderer:
    """Collect the rendering of each sink call; ``getvalue()`` joins them."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def getvalue(self) -> str:
        return "".join(self._parts)

    def _write(self, data: str) -> AnsiRenderer:
        self._parts.append(data)
        return self

    # Style toggles

    def bold(self) -> AnsiRenderer:
        return self._write(sgr(Sgr.BOLD))

    def normal(self) -> AnsiRenderer:
        return self._write(sgr(Sgr.NORMAL))

    def faint(self) -> AnsiRenderer:
        return self._write(sgr(Sgr.FAINT))

    def italic(self) -> AnsiRenderer:
        return self._write(sgr(Sgr.ITALIC))

    def underline(self) -> AnsiRenderer:
        return self._write(sgr(Sgr.UNDERLINE))

    def blink(self) -> AnsiRenderer:
        return self._write(sgr(Sgr.BLINK))

    def negative(self) -> AnsiRenderer:
        return self._write(sgr(Sgr.NEGATIVE))

    def strikethrough(self) -> AnsiRenderer:
        return self._write(sgr(Sgr.STRIKETHROUGH))

    def nostyle(self) -> AnsiRenderer:
        return self._write(sgr(Sgr.RESET))

    def color(self, value: SgrColor) -> AnsiRenderer:
        return self._write(sgr(*value.params))

    # Erase in display / line (ED, EL)

    def erase_display(self) -> AnsiRenderer:
        return self._write(control_sequence("J", 2))

    def erase_display_up(self) -> AnsiRenderer:
        return self._write(control_sequence("J", 1))

    def erase_display_down(self) -> AnsiRenderer:
        return self._write(control_sequence("J", 0))

    def erase_line(self) -> AnsiRenderer:
        return self._write(control_sequence("K", 2))

    def erase_line_to_eol(self) -> AnsiRenderer:
        return self._write(control_sequence("K", 0))

    def erase_line_to_sol(self) -> AnsiRenderer:
        return self._write(control_sequence("K", 1))

    # Cursor

    def cursor_move(self, direction: Direction, amount: int) -> AnsiRenderer:
        return self._write(control_sequence(_CURSOR_FINAL[direction], amount))

    def cursor_position(self, row: int, col: int) -> AnsiRenderer:
        return self._write(control_sequence("H", row, col))

    # Text

    def lf(self) -> AnsiRenderer:
        return self._write("\n")

    def text(self, value: str) -> AnsiRenderer:
        return self._write(value)


def render(source: str, mode: ColorMode = ColorMode.DIRECT) -> str:
    """Parse markup source and return the rendered control sequence string."""
    from ansimark.parser import Parser

    renderer = AnsiRenderer()
    Parser(renderer, mode).parse(source)
    return renderer.getvalue()
