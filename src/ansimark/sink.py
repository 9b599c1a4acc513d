"""Command sink interface and a recording implementation."""

from __future__ import annotations

from typing import Any, Protocol

from ansimark.palette import SgrColor
from ansimark.tokens import Direction


class CommandSink(Protocol):
    """One method per terminal operation. Return values are ignored."""

    def bold(self) -> object: ...
    def normal(self) -> object: ...
    def faint(self) -> object: ...
    def italic(self) -> object: ...
    def underline(self) -> object: ...
    def blink(self) -> object: ...
    def negative(self) -> object: ...
    def strikethrough(self) -> object: ...
    def nostyle(self) -> object: ...
    def color(self, value: SgrColor) -> object: ...
    def erase_display(self) -> object: ...
    def erase_display_up(self) -> object: ...
    def erase_display_down(self) -> object: ...
    def erase_line(self) -> object: ...
    def erase_line_to_eol(self) -> object: ...
    def erase_line_to_sol(self) -> object: ...
    def cursor_move(self, direction: Direction, amount: int) -> object: ...
    def cursor_position(self, row: int, col: int) -> object: ...
    def lf(self) -> object: ...
    def text(self, value: str) -> object: ...


Call = tuple[str, tuple[Any, ...]]


class RecordingSink:
    """CommandSink that records each call as an (operation, args) pair."""

    def __init__(self) -> None:
        self.calls: list[Call] = []

    def _record(self, name: str, *args: Any) -> RecordingSink:
        self.calls.append((name, args))
        return self

    def bold(self) -> RecordingSink:
        return self._record("bold")

    def normal(self) -> RecordingSink:
        return self._record("normal")

    def faint(self) -> RecordingSink:
        return self._record("faint")

    def italic(self) -> RecordingSink:
        return self._record("italic")

    def underline(self) -> RecordingSink:
        return self._record("underline")

    def blink(self) -> RecordingSink:
        return self._record("blink")

    def negative(self) -> RecordingSink:
        return self._record("negative")

    def strikethrough(self) -> RecordingSink:
        return self._record("strikethrough")

    def nostyle(self) -> RecordingSink:
        return self._record("nostyle")

    def color(self, value: SgrColor) -> RecordingSink:
        return self._record("color", value)

    def erase_display(self) -> RecordingSink:
        return self._record("erase_display")

    def erase_display_up(self) -> RecordingSink:
        return self._record("erase_display_up")

    def erase_display_down(self) -> RecordingSink:
        return self._record("erase_display_down")

    def erase_line(self) -> RecordingSink:
        return self._record("erase_line")

    def erase_line_to_eol(self) -> RecordingSink:
        return self._record("erase_line_to_eol")

    def erase_line_to_sol(self) -> RecordingSink:
        return self._record("erase_line_to_sol")

    def cursor_move(self, direction: Direction, amount: int) -> RecordingSink:
        return self._record("cursor_move", direction, amount)

    def cursor_position(self, row: int, col: int) -> RecordingSink:
        return self._record("cursor_position", row, col)

    def lf(self) -> RecordingSink:
        return self._record("lf")

    def text(self, value: str) -> RecordingSink:
        return self._record("text", value)
