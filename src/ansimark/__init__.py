"""ansimark — %-delimited inline markup to terminal control sequences."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ansimark.palette import ColorMode
    from ansimark.sink import CommandSink

__version__ = "0.1.0"


def parse(source: str, sink: CommandSink, mode: ColorMode | None = None) -> None:
    """Classify markup source and send one command per chunk to *sink*."""
    from ansimark.palette import ColorMode
    from ansimark.parser import Parser

    Parser(sink, mode or ColorMode.DIRECT).parse(source)


def render(source: str, mode: ColorMode | None = None) -> str:
    """Parse markup source and return the rendered ANSI escape sequence string."""
    from ansimark.palette import ColorMode
    from ansimark.renderer import render as _render

    return _render(source, mode or ColorMode.DIRECT)
