"""--debug token dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from ansimark.parser import Parser, scan
from ansimark.tokens import TokenType


def dump_tokens(source: str, parser: Parser, *, file: TextIO = sys.stderr) -> None:
    """Print one line per classified chunk to *file*.

    Color selects show the palette entry they resolve to in the parser's
    mode. Stops at the first markup error, which propagates.
    """
    for token in scan(source):
        pos = token.span.start
        loc = f"{pos.line}:{pos.column}"
        if token.type is TokenType.TEXT:
            file.write(f"{loc:>7} TEXT({token.text!r})\n")
        elif token.type in (TokenType.FOREGROUND, TokenType.BACKGROUND):
            color = parser.resolve_color(token, source)
            file.write(f"{loc:>7} {token.type.name}({token.args[0]}) -> {color}\n")
        elif token.args:
            args = ", ".join(str(a) for a in token.args)
            file.write(f"{loc:>7} {token.type.name}({args})\n")
        else:
            file.write(f"{loc:>7} {token.type.name}\n")
