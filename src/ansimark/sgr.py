"""SGR (Select Graphic Rendition) parameter codes, ECMA-48 §8.3.117."""

from __future__ import annotations

from enum import IntEnum


class Sgr(IntEnum):
    RESET = 0
    BOLD = 1
    FAINT = 2
    ITALIC = 3
    UNDERLINE = 4
    BLINK = 5
    NEGATIVE = 7
    STRIKETHROUGH = 9
    NORMAL = 22

    FG_BLACK = 30
    FG_RED = 31
    FG_GREEN = 32
    FG_YELLOW = 33
    FG_BLUE = 34
    FG_PURPLE = 35
    FG_CYAN = 36
    FG_WHITE = 37

    BG_BLACK = 40
    BG_RED = 41
    BG_GREEN = 42
    BG_YELLOW = 43
    BG_BLUE = 44
    BG_PURPLE = 45
    BG_CYAN = 46
    BG_WHITE = 47

    # aixterm bright colors
    FG_BLACK_BRIGHT = 90
    FG_RED_BRIGHT = 91
    FG_GREEN_BRIGHT = 92
    FG_YELLOW_BRIGHT = 93
    FG_BLUE_BRIGHT = 94
    FG_PURPLE_BRIGHT = 95
    FG_CYAN_BRIGHT = 96
    FG_WHITE_BRIGHT = 97

    BG_BLACK_BRIGHT = 100
    BG_RED_BRIGHT = 101
    BG_GREEN_BRIGHT = 102
    BG_YELLOW_BRIGHT = 103
    BG_BLUE_BRIGHT = 104
    BG_PURPLE_BRIGHT = 105
    BG_CYAN_BRIGHT = 106
    BG_WHITE_BRIGHT = 107
