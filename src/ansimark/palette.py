"""Color palettes — 4-bit color index to SGR color parameters.

Indices follow the MS-DOS convention:

    0  black          8  grey
    1  blue           9  light blue
    2  green         10  light green
    3  cyan          11  light cyan
    4  red           12  light red
    5  magenta       13  light magenta
    6  yellow        14  light yellow
    7  white         15  bright white

The background palette is shared by both color modes. The foreground palette
depends on the mode: DIRECT uses the aixterm bright codes (90-97), INTENSITY
renders 8-15 as the base color with the intensity bit set, for ANSI.SYS and
BBS terminals without bright color codes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ansimark.sgr import Sgr

PALETTE_SIZE = 16

# MS-DOS order of the eight base colors
_DOS_ORDER = ("BLACK", "BLUE", "GREEN", "CYAN", "RED", "PURPLE", "YELLOW", "WHITE")


class ColorMode(Enum):
    DIRECT = "direct"
    INTENSITY = "intensity"

    @classmethod
    def from_name(cls, name: str) -> ColorMode:
        """Resolve a mode name, accepting the aixterm/ansibbs aliases."""
        key = name.strip().lower()
        key = _MODE_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            choices = ", ".join(sorted({m.value for m in cls} | set(_MODE_ALIASES)))
            raise ValueError(f"unknown color mode '{name}' (expected one of: {choices})") from None


_MODE_ALIASES = {"aixterm": "direct", "ansibbs": "intensity"}


@dataclass(frozen=True, slots=True)
class SgrColor:
    """An opaque color command: the SGR parameters that select one color."""

    params: tuple[int, ...]

    def __str__(self) -> str:
        return ";".join(str(p) for p in self.params)


class Palette:
    """Immutable 16-entry mapping from color index to SgrColor."""

    __slots__ = ("name", "_entries")

    def __init__(self, name: str, entries: tuple[SgrColor, ...]) -> None:
        if len(entries) != PALETTE_SIZE:
            raise ValueError(f"palette '{name}' needs {PALETTE_SIZE} entries, got {len(entries)}")
        self.name = name
        self._entries = entries

    def __getitem__(self, index: int) -> SgrColor:
        # No negative indexing, no wrapping
        if not 0 <= index < PALETTE_SIZE:
            raise IndexError(f"color index {index} out of range for palette '{self.name}'")
        return self._entries[index]

    def __len__(self) -> int:
        return PALETTE_SIZE

    def __iter__(self):
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"Palette({self.name!r})"


def _build(name: str, codes: list[int | tuple[int, ...]]) -> Palette:
    entries = tuple(
        SgrColor(tuple(int(p) for p in c) if isinstance(c, tuple) else (int(c),)) for c in codes
    )
    return Palette(name, entries)


BACKGROUND = _build(
    "background",
    [Sgr[f"BG_{c}"] for c in _DOS_ORDER] + [Sgr[f"BG_{c}_BRIGHT"] for c in _DOS_ORDER],
)

FOREGROUND_DIRECT = _build(
    "foreground-direct",
    [Sgr[f"FG_{c}"] for c in _DOS_ORDER] + [Sgr[f"FG_{c}_BRIGHT"] for c in _DOS_ORDER],
)

FOREGROUND_INTENSITY = _build(
    "foreground-intensity",
    [(Sgr.RESET, Sgr[f"FG_{c}"]) for c in _DOS_ORDER]
    + [(Sgr.BOLD, Sgr[f"FG_{c}"]) for c in _DOS_ORDER],
)


@dataclass(frozen=True, slots=True)
class PaletteSet:
    """The foreground/background pair a parser resolves color indices through."""

    foreground: Palette
    background: Palette

    @classmethod
    def for_mode(cls, mode: ColorMode) -> PaletteSet:
        if mode is ColorMode.INTENSITY:
            return cls(FOREGROUND_INTENSITY, BACKGROUND)
        return cls(FOREGROUND_DIRECT, BACKGROUND)
