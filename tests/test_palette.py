"""Palette tables and color mode lookup."""

import pytest

from ansimark.palette import (
    BACKGROUND,
    FOREGROUND_DIRECT,
    FOREGROUND_INTENSITY,
    ColorMode,
    Palette,
    PaletteSet,
    SgrColor,
)

ALL_PALETTES = [BACKGROUND, FOREGROUND_DIRECT, FOREGROUND_INTENSITY]


class TestTables:
    @pytest.mark.parametrize("palette", ALL_PALETTES, ids=repr)
    def test_sixteen_entries(self, palette):
        assert len(palette) == 16
        assert len(list(palette)) == 16

    @pytest.mark.parametrize("palette", ALL_PALETTES, ids=repr)
    def test_total_over_range(self, palette):
        for i in range(16):
            assert isinstance(palette[i], SgrColor)

    @pytest.mark.parametrize("palette", ALL_PALETTES, ids=repr)
    @pytest.mark.parametrize("index", [16, 42, 99, -1])
    def test_rejects_out_of_range(self, palette, index):
        with pytest.raises(IndexError):
            palette[index]

    def test_dos_color_order(self):
        # 1 is blue, 4 is red in the MS-DOS order
        assert FOREGROUND_DIRECT[1] == SgrColor((34,))
        assert FOREGROUND_DIRECT[4] == SgrColor((31,))

    def test_direct_foreground(self):
        assert FOREGROUND_DIRECT[0] == SgrColor((30,))
        assert FOREGROUND_DIRECT[7] == SgrColor((37,))
        assert FOREGROUND_DIRECT[8] == SgrColor((90,))
        assert FOREGROUND_DIRECT[15] == SgrColor((97,))

    def test_intensity_foreground(self):
        assert FOREGROUND_INTENSITY[0] == SgrColor((0, 30))
        assert FOREGROUND_INTENSITY[7] == SgrColor((0, 37))
        assert FOREGROUND_INTENSITY[8] == SgrColor((1, 30))
        assert FOREGROUND_INTENSITY[15] == SgrColor((1, 37))

    def test_intensity_repeats_base_colors(self):
        for i in range(8):
            assert FOREGROUND_INTENSITY[i].params[1] == FOREGROUND_INTENSITY[i + 8].params[1]

    def test_background(self):
        assert BACKGROUND[3] == SgrColor((46,))
        assert BACKGROUND[8] == SgrColor((100,))
        assert BACKGROUND[15] == SgrColor((107,))

    def test_sgr_color_str(self):
        assert str(SgrColor((1, 37))) == "1;37"
        assert str(SgrColor((97,))) == "97"

    def test_wrong_size_rejected(self):
        with pytest.raises(ValueError, match="16 entries"):
            Palette("short", (SgrColor((30,)),))


class TestColorMode:
    def test_palette_set_direct(self):
        ps = PaletteSet.for_mode(ColorMode.DIRECT)
        assert ps.foreground is FOREGROUND_DIRECT
        assert ps.background is BACKGROUND

    def test_palette_set_intensity(self):
        ps = PaletteSet.for_mode(ColorMode.INTENSITY)
        assert ps.foreground is FOREGROUND_INTENSITY
        assert ps.background is BACKGROUND

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("direct", ColorMode.DIRECT),
            ("intensity", ColorMode.INTENSITY),
            ("aixterm", ColorMode.DIRECT),
            ("ANSIBBS", ColorMode.INTENSITY),
            (" direct ", ColorMode.DIRECT),
        ],
    )
    def test_from_name(self, name, expected):
        assert ColorMode.from_name(name) is expected

    def test_from_name_unknown(self):
        with pytest.raises(ValueError, match="unknown color mode"):
            ColorMode.from_name("truecolor")
