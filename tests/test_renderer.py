"""Renderer unit tests."""

from __future__ import annotations

import pytest

import ansimark
from ansimark.palette import ColorMode, SgrColor
from ansimark.renderer import AnsiRenderer, control_sequence, render
from ansimark.tokens import Direction

ESC = "\033["


class TestControlSequence:
    def test_no_params(self) -> None:
        assert control_sequence("J") == ESC + "J"

    def test_params(self) -> None:
        assert control_sequence("H", 3, 7) == ESC + "3;7H"


class TestRendererCalls:
    @pytest.mark.parametrize(
        ("method", "expected"),
        [
            ("bold", "1m"),
            ("normal", "22m"),
            ("faint", "2m"),
            ("italic", "3m"),
            ("underline", "4m"),
            ("blink", "5m"),
            ("negative", "7m"),
            ("strikethrough", "9m"),
            ("nostyle", "0m"),
            ("erase_display", "2J"),
            ("erase_display_up", "1J"),
            ("erase_display_down", "0J"),
            ("erase_line", "2K"),
            ("erase_line_to_eol", "0K"),
            ("erase_line_to_sol", "1K"),
        ],
    )
    def test_no_arg_operations(self, method: str, expected: str) -> None:
        r = AnsiRenderer()
        getattr(r, method)()
        assert r.getvalue() == ESC + expected

    def test_color(self) -> None:
        r = AnsiRenderer()
        r.color(SgrColor((1, 37)))
        assert r.getvalue() == ESC + "1;37m"

    @pytest.mark.parametrize(
        ("direction", "final"),
        [
            (Direction.UP, "A"),
            (Direction.DOWN, "B"),
            (Direction.FORWARD, "C"),
            (Direction.BACK, "D"),
        ],
    )
    def test_cursor_move(self, direction: Direction, final: str) -> None:
        r = AnsiRenderer()
        r.cursor_move(direction, 4)
        assert r.getvalue() == f"{ESC}4{final}"

    def test_cursor_position(self) -> None:
        r = AnsiRenderer()
        r.cursor_position(10, 20)
        assert r.getvalue() == ESC + "10;20H"

    def test_text_and_lf(self) -> None:
        r = AnsiRenderer()
        r.text("hi").lf()
        assert r.getvalue() == "hi\n"


class TestRender:
    SAMPLE = "%c%%r%%f15%%b3%Hello %f0%world!%r%%lf%"

    def test_direct_mode(self) -> None:
        assert render(self.SAMPLE) == (
            f"{ESC}2J{ESC}0m{ESC}97m{ESC}46mHello {ESC}30mworld!{ESC}0m\n"
        )

    def test_intensity_mode(self) -> None:
        assert render(self.SAMPLE, ColorMode.INTENSITY) == (
            f"{ESC}2J{ESC}0m{ESC}1;37m{ESC}46mHello {ESC}0;30mworld!{ESC}0m\n"
        )

    def test_plain_text_untouched(self) -> None:
        assert render("no markup here") == "no markup here"

    def test_package_level_render(self) -> None:
        assert ansimark.render("%b%x") == f"{ESC}1mx"
        assert ansimark.render("%f8%", ColorMode.INTENSITY) == f"{ESC}1;30m"

    def test_package_level_render_survives_submodule_import(self) -> None:
        import ansimark.renderer  # noqa: F401

        assert ansimark.render("%b%x") == f"{ESC}1mx"
        assert ansimark.render("%b%x") == f"{ESC}1mx"
