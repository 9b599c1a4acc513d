"""Command-line interface for ansimark."""

from __future__ import annotations

import argparse
import logging
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ansimark.errors import MarkupError
from ansimark.palette import ColorMode

CONFIG_NAME = "ansimark.toml"

_CONSOLE_FMT = "%(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None
    text: str | None
    output_file: Path | None
    mode: ColorMode
    debug: bool
    verbose: bool

    @property
    def display_name(self) -> str:
        if self.text is not None:
            return "<text>"
        if self.input_file is None or str(self.input_file) == "-":
            return "<stdin>"
        return str(self.input_file)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="ansimark",
        description="Render %-delimited markup to ANSI terminal control sequences",
    )
    p.add_argument("input", nargs="?", help="Input file, or - for stdin")
    p.add_argument("-t", "--text", help="Markup given inline instead of an input file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-m",
        "--mode",
        default=None,
        metavar="MODE",
        help="Foreground color mode: direct (aixterm) or intensity (ansibbs)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument("--debug", action="store_true", help="Dump classified tokens to stderr")
    p.add_argument("-v", "--verbose", action="store_true", help="Log each dispatched command")
    return p


def parse_mode_arg(s: str) -> ColorMode:
    """Parse a color mode name, raising ArgumentTypeError on unknown names."""
    try:
        return ColorMode.from_name(s)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file.

    A missing auto-discovered file gives an empty dict; a missing file named
    with --config is an ArgumentTypeError.
    """
    path = config_path if config_path is not None else input_dir / CONFIG_NAME

    if not path.is_file():
        if config_path is not None:
            raise argparse.ArgumentTypeError(f"config file not found: {config_path}")
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: default < config file < CLI flags.
    """
    if args.input is None and args.text is None:
        raise argparse.ArgumentTypeError("no input (give a file, - for stdin, or --text)")
    if args.input is not None and args.text is not None:
        raise argparse.ArgumentTypeError("give either an input file or --text, not both")

    input_file = Path(args.input) if args.input is not None else None
    if input_file is not None and str(input_file) != "-":
        input_dir = input_file.parent
        if not input_dir.parts:
            input_dir = Path(".")
    else:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    # Color mode: default < config < CLI
    mode = ColorMode.DIRECT
    cfg_mode = config.get("mode")
    if isinstance(cfg_mode, str):
        mode = parse_mode_arg(cfg_mode)
    elif cfg_mode is not None:
        raise argparse.ArgumentTypeError(f"config 'mode' must be a string, got {cfg_mode!r}")
    if args.mode is not None:
        mode = parse_mode_arg(args.mode)

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        text=args.text,
        output_file=output_file,
        mode=mode,
        debug=args.debug,
        verbose=args.verbose,
    )


def setup_logging(*, verbose: bool) -> logging.Logger:
    """Attach a stderr handler to the package logger."""
    root = logging.getLogger("ansimark")
    root.handlers.clear()
    level = logging.DEBUG if verbose else logging.WARNING
    root.setLevel(level)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter(_CONSOLE_FMT))
    root.addHandler(console)
    return root


def read_source(options: CliOptions) -> str:
    if options.text is not None:
        return options.text
    if options.input_file is None or str(options.input_file) == "-":
        return sys.stdin.read()
    return options.input_file.read_text(encoding="utf-8")


def render_source(source: str, options: CliOptions) -> str:
    """Parse markup source and render it in the configured color mode."""
    from ansimark.debug import dump_tokens
    from ansimark.parser import Parser
    from ansimark.renderer import AnsiRenderer

    renderer = AnsiRenderer()
    parser = Parser(renderer, options.mode)

    if options.debug:
        dump_tokens(source, parser, file=sys.stderr)

    parser.parse(source)
    return renderer.getvalue()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except tomllib.TOMLDecodeError as exc:
        print(f"error: invalid config file: {exc}", file=sys.stderr)
        return 2

    setup_logging(verbose=options.verbose)

    try:
        source = read_source(options)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        output = render_source(source, options)
    except MarkupError as exc:
        print(exc.format(options.display_name), file=sys.stderr)
        return 1

    if options.output_file:
        try:
            options.output_file.write_text(output, encoding="utf-8")
        except OSError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2
    else:
        sys.stdout.write(output)

    return 0
