from __future__ import annotations

import os
from argparse import ArgumentParser
from typing import Callable

from . import (
    InvalidArgument,
    Stream,
    enable_virtual_terminal_processing,
    get_preference,
    is_supported,
    seq,
    should_use,
)
from .__about__ import __version__
from .predefined import RESET, Colors, Combinations, Effects, Fonts, Misc

SAMPLE_TEXT = "Hello world!"

COLOR_NAMES = ("BLACK", "RED", "GREEN", "YELLOW", "BLUE", "MAGENTA", "CYAN", "WHITE")

Formatter = Callable[[str], str]


def _section(title: str, rows: list[tuple[str, str]], fmt: Formatter) -> str:
    buff = title + ":\n"

    for label, sequence in rows:
        buff += f"  {label + ':':<18}{fmt(sequence)}{SAMPLE_TEXT}{fmt(RESET)}\n"

    return buff


def _color_section(title: str, palette: type, others: type, fmt: Formatter) -> str:
    """Renders each color of `palette` on its own, then over black & white `others`."""

    buff = title + ":\n"

    for name in COLOR_NAMES:
        sequence = getattr(palette, name)

        buff += f"  {name.capitalize() + ':':<18}"
        buff += f"{fmt(sequence)}{SAMPLE_TEXT}    "
        buff += f"{fmt(others.BLACK)}{SAMPLE_TEXT}{fmt(others.RESET)}    "
        buff += f"{fmt(others.WHITE)}{SAMPLE_TEXT}{fmt(RESET)}\n"

    return buff


def run_demo(force: bool) -> None:
    """Prints the sample text with every predefined sequence applied."""

    enable_virtual_terminal_processing()
    use = force or should_use(Stream.STDOUT, get_preference())

    def fmt(sequence: str) -> str:
        return sequence if use else ""

    fg, bg = Colors.Fg, Colors.Bg

    sections = [
        f"Demo text:\n  {'':<18}{SAMPLE_TEXT}\n",
        _section(
            "With effects",
            [
                ("Bold", Effects.BOLD),
                ("Dim", Effects.DIM),
                ("Italic", Effects.ITALIC),
                ("Underline", Effects.UNDERLINE),
                ("Blink", Effects.BLINK),
                ("Rapid-blink", Effects.RAPID_BLINK),
                ("Inverse", Effects.INVERSE),
                ("Invisible", Effects.INVISIBLE),
                ("Strike-through", Effects.STRIKE),
                ("Fraktur", Effects.FRAKTUR),
                ("Double-underline", Effects.DBL_UNDERLINE),
            ],
            fmt,
        ),
        _color_section("Basic foreground colours", fg, bg, fmt),
        _color_section("Basic foreground colours - bright", fg.Bright, bg, fmt),
        _color_section("Basic background colours", bg, fg, fmt),
        _color_section("Basic background colours - bright", bg.Bright, fg, fmt),
        _section(
            "Misc",
            [
                ("Framed", Misc.FRAMED),
                ("Encircled", Misc.ENCIRCLED),
                ("Overlined", Misc.OVERLINED),
            ],
            fmt,
        ),
        _section(
            "Misc - Ideogram",
            [
                ("Underline", Misc.Ideogram.UNDERLINE),
                ("Double-underline", Misc.Ideogram.DBL_UNDERLINE),
                ("Overline", Misc.Ideogram.OVERLINE),
                ("Double-overline", Misc.Ideogram.DBL_OVERLINE),
                ("Stress-marking", Misc.Ideogram.STRESS_MARKING),
            ],
            fmt,
        ),
        _section(
            "Combinations - foreground-color + bold",
            [
                (name.capitalize(), getattr(Combinations.FgBold, name))
                for name in COLOR_NAMES
            ],
            fmt,
        ),
        _section(
            "With font selection",
            [("Default", Fonts.DEFAULT)]
            + [(f"Alt #{i}", getattr(Fonts, f"ALT{i}")) for i in range(1, 10)],
            fmt,
        ),
    ]

    print("".join(sections), end="")


def run_support() -> None:
    """Prints the formatting verdict for each output stream."""

    rows = [
        ("$TERM", os.getenv("TERM", "-")),
        ("$NO_COLOR", os.getenv("NO_COLOR", "-")),
        ("$TERMCTRL_COLOR", os.getenv("TERMCTRL_COLOR", "-")),
        ("stdout supported", str(is_supported(Stream.STDOUT))),
        ("stderr supported", str(is_supported(Stream.STDERR))),
        ("preference", str(get_preference())),
    ]

    max_left = max(len(row[0]) for row in rows) + 3

    for left, right in rows:
        print(f"{left:<{max_left}}{right}")


def run_seq(codes: list[str]) -> None:
    """Prints the repr of the sequence built from the given codes."""

    print(repr(seq(*codes)))


def main(argv: list[str] | None = None) -> None:
    """The main entrypoint."""

    parser = ArgumentParser(
        "termctrl", description="Terminal control sequence helpers."
    )
    parser.add_argument("-v", "--version", action="version", version=__version__)

    subs = parser.add_subparsers(required=True)

    demo_command = subs.add_parser("demo", help="show every predefined sequence")
    demo_command.set_defaults(func=run_demo)
    demo_command.add_argument(
        "--force", action="store_true", help="format even when stdout is not a TTY"
    )

    subs.add_parser("support", help="show formatting support").set_defaults(
        func=run_support
    )

    seq_command = subs.add_parser("seq", help="build a sequence from codes")
    seq_command.set_defaults(func=run_seq)
    seq_command.add_argument("codes", nargs="+")

    args = parser.parse_args(argv)

    command = args.func

    opts = vars(args)
    del opts["func"]

    try:
        command(**opts)

    except InvalidArgument as error:
        parser.error(str(error))


if __name__ == "__main__":
    main()
