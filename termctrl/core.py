"""Construction and decoding of SGR control sequences.

A control sequence has the form `ESC [ <codes> m`, where `<codes>` is one or more
decimal numbers separated by semicolons. The functions here only build & inspect
strings; they never touch the terminal.
"""

from __future__ import annotations

import re

__all__ = [
    "SEQ_PREFIX",
    "SEQ_POSTFIX",
    "RE_SEQUENCE",
    "TermCtrlError",
    "InvalidArgument",
    "OutOfRange",
    "codes",
    "seq",
    "c256_fg",
    "c256_bg",
    "rgb_fg",
    "rgb_bg",
    "parse",
    "strip",
    "width",
]

SEQ_PREFIX = "\x1b["
SEQ_POSTFIX = "m"

RE_FRAGMENT = re.compile(r"[0-9]+(?:;[0-9]+)*")
RE_SEQUENCE = re.compile(r"\x1b\[([0-9;]*)m")

EXTENDED_FOREGROUND = 38
EXTENDED_BACKGROUND = 48
EXTENDED_256 = 5
EXTENDED_RGB = 2


class TermCtrlError(Exception):
    """The base of every error raised by this library."""


class InvalidArgument(TermCtrlError, ValueError):
    """Raised when a sequence cannot be built from the given codes."""


class OutOfRange(TermCtrlError, ValueError):
    """Raised when a color index or channel falls outside of 0-255."""


def _render(part: int | str) -> str:
    """Renders a single code or code fragment."""

    # bool is an int subclass, but `True` is never what the caller meant.
    if isinstance(part, bool):
        raise InvalidArgument(f"Booleans are not valid codes, got {part!r}.")

    if isinstance(part, int):
        if part < 0:
            raise InvalidArgument(f"Codes must be non-negative, got {part!r}.")

        return str(part)

    if isinstance(part, str):
        if RE_FRAGMENT.fullmatch(part) is None:
            raise InvalidArgument(f"Malformed code fragment {part!r}.")

        # Normalizes leading zeroes, e.g. "05" -> "5".
        return ";".join(str(int(code)) for code in part.split(";"))

    raise InvalidArgument(
        f"Codes must be integers or strings, got {type(part).__name__!r}."
    )


def codes(*parts: int | str) -> str:
    """Joins codes into a fragment that can be used within a sequence.

    Args:
        *parts: Integers, or already-joined fragments like `"38;5;141"`.

    Returns:
        The codes joined with semicolons, e.g. `codes(1, "2;3", 4) == "1;2;3;4"`.

    Raises:
        InvalidArgument: No parts were given, or one of them is not a valid code.
    """

    if not parts:
        raise InvalidArgument("At least one code is required.")

    return ";".join(_render(part) for part in parts)


def seq(*parts: int | str) -> str:
    """Constructs a full control sequence.

    Args:
        *parts: The codes to include, same as `codes`.

    Returns:
        A string like `\\x1b[31;1m`.

    Raises:
        InvalidArgument: No parts were given, or one of them is not a valid code.
    """

    return SEQ_PREFIX + codes(*parts) + SEQ_POSTFIX


def _check_channel(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}.")

    if not 0 <= value <= 255:
        raise OutOfRange(f"{name} must be within 0-255, got {value!r}.")

    return value


def c256_fg(index: int) -> str:
    """Returns the codes selecting a 256-color palette index as foreground."""

    return codes(EXTENDED_FOREGROUND, EXTENDED_256, _check_channel("index", index))


def c256_bg(index: int) -> str:
    """Returns the codes selecting a 256-color palette index as background."""

    return codes(EXTENDED_BACKGROUND, EXTENDED_256, _check_channel("index", index))


def _rgb(layer: int, red: int, green: int, blue: int) -> str:
    return codes(
        layer,
        EXTENDED_RGB,
        _check_channel("red", red),
        _check_channel("green", green),
        _check_channel("blue", blue),
    )


def rgb_fg(red: int, green: int, blue: int) -> str:
    """Returns the codes selecting a 24-bit foreground color."""

    return _rgb(EXTENDED_FOREGROUND, red, green, blue)


def rgb_bg(red: int, green: int, blue: int) -> str:
    """Returns the codes selecting a 24-bit background color."""

    return _rgb(EXTENDED_BACKGROUND, red, green, blue)


def parse(sequence: str) -> tuple[int, ...]:
    """Parses a single control sequence back into its codes.

    Args:
        sequence: Exactly one sequence, with nothing around it.

    Returns:
        The codes in the order they appear.

    Raises:
        InvalidArgument: The text is not exactly one well-formed sequence.
    """

    mtch = RE_SEQUENCE.fullmatch(sequence)

    if mtch is None or RE_FRAGMENT.fullmatch(mtch[1]) is None:
        raise InvalidArgument(f"Not a control sequence: {sequence!r}.")

    return tuple(int(code) for code in mtch[1].split(";"))


def strip(text: str) -> str:
    """Removes every control sequence from the text."""

    return RE_SEQUENCE.sub("", text)


def width(text: str) -> int:
    """Returns the visual width of some text, ignoring control sequences."""

    return len(strip(text))
