"""Named code fragments.

These are the bare numeric codes (as strings), without the surrounding `ESC [`
and `m`. Use them to compose custom sequences, e.g.:

    seq(Colors.Fg.RED, Effects.BOLD, c256_bg(238))

For whole, ready-to-print sequences see `termctrl.predefined`.
"""

from .core import SEQ_POSTFIX, SEQ_PREFIX, codes

__all__ = [
    "SEQ_PREFIX",
    "SEQ_POSTFIX",
    "RESET",
    "Effects",
    "Fonts",
    "Colors",
    "Colours",
    "Misc",
    "Combinations",
]

RESET = codes(0)
"""Removes all effects and colors."""


class Effects:
    """Text effects."""

    NORMAL = RESET
    BOLD = codes(1)
    DIM = codes(2)
    ITALIC = codes(3)
    UNDERLINE = codes(4)
    BLINK = codes(5)
    RAPID_BLINK = codes(6)
    """Rarely implemented."""
    INVERSE = codes(7)
    INVISIBLE = codes(8)
    STRIKE = codes(9)

    # 10-19 select fonts, see `Fonts`.

    FRAKTUR = codes(20)
    DBL_UNDERLINE = codes(21)

    class Remove:
        """Codes that remove a single effect."""

        BOLD_DIM = codes(22)
        ITALIC = codes(23)
        UNDERLINE = codes(24)
        BLINK = codes(25)
        # 26 is reserved.
        INVERSE = codes(27)
        INVISIBLE = codes(28)
        STRIKE = codes(29)

        INTENSITY = BOLD_DIM

    STEADY = Remove.BLINK
    POSITIVE = Remove.INVERSE
    VISIBLE = Remove.INVISIBLE


class Fonts:
    """Font selection."""

    DEFAULT = codes(10)
    ALT1 = codes(11)
    ALT2 = codes(12)
    ALT3 = codes(13)
    ALT4 = codes(14)
    ALT5 = codes(15)
    ALT6 = codes(16)
    ALT7 = codes(17)
    ALT8 = codes(18)
    ALT9 = codes(19)


class Colors:
    """Foreground & background colors."""

    class Fg:
        BLACK = codes(30)
        RED = codes(31)
        GREEN = codes(32)
        YELLOW = codes(33)
        BLUE = codes(34)
        MAGENTA = codes(35)
        CYAN = codes(36)
        WHITE = codes(37)

        RESET = codes(39)

        class Bright:
            BLACK = codes(90)
            RED = codes(91)
            GREEN = codes(92)
            YELLOW = codes(93)
            BLUE = codes(94)
            MAGENTA = codes(95)
            CYAN = codes(96)
            WHITE = codes(97)

    class Bg:
        BLACK = codes(40)
        RED = codes(41)
        GREEN = codes(42)
        YELLOW = codes(43)
        BLUE = codes(44)
        MAGENTA = codes(45)
        CYAN = codes(46)
        WHITE = codes(47)

        RESET = codes(49)

        class Bright:
            BLACK = codes(100)
            RED = codes(101)
            GREEN = codes(102)
            YELLOW = codes(103)
            BLUE = codes(104)
            MAGENTA = codes(105)
            CYAN = codes(106)
            WHITE = codes(107)

    RESET = codes(39, 49)
    RESET_FG = Fg.RESET
    RESET_BG = Bg.RESET


Colours = Colors


class Misc:
    """Rarely supported effects."""

    FRAMED = codes(51)
    ENCIRCLED = codes(52)
    OVERLINED = codes(53)

    class Remove:
        FRAMED_ENCIRCLED = codes(54)
        OVERLINED = codes(55)

    class Ideogram:
        UNDERLINE = codes(60)
        """Underline, or a line on the right side."""
        DBL_UNDERLINE = codes(61)
        """Double underline, or a double line on the right side."""
        OVERLINE = codes(62)
        """Overline, or a line on the left side."""
        DBL_OVERLINE = codes(63)
        """Double overline, or a double line on the left side."""
        STRESS_MARKING = codes(64)
        RESET = codes(65)


class Combinations:
    """Commonly combined codes."""

    class FgBold:
        BLACK = codes(30, 1)
        RED = codes(31, 1)
        GREEN = codes(32, 1)
        YELLOW = codes(33, 1)
        BLUE = codes(34, 1)
        MAGENTA = codes(35, 1)
        CYAN = codes(36, 1)
        WHITE = codes(37, 1)
