"""Ready-to-print control sequences.

Insert these around some text, and remember to reset afterwards:

    print(f"{Colors.Fg.RED}Error:{RESET} You made an error!")

Only do this when the output stream supports it, see `termctrl.support`.
"""

from .core import seq

__all__ = [
    "RESET",
    "Effects",
    "Fonts",
    "Colors",
    "Colours",
    "Misc",
    "Combinations",
]

RESET = seq(0)
"""Removes all effects and colors."""


class Effects:
    """Text effects."""

    NORMAL = RESET
    BOLD = seq(1)
    DIM = seq(2)
    ITALIC = seq(3)
    UNDERLINE = seq(4)
    BLINK = seq(5)
    RAPID_BLINK = seq(6)
    INVERSE = seq(7)
    INVISIBLE = seq(8)
    STRIKE = seq(9)
    FRAKTUR = seq(20)
    DBL_UNDERLINE = seq(21)

    class Remove:
        """Sequences that remove a single effect."""

        BOLD_DIM = seq(22)
        ITALIC = seq(23)
        UNDERLINE = seq(24)
        BLINK = seq(25)
        INVERSE = seq(27)
        INVISIBLE = seq(28)
        STRIKE = seq(29)

        INTENSITY = BOLD_DIM

    STEADY = Remove.BLINK
    POSITIVE = Remove.INVERSE
    VISIBLE = Remove.INVISIBLE


class Fonts:
    """Font selection."""

    DEFAULT = seq(10)
    ALT1 = seq(11)
    ALT2 = seq(12)
    ALT3 = seq(13)
    ALT4 = seq(14)
    ALT5 = seq(15)
    ALT6 = seq(16)
    ALT7 = seq(17)
    ALT8 = seq(18)
    ALT9 = seq(19)


class Colors:
    """Foreground & background colors."""

    class Fg:
        BLACK = seq(30)
        RED = seq(31)
        GREEN = seq(32)
        YELLOW = seq(33)
        BLUE = seq(34)
        MAGENTA = seq(35)
        CYAN = seq(36)
        WHITE = seq(37)

        RESET = seq(39)

        class Bright:
            BLACK = seq(90)
            RED = seq(91)
            GREEN = seq(92)
            YELLOW = seq(93)
            BLUE = seq(94)
            MAGENTA = seq(95)
            CYAN = seq(96)
            WHITE = seq(97)

    class Bg:
        BLACK = seq(40)
        RED = seq(41)
        GREEN = seq(42)
        YELLOW = seq(43)
        BLUE = seq(44)
        MAGENTA = seq(45)
        CYAN = seq(46)
        WHITE = seq(47)

        RESET = seq(49)

        class Bright:
            BLACK = seq(100)
            RED = seq(101)
            GREEN = seq(102)
            YELLOW = seq(103)
            BLUE = seq(104)
            MAGENTA = seq(105)
            CYAN = seq(106)
            WHITE = seq(107)

    RESET = seq(39, 49)
    RESET_FG = Fg.RESET
    RESET_BG = Bg.RESET


Colours = Colors


class Misc:
    """Rarely supported effects."""

    FRAMED = seq(51)
    ENCIRCLED = seq(52)
    OVERLINED = seq(53)

    class Remove:
        FRAMED_ENCIRCLED = seq(54)
        OVERLINED = seq(55)

    class Ideogram:
        UNDERLINE = seq(60)
        DBL_UNDERLINE = seq(61)
        OVERLINE = seq(62)
        DBL_OVERLINE = seq(63)
        STRESS_MARKING = seq(64)
        RESET = seq(65)


class Combinations:
    """Commonly combined codes."""

    class FgBold:
        BLACK = seq(30, 1)
        RED = seq(31, 1)
        GREEN = seq(32, 1)
        YELLOW = seq(33, 1)
        BLUE = seq(34, 1)
        MAGENTA = seq(35, 1)
        CYAN = seq(36, 1)
        WHITE = seq(37, 1)
