import sys

from termctrl import Stream, c256_fg, fragments, get_preference, seq, should_use
from termctrl.predefined import RESET, Colors, Effects


def main() -> None:
    use = should_use(Stream.STDERR, get_preference())

    def fmt(sequence: str) -> str:
        return sequence if use else ""

    print(
        f"{fmt(Colors.Fg.RED)}{fmt(Effects.BOLD)}Error:{fmt(RESET)} You made an error!",
        file=sys.stderr,
    )
    print(
        f"{fmt(seq(c256_fg(141), fragments.Effects.ITALIC))}hint:{fmt(RESET)}"
        + " try again.",
        file=sys.stderr,
    )


if __name__ == "__main__":
    main()
