from termctrl import fragments, predefined, seq
from termctrl.core import parse


def _walk(namespace, prefix=""):
    """Yields (dotted name, value) for every constant within a catalogue class."""

    for name, value in vars(namespace).items():
        if name.startswith("_"):
            continue

        if isinstance(value, type):
            yield from _walk(value, f"{prefix}{name}.")

        elif isinstance(value, str):
            yield prefix + name, value


CATALOGUES = ["Effects", "Fonts", "Colors", "Misc", "Combinations"]


def test_predefined_sequences():
    assert predefined.RESET == "\x1b[0m"
    assert predefined.Effects.BOLD == "\x1b[1m"
    assert predefined.Colors.Fg.GREEN == "\x1b[32m"
    assert predefined.Combinations.FgBold.GREEN == "\x1b[32;1m"
    assert predefined.Colors.RESET == "\x1b[39;49m"
    assert predefined.Colors.Bg.Bright.WHITE == "\x1b[107m"
    assert predefined.Misc.Ideogram.RESET == "\x1b[65m"
    assert predefined.Fonts.ALT9 == "\x1b[19m"


def test_predefined_aliases():
    effects = predefined.Effects

    assert effects.NORMAL == predefined.RESET
    assert effects.STEADY == effects.Remove.BLINK == "\x1b[25m"
    assert effects.POSITIVE == effects.Remove.INVERSE == "\x1b[27m"
    assert effects.VISIBLE == effects.Remove.INVISIBLE == "\x1b[28m"
    assert effects.Remove.INTENSITY == effects.Remove.BOLD_DIM
    assert predefined.Colours is predefined.Colors
    assert predefined.Colors.RESET_FG == predefined.Colors.Fg.RESET


def test_fragments():
    assert fragments.SEQ_PREFIX == "\x1b["
    assert fragments.SEQ_POSTFIX == "m"
    assert fragments.RESET == "0"
    assert fragments.Colors.RESET == "39;49"
    assert fragments.Effects.RAPID_BLINK == "6"
    assert fragments.Combinations.FgBold.RED == "31;1"
    assert seq(fragments.Colors.Fg.RED, fragments.Effects.BOLD) == "\x1b[31;1m"


def test_predefined_matches_fragments():
    for catalogue in CATALOGUES:
        expected = dict(_walk(getattr(fragments, catalogue)))
        sequences = dict(_walk(getattr(predefined, catalogue)))

        assert expected.keys() == sequences.keys(), catalogue

        for name, fragment in expected.items():
            assert sequences[name] == seq(fragment), name


def test_predefined_well_formed_and_stable():
    for catalogue in CATALOGUES:
        first = dict(_walk(getattr(predefined, catalogue)))
        second = dict(_walk(getattr(predefined, catalogue)))

        assert first == second

        for sequence in first.values():
            assert seq(*parse(sequence)) == sequence


def test_predefined_reserved_codes_unnamed():
    named = {
        code
        for catalogue in CATALOGUES
        for _, sequence in _walk(getattr(predefined, catalogue))
        for code in parse(sequence)
    }

    assert 26 not in named
    assert 6 in named


def test_predefined_documented_like_fragments():
    for catalogue in CATALOGUES:
        doc = getattr(predefined, catalogue).__doc__

        assert doc, catalogue
        assert doc == getattr(fragments, catalogue).__doc__, catalogue
