import pytest

from trialmenu.colors import Color, ColorModifier


def test_default_modifier_resets():
    assert str(ColorModifier()) == "\033[0m"


def test_none_colour_matches_default():
    assert str(ColorModifier(Color.NONE)) == str(ColorModifier())


def test_foreground_red():
    line = f"  {ColorModifier(Color.FG_RED)}Do Something{ColorModifier()}\n"
    assert line == "  \033[31mDo Something\033[0m\n"


def test_background_and_foreground_combined():
    line = (
        f"  {ColorModifier(Color.BG_RED)}{ColorModifier(Color.FG_BLUE)}"
        f"Do Something{ColorModifier()}\n"
    )
    assert line == "  \033[41m\033[34mDo Something\033[0m\n"


@pytest.mark.parametrize(
    "color, code",
    [
        (Color.FG_BLACK, 30),
        (Color.FG_WHITE, 37),
        (Color.FG_GRAY, 90),
        (Color.FG_BRIGHT_WHITE, 97),
        (Color.BG_BLACK, 40),
        (Color.BG_WHITE, 47),
        (Color.BG_GRAY, 100),
        (Color.BG_BRIGHT_WHITE, 107),
    ],
)
def test_colour_codes(color, code):
    assert int(color) == code
    assert str(ColorModifier(color)) == f"\033[{code}m"


def test_modifiers_compare_by_colour():
    assert ColorModifier(Color.FG_AQUA) == ColorModifier(Color.FG_AQUA)
    assert ColorModifier(Color.FG_AQUA) != ColorModifier(Color.BG_AQUA)