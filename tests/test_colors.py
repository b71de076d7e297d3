import pytest

from raycub.colors import lookup_color


def test_basic_names():
    assert lookup_color("snow") == 0xFFFAFA
    assert lookup_color("ghost white") == 0xF8F8FF
    assert lookup_color("black") == 0x0


def test_case_insensitive():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Ghost White") == lookup_color("ghost white")


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_none_is_transparent():
    assert lookup_color("none") == -1


def test_unknown_name():
    assert lookup_color("definitely not a colour") is None
    assert lookup_color("") is None


def test_exact_match_required():
    assert lookup_color(" snow") is None
    assert lookup_color("snow ") is None


@pytest.mark.parametrize("level", range(0, 101))
def test_gray_and_grey_agree(level):
    assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")
    value = lookup_color(f"gray{level}")
    red, green, blue = (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF
    assert red == green == blue


def test_gray_levels_increase():
    values = [lookup_color(f"gray{level}") for level in range(0, 101)]
    assert values == sorted(values)
    assert values[0] == lookup_color("black")
    assert values[-1] == lookup_color("white")


@pytest.mark.parametrize(
    "spaced, joined",
    [
        ("ghost white", "ghostwhite"),
        ("navy blue", "navyblue"),
        ("dark red", "darkred"),
        ("light green", "lightgreen"),
    ],
)
def test_spaced_and_joined_forms(spaced, joined):
    assert lookup_color(spaced) == lookup_color(joined)


@pytest.mark.parametrize("base", ["snow", "seashell", "bisque", "red", "gold"])
def test_numbered_variant_one_matches_base(base):
    assert lookup_color(f"{base}1") == lookup_color(base)


@pytest.mark.parametrize("name", ["red", "green", "blue", "cyan", "magenta", "yellow"])
def test_values_fit_in_24_bits(name):
    value = lookup_color(name)
    assert 0 <= value <= 0xFFFFFF