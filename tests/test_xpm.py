import pytest

from raycub.xpm import (
    XpmError,
    XpmImage,
    load_xpm,
    parse_xpm,
    parse_xpm_lines,
    strip_comments,
    text_to_rgb,
)

SAMPLE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"3 2 3 1",
"a c #FF0000",
"b c red",
". c None",
// pixels
"ab.",
".ba"
};
"""


def test_parse_xpm_dimensions():
    image = parse_xpm(SAMPLE)
    assert (image.width, image.height) == (3, 2)
    assert len(image.pixels) == 6


def test_parse_xpm_pixels():
    image = parse_xpm(SAMPLE)
    assert image.pixel(0, 0) == 0xFF0000
    assert image.pixel(1, 0) == 0xFF0000
    assert image.pixel(2, 0) == 0xFF000000
    assert image.pixel(0, 1) == 0xFF000000
    assert image.pixel(2, 1) == 0xFF0000


def test_pixel_out_of_range():
    image = parse_xpm(SAMPLE)
    with pytest.raises(IndexError):
        image.pixel(3, 0)
    with pytest.raises(IndexError):
        image.pixel(0, -1)


def test_strip_comments_keeps_length_and_strings():
    text = 'a /* x */ "q/*w*/" // tail\nb'
    stripped = strip_comments(text)
    assert len(stripped) == len(text)
    assert '"q/*w*/"' in stripped
    assert "x" not in stripped
    assert "tail" not in stripped
    assert stripped.endswith("b")


def test_strip_comments_unterminated_block():
    stripped = strip_comments('"k" /* open')
    assert stripped.strip() == '"k"'


def test_text_to_rgb_hex():
    assert text_to_rgb("#00ff00", None) == 0x00FF00


def test_text_to_rgb_named_case_insensitive():
    assert text_to_rgb("RED", None) == text_to_rgb("red", None)
    assert text_to_rgb("red", None) == 0xFF0000


def test_text_to_rgb_two_words():
    assert text_to_rgb("light", "green") == text_to_rgb("lightgreen", None)


def test_text_to_rgb_none_and_unknown():
    assert text_to_rgb("None", None) == -1
    assert text_to_rgb("nosuchcolour", None) == 0


def test_parse_xpm_lines_matches_file_form():
    lines = ["3 2 3 1", "a c #FF0000", "b c red", ". c None", "ab.", ".ba"]
    assert parse_xpm_lines(lines) == parse_xpm(SAMPLE)


def test_parse_two_chars_per_pixel():
    lines = ["2 1 2 2", "aa c #000001", "bb c #000002", "bbaa"]
    image = parse_xpm_lines(lines)
    assert image.pixels == (0x000002, 0x000001)


def test_unknown_pixel_key_gives_black():
    image = parse_xpm_lines(["1 1 1 1", "a c #123456", "z"])
    assert image.pixels == (0,)


def test_zero_header_value_is_error():
    with pytest.raises(XpmError):
        parse_xpm_lines(["0 1 1 1", "a c red", "a"])


def test_short_header_is_error():
    with pytest.raises(XpmError):
        parse_xpm_lines(["1 1 1"])


def test_missing_c_key_is_error():
    with pytest.raises(XpmError):
        parse_xpm_lines(["1 1 1 1", "a m red", "a"])


def test_missing_rows_is_error():
    with pytest.raises(XpmError):
        parse_xpm_lines(["1 2 1 1", "a c red", "a"])


def test_short_row_is_error():
    with pytest.raises(XpmError):
        parse_xpm_lines(["3 1 1 1", "a c red", "aa"])


def test_load_xpm_from_file(tmp_path):
    path = tmp_path / "wall.xpm"
    path.write_text(SAMPLE)
    image = load_xpm(path)
    assert isinstance(image, XpmImage)
    assert image == parse_xpm(SAMPLE)


def test_load_xpm_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_xpm(tmp_path / "absent.xpm")