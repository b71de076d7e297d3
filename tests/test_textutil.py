import pytest

from raycub.textutil import atoi, split_words


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   42", 42),
        ("\t\n 7", 7),
        ("-17", -17),
        ("+5", 5),
        ("12abc", 12),
        ("255", 255),
    ],
)
def test_atoi_parses_leading_number(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "-", "+", "  x12"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


def test_atoi_only_one_sign():
    assert atoi("--3") == 0


def test_atoi_overflow_positive_gives_minus_one():
    assert atoi("99999999999999999") == -1


def test_atoi_overflow_negative_gives_zero():
    assert atoi("-99999999999999999") == 0


def test_atoi_round_trips_small_integers():
    for value in range(-300, 300):
        assert atoi(str(value)) == value


def test_split_words_drops_empty_words():
    assert split_words("a,,b,c", ",") == ["a", "b", "c"]


def test_split_words_leading_and_trailing_separators():
    assert split_words(",,x,,", ",") == ["x"]


def test_split_words_empty_text():
    assert split_words("", ",") == []
    assert split_words(",,,", ",") == []


def test_split_words_join_round_trip():
    words = ["111", "10N1", "1 01"]
    assert split_words("\n".join(words) + "\n", "\n") == words