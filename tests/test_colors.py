import pytest

from lemkit.colors import lookup_color, parse_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("black", 0x0),
        ("gray50", 0x7F7F7F),
    ],
)
def test_lookup_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_ignores_case():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Ghost White") == lookup_color("ghost white")


def test_lookup_none_is_transparent():
    assert lookup_color("none") == -1


def test_lookup_unknown_returns_none():
    assert lookup_color("not a colour") is None


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light goldenrod") == 0xFAFAD2


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_agree(level):
    assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_spaced_and_joined_names_agree():
    assert lookup_color("midnight blue") == lookup_color("midnightblue")
    assert lookup_color("navy blue") == lookup_color("navyblue")


def test_parse_hash_is_hexadecimal():
    assert parse_color("#ff0000") == 0xFF0000
    assert parse_color("#00FF00") == 0xFF00


def test_parse_hash_without_digits_is_zero():
    assert parse_color("#") == 0
    assert parse_color("#zz") == 0


def test_parse_hash_ignores_extra():
    assert parse_color("#0000ff", "blue") == 0xFF


def test_parse_joins_extra_word():
    assert parse_color("navy", "blue") == lookup_color("navy blue")
    assert parse_color("ghost", "white") == lookup_color("ghostwhite")


def test_parse_plain_name():
    assert parse_color("Red") == 0xFF0000
    assert parse_color("none") == -1


def test_parse_unknown_is_zero():
    assert parse_color("no such colour") == 0
    assert parse_color("navy", "green") == 0


def test_parse_joined_name_is_truncated():
    long_word = "x" * 100
    assert parse_color(long_word, "red") == 0
    assert parse_color("red", long_word) == 0
    assert parse_color("white" + " " * 58, "ignored") == 0
    assert parse_color("red" + "", None) == 0xFF0000