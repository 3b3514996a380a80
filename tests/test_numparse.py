import pytest

from lemkit.numparse import NumberFormatError, ParsedNumber, parse_hex, parse_int


def test_parse_int_skips_whitespace_and_sign():
    text = " \t -123abc"
    result = parse_int(text)
    assert result.value == -123
    assert result.digits == 3
    assert text[result.end:] == "abc"


def test_parse_int_plus_sign():
    result = parse_int("+77")
    assert result == ParsedNumber(77, 2, 3)


def test_parse_int_from_position():
    text = "10 20"
    first = parse_int(text)
    second = parse_int(text, first.end)
    assert (first.value, second.value) == (10, 20)
    assert second.end == len(text)


@pytest.mark.parametrize("number", [0, 1, -1, 999, -4096, 2147483647, -2147483648])
def test_parse_int_round_trip(number):
    text = str(number)
    result = parse_int(text)
    assert result.value == number
    assert result.end == len(text)


@pytest.mark.parametrize("text", ["2147483648", "-2147483649", "99999999999999999999"])
def test_parse_int_overflow(text):
    with pytest.raises(NumberFormatError):
        parse_int(text)


@pytest.mark.parametrize("text", ["", "   ", "+", "-", "abc", "- 5"])
def test_parse_int_without_digits(text):
    with pytest.raises(NumberFormatError):
        parse_int(text)


def test_parse_int_bad_position():
    with pytest.raises(IndexError):
        parse_int("12", 5)


def test_parse_hex_with_prefix():
    text = "0X7fffffff rest"
    result = parse_hex(text)
    assert result.value == 2147483647
    assert result.digits == 8
    assert text[result.end:] == " rest"


def test_parse_hex_mixed_case():
    assert parse_hex("ff").value == parse_hex("FF").value == parse_hex("0xfF").value


def test_parse_hex_round_trip():
    for number in (0, 1, 255, 4096, 2147483647):
        assert parse_hex(format(number, "x")).value == number
        assert parse_hex("0x" + format(number, "X")).value == number


def test_parse_hex_sign_boundary():
    assert parse_hex("80000000").value == -2147483648


def test_parse_hex_overflow():
    with pytest.raises(NumberFormatError):
        parse_hex("80000001")


def test_parse_hex_without_digits_is_zero():
    result = parse_hex("  zz")
    assert result.value == 0
    assert result.digits == 0
    assert result.end == 2