import pytest

from lemkit.printf import printf, sprintf


@pytest.mark.parametrize(
    "fmt, value",
    [
        ("%d", 42),
        ("%d", -42),
        ("%i", -7),
        ("%5d", 42),
        ("%5d", -42),
        ("%-5d", 42),
        ("%-5d", -42),
        ("%05d", -42),
        ("%+d", 42),
        ("%+5d", 42),
        ("%+05d", 42),
        ("% d", 42),
        ("% d", -42),
        ("% 5d", 42),
        ("%.3d", 7),
        ("%8.3d", 42),
        ("%x", 255),
        ("%X", 255),
        ("%#x", 255),
        ("%#X", 255),
        ("%#8x", 255),
        ("%#08x", 255),
        ("%o", 8),
        ("%u", 7),
        ("%c", 65),
    ],
)
def test_integer_conversions_match_standard_printf(fmt, value):
    assert sprintf(fmt, value) == fmt % value


@pytest.mark.parametrize(
    "fmt, value",
    [
        ("%s", "hello"),
        ("%10s", "hello"),
        ("%-10s", "hello"),
        ("%.2s", "hello"),
        ("%6.3s", "hello"),
    ],
)
def test_string_conversions_match_standard_printf(fmt, value):
    assert sprintf(fmt, value) == fmt % value


def test_literal_text_and_several_arguments():
    assert sprintf("%s=%d, 100%% sure", "x", 5) == "%s=%d, 100%% sure" % ("x", 5)


def test_percent_sign_with_width():
    assert sprintf("%5%") == sprintf("%5s", "%")


def test_null_string_prints_placeholder():
    assert sprintf("%s", None) == "(null)"


def test_length_modifiers_narrow_signed_values():
    assert sprintf("%hhd", 255) == sprintf("%d", -1)
    assert sprintf("%hd", 65535) == sprintf("%d", -1)
    assert sprintf("%d", 2**32 + 5) == sprintf("%d", 5)


def test_long_modifiers_keep_64_bits():
    assert sprintf("%lld", -(2**40)) == str(-(2**40))
    assert sprintf("%ld", 2**40) == str(2**40)
    assert sprintf("%D", 2**40) == sprintf("%ld", 2**40)


def test_unsigned_wraps_to_word_size():
    assert int(sprintf("%u", -1)) == 0xFFFFFFFF
    assert int(sprintf("%lu", -1)) == 0xFFFFFFFFFFFFFFFF
    assert sprintf("%U", -1) == sprintf("%lu", -1)


@pytest.mark.parametrize("number", [0, 1, 5, 255, 1023, 123456789])
def test_binary_and_hex_round_trip(number):
    assert int(sprintf("%b", number), 2) == number
    assert int(sprintf("%x", number), 16) == number
    assert int(sprintf("%o", number), 8) == number


def test_upper_hex_is_upper_of_lower_hex():
    assert sprintf("%X", 48879) == sprintf("%x", 48879).upper()


def test_zero_with_zero_precision_prints_nothing():
    assert sprintf("%.0d", 0) == ""
    assert sprintf("%.0x", 0) == sprintf("%.0d", 0)


def test_alternate_octal_gets_leading_zero():
    assert sprintf("%#o", 8) == "0" + sprintf("%o", 8)


def test_pointer_has_hex_prefix():
    assert sprintf("%p", 255) == "0x" + sprintf("%x", 255)


def test_zero_flag_ignored_with_precision_for_integers():
    assert sprintf("%08.3d", 42) == sprintf("%8.3d", 42)


def test_star_width_and_precision():
    assert sprintf("%*d", 6, 42) == "%*d" % (6, 42)
    assert sprintf("%*d", -6, 42) == sprintf("%-6d", 42)
    assert sprintf("%.*s", 2, "hello") == "%.*s" % (2, "hello")


def test_count_conversion_reports_characters_so_far():
    collected = []
    result = sprintf("abc%ndef", collected.append)
    assert result == "abcdef"
    assert collected == [3]


def test_count_conversion_with_none_prints_letter():
    assert sprintf("%n", None) == "n"


def test_unknown_conversion_is_printed_literally():
    assert sprintf("%y") == "y"
    assert sprintf("%5y") == sprintf("%5s", "y")


def test_trailing_percent_is_dropped():
    assert sprintf("abc%") == "abc"


def test_char_zero_prints_nul():
    assert sprintf("%c", 0) == "\0"


def test_upper_string_conversion():
    assert sprintf("%S", "hi") == sprintf("%s", "hi")


def test_e_and_g_print_fixed_point():
    assert sprintf("%e", 2.5) == sprintf("%f", 2.5)
    assert sprintf("%g", -1.25) == sprintf("%f", -1.25)


@pytest.mark.parametrize("value", [0.5, 10.75, 3.0])
def test_hex_float_round_trip(value):
    assert float.fromhex("0x" + sprintf("%a", value)) == value


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d")


def test_wrong_argument_types_raise():
    with pytest.raises(TypeError):
        sprintf("%d", "x")
    with pytest.raises(TypeError):
        sprintf("%s", 5)


def test_non_finite_float_raises():
    with pytest.raises(ValueError):
        sprintf("%f", float("inf"))


def test_printf_writes_to_stdout(capsys):
    count = printf("%s-%d\n", "a", 1)
    out = capsys.readouterr().out
    assert out == "a-1\n"
    assert count == len(out)