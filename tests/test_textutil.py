import pytest

from lemkit import textutil


def test_split_drops_empty_pieces():
    assert textutil.split("**hello*fellow***students*", "*") == ["hello", "fellow", "students"]


def test_split_only_separators():
    assert textutil.split("****", "*") == []


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        textutil.split("a b", "")


def test_split_join_round_trip():
    words = ["alpha", "beta", "gamma"]
    assert textutil.split(" ".join(words), " ") == words


def test_trim_both_ends():
    assert textutil.trim(" \t\n hello world \n\t") == "hello world"


def test_trim_all_whitespace():
    assert textutil.trim(" \n\t ") == ""


def test_trim_keeps_other_whitespace():
    assert textutil.trim("\rabc\r") == "\rabc\r"


def test_substring_clamps_length():
    assert textutil.substring("room 1 2", 5, 100) == "1 2"
    assert textutil.substring("room 1 2", 0, 4) == "room"


def test_substring_errors():
    with pytest.raises(IndexError):
        textutil.substring("abc", 4, 1)
    with pytest.raises(ValueError):
        textutil.substring("abc", 0, -1)


def test_find():
    haystack = "lem-in ants"
    index = textutil.find(haystack, "ants")
    assert haystack[index:index + 4] == "ants"
    assert textutil.find(haystack, "bees") is None
    assert textutil.find(haystack, "") == 0


def test_find_within_respects_limit():
    haystack = "abcdef"
    assert textutil.find_within(haystack, "cd", 4) == textutil.find(haystack, "cd")
    assert textutil.find_within(haystack, "cd", 3) is None
    assert textutil.find_within(haystack, "", 0) == 0


def test_find_within_negative_limit():
    with pytest.raises(ValueError):
        textutil.find_within("abc", "a", -1)


def test_rfind_char():
    text = "hello world"
    index = textutil.rfind_char(text, "o")
    assert text[index] == "o"
    assert "o" not in text[index + 1:]
    assert textutil.rfind_char(text, "z") is None
    assert textutil.rfind_char(text, "\0") == len(text)


def test_compare_prefix():
    assert textutil.compare_prefix("abc", "abd", 2) == 0
    assert textutil.compare_prefix("abc", "abd", 3) < 0
    assert textutil.compare_prefix("abd", "abc", 3) > 0
    assert textutil.compare_prefix("ab", "abc", 5) < 0
    assert textutil.compare_prefix("anything", "else", 0) == 0


def test_compare_prefix_stops_at_nul():
    assert textutil.compare_prefix("ab\0x", "ab\0y", 10) == 0


def test_equal_prefix():
    assert textutil.equal_prefix("##start", "##end", 2) is True
    assert textutil.equal_prefix("##start", "##end", 3) is False
    assert textutil.equal_prefix(None, "a", 1) is False


def test_append_prefix():
    assert textutil.append_prefix("ab", "cdef", 2) == "abcd"
    assert textutil.append_prefix(None, "cdef", 3) == "cde"
    assert textutil.append_prefix("ab", None, 3) == "ab"
    assert textutil.append_prefix(None, None, 3) == ""
    assert textutil.append_prefix(None, None, 0) is None


def test_map_chars_with_to_upper():
    assert textutil.map_chars("Hello, ant!", textutil.to_upper) == "HELLO, ANT!"


def test_map_indexed():
    result = textutil.map_indexed("abcd", lambda i, c: c if i % 2 else textutil.to_upper(c))
    assert result == "AbCd"


def test_case_round_trip():
    for char in "abcxyzABCXYZ":
        assert textutil.to_lower(textutil.to_upper(char)) == char.lower()
        assert textutil.to_upper(textutil.to_lower(char)) == char.upper()


@pytest.mark.parametrize("char", ["@", "[", "`", "{", "1", "é", " "])
def test_case_leaves_non_letters(char):
    assert textutil.to_upper(char) == char
    assert textutil.to_lower(char) == char