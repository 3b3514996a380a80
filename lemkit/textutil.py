"""Small string helpers with NUL-terminated-string semantics where it matters."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, Optional

_TRIM_CHARS = " \n\t"


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1 or sep == "\0":
        raise ValueError("separator must be one non-NUL character")
    return [word for word in text.split(sep) if word]


def trim(text: str) -> str:
    """Remove spaces, newlines and tabs from both ends."""
    return text.strip(_TRIM_CHARS)


def substring(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``."""
    if not 0 <= start <= len(text):
        raise IndexError(f"start {start} is outside the text")
    if length < 0:
        raise ValueError("length must not be negative")
    return text[start:start + length]


def find(haystack: str, needle: str) -> Optional[int]:
    """Return the index of the first occurrence of ``needle``, or None."""
    index = haystack.find(needle)
    return None if index < 0 else index


def find_within(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Like find, but the match must lie wholly within the first ``limit`` characters."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    return find(haystack[:limit], needle)


def rfind_char(text: str, char: str) -> Optional[int]:
    """Return the index of the last ``char`` in ``text``, or None.

    Searching for NUL finds the end of the text.
    """
    if len(char) != 1:
        raise ValueError("expected a single character")
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def compare_prefix(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters; return the difference of the first mismatch.

    The end of either string compares as NUL, and comparison stops there.
    """
    for a, b in zip_longest(first[:count], second[:count], fillvalue="\0"):
        diff = ord(a) - ord(b)
        if diff or a == "\0" or b == "\0":
            return diff
    return 0


def equal_prefix(first: Optional[str], second: Optional[str], count: int) -> bool:
    """True when the first ``count`` characters match; False if either is None."""
    if first is None or second is None:
        return False
    return compare_prefix(first, second, count) == 0


def append_prefix(dst: Optional[str], src: Optional[str], count: int) -> Optional[str]:
    """Return ``dst`` followed by at most ``count`` characters of ``src``.

    With no ``src`` the result is ``dst``; with neither, an empty string when
    ``count`` is positive and None otherwise.
    """
    if src is None:
        if dst is not None:
            return dst
        return "" if count else None
    return (dst or "") + src[:count]


def map_chars(text: str, func: Callable[[str], str]) -> str:
    """Apply ``func`` to every character and join the results."""
    return "".join(func(char) for char in text)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Apply ``func(index, char)`` to every character and join the results."""
    return "".join(func(index, char) for index, char in enumerate(text))


def to_upper(char: str) -> str:
    """Upper-case an ASCII letter; leave anything else unchanged."""
    return chr(ord(char) - 32) if "a" <= char <= "z" and len(char) == 1 else char


def to_lower(char: str) -> str:
    """Lower-case an ASCII letter; leave anything else unchanged."""
    return chr(ord(char) + 32) if "A" <= char <= "Z" and len(char) == 1 else char