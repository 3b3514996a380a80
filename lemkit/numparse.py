"""Parsing of 32-bit decimal and hexadecimal integers embedded in text."""

from __future__ import annotations

from dataclasses import dataclass

_WHITESPACE = " \t\n\v\f\r"
_INT_MAX = 2147483647
_INT_MIN_MAGNITUDE = 2147483648
_HEX_DIGITS = "0123456789abcdefABCDEF"


class NumberFormatError(ValueError):
    """Raised when text does not hold a valid 32-bit integer."""


@dataclass(frozen=True)
class ParsedNumber:
    """A number read from text, with its digit count and the position after it."""

    value: int
    digits: int
    end: int


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    return pos


def _check_position(text: str, pos: int) -> None:
    if not 0 <= pos <= len(text):
        raise IndexError(f"position {pos} is outside the text")


def parse_int(text: str, pos: int = 0) -> ParsedNumber:
    """Parse a signed decimal 32-bit integer starting at ``pos``.

    Leading whitespace and a single ``+`` or ``-`` are accepted. Raises
    NumberFormatError when there are no digits or the value overflows.
    """
    _check_position(text, pos)
    pos = _skip_whitespace(text, pos)
    negative = pos < len(text) and text[pos] == "-"
    if pos < len(text) and text[pos] in "+-":
        pos += 1
    start = pos
    while pos < len(text) and "0" <= text[pos] <= "9":
        pos += 1
    digits = pos - start
    if not digits:
        raise NumberFormatError(f"no digits at position {start}")
    magnitude = int(text[start:pos])
    limit = _INT_MIN_MAGNITUDE if negative else _INT_MAX
    if magnitude > limit:
        raise NumberFormatError(f"{text[start:pos]!r} does not fit in 32 bits")
    return ParsedNumber(-magnitude if negative else magnitude, digits, pos)


def parse_hex(text: str, pos: int = 0) -> ParsedNumber:
    """Parse an unsigned hexadecimal number starting at ``pos``.

    Leading whitespace and a ``0x``/``0X`` prefix are accepted. Text without
    hex digits yields zero with a digit count of zero. Values up to
    0x80000000 are accepted and read as signed 32-bit; larger ones raise
    NumberFormatError.
    """
    _check_position(text, pos)
    pos = _skip_whitespace(text, pos)
    if text.startswith(("0x", "0X"), pos):
        pos += 2
    start = pos
    while pos < len(text) and text[pos] in _HEX_DIGITS:
        pos += 1
    digits = pos - start
    if not digits:
        return ParsedNumber(0, 0, pos)
    number = int(text[start:pos], 16)
    if number > _INT_MIN_MAGNITUDE:
        raise NumberFormatError(f"{text[start:pos]!r} does not fit in 32 bits")
    if number > _INT_MAX:
        number -= 1 << 32
    return ParsedNumber(number, digits, pos)