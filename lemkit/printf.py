"""Formatted output with C printf-style conversion specifications.

Supported conversions: d i u o x X b p f F e E g G a A c C s S n and
``%%``. Any other conversion character is printed literally, padded to
the requested width. The floating conversions e, g and a all print
fixed-point digits (a in base 16).
"""

from __future__ import annotations

import math
import numbers
import operator
import sys
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Iterator, Optional

_MASK64 = (1 << 64) - 1

_FLAG_CHARS = frozenset("-+ #*.0123456789")
_DIGIT_CHARS = frozenset("0123456789")

_DECIMAL = "0123456789"
_OCTAL = "01234567"
_HEX = "0123456789abcdef"
_BINARY = "01"

_BASES = {
    "d": _DECIMAL, "i": _DECIMAL, "u": _DECIMAL,
    "e": _DECIMAL, "f": _DECIMAL, "g": _DECIMAL,
    "o": _OCTAL,
    "a": _HEX, "x": _HEX, "p": _HEX,
    "b": _BINARY,
}

_LONG_UPPER = frozenset("SCDOFU")
_LOWERED = frozenset("SCUDOIXFAGE")
_ZERO_CLEARED_BY_PRECISION = frozenset("dixo")

_SIGNED_INTS = frozenset("di")
_UNSIGNED_INTS = frozenset("uoxb")
_FLOATS = frozenset("aefg")
_SIGNED = frozenset("difega")
_PLUS_WIDTH = frozenset("dfgea")
_ALTERNATE = frozenset("ox")
_PRECISION_PADDED = frozenset("duioxp")


@dataclass
class FormatSpec:
    """One parsed conversion specification."""

    left: bool = False
    plus: bool = False
    space: bool = False
    alternate: bool = False
    zero: bool = False
    width: int = 0
    precision: Optional[int] = None
    h_count: int = 0
    l_count: int = 0
    long_double: bool = False
    intmax: bool = False
    size: bool = False
    upper: bool = False
    conversion: str = ""

    @property
    def int_bits(self) -> int:
        """Width in bits of the integer argument, from the length modifiers."""
        if self.intmax or self.l_count or self.size:
            return 64
        if self.h_count >= 2:
            return 8
        if self.h_count == 1:
            return 16
        return 32


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _next_int(args: Iterator[Any]) -> int:
    return operator.index(_next_arg(args))


def _read_length(fmt: str, pos: int, spec: FormatSpec) -> int:
    while pos < len(fmt):
        char = fmt[pos]
        if char == "h":
            spec.h_count += 1
        elif char == "l":
            spec.l_count += 1
        elif char == "L":
            spec.long_double = True
        elif char == "j":
            spec.intmax = True
        elif char == "z":
            spec.size = True
        else:
            break
        pos += 1
    return pos


def _read_number(fmt: str, pos: int) -> tuple[int, int]:
    """Read decimal digits from ``pos``; return the value and the last digit's index."""
    end = pos
    while end + 1 < len(fmt) and fmt[end + 1] in _DIGIT_CHARS:
        end += 1
    return int(fmt[pos:end + 1]), end


def _parse_spec(fmt: str, pos: int, args: Iterator[Any]) -> tuple[FormatSpec, int]:
    spec = FormatSpec()
    pos = _read_length(fmt, pos, spec)
    has_precision = False
    precision = 0
    while pos < len(fmt) and fmt[pos] in _FLAG_CHARS:
        char = fmt[pos]
        if char == "-":
            spec.left = True
        elif char == "+":
            spec.plus = True
        elif char == " ":
            spec.space = True
        elif char == "#":
            spec.alternate = True
        if char == "0" and not has_precision and spec.width == 0:
            spec.zero = True
        if char == ".":
            has_precision = True
            following = fmt[pos + 1:pos + 2]
            if following == "*":
                pos += 1
                precision = _next_int(args)
            elif following and following in _DIGIT_CHARS:
                precision, pos = _read_number(fmt, pos + 1)
            else:
                precision = 0
        elif not has_precision and (char == "*" or char in _DIGIT_CHARS):
            if char == "*":
                spec.width = _next_int(args)
            else:
                spec.width, pos = _read_number(fmt, pos)
        pos += 1

    if has_precision and precision < 0:
        has_precision = False
    spec.precision = precision if has_precision else None
    if spec.width < 0:
        spec.left = True
        spec.width = -spec.width
    pos = _read_length(fmt, pos, spec)

    conversion = fmt[pos] if pos < len(fmt) else ""
    if conversion in _LONG_UPPER:
        spec.l_count = max(spec.l_count, 1)
    spec.upper = conversion < "a" and conversion != "P"
    if conversion in _LOWERED:
        conversion = conversion.lower()
    if spec.zero and has_precision and conversion in _ZERO_CLEARED_BY_PRECISION:
        spec.zero = False
    spec.conversion = conversion
    return spec, pos + 1 if conversion else pos


def _digits_for(spec: FormatSpec) -> str:
    digits = _BASES[spec.conversion]
    return digits.upper() if spec.upper else digits


def _to_base(number: int, digits: str) -> str:
    radix = len(digits)
    out = []
    while True:
        number, rest = divmod(number, radix)
        out.append(digits[rest])
        if not number:
            return "".join(reversed(out))


def _alternate_prefix(spec: FormatSpec, is_null: bool) -> str:
    conversion = spec.conversion
    prefix = ""
    if spec.alternate:
        if conversion == "o" and (not is_null or spec.precision is not None):
            prefix += "0"
        if conversion == "x" and not is_null:
            prefix += "0X" if spec.upper else "0x"
    if conversion == "p":
        prefix += "0x"
    return prefix


def _width_fill(spec: FormatSpec, negative: bool, length: int, precision: int) -> str:
    conversion = spec.conversion
    width = spec.width - (1 if negative else 0)
    if conversion in _PLUS_WIDTH and spec.plus and not negative:
        width -= 1
    if spec.space and not spec.plus:
        width -= 1
    if spec.alternate and conversion == "o":
        width -= 1
    if spec.alternate and conversion == "x":
        width -= 2
    if conversion == "p":
        width -= 2
    if conversion == "f":
        width -= precision + length + 1
        if spec.precision is not None and not precision:
            width += 1
    else:
        width -= max(precision, length)
    fill = "0" if spec.zero and spec.precision is None else " "
    return fill * max(0, width)


def _left_part(spec: FormatSpec, negative: bool, length: int,
               precision: int, is_null: bool) -> str:
    """Everything before the digits: signs, prefixes, width and precision padding."""
    conversion = spec.conversion
    sign = "-" if negative else "+"
    parts = []
    if conversion in _SIGNED:
        if spec.plus and spec.zero:
            parts.append(sign)
        if spec.space and not spec.plus and not negative:
            parts.append(" ")
        if negative and spec.zero and not spec.plus:
            parts.append("-")
    if conversion in _ALTERNATE and spec.zero:
        parts.append(_alternate_prefix(spec, is_null))
    if not spec.left:
        parts.append(_width_fill(spec, negative, length, precision))
    if conversion == "p":
        parts.append(_alternate_prefix(spec, is_null))
    if conversion in _SIGNED and (spec.plus or negative) and not spec.zero:
        parts.append(sign)
    if conversion in _ALTERNATE and not spec.zero:
        parts.append(_alternate_prefix(spec, is_null))
    if conversion in _PRECISION_PADDED:
        count = precision - 1 if conversion == "o" and spec.alternate else precision
        parts.append("0" * max(0, count - length))
    return "".join(parts)


def _pad_right(spec: FormatSpec, body: str) -> str:
    if spec.left and spec.width > len(body):
        return body + " " * (spec.width - len(body))
    return body


def _format_integer(spec: FormatSpec, number: int) -> str:
    digits = _digits_for(spec)
    negative = False
    magnitude = number
    if len(digits) == 10 and spec.conversion != "u" and number >= 1 << 63:
        negative = True
        magnitude = (1 << 64) - number
    text = _to_base(magnitude, digits)
    if spec.precision == 0 and number == 0 and spec.conversion in _PRECISION_PADDED:
        text = ""
    precision = spec.precision or 0
    body = _left_part(spec, negative, len(text), precision, number == 0) + text
    return _pad_right(spec, body)


def _format_float(spec: FormatSpec, value: float) -> str:
    if not math.isfinite(value):
        raise ValueError(f"cannot format non-finite value {value!r}")
    digits = _digits_for(spec)
    radix = len(digits)
    precision = spec.precision if spec.precision is not None else 6
    negative = value < 0
    scaled = math.floor(Fraction(abs(value)) * radix ** (precision + 1))
    units, last = divmod(scaled, radix)
    if last >= radix // 2:
        units += 1
    whole, fraction = divmod(units, radix ** precision)
    int_text = _to_base(whole, digits)
    text = int_text
    if precision:
        text += "." + _to_base(fraction, digits).rjust(precision, digits[0])
    body = _left_part(spec, negative, len(int_text), precision, False) + text
    return _pad_right(spec, body)


def _format_text(spec: FormatSpec, text: str) -> str:
    length = len(text)
    if spec.precision is not None and spec.conversion == "s":
        shown = min(spec.precision, length)
    else:
        shown = length
    padding = spec.width - shown if spec.width else 0
    visible = text[:shown]
    if spec.left:
        return visible + " " * max(0, padding)
    fill = "0" if spec.zero else " "
    return fill * max(0, padding) + visible


def _char_arg(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise TypeError("%c requires an int or a single character")
        return arg
    return chr(operator.index(arg) & 0xFF)


def _string_arg(arg: Any) -> str:
    if arg is None:
        return "(null)"
    if not isinstance(arg, str):
        raise TypeError(f"%s requires a str, not {type(arg).__name__}")
    return arg.split("\0", 1)[0]


def _float_arg(arg: Any) -> float:
    if not isinstance(arg, numbers.Real):
        raise TypeError(f"a real number is required, not {type(arg).__name__}")
    return float(arg)


def _convert(spec: FormatSpec, args: Iterator[Any], written: int) -> str:
    conversion = spec.conversion
    if conversion in _SIGNED_INTS:
        bits = spec.int_bits
        value = _next_int(args) & ((1 << bits) - 1)
        if value >= 1 << (bits - 1):
            value -= 1 << bits
        return _format_integer(spec, value & _MASK64)
    if conversion in _UNSIGNED_INTS:
        return _format_integer(spec, _next_int(args) & ((1 << spec.int_bits) - 1))
    if conversion == "p":
        arg = _next_arg(args)
        return _format_integer(spec, 0 if arg is None else operator.index(arg) & _MASK64)
    if conversion in _FLOATS:
        return _format_float(spec, _float_arg(_next_arg(args)))
    if conversion == "n":
        target = _next_arg(args)
        if target is not None:
            target(written)
            return ""
        return _format_text(spec, "n")
    if conversion == "c":
        return _format_text(spec, _char_arg(_next_arg(args)))
    if conversion == "s":
        return _format_text(spec, _string_arg(_next_arg(args)))
    return _format_text(spec, conversion)


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the result.

    ``%n`` takes a callable, which is called with the number of characters
    produced so far; a None argument prints ``n`` instead.
    """
    if not isinstance(fmt, str):
        raise TypeError("format must be a str")
    remaining = iter(args)
    parts = []
    written = 0
    pos = 0
    while True:
        index = fmt.find("%", pos)
        if index < 0:
            parts.append(fmt[pos:])
            break
        literal = fmt[pos:index]
        parts.append(literal)
        written += len(literal)
        spec, pos = _parse_spec(fmt, index + 1, remaining)
        converted = _convert(spec, remaining, written)
        parts.append(converted)
        written += len(converted)
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)