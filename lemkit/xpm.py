"""Reading XPM images into rows of 32-bit pixel values."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Union

from .colors import parse_color
from .numparse import NumberFormatError, parse_int

TRANSPARENT = 0xFF000000
"""Pixel value used for the colour ``None``."""

_WORD_SEPARATOR = re.compile(r"[ \t]+")
_DIRECT_KEY_LIMIT = 2
_HEADER_FIELDS = ("width", "height", "colour count", "characters per pixel")


class XpmError(ValueError):
    """Raised when XPM data is malformed or incomplete."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: ``pixels[y][x]`` holds a 0xAARRGGBB value."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATOR.split(text) if word]


def _blank_comments(text: str, opener: str, closer: str) -> str:
    """Replace every ``opener ... closer`` outside double quotes with spaces."""
    pieces = []
    copied = 0
    inside_quotes = False
    pos = 0
    while pos < len(text):
        if text[pos] == '"':
            inside_quotes = not inside_quotes
        if not inside_quotes and text.startswith(opener, pos):
            end = text.find(closer, pos + len(opener))
            stop = len(text) if end < 0 else end + len(closer)
            pieces.append(text[copied:pos])
            pieces.append(" " * (stop - pos))
            copied = pos = stop
            continue
        pos += 1
    pieces.append(text[copied:])
    return "".join(pieces)


def strip_comments(text: str) -> str:
    """Blank out ``/* */`` and ``//`` comments that lie outside quotes.

    Comments are replaced by spaces of the same length, so positions in
    the text are kept. A ``//`` comment is blanked with its newline.
    """
    return _blank_comments(_blank_comments(text, "/*", "*/"), "//", "\n")


def _header_value(word: str, label: str) -> int:
    try:
        value = parse_int(word).value
    except NumberFormatError:
        value = 0
    if value <= 0:
        raise XpmError(f"invalid {label} {word!r} in header")
    return value


def _pixel_value(color: int) -> int:
    return TRANSPARENT if color == -1 else color & 0xFFFFFFFF


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode an XPM image from its strings: header, colours, then pixel rows."""
    remaining: Iterator[str] = iter(lines)

    def take(what: str) -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise XpmError(f"missing {what}") from None

    header = split_words(take("header"))
    if len(header) < len(_HEADER_FIELDS):
        raise XpmError("header needs width, height, colour count and characters per pixel")
    width, height, ncolors, cpp = (
        _header_value(word, label) for word, label in zip(header, _HEADER_FIELDS)
    )

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = take("colour definition")
        if len(line) < cpp:
            raise XpmError(f"colour definition {line!r} is shorter than its key")
        words = split_words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"colour definition {line!r} has no 'c' entry") from None
        if index + 1 >= len(words):
            raise XpmError(f"colour definition {line!r} has no colour after 'c'")
        extra = words[index + 2] if index + 2 < len(words) else None
        color = parse_color(words[index + 1], extra)
        key = line[:cpp]
        if cpp <= _DIRECT_KEY_LIMIT:
            palette[key] = color
        else:
            palette.setdefault(key, color)

    rows = []
    for _ in range(height):
        line = take("pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {line!r} is too short")
        rows.append(tuple(
            _pixel_value(palette.get(line[start:start + cpp], 0))
            for start in range(0, width * cpp, cpp)
        ))
    return XpmImage(width, height, tuple(rows))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode an XPM image from the text of an XPM file."""
    segments = strip_comments(text).split('"')
    return parse_xpm_lines(segments[1:len(segments) - 1:2])


def load_xpm(path: Union[str, Path]) -> XpmImage:
    """Read and decode the XPM file at ``path``."""
    return parse_xpm_text(Path(path).read_text(encoding="latin-1"))