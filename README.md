# lemkit

Pure-Python helpers with no third-party dependencies.

## Modules

- `lemkit.numparse`
  - `parse_int(text, pos=0)` reads a signed decimal 32-bit integer. It skips
    leading whitespace and accepts one `+` or `-`.
  - `parse_hex(text, pos=0)` reads a hexadecimal number. It skips leading
    whitespace and accepts an optional `0x`/`0X` prefix.
  - Both return a `ParsedNumber` with `value`, `digits` and `end`, the
    position after the number.
  - `parse_int` raises `NumberFormatError` (a `ValueError`) when there are
    no digits or when the value overflows 32 bits.
  - `parse_hex` returns a value of 0 and a digit count of 0 when there are
    no hex digits. It raises only for values above `0x80000000`. Values
    above `0x7fffffff` come back as signed 32-bit numbers.
- `lemkit.textutil`: string helpers.
  - `split(text, sep)` splits on one character and drops empty pieces.
  - `trim` strips spaces, tabs and newlines.
  - `substring(text, start, length)` takes part of a string.
  - `find` and `find_within` search for a substring; `rfind_char` finds the
    last occurrence of a character. All three return `None` when nothing
    is found.
  - `compare_prefix` and `equal_prefix` compare the first characters of two
    strings.
  - `append_prefix` appends part of one string to another.
  - `map_chars` and `map_indexed` apply a function to each character.
  - `to_upper` and `to_lower` change the case of ASCII letters.
- `lemkit.linereader`
  - `LineReader(stream)` yields the lines of a text or binary stream
    without their newlines, through `read_line()` or by iteration.
    `read_line()` returns `None` at the end of the stream.
  - `read_lines(stream)` returns all the lines as a list.
- `lemkit.printf`
  - `sprintf(fmt, *args)` returns the formatted string.
  - `printf(fmt, *args)` writes the formatted string to standard output and
    returns its length.
  - Supported: the flags `- + space # 0`, a width and a precision (either
    can be `*`), and the length modifiers `h hh l ll L j z`.
  - Conversions:
    - integers: `d i u o x X b p`
    - floating point: `f F e E g G a A`. The `e`, `g` and `a` conversions
      print fixed-point digits, and `a` prints them in base 16.
    - text: `c C s S`. A `None` argument to `%s` prints `(null)`.
    - `n` takes a callable, which is called with the number of characters
      written so far.
  - Any other character after `%` is printed as itself, so `%%` gives `%`.
  - `FormatSpec` holds one parsed conversion specification.
- `lemkit.colors`
  - `lookup_color(name)` finds an X11 colour name, ignoring case, and
    returns its `0xRRGGBB` value. It returns `None` for an unknown name and
    -1 for `none`.
  - `parse_color(name, extra=None)` resolves an XPM colour specification.
    It reads `#rrggbb` as hex; for any other name it looks the name up and
    gives 0 for unknown names.
- `lemkit.xpm`
  - `parse_xpm_text`, `parse_xpm_lines` and `load_xpm` decode XPM images
    into an `XpmImage` with `width`, `height` and `pixels[y][x]`.
  - The colour `None` becomes `TRANSPARENT` (`0xFF000000`).
  - Malformed data raises `XpmError`.
  - `split_words` splits text on spaces and tabs.
  - `strip_comments` blanks out comments that lie outside quotes.
- `lemkit.rooms`
  - `parse_room("name x y")` returns a `Room`.
  - A line without coordinates, or with bad coordinates, raises
    `RoomFormatError`.
  - A `Room` also holds routing fields: `links`, `path`, `link_count`,
    `ant`, `previous_ant` and `path_length`. A room starts with
    `path_length` set to `MAX_PATH_LENGTH`.
- `lemkit.oplog`
  - `OperationLog` keeps lines in the order they were appended. It has
    `append`, `remove_last`, `clear`, iteration and `len()`.

## Examples

```python
from lemkit.printf import sprintf
from lemkit.rooms import parse_room
from lemkit.colors import lookup_color

sprintf("%-5d|%05.1f|%#x", 42, 3.14159, 255)
room = parse_room("start 3 7")   # room.name == "start", room.x == 3, room.y == 7
lookup_color("red")              # 0xFF0000
```

## What it does not do

lemkit is a library only and installs no command. It reads room lines, but
it does not parse a whole ant-farm map and it does not search for paths.
It also does not move ants and has no drawing or windowing code. The
routing fields on `Room` are plain data, and nothing in the package fills
them in.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```