import io

from lemkit.linereader import LineReader, read_lines


class _TrickleStream:
    """Hands out one character per read call."""

    def __init__(self, text):
        self._text = text
        self._pos = 0

    def read(self, size=-1):
        chunk = self._text[self._pos:self._pos + 1]
        self._pos += len(chunk)
        return chunk


def test_lines_without_newlines():
    assert read_lines(io.StringIO("3\n##start\nA 1 2\n")) == ["3", "##start", "A 1 2"]


def test_last_line_without_newline():
    assert read_lines(io.StringIO("a\nb")) == ["a", "b"]


def test_empty_lines_are_kept():
    assert read_lines(io.StringIO("a\n\nb\n")) == ["a", "", "b"]


def test_empty_stream():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_read_line_then_end():
    reader = LineReader(io.StringIO("only\n"))
    assert reader.read_line() == "only"
    assert reader.read_line() is None


def test_binary_stream():
    assert read_lines(io.BytesIO(b"x-y\nL1-x\n")) == [b"x-y", b"L1-x"]


def test_one_character_reads_match_bulk_reads():
    text = "first\n\nthird line\nlast"
    assert read_lines(_TrickleStream(text)) == read_lines(io.StringIO(text))


def test_join_round_trip():
    lines = ["room 0 0", "", "room-other", "# comment"]
    text = "\n".join(lines) + "\n"
    assert read_lines(io.StringIO(text)) == lines
    assert "\n".join(LineReader(io.StringIO(text))) + "\n" == text


def test_long_line_spans_chunks():
    line = "x" * 10000
    assert read_lines(io.StringIO(line + "\nend")) == [line, "end"]