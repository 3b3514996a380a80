"""Reading newline-separated lines from a stream, one at a time."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

_CHUNK_SIZE = 4096


class LineReader(Generic[AnyStr]):
    """Reads lines from a text or binary stream without their newlines.

    A final line without a trailing newline is returned; an empty
    remainder at end of stream is not.
    """

    def __init__(self, stream: IO[AnyStr]) -> None:
        self._stream = stream
        self._buffer: Optional[AnyStr] = None
        self._eof = False

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None at end of stream."""
        while True:
            if self._buffer:
                sep = b"\n" if isinstance(self._buffer, bytes) else "\n"
                index = self._buffer.find(sep)
                if index >= 0:
                    line = self._buffer[:index]
                    self._buffer = self._buffer[index + 1:]
                    return line
            if self._eof:
                break
            chunk = self._stream.read(_CHUNK_SIZE)
            if not chunk:
                self._eof = True
                continue
            self._buffer = chunk if self._buffer is None else self._buffer + chunk
        rest, self._buffer = self._buffer, None
        return rest if rest else None

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr]) -> list[AnyStr]:
    """Read every line of ``stream`` into a list."""
    return list(LineReader(stream))