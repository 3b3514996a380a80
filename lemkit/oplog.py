"""An ordered log of operation lines."""

from __future__ import annotations

from typing import Iterator


class OperationLog:
    """Lines kept in the order they were appended; the newest can be removed."""

    def __init__(self) -> None:
        self._lines: list[str] = []

    def append(self, text: str) -> None:
        """Add ``text`` after the existing lines."""
        self._lines.append(text)

    def remove_last(self) -> str:
        """Remove and return the newest line; raise IndexError when empty."""
        if not self._lines:
            raise IndexError("remove_last from an empty operation log")
        return self._lines.pop()

    def clear(self) -> None:
        """Remove every line."""
        self._lines.clear()

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._lines))

    def __len__(self) -> int:
        return len(self._lines)