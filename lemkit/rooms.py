"""Rooms of an ant farm and the parsing of room description lines."""

from __future__ import annotations

from dataclasses import dataclass, field

from .numparse import NumberFormatError, parse_int

MAX_PATH_LENGTH = 0x7FFFFFFF
"""Path length of a room that no path has reached yet."""


class RoomFormatError(ValueError):
    """Raised when a room line is not ``name x y``."""


@dataclass
class Room:
    """A room with its coordinates and the state used while routing ants."""

    name: str = ""
    x: int = 0
    y: int = 0
    links: list[int] = field(default_factory=list)
    path: list[int] = field(default_factory=list)
    link_count: int = 0
    ant: int = 0
    previous_ant: int = 0
    path_length: int = MAX_PATH_LENGTH


def parse_room(line: str) -> Room:
    """Parse ``name x y``: the name runs to the first space, then two integers."""
    space = line.find(" ")
    if space < 0:
        raise RoomFormatError(f"room line {line!r} has no coordinates")
    try:
        x = parse_int(line, space)
        y = parse_int(line, x.end)
    except NumberFormatError as exc:
        raise RoomFormatError(f"bad coordinates in room line {line!r}") from exc
    return Room(name=line[:space], x=x.value, y=y.value)