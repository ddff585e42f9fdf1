"""
Layout text parser.

Turns a compact floor plan description into rooms with closed polygon rings::

    bedroom: (209,172)(150,172)(150,143)(209,143), living_room: (135,128)(47,128)(47,40)(135,40)

Room entries are separated by ``", "``, a room type and its coordinate list
by ``": "``, and coordinate pairs are written back to back as ``(x,y)``.
A prompt puts a free-text description in front of a ``[Layout]`` marker.

Every stage raises its own LayoutParseError subclass; nothing is coerced
or skipped.
"""

import math
import re
from typing import Iterable, List, Tuple

from .errors import (
    InvalidNumber,
    MalformedCoordinate,
    MalformedCoordinateList,
    MalformedRoomEntry,
    MissingLayoutMarker,
    MultipleLayoutMarkers,
)
from .geometry import MultiPolygon, Point, Room, format_number

ROOM_SEPARATOR = ", "
TYPE_SEPARATOR = ": "
PAIR_SEPARATOR = ")("
COORDINATE_SEPARATOR = ","
LAYOUT_MARKER = "[Layout]"
PROMPT_MARKER = "[User prompt]"

# Plain decimal literals only: no whitespace, underscores, inf or nan.
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_number(text: str) -> float:
    """Parse one coordinate, raising InvalidNumber on anything but a decimal literal."""
    if not _NUMBER_RE.fullmatch(text):
        raise InvalidNumber(text)
    value = float(text)
    if math.isinf(value):
        raise InvalidNumber(text)
    return value


def parse_point(pair: str) -> Point:
    """Parse ``"x,y"`` into a Point."""
    parts = pair.split(COORDINATE_SEPARATOR)
    if len(parts) != 2:
        raise MalformedCoordinate(
            f"Expected 'x,y' but got {pair!r} ({len(parts)} parts)", pair
        )
    x, y = parts
    return Point(parse_number(x), parse_number(y))


def split_coordinate_list(text: str) -> List[str]:
    """
    Split ``"(x1,y1)(x2,y2)"`` into ``["x1,y1", "x2,y2"]``.

    Exactly one leading ``(`` and one trailing ``)`` are removed before
    splitting on ``)(``.
    """
    if len(text) < 2 or not text.startswith("(") or not text.endswith(")"):
        raise MalformedCoordinateList(
            f"Coordinate list must be wrapped in parentheses: {text!r}", text
        )
    inner = text[1:-1]
    if not inner:
        raise MalformedCoordinateList(f"Coordinate list is empty: {text!r}", text)
    return inner.split(PAIR_SEPARATOR)


def parse_ring(text: str) -> Tuple[Point, ...]:
    """
    Parse a coordinate list into a closed ring.

    The first point is always appended once more, even when the written
    list already ends where it started.
    """
    points = [parse_point(pair) for pair in split_coordinate_list(text)]
    points.append(points[0])
    return tuple(points)


def parse_room(entry: str) -> Room:
    """Parse ``"<type>: <coordinate list>"`` into a Room."""
    parts = entry.split(TYPE_SEPARATOR)
    if len(parts) != 2:
        raise MalformedRoomEntry(
            f"Expected '<type>: <coordinates>' but got {entry!r}", entry
        )
    room_type, coordinates = parts
    return Room(room_type=room_type, geometry=MultiPolygon.from_ring(parse_ring(coordinates)))


def parse_layout(text: str) -> List[Room]:
    """
    Parse a layout string into rooms, in input order.

    Duplicate room types are kept as separate rooms. An empty string gives
    an empty list.
    """
    if text == "":
        return []
    return [parse_room(entry) for entry in text.split(ROOM_SEPARATOR)]


def parse_apartment_name(text: str) -> str:
    """Strip an optional leading ``[User prompt]`` tag and surrounding whitespace."""
    text = text.strip()
    if text.startswith(PROMPT_MARKER):
        text = text[len(PROMPT_MARKER):]
    return text.strip()


def parse_prompt(text: str) -> Tuple[str, List[Room]]:
    """
    Split a prompt around its single ``[Layout]`` marker.

    Returns the trimmed description and the rooms parsed from the trimmed
    layout body.
    """
    count = text.count(LAYOUT_MARKER)
    if count == 0:
        raise MissingLayoutMarker(f"Prompt has no {LAYOUT_MARKER} marker", text)
    if count > 1:
        raise MultipleLayoutMarkers(
            f"Prompt has {count} {LAYOUT_MARKER} markers, expected one", text
        )
    description, layout = text.split(LAYOUT_MARKER)
    return parse_apartment_name(description), parse_layout(layout.strip())


def render_ring(ring: Iterable[Point]) -> str:
    """Write a closed ring as ``(x,y)(x,y)...`` without its closing point."""
    points = list(ring)[:-1]
    return "".join(f"({format_number(p.x)},{format_number(p.y)})" for p in points)


def render_layout(rooms: Iterable[Room]) -> str:
    """Write rooms back in the layout text form accepted by parse_layout."""
    return ROOM_SEPARATOR.join(
        f"{room.room_type}{TYPE_SEPARATOR}{render_ring(room.ring)}" for room in rooms
    )
