"""Exceptions raised by the layout parser and the room store."""


class LayoutParseError(ValueError):
    """Base class for malformed layout text."""

    def __init__(self, message: str, fragment: str = ""):
        super().__init__(message)
        self.fragment = fragment


class MalformedRoomEntry(LayoutParseError):
    """A room entry is not of the form ``<type>: <coordinates>``."""


class MalformedCoordinateList(LayoutParseError):
    """A coordinate list holds no parenthesized pairs."""


class MalformedCoordinate(LayoutParseError):
    """A coordinate pair does not split into exactly two numbers."""


class InvalidNumber(LayoutParseError):
    """A coordinate is not a floating-point literal."""

    def __init__(self, value: str):
        super().__init__(f"Invalid number: {value!r}", value)
        self.value = value


class MissingLayoutMarker(LayoutParseError):
    """A prompt has no ``[Layout]`` marker."""


class MultipleLayoutMarkers(LayoutParseError):
    """A prompt has more than one ``[Layout]`` marker."""


class InvalidGeometry(ValueError):
    """A geometry cannot be converted to a shapely shape."""


class RoomOverlap(ValueError):
    """A new room intersects a room already stored for the apartment."""

    def __init__(self, room_type: str, existing_room_type: str):
        super().__init__(
            f"Room '{room_type}' overlaps existing room '{existing_room_type}'."
        )
        self.room_type = room_type
        self.existing_room_type = existing_room_type


class ApartmentNotFound(LookupError):
    """No apartment exists with the requested id."""
