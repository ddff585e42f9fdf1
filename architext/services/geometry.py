"""
Geometry value types for parsed floor plans.

A room's boundary is kept exactly as written (plus its closing point) in
small immutable dataclasses. Shapely shapes are built from them on demand
for spatial predicates.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from shapely.geometry import MultiPolygon as ShapelyMultiPolygon
from shapely.geometry import Polygon as ShapelyPolygon

from .errors import InvalidGeometry

# Three distinct corners plus the closing point
MIN_RING_POINTS = 4


def format_number(value: float) -> str:
    """Write a coordinate without a trailing ``.0`` when it is integral."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class Point:
    """A 2D point."""

    x: float
    y: float

    def to_list(self) -> List[float]:
        return [self.x, self.y]


Ring = Tuple[Point, ...]


@dataclass(frozen=True)
class Polygon:
    """A polygon made of rings; the first ring is the exterior."""

    rings: Tuple[Ring, ...]

    @property
    def exterior(self) -> Ring:
        return self.rings[0]


@dataclass(frozen=True)
class MultiPolygon:
    """An ordered collection of polygons."""

    polygons: Tuple[Polygon, ...]

    @staticmethod
    def from_ring(points: Iterable[Point]) -> "MultiPolygon":
        """Wrap one ring as a single-ring polygon inside a single-polygon collection."""
        return MultiPolygon(polygons=(Polygon(rings=(tuple(points),)),))

    @staticmethod
    def from_coordinates(data: Sequence) -> "MultiPolygon":
        """
        Rebuild from the nested ``[[[ [x, y], ... ]]]`` form produced by
        :meth:`to_coordinates`.
        """
        return MultiPolygon(polygons=tuple(
            Polygon(rings=tuple(
                tuple(Point(float(x), float(y)) for x, y in ring)
                for ring in polygon
            ))
            for polygon in data
        ))

    def to_coordinates(self) -> list:
        """Nested lists of ``[x, y]`` pairs: polygons, then rings, then points."""
        return [
            [[p.to_list() for p in ring] for ring in polygon.rings]
            for polygon in self.polygons
        ]

    def to_shapely(self) -> ShapelyMultiPolygon:
        """
        Convert to a shapely MultiPolygon.

        Raises InvalidGeometry when a ring has too few points to bound an area.
        """
        parts = []
        for polygon in self.polygons:
            rings = [[(p.x, p.y) for p in ring] for ring in polygon.rings]
            for ring in rings:
                if len(ring) < MIN_RING_POINTS:
                    raise InvalidGeometry(
                        f"A ring needs at least {MIN_RING_POINTS} points, got {len(ring)}"
                    )
            parts.append(ShapelyPolygon(rings[0], rings[1:]))
        return ShapelyMultiPolygon(parts)

    def to_wkt(self) -> str:
        """Well-known text, e.g. ``MULTIPOLYGON (((0 0, 1 0, 1 1, 0 0)))``."""
        polygons = []
        for polygon in self.polygons:
            rings = [
                "(" + ", ".join(f"{format_number(p.x)} {format_number(p.y)}" for p in ring) + ")"
                for ring in polygon.rings
            ]
            polygons.append("(" + ", ".join(rings) + ")")
        return "MULTIPOLYGON (" + ", ".join(polygons) + ")"


@dataclass(frozen=True)
class Room:
    """A labelled room. The label is free text, kept verbatim."""

    room_type: str
    geometry: MultiPolygon

    @property
    def ring(self) -> Ring:
        """Exterior ring of the first polygon."""
        return self.geometry.polygons[0].exterior

    def to_dict(self) -> dict:
        return {
            "room_type": self.room_type,
            "coordinates": self.geometry.to_coordinates(),
        }


@dataclass(frozen=True)
class Layout:
    """An apartment's rooms with an optional free-text description."""

    rooms: Tuple[Room, ...]
    description: Optional[str] = None
