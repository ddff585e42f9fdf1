"""Spatial predicates between room geometries, backed by Shapely."""

from typing import Callable

from .geometry import MultiPolygon

IntersectsPredicate = Callable[[MultiPolygon, MultiPolygon], bool]


def intersects(a: MultiPolygon, b: MultiPolygon) -> bool:
    """True if the two shapes share any point, boundaries included."""
    return a.to_shapely().intersects(b.to_shapely())


def interiors_overlap(a: MultiPolygon, b: MultiPolygon) -> bool:
    """True if the two shapes share area; rooms that only share a wall do not."""
    shape_a = a.to_shapely()
    shape_b = b.to_shapely()
    return shape_a.intersects(shape_b) and not shape_a.touches(shape_b)
