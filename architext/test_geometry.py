"""Tests for geometry value types, spatial predicates and the adjacency graph."""
import pytest

from architext.services.adjacency import adjacency_pairs, build_adjacency_graph, room_neighbours
from architext.services.errors import InvalidGeometry
from architext.services.geometry import MultiPolygon, Point, Polygon, Room, format_number
from architext.services.layout_parser import parse_layout, parse_room
from architext.services.spatial import interiors_overlap, intersects


def square(x, y, size):
    return parse_room(f"room: ({x},{y})({x + size},{y})({x + size},{y + size})({x},{y + size})").geometry


# ============================================================================
# Value types
# ============================================================================

class TestGeometry:
    def test_points_compare_by_value(self):
        assert Point(1.0, 2.0) == Point(1, 2)
        assert Point(1.0, 2.0) != Point(2.0, 1.0)

    def test_values_are_immutable(self):
        with pytest.raises(AttributeError):
            Point(1.0, 2.0).x = 3.0

    def test_coordinates_round_trip(self):
        geometry = square(0, 0, 10)
        data = geometry.to_coordinates()
        assert data == [[[[0.0, 0.0], [10.0, 0.0], [10.0, 10.0], [0.0, 10.0], [0.0, 0.0]]]]
        assert MultiPolygon.from_coordinates(data) == geometry

    def test_wkt(self):
        room = parse_layout("bedroom: (209,172)(150,172)(150,143)(209,143)")[0]
        assert room.geometry.to_wkt() == (
            "MULTIPOLYGON (((209 172, 150 172, 150 143, 209 143, 209 172)))"
        )

    def test_format_number(self):
        assert format_number(3.0) == "3"
        assert format_number(-0.5) == "-0.5"

    def test_to_shapely(self):
        shape = square(0, 0, 10).to_shapely()
        assert shape.geom_type == "MultiPolygon"
        assert shape.area == pytest.approx(100.0)

    @pytest.mark.parametrize("text", ["closet: (0,0)", "closet: (0,0)(1,1)"])
    def test_degenerate_ring_cannot_be_converted(self, text):
        geometry = parse_room(text).geometry
        with pytest.raises(InvalidGeometry):
            geometry.to_shapely()

    def test_smallest_ring_converts(self):
        shape = parse_room("closet: (0,0)(1,0)(1,1)").geometry.to_shapely()
        assert shape.area == pytest.approx(0.5)

    def test_degenerate_hole_cannot_be_converted(self):
        shell = square(0, 0, 10).polygons[0].exterior
        hole = (Point(1.0, 1.0), Point(2.0, 2.0), Point(1.0, 1.0))
        geometry = MultiPolygon(polygons=(Polygon(rings=(shell, hole)),))
        with pytest.raises(InvalidGeometry):
            geometry.to_shapely()

    def test_room_to_dict(self):
        room = Room("hall", square(0, 0, 1))
        assert room.to_dict()["room_type"] == "hall"
        assert len(room.to_dict()["coordinates"][0][0]) == 5


# ============================================================================
# Spatial predicates
# ============================================================================

class TestSpatial:
    def test_disjoint(self):
        assert intersects(square(0, 0, 10), square(20, 20, 5)) is False
        assert interiors_overlap(square(0, 0, 10), square(20, 20, 5)) is False

    def test_overlapping(self):
        assert intersects(square(0, 0, 10), square(5, 5, 10)) is True
        assert interiors_overlap(square(0, 0, 10), square(5, 5, 10)) is True

    def test_shared_wall(self):
        assert intersects(square(0, 0, 10), square(10, 0, 10)) is True
        assert interiors_overlap(square(0, 0, 10), square(10, 0, 10)) is False


# ============================================================================
# Adjacency
# ============================================================================

class TestAdjacency:
    def test_rooms_sharing_a_wall(self):
        rooms = parse_layout(
            "living: (0,0)(10,0)(10,10)(0,10), "
            "kitchen: (10,0)(20,0)(20,10)(10,10), "
            "bedroom: (30,30)(40,30)(40,40)(30,40)"
        )
        graph = build_adjacency_graph(rooms)
        assert adjacency_pairs(graph) == [(0, 1)]
        assert graph.edges[0, 1]["shared_length"] == 10.0
        assert graph.nodes[2]["room_type"] == "bedroom"
        assert room_neighbours(graph, 1) == [0]
        assert room_neighbours(graph, 2) == []
        assert room_neighbours(graph, 9) == []

    def test_corner_touch_is_not_adjacent(self):
        rooms = [Room("a", square(0, 0, 10)), Room("b", square(10, 10, 10))]
        assert adjacency_pairs(build_adjacency_graph(rooms)) == []
