"""
Adjacency graph construction for parsed rooms.

Builds a NetworkX graph where nodes are room positions in the layout and
edges connect rooms that share a boundary segment.
"""

from typing import List, Sequence, Tuple

import networkx as nx

from .geometry import Room


def build_adjacency_graph(rooms: Sequence[Room],
                          tolerance: float = 0.05) -> nx.Graph:
    """
    Build an adjacency graph from parsed rooms.

    Two rooms are adjacent if they share a boundary of length > tolerance.

    Parameters
    ----------
    rooms : sequence of Room
        Rooms in layout order; a room's index is its node id.
    tolerance : float
        Minimum shared boundary length to count as adjacent.

    Returns
    -------
    nx.Graph
        Undirected graph with room indices as nodes and shared-boundary
        length as edge weight ``shared_length``.
    """
    G = nx.Graph()
    shapes = [room.geometry.to_shapely() for room in rooms]
    for i, room in enumerate(rooms):
        G.add_node(i, room_type=room.room_type)

    for i in range(len(rooms)):
        for j in range(i + 1, len(rooms)):
            shared = shapes[i].intersection(shapes[j])
            length = shared.length if not shared.is_empty else 0.0
            if length > tolerance:
                G.add_edge(i, j, shared_length=round(length, 4))
    return G


def adjacency_pairs(graph: nx.Graph) -> List[Tuple[int, int]]:
    """List all (index_a, index_b) pairs that share a wall, lowest index first."""
    return sorted(tuple(sorted(edge)) for edge in graph.edges())


def room_neighbours(graph: nx.Graph, index: int) -> List[int]:
    """Return indices of rooms adjacent to the room at *index*."""
    if index not in graph:
        return []
    return sorted(graph.neighbors(index))
