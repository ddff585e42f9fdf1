"""
JSONL export of apartment layouts.

Each export appends one line holding a single conversation::

    {"conversations": [{"from": "<instruction>", "value": "<description>"}]}

The ``value`` names the layout, lists every room with its geometry as
well-known text and finishes with the rooms that share a wall.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from sqlalchemy.ext.asyncio import AsyncSession

from architext import config
from .adjacency import adjacency_pairs, build_adjacency_graph
from .geometry import Layout, Room
from .room_service import load_layout

logger = logging.getLogger(__name__)

INSTRUCTION = (
    "Imagine an apartment that suits your lifestyle. The apartment layout is {layout}. "
    "This output provides a detailed description of an apartment with a {layout} layout "
    "along with its rooms. Each room is thoughtfully placed and designed to maximize space "
    "and functionality. The spatial relationship between rooms is also indicated, "
    "particularly if they are adjacent. In addition, each room's location is defined using "
    "the 'Well-known Text' (WKT) markup language for representing vector geometry objects "
    "on a map. In this syntax, a MULTIPOLYGON is represented as a ring of points that ends "
    "where it started."
)


def describe_room(room: Room) -> str:
    return f"The room type is {room.room_type}, and its coordinates are {room.geometry.to_wkt()}."


def build_conversation(layout: Layout, include_adjacency: bool = True,
                       tolerance: Optional[float] = None) -> dict:
    """Build the ``{"from", "value"}`` pair for one layout."""
    description = layout.description or ""
    lines = [f"The apartment layout is {description}."]
    lines.extend(describe_room(room) for room in layout.rooms)

    if include_adjacency and len(layout.rooms) > 1:
        if tolerance is None:
            tolerance = config.ADJACENCY_TOLERANCE
        graph = build_adjacency_graph(layout.rooms, tolerance=tolerance)
        for i, j in adjacency_pairs(graph):
            lines.append(
                f"The {layout.rooms[i].room_type} is adjacent to the {layout.rooms[j].room_type}."
            )

    return {
        "from": INSTRUCTION.format(layout=description),
        "value": "\n".join(lines),
    }


def to_jsonl_record(layout: Layout, **kwargs) -> str:
    """One JSON object, without the trailing newline."""
    return json.dumps({"conversations": [build_conversation(layout, **kwargs)]})


def append_jsonl(path: Union[str, Path], layout: Layout, **kwargs) -> Path:
    """Append the layout's record as one line of *path*."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        f.write(to_jsonl_record(layout, **kwargs) + "\n")
    logger.info("Exported %d rooms to %s", len(layout.rooms), path)
    return path


async def export_apartment(db: AsyncSession, apartment_id: str,
                           path: Optional[Union[str, Path]] = None, **kwargs) -> Path:
    """Append a stored apartment to *path*, or to the configured export file."""
    layout = await load_layout(db, apartment_id)
    if path is None:
        path = config.EXPORT_DIR / config.EXPORT_FILENAME
    return append_jsonl(path, layout, **kwargs)
