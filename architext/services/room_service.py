"""
Apartment and room persistence.

Rooms are stored per apartment. Before a room is added, its geometry is
checked against every room already stored for the same apartment with an
``intersects`` predicate; any hit rejects the room with RoomOverlap.
"""

import logging
from typing import Iterable, List

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from architext import models
from .errors import ApartmentNotFound, RoomOverlap
from .geometry import Layout, Room
from .layout_parser import parse_prompt
from .spatial import IntersectsPredicate, intersects as shapely_intersects

logger = logging.getLogger(__name__)


async def create_apartment(db: AsyncSession, apartment_layout: str) -> models.Apartment:
    """Create an apartment with a free-text layout description."""
    apartment = models.Apartment(apartment_layout=apartment_layout)
    db.add(apartment)
    await db.flush()
    logger.info("Created apartment %s", apartment.id)
    return apartment


async def get_apartment(db: AsyncSession, apartment_id: str) -> models.Apartment:
    result = await db.execute(
        select(models.Apartment).where(models.Apartment.id == apartment_id)
    )
    apartment = result.scalar_one_or_none()
    if apartment is None:
        raise ApartmentNotFound(f"Apartment not found: {apartment_id}")
    return apartment


async def _stored_rooms(db: AsyncSession, apartment_id: str) -> List[models.Room]:
    result = await db.execute(
        select(models.Room)
        .where(models.Room.apartment_id == apartment_id)
        .order_by(models.Room.position)
    )
    return list(result.scalars().all())


async def insert_room(
    db: AsyncSession,
    apartment_id: str,
    room: Room,
    intersects: IntersectsPredicate = shapely_intersects,
) -> models.Room:
    """
    Store *room* for the apartment unless it intersects a room already there.

    Raises ApartmentNotFound for an unknown apartment, InvalidGeometry when
    the room does not bound an area, and RoomOverlap when *intersects* is
    true for any existing room of the same apartment.
    """
    await get_apartment(db, apartment_id)
    room.geometry.to_shapely()

    for existing in await _stored_rooms(db, apartment_id):
        if intersects(room.geometry, existing.to_room().geometry):
            logger.warning(
                "Rejected room '%s' for apartment %s: overlaps '%s'",
                room.room_type, apartment_id, existing.room_type,
            )
            raise RoomOverlap(room.room_type, existing.room_type)

    result = await db.execute(
        select(func.count()).select_from(models.Room).where(models.Room.apartment_id == apartment_id)
    )
    position = result.scalar_one()

    record = models.Room.from_room(apartment_id, room, position)
    db.add(record)
    await db.flush()
    logger.info("Inserted room '%s' into apartment %s", room.room_type, apartment_id)
    return record


async def insert_layout(
    db: AsyncSession,
    apartment_id: str,
    rooms: Iterable[Room],
    intersects: IntersectsPredicate = shapely_intersects,
) -> List[models.Room]:
    """Insert rooms in order; the first overlap aborts with RoomOverlap."""
    return [await insert_room(db, apartment_id, room, intersects) for room in rooms]


async def list_rooms(db: AsyncSession, apartment_id: str) -> List[Room]:
    """Rooms stored for the apartment, in insertion order."""
    return [record.to_room() for record in await _stored_rooms(db, apartment_id)]


async def load_layout(db: AsyncSession, apartment_id: str) -> Layout:
    """The apartment's description and rooms."""
    apartment = await get_apartment(db, apartment_id)
    rooms = await list_rooms(db, apartment_id)
    return Layout(rooms=tuple(rooms), description=apartment.apartment_layout)


async def import_prompt(
    db: AsyncSession,
    prompt: str,
    intersects: IntersectsPredicate = shapely_intersects,
) -> models.Apartment:
    """Parse a ``<description> [Layout] <rooms>`` prompt and store it as a new apartment."""
    description, rooms = parse_prompt(prompt)
    apartment = await create_apartment(db, description)
    await insert_layout(db, apartment.id, rooms, intersects)
    return apartment
