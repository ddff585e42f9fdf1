"""SQLAlchemy ORM models for apartments and their rooms."""

import json
import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, Integer, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship
from architext.database import Base
from architext.services import geometry


def generate_uuid():
    return str(uuid.uuid4())


class Apartment(Base):
    __tablename__ = "apartments"

    id = Column(String, primary_key=True, default=generate_uuid)
    apartment_layout = Column(Text, nullable=False, default="")  # free-text description
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))

    rooms = relationship(
        "Room",
        back_populates="apartment",
        cascade="all, delete-orphan",
        order_by="Room.position",
    )


class Room(Base):
    __tablename__ = "rooms"

    id = Column(String, primary_key=True, default=generate_uuid)
    apartment_id = Column(String, ForeignKey("apartments.id"), index=True, nullable=False)
    room_type = Column(String, nullable=False)
    position = Column(Integer, nullable=False, default=0)
    room_coordinates = Column(Text, nullable=False)  # JSON string of the MultiPolygon nesting

    apartment = relationship("Apartment", back_populates="rooms")

    @classmethod
    def from_room(cls, apartment_id: str, room: geometry.Room, position: int) -> "Room":
        return cls(
            apartment_id=apartment_id,
            room_type=room.room_type,
            position=position,
            room_coordinates=json.dumps(room.geometry.to_coordinates()),
        )

    def to_room(self) -> geometry.Room:
        """Rebuild the parsed room value."""
        return geometry.Room(
            room_type=self.room_type,
            geometry=geometry.MultiPolygon.from_coordinates(json.loads(self.room_coordinates)),
        )
