"""Accommodation and Room model definitions."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint, ForeignKey, Integer, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.database import Base


class Accommodation(Base):
    """Accommodation entity representing a lodging property."""

    __tablename__ = "accommodations"

    # Primary key
    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    # Property information
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    contact: Mapped[str | None] = mapped_column(String(64), nullable=True)
    details: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        nullable=False,
        server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        nullable=False,
        server_default=func.now(),
        onupdate=func.now()
    )

    __table_args__ = (
        CheckConstraint("length(name) >= 2", name="ck_accommodation_name_length"),
    )

    # Relationships
    rooms: Mapped[list["Room"]] = relationship(
        "Room",
        back_populates="accommodation",
        cascade="all, delete-orphan",
        order_by="Room.name",
    )

    def __repr__(self) -> str:
        return f"<Accommodation(id={self.id}, name='{self.name}')>"


class Room(Base):
    """Room entity representing one room type offered by an accommodation."""

    __tablename__ = "rooms"

    # Primary key
    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    # Foreign key to accommodation
    accommodation_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("accommodations.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    # Room type details
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False, default=2)
    price: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        nullable=False,
        server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        nullable=False,
        server_default=func.now(),
        onupdate=func.now()
    )

    __table_args__ = (
        CheckConstraint("capacity > 0", name="ck_room_capacity_positive"),
        CheckConstraint("price >= 0", name="ck_room_price_non_negative"),
    )

    # Relationships
    accommodation: Mapped["Accommodation"] = relationship("Accommodation", back_populates="rooms")

    def __repr__(self) -> str:
        return (
            f"<Room(id={self.id}, accommodation_id={self.accommodation_id}, "
            f"name='{self.name}', capacity={self.capacity})>"
        )
