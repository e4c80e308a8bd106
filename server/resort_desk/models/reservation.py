"""Reservation model definition."""

import datetime as dt
from enum import Enum
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint, Date, ForeignKey, Integer, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.database import Base

if TYPE_CHECKING:
    from .accommodation import Accommodation
    from .ticket import Ticket


class ReservationType(str, Enum):
    """Reservation type enumeration."""
    ACCOMMODATION = "accommodation"
    DAY = "day"


class ReservationStatus(str, Enum):
    """Reservation status enumeration."""
    BOOKED = "booked"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Reservation(Base):
    """Reservation entity representing an overnight stay or a day visit."""

    __tablename__ = "reservations"

    # Primary key
    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    reservation_type: Mapped[ReservationType] = mapped_column(
        String(20),
        nullable=False,
        default=ReservationType.ACCOMMODATION,
        index=True
    )

    # Guest
    customer_name: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    phone: Mapped[str | None] = mapped_column(String(32), nullable=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    headcount: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    # Optional links; rows survive deletion of the referenced record
    accommodation_id: Mapped[UUID | None] = mapped_column(
        Uuid,
        ForeignKey("accommodations.id", ondelete="SET NULL"),
        nullable=True,
        index=True
    )
    ticket_id: Mapped[UUID | None] = mapped_column(
        Uuid,
        ForeignKey("tickets.id", ondelete="SET NULL"),
        nullable=True,
        index=True
    )

    # Pickup
    pickup_location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    pickup_time: Mapped[str | None] = mapped_column(String(32), nullable=True)

    # Payment; balance is always total_amount - deposit
    total_amount: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    deposit: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    balance: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[ReservationStatus] = mapped_column(
        String(20),
        nullable=False,
        default=ReservationStatus.BOOKED,
        index=True
    )

    # Timestamps
    created_at: Mapped[dt.datetime] = mapped_column(
        nullable=False,
        server_default=func.now()
    )
    updated_at: Mapped[dt.datetime] = mapped_column(
        nullable=False,
        server_default=func.now(),
        onupdate=func.now()
    )

    # Constraints
    __table_args__ = (
        CheckConstraint("headcount > 0", name="ck_reservation_headcount_positive"),
        CheckConstraint("total_amount >= 0", name="ck_reservation_total_non_negative"),
        CheckConstraint("deposit >= 0", name="ck_reservation_deposit_non_negative"),
        CheckConstraint("balance = total_amount - deposit", name="ck_reservation_balance"),
        CheckConstraint(
            "reservation_type IN ('accommodation', 'day')",
            name="ck_reservation_type_valid"
        ),
        CheckConstraint(
            "status IN ('booked', 'completed', 'cancelled')",
            name="ck_reservation_status_valid"
        ),
    )

    # Relationships
    accommodation: Mapped["Accommodation | None"] = relationship("Accommodation")
    ticket: Mapped["Ticket | None"] = relationship("Ticket")

    def __repr__(self) -> str:
        return (
            f"<Reservation(id={self.id}, type={self.reservation_type}, date={self.date}, "
            f"customer_name='{self.customer_name}', status={self.status})>"
        )
