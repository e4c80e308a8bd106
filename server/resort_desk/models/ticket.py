"""Ticket model definition."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint, Integer, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from ..core.database import Base


class Ticket(Base):
    """Ticket entity representing a purchasable leisure-activity pass."""

    __tablename__ = "tickets"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    price: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

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
        CheckConstraint("length(name) >= 2", name="ck_ticket_name_length"),
        CheckConstraint("price >= 0", name="ck_ticket_price_non_negative"),
    )

    def __repr__(self) -> str:
        return f"<Ticket(id={self.id}, name='{self.name}', price={self.price})>"
