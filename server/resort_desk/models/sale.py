"""Sale model definition."""

from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint, ForeignKey, Integer, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.database import Base

if TYPE_CHECKING:
    from .reservation import Reservation


def utc_now() -> datetime:
    """Naive UTC timestamp; sale times are stored in UTC."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class SaleCategory(str, Enum):
    """Sale category enumeration."""
    SKI = "ski"
    ROOM = "room"
    FOOD = "food"
    OTHER = "other"


class Sale(Base):
    """Sale entity representing one recorded revenue transaction."""

    __tablename__ = "sales"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    reservation_id: Mapped[UUID | None] = mapped_column(
        Uuid,
        ForeignKey("reservations.id", ondelete="SET NULL"),
        nullable=True,
        index=True
    )

    item_name: Mapped[str] = mapped_column(String(255), nullable=False)
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    category: Mapped[SaleCategory] = mapped_column(
        String(20),
        nullable=False,
        default=SaleCategory.OTHER,
        index=True
    )

    # Naive UTC; dashboard windows filter on this column
    created_at: Mapped[datetime] = mapped_column(
        nullable=False,
        default=utc_now,
        server_default=func.now(),
        index=True
    )

    __table_args__ = (
        CheckConstraint("amount >= 0", name="ck_sale_amount_non_negative"),
        CheckConstraint("length(item_name) >= 2", name="ck_sale_item_name_length"),
        CheckConstraint(
            "category IN ('ski', 'room', 'food', 'other')",
            name="ck_sale_category_valid"
        ),
    )

    reservation: Mapped["Reservation | None"] = relationship("Reservation")

    def __repr__(self) -> str:
        return (
            f"<Sale(id={self.id}, item_name='{self.item_name}', amount={self.amount}, "
            f"category={self.category})>"
        )
