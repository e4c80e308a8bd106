"""Staff profile model definition."""

from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from ..core.database import Base


class ProfileRole(str, Enum):
    """Staff role enumeration."""
    ADMIN = "admin"
    EMPLOYEE = "employee"


class Profile(Base):
    """Profile entity representing a staff account record."""

    __tablename__ = "profiles"

    # Shares its id with the identity provider's user
    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    name: Mapped[str | None] = mapped_column(String(128), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(32), nullable=True)
    role: Mapped[ProfileRole] = mapped_column(
        String(20),
        nullable=False,
        default=ProfileRole.EMPLOYEE,
        index=True
    )

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
        CheckConstraint("role IN ('admin', 'employee')", name="ck_profile_role_valid"),
    )

    def __repr__(self) -> str:
        return f"<Profile(id={self.id}, email='{self.email}', role={self.role})>"
