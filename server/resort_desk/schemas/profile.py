"""Staff profile Pydantic schemas."""

from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, Field

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class ProfileRole(str, Enum):
    """Staff role enumeration."""
    ADMIN = "admin"
    EMPLOYEE = "employee"


class CreateProfileRequest(BaseModel):
    """Request schema for registering a staff profile."""

    id: UUID | None = Field(None, description="Identity provider user ID; generated when omitted")
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN, description="Login email")
    name: str = Field(..., min_length=1, max_length=128, description="Display name")
    phone: str | None = Field(None, max_length=32, description="Contact phone number")
    role: ProfileRole = Field(ProfileRole.EMPLOYEE, description="Staff role")


class UpdateProfileRequest(BaseModel):
    """Request schema for a partial profile update."""

    id: UUID = Field(..., description="Profile to update")
    name: str | None = Field(None, min_length=1, max_length=128, description="Display name")
    phone: str | None = Field(None, max_length=32, description="Contact phone number")
    role: ProfileRole | None = Field(None, description="Staff role")


class Profile(BaseModel):
    """Profile response schema."""

    id: str = Field(..., description="Profile ID")
    email: str = Field(..., description="Login email")
    name: str | None = Field(None, description="Display name")
    phone: str | None = Field(None, description="Contact phone number")
    role: ProfileRole = Field(..., description="Staff role")
    created_at: datetime | None = Field(None, description="Creation time (ISO 8601)")


class ProfileListResponse(BaseModel):
    """Response schema for the staff list."""

    items: list[Profile] = Field(..., description="Profiles, newest first")


class CurrentProfile(BaseModel):
    """The caller's identity and effective role."""

    id: str = Field(..., description="Caller ID")
    email: str | None = Field(None, description="Login email")
    name: str | None = Field(None, description="Display name")
    role: ProfileRole = Field(..., description="Effective role; employee when no profile exists")
