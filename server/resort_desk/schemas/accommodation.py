"""Accommodation- and room-related Pydantic schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class RoomInput(BaseModel):
    """Room type fields shared by create requests."""

    name: str = Field(..., min_length=1, max_length=128, description="Room type name")
    capacity: int = Field(2, ge=1, le=100, description="Guests per room")
    price: int = Field(0, ge=0, description="Nightly price in whole currency units")
    notes: str | None = Field(None, max_length=2000, description="Free-form notes")


class CreateAccommodationRequest(BaseModel):
    """Request schema for creating an accommodation."""

    name: str = Field(..., min_length=2, max_length=255, description="Accommodation name")
    contact: str | None = Field(None, max_length=64, description="Contact phone number")
    details: str | None = Field(None, max_length=4000, description="Additional details")
    rooms: list[RoomInput] = Field(default_factory=list, description="Initial room types")


class UpdateAccommodationRequest(BaseModel):
    """Request schema for a partial accommodation update."""

    id: UUID = Field(..., description="Accommodation to update")
    name: str | None = Field(None, min_length=2, max_length=255, description="Accommodation name")
    contact: str | None = Field(None, max_length=64, description="Contact phone number")
    details: str | None = Field(None, max_length=4000, description="Additional details")


class AddRoomRequest(RoomInput):
    """Request schema for adding a room type to an accommodation."""

    accommodation_id: UUID = Field(..., description="Owning accommodation")


class UpdateRoomRequest(BaseModel):
    """Request schema for a partial room update."""

    id: UUID = Field(..., description="Room to update")
    name: str | None = Field(None, min_length=1, max_length=128, description="Room type name")
    capacity: int | None = Field(None, ge=1, le=100, description="Guests per room")
    price: int | None = Field(None, ge=0, description="Nightly price")
    notes: str | None = Field(None, max_length=2000, description="Free-form notes")


class Room(BaseModel):
    """Room response schema."""

    id: str = Field(..., description="Unique room ID")
    accommodation_id: str = Field(..., description="Owning accommodation ID")
    name: str = Field(..., description="Room type name")
    capacity: int = Field(..., description="Guests per room")
    price: int = Field(..., description="Nightly price")
    notes: str | None = Field(None, description="Free-form notes")


class Accommodation(BaseModel):
    """Accommodation response schema."""

    id: str = Field(..., description="Unique accommodation ID")
    name: str = Field(..., description="Accommodation name")
    contact: str | None = Field(None, description="Contact phone number")
    details: str | None = Field(None, description="Additional details")
    rooms: list[Room] = Field(default_factory=list, description="Room types")
    created_at: datetime | None = Field(None, description="Creation time (ISO 8601)")


class AccommodationListResponse(BaseModel):
    """Response schema for the accommodation list."""

    items: list[Accommodation] = Field(..., description="Accommodations, newest first")
