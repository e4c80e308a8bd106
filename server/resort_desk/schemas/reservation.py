"""Reservation-related Pydantic schemas."""

import datetime as dt
from enum import Enum
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field

from .common import OptionalReference


class ReservationType(str, Enum):
    """Reservation type enumeration."""
    ACCOMMODATION = "accommodation"
    DAY = "day"


class ReservationStatus(str, Enum):
    """Reservation status enumeration."""
    BOOKED = "booked"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


SortKey = Literal[
    "reservation_type",
    "date",
    "customer_name",
    "status",
    "headcount",
    "total_amount",
    "created_at",
]
SortDirection = Literal["asc", "desc"]


class SortConfig(BaseModel):
    """Sort column and direction of the reservation table."""

    key: SortKey = Field("reservation_type", description="Primary sort column")
    direction: SortDirection = Field("asc", description="Sort direction")


class CreateReservationRequest(BaseModel):
    """Request schema for creating a reservation."""

    reservation_type: ReservationType = Field(ReservationType.ACCOMMODATION, description="Overnight stay or day visit")
    customer_name: str = Field(..., min_length=2, max_length=128, description="Name the booking is under")
    phone: str | None = Field(None, max_length=32, description="Contact phone number")
    date: dt.date = Field(..., description="Check-in or visit date")
    headcount: int = Field(1, ge=1, le=1000, description="Number of guests")
    accommodation_id: OptionalReference = Field(None, description="Linked accommodation")
    ticket_id: OptionalReference = Field(None, description="Linked ticket")
    pickup_location: str | None = Field(None, max_length=255, description="Pickup place")
    pickup_time: str | None = Field(None, max_length=32, description="Pickup time, e.g. 14:00")
    total_amount: int = Field(0, ge=0, description="Total price in whole currency units")
    deposit: int = Field(0, ge=0, description="Deposit already paid")
    notes: str | None = Field(None, max_length=4000, description="Free-form notes")
    status: ReservationStatus = Field(ReservationStatus.BOOKED, description="Reservation status")


class UpdateReservationRequest(BaseModel):
    """Request schema for a partial reservation update; omitted fields are kept."""

    id: UUID = Field(..., description="Reservation to update")
    reservation_type: ReservationType | None = Field(None, description="Overnight stay or day visit")
    customer_name: str | None = Field(None, min_length=2, max_length=128, description="Name the booking is under")
    phone: str | None = Field(None, max_length=32, description="Contact phone number")
    date: dt.date | None = Field(None, description="Check-in or visit date")
    headcount: int | None = Field(None, ge=1, le=1000, description="Number of guests")
    accommodation_id: OptionalReference = Field(None, description="Linked accommodation; empty clears it")
    ticket_id: OptionalReference = Field(None, description="Linked ticket; empty clears it")
    pickup_location: str | None = Field(None, max_length=255, description="Pickup place")
    pickup_time: str | None = Field(None, max_length=32, description="Pickup time")
    total_amount: int | None = Field(None, ge=0, description="Total price")
    deposit: int | None = Field(None, ge=0, description="Deposit already paid")
    notes: str | None = Field(None, max_length=4000, description="Free-form notes")
    status: ReservationStatus | None = Field(None, description="Reservation status")


class UpdateReservationStatusRequest(BaseModel):
    """Request schema for changing only the reservation status."""

    id: UUID = Field(..., description="Reservation to update")
    status: ReservationStatus = Field(..., description="New status")


class SearchReservationsRequest(BaseModel):
    """
    Request schema for searching reservations.

    Without bounds and with ``show_all`` false, the search covers today
    through the configured number of days ahead.
    """

    date_from: dt.date | None = Field(None, description="First date (inclusive)")
    date_to: dt.date | None = Field(None, description="Last date (inclusive)")
    show_all: bool = Field(False, description="Ignore dates and return every reservation")
    sort: SortConfig = Field(default_factory=SortConfig, description="Sort order")
    toggle: SortKey | None = Field(None, description="Clicked column header; flips or replaces the sort")


class Reservation(BaseModel):
    """Reservation response schema."""

    id: str = Field(..., description="Unique reservation ID")
    reservation_type: ReservationType = Field(..., description="Overnight stay or day visit")
    customer_name: str = Field(..., description="Name the booking is under")
    phone: str | None = Field(None, description="Contact phone number")
    date: dt.date = Field(..., description="Check-in or visit date")
    headcount: int = Field(..., description="Number of guests")
    accommodation_id: str | None = Field(None, description="Linked accommodation ID")
    accommodation_name: str | None = Field(None, description="Linked accommodation name")
    ticket_id: str | None = Field(None, description="Linked ticket ID")
    ticket_name: str | None = Field(None, description="Linked ticket name")
    pickup_location: str | None = Field(None, description="Pickup place")
    pickup_time: str | None = Field(None, description="Pickup time")
    total_amount: int = Field(..., description="Total price")
    deposit: int = Field(..., description="Deposit already paid")
    balance: int = Field(..., description="Amount still due (total - deposit)")
    notes: str | None = Field(None, description="Free-form notes")
    status: ReservationStatus = Field(..., description="Reservation status")
    created_at: dt.datetime | None = Field(None, description="Creation time (ISO 8601)")


class SearchReservationsResponse(BaseModel):
    """Response schema for reservation search."""

    items: list[Reservation] = Field(..., description="Matching reservations")
    date_from: dt.date | None = Field(None, description="Applied first date")
    date_to: dt.date | None = Field(None, description="Applied last date")
    sort: SortConfig = Field(..., description="Applied sort order")


class LinkableReservation(BaseModel):
    """Reservation summary offered when linking a sale."""

    id: str = Field(..., description="Reservation ID")
    customer_name: str = Field(..., description="Name the booking is under")
    date: dt.date = Field(..., description="Check-in or visit date")


class LinkableReservationsResponse(BaseModel):
    """Response schema for the sale-linking picker."""

    items: list[LinkableReservation] = Field(..., description="Booked or completed reservations, latest date first")
