"""Ticket-related Pydantic schemas."""

from uuid import UUID

from pydantic import BaseModel, Field


class CreateTicketRequest(BaseModel):
    """Request schema for creating a ticket."""

    name: str = Field(..., min_length=2, max_length=255, description="Ticket name, e.g. full-day pass")
    price: int = Field(0, ge=0, description="Price in whole currency units")


class UpdateTicketRequest(BaseModel):
    """Request schema for a partial ticket update."""

    id: UUID = Field(..., description="Ticket to update")
    name: str | None = Field(None, min_length=2, max_length=255, description="Ticket name")
    price: int | None = Field(None, ge=0, description="Price in whole currency units")


class Ticket(BaseModel):
    """Ticket response schema."""

    id: str = Field(..., description="Unique ticket ID")
    name: str = Field(..., description="Ticket name")
    price: int = Field(..., description="Price in whole currency units")


class TicketListResponse(BaseModel):
    """Response schema for the ticket list."""

    items: list[Ticket] = Field(..., description="Tickets, newest first")
