"""Sale-related Pydantic schemas."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from .common import OptionalReference


class SaleCategory(str, Enum):
    """Sale category enumeration."""
    SKI = "ski"
    ROOM = "room"
    FOOD = "food"
    OTHER = "other"


class CreateSaleRequest(BaseModel):
    """Request schema for recording a sale."""

    reservation_id: OptionalReference = Field(None, description="Linked reservation; \"none\" for walk-ins")
    item_name: str = Field(..., min_length=2, max_length=255, description="What was sold")
    amount: int = Field(0, ge=0, description="Amount in whole currency units")
    category: SaleCategory = Field(SaleCategory.OTHER, description="Revenue category")
    created_at: datetime | None = Field(None, description="When the sale happened; defaults to now")


class Sale(BaseModel):
    """Sale response schema."""

    id: str = Field(..., description="Unique sale ID")
    reservation_id: str | None = Field(None, description="Linked reservation ID")
    customer_name: str | None = Field(None, description="Customer of the linked reservation")
    item_name: str = Field(..., description="What was sold")
    amount: int = Field(..., description="Amount in whole currency units")
    category: SaleCategory = Field(..., description="Revenue category")
    created_at: datetime = Field(..., description="When the sale happened (ISO 8601)")


class SaleListResponse(BaseModel):
    """Response schema for the sale list."""

    items: list[Sale] = Field(..., description="Sales, newest first")
    total_amount: int = Field(..., description="Sum of the listed amounts")
