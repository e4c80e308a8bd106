"""Dashboard Pydantic schemas."""

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field


class ViewMode(str, Enum):
    """Dashboard window size."""
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class DashboardStatsRequest(BaseModel):
    """Request schema for dashboard statistics."""

    view_mode: ViewMode = Field(ViewMode.DAILY, description="Window size")
    reference_date: date | None = Field(None, description="Any date inside the window; defaults to today")


class ChartPoint(BaseModel):
    """One bar of the sales trend chart."""

    name: str = Field(..., description="Bar label")
    total: int = Field(..., description="Sales total of the bar")


class DashboardStats(BaseModel):
    """Dashboard statistics response schema."""

    view_mode: ViewMode = Field(..., description="Window size")
    start: date = Field(..., description="First day of the window")
    end: date = Field(..., description="Last day of the window")
    label: str = Field(..., description="Human-readable window label")
    currency: str = Field(..., description="ISO 4217 currency of the amounts")
    total_sales: int = Field(..., description="Sum of sales in the window")
    active_reservations: int = Field(..., description="Non-cancelled reservations dated in the window")
    visitor_count: int = Field(..., description="Number of sales in the window")
    average_sale: int = Field(..., description="Average amount per sale")
    growth_rate: float | None = Field(None, description="Percent change of sales versus the previous window")
    chart: list[ChartPoint] = Field(..., description="Sales trend bars")
