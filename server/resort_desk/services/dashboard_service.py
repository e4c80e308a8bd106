"""Dashboard service computing sales statistics over a date window."""

import calendar
import logging
from collections import defaultdict
from datetime import date, datetime, time, timedelta
from typing import Iterable, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import settings
from ..models.reservation import Reservation, ReservationStatus
from ..models.sale import Sale, utc_now
from ..schemas.dashboard import ChartPoint, DashboardStats, DashboardStatsRequest, ViewMode
from .sale_service import SaleService

logger = logging.getLogger(__name__)


def ordinal(day: int) -> str:
    """Return ``day`` with its English suffix, e.g. 1st, 2nd, 11th, 23rd."""
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def week_start(day: date, week_starts_on: int = 0) -> date:
    """
    First day of the week containing ``day``.

    ``week_starts_on`` counts from Sunday (0) to Saturday (6).
    """
    sunday_based = (day.weekday() + 1) % 7
    return day - timedelta(days=(sunday_based - week_starts_on) % 7)


def resolve_range(
    view_mode: ViewMode,
    reference_date: date,
    week_starts_on: int = 0,
) -> tuple[date, date, str]:
    """
    Resolve the window a dashboard view covers.

    Returns:
        (start, end, label) with both bounds inclusive
    """
    if view_mode == ViewMode.DAILY:
        label = f"{reference_date:%B} {ordinal(reference_date.day)}, {reference_date.year}"
        return reference_date, reference_date, label

    if view_mode == ViewMode.WEEKLY:
        start = week_start(reference_date, week_starts_on)
        end = start + timedelta(days=6)
        return start, end, f"{start:%b} {start.day} - {end:%b} {end.day}"

    start = reference_date.replace(day=1)
    last_day = calendar.monthrange(start.year, start.month)[1]
    end = start.replace(day=last_day)
    return start, end, f"{start:%B %Y}"


def previous_range(
    view_mode: ViewMode,
    start: date,
    week_starts_on: int = 0,
) -> tuple[date, date]:
    """The window of the same view mode immediately before the one starting at ``start``."""
    prev_start, prev_end, _ = resolve_range(view_mode, start - timedelta(days=1), week_starts_on)
    return prev_start, prev_end


def day_bounds(start: date, end: date) -> tuple[datetime, datetime]:
    """Half-open datetime bounds covering ``start`` 00:00 through the end of ``end``."""
    return datetime.combine(start, time.min), datetime.combine(end + timedelta(days=1), time.min)


def build_chart(
    view_mode: ViewMode,
    start: date,
    end: date,
    sales: Iterable[tuple[datetime, int]],
) -> list[ChartPoint]:
    """
    Bucket ``(created_at, amount)`` pairs into chart bars.

    The daily view is one bar; other views get one bar per day, empty days
    included.
    """
    per_day: dict[date, int] = defaultdict(int)
    for created_at, amount in sales:
        per_day[created_at.date()] += amount

    if view_mode == ViewMode.DAILY:
        return [ChartPoint(name=f"{start:%b %d}", total=sum(per_day.values()))]

    points = []
    day = start
    while day <= end:
        points.append(ChartPoint(name=str(day.day), total=per_day.get(day, 0)))
        day += timedelta(days=1)
    return points


def average_sale(total: int, count: int) -> int:
    if count == 0:
        return 0
    return round(total / count)


def growth_rate(current: int, previous: int) -> Optional[float]:
    """Percent change versus the previous window, None without a baseline."""
    if previous == 0:
        return None
    return round((current - previous) / previous * 100, 1)


class DashboardService:
    """Service aggregating sales and reservations for the dashboard."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.sale_service = SaleService(db)

    async def _sales_total(self, start: date, end: date) -> int:
        lower, upper = day_bounds(start, end)
        stmt = select(func.coalesce(func.sum(Sale.amount), 0)).where(
            Sale.created_at >= lower,
            Sale.created_at < upper,
        )
        result = await self.db.execute(stmt)
        return int(result.scalar_one())

    async def _active_reservation_count(self, start: date, end: date) -> int:
        stmt = select(func.count(Reservation.id)).where(
            Reservation.date >= start,
            Reservation.date <= end,
            Reservation.status != ReservationStatus.CANCELLED.value,
        )
        result = await self.db.execute(stmt)
        return int(result.scalar_one())

    async def get_stats(
        self,
        request: DashboardStatsRequest,
        today: Optional[date] = None,
    ) -> DashboardStats:
        """
        Compute dashboard statistics for the requested window.

        Args:
            request: View mode and optional reference date
            today: Fallback reference date; defaults to the current UTC date

        Returns:
            Totals, counts and chart bars for the window
        """
        reference = request.reference_date or today or utc_now().date()
        start, end, label = resolve_range(request.view_mode, reference, settings.week_starts_on)

        lower, upper = day_bounds(start, end)
        sales = await self.sale_service.list_sales_between(lower, upper)
        total = sum(sale.amount for sale in sales)

        prev_start, prev_end = previous_range(request.view_mode, start, settings.week_starts_on)
        previous_total = await self._sales_total(prev_start, prev_end)

        stats = DashboardStats(
            view_mode=request.view_mode,
            start=start,
            end=end,
            label=label,
            currency=settings.currency,
            total_sales=total,
            active_reservations=await self._active_reservation_count(start, end),
            visitor_count=len(sales),
            average_sale=average_sale(total, len(sales)),
            growth_rate=growth_rate(total, previous_total),
            chart=build_chart(
                request.view_mode,
                start,
                end,
                ((sale.created_at, sale.amount) for sale in sales),
            ),
        )

        logger.info(
            "Dashboard stats computed",
            extra={
                "view_mode": request.view_mode.value,
                "start": start.isoformat(),
                "end": end.isoformat(),
                "total_sales": total,
                "visitor_count": stats.visitor_count
            }
        )

        return stats
