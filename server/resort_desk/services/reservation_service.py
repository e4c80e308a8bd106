"""Reservation service for booking operations."""

import logging
from datetime import date, timedelta
from typing import Optional
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..core.config import settings
from ..core.exceptions import NotFoundError, ValidationError
from ..core.observability import metrics_collector
from ..models.accommodation import Accommodation
from ..models.reservation import Reservation, ReservationStatus
from ..models.sale import Sale
from ..models.ticket import Ticket
from ..schemas.reservation import (
    CreateReservationRequest,
    SearchReservationsRequest,
    SortConfig,
    UpdateReservationRequest,
    UpdateReservationStatusRequest,
)

logger = logging.getLogger(__name__)

# Fields a partial update may not clear by sending null
_REQUIRED_FIELDS = {
    "reservation_type",
    "customer_name",
    "date",
    "headcount",
    "total_amount",
    "deposit",
    "status",
}

# Sale linking only offers reservations that actually happened or will happen
LINKABLE_STATUSES = (ReservationStatus.BOOKED.value, ReservationStatus.COMPLETED.value)


def compute_balance(total_amount: int, deposit: int) -> int:
    """Return the amount still due on a reservation."""
    return total_amount - deposit


def resolve_search_window(
    request: SearchReservationsRequest,
    today: date,
    window_days: int,
) -> tuple[Optional[date], Optional[date]]:
    """
    Return the (date_from, date_to) bounds a search applies.

    ``show_all`` removes both bounds. A request without any bound falls back
    to today through ``window_days`` ahead; a single given bound is kept as is.
    """
    if request.show_all:
        return None, None
    if request.date_from is None and request.date_to is None:
        return today, today + timedelta(days=window_days)
    return request.date_from, request.date_to


def toggle_sort(current: SortConfig, key: str) -> SortConfig:
    """Clicking the active column flips asc to desc; any other column starts ascending."""
    if current.key == key and current.direction == "asc":
        return SortConfig(key=key, direction="desc")
    return SortConfig(key=key, direction="asc")


def effective_sort(request: SearchReservationsRequest) -> SortConfig:
    """The sort a search applies once a clicked column header is taken into account."""
    if request.toggle is None:
        return request.sort
    return toggle_sort(request.sort, request.toggle)


def build_order_by(sort: SortConfig) -> list:
    """
    Translate a sort config into ORDER BY clauses.

    Type and date always break ties on each other so overnight stays and day
    visits stay grouped by date.
    """
    column = getattr(Reservation, sort.key)
    primary = column.asc() if sort.direction == "asc" else column.desc()

    if sort.key == "reservation_type":
        return [primary, Reservation.date.asc()]
    if sort.key == "date":
        return [primary, Reservation.reservation_type.asc()]
    return [primary]


class ReservationService:
    """Service for reservation-related operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    def _base_query(self):
        return select(Reservation).options(
            selectinload(Reservation.accommodation),
            selectinload(Reservation.ticket),
        )

    async def search_reservations(
        self,
        request: SearchReservationsRequest,
        today: Optional[date] = None,
    ) -> tuple[list[Reservation], Optional[date], Optional[date]]:
        """
        Search reservations by date window with a configurable sort.

        Args:
            request: Search criteria
            today: Reference day for the default window; defaults to date.today()

        Returns:
            Matching reservations and the date bounds actually applied

        Raises:
            ValidationError: If the bounds are inverted
        """
        date_from, date_to = resolve_search_window(
            request,
            today or date.today(),
            settings.reservation_window_days,
        )
        if date_from is not None and date_to is not None and date_from > date_to:
            raise ValidationError(
                detail="date_from must not be after date_to",
                errors={"date_from": date_from.isoformat(), "date_to": date_to.isoformat()}
            )

        stmt = self._base_query()
        if date_from is not None:
            stmt = stmt.where(Reservation.date >= date_from)
        if date_to is not None:
            stmt = stmt.where(Reservation.date <= date_to)
        sort = effective_sort(request)
        stmt = stmt.order_by(*build_order_by(sort))

        result = await self.db.execute(stmt)
        reservations = list(result.scalars())

        logger.info(
            "Reservation search completed",
            extra={
                "total_found": len(reservations),
                "date_from": date_from.isoformat() if date_from else None,
                "date_to": date_to.isoformat() if date_to else None,
                "sort_key": sort.key,
                "sort_direction": sort.direction
            }
        )

        return reservations, date_from, date_to

    async def get_reservation_by_id(self, reservation_id: UUID) -> Optional[Reservation]:
        """
        Get reservation by ID with its accommodation and ticket loaded.

        Args:
            reservation_id: Reservation ID to search for

        Returns:
            Reservation if found, None otherwise
        """
        stmt = (
            self._base_query()
            .where(Reservation.id == reservation_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_reservation_by_id_or_raise(self, reservation_id: UUID) -> Reservation:
        """
        Get reservation by ID or raise NotFoundError.

        Raises:
            NotFoundError: If reservation not found
        """
        reservation = await self.get_reservation_by_id(reservation_id)
        if not reservation:
            logger.warning(
                "Reservation not found",
                extra={"reservation_id": str(reservation_id)}
            )
            raise NotFoundError(
                resource_type="reservation",
                resource_id=str(reservation_id)
            )
        return reservation

    async def _ensure_references_exist(
        self,
        accommodation_id: Optional[UUID],
        ticket_id: Optional[UUID],
    ) -> None:
        if accommodation_id is not None and await self.db.get(Accommodation, accommodation_id) is None:
            raise NotFoundError(resource_type="accommodation", resource_id=str(accommodation_id))
        if ticket_id is not None and await self.db.get(Ticket, ticket_id) is None:
            raise NotFoundError(resource_type="ticket", resource_id=str(ticket_id))

    async def create_reservation(self, request: CreateReservationRequest) -> Reservation:
        """
        Create a new reservation.

        Args:
            request: Reservation creation request

        Returns:
            Created reservation with its links loaded

        Raises:
            NotFoundError: If the linked accommodation or ticket does not exist
        """
        await self._ensure_references_exist(request.accommodation_id, request.ticket_id)

        reservation = Reservation(
            reservation_type=request.reservation_type.value,
            customer_name=request.customer_name,
            phone=request.phone,
            date=request.date,
            headcount=request.headcount,
            accommodation_id=request.accommodation_id,
            ticket_id=request.ticket_id,
            pickup_location=request.pickup_location,
            pickup_time=request.pickup_time,
            total_amount=request.total_amount,
            deposit=request.deposit,
            balance=compute_balance(request.total_amount, request.deposit),
            notes=request.notes,
            status=request.status.value,
        )

        self.db.add(reservation)
        await self.db.commit()

        metrics_collector.record_reservation_created(reservation.reservation_type)

        logger.info(
            "Reservation created successfully",
            extra={
                "reservation_id": str(reservation.id),
                "reservation_type": reservation.reservation_type,
                "date": reservation.date.isoformat(),
                "headcount": reservation.headcount,
                "balance": reservation.balance
            }
        )

        return await self.get_reservation_by_id_or_raise(reservation.id)

    async def update_reservation(self, request: UpdateReservationRequest) -> Reservation:
        """
        Apply a partial update; the balance is recomputed from the result.

        Raises:
            NotFoundError: If the reservation or a newly linked record does not exist
        """
        reservation = await self.get_reservation_by_id_or_raise(request.id)
        previous_status = reservation.status

        changes = {
            field: value
            for field, value in request.model_dump(exclude_unset=True, exclude={"id"}).items()
            if not (value is None and field in _REQUIRED_FIELDS)
        }

        await self._ensure_references_exist(
            changes.get("accommodation_id"),
            changes.get("ticket_id"),
        )

        for field, value in changes.items():
            setattr(reservation, field, getattr(value, "value", value))
        reservation.balance = compute_balance(reservation.total_amount, reservation.deposit)

        await self.db.commit()

        if reservation.status != previous_status:
            metrics_collector.record_status_change(reservation.status)

        logger.info(
            "Reservation updated",
            extra={
                "reservation_id": str(request.id),
                "fields": sorted(changes),
                "balance": reservation.balance
            }
        )

        return await self.get_reservation_by_id_or_raise(request.id)

    async def update_status(self, request: UpdateReservationStatusRequest) -> Reservation:
        """
        Change only the status of a reservation, e.g. mark it completed.

        Raises:
            NotFoundError: If reservation not found
        """
        reservation = await self.get_reservation_by_id_or_raise(request.id)
        previous_status = reservation.status

        reservation.status = request.status.value
        await self.db.commit()

        if previous_status != reservation.status:
            metrics_collector.record_status_change(reservation.status)

        logger.info(
            "Reservation status changed",
            extra={
                "reservation_id": str(request.id),
                "from_status": previous_status,
                "to_status": reservation.status
            }
        )

        return await self.get_reservation_by_id_or_raise(request.id)

    async def delete_reservation(self, reservation_id: UUID) -> None:
        """
        Delete a reservation; sales linked to it are kept and unlinked.

        Raises:
            NotFoundError: If reservation not found
        """
        reservation = await self.get_reservation_by_id_or_raise(reservation_id)

        await self.db.execute(
            update(Sale)
            .where(Sale.reservation_id == reservation_id)
            .values(reservation_id=None)
        )
        await self.db.delete(reservation)
        await self.db.commit()

        logger.info("Reservation deleted", extra={"reservation_id": str(reservation_id)})

    async def list_linkable_reservations(self, limit: Optional[int] = None) -> list[Reservation]:
        """
        List reservations a sale can be linked to.

        Returns:
            Booked or completed reservations, latest date first
        """
        stmt = (
            select(Reservation)
            .where(Reservation.status.in_(LINKABLE_STATUSES))
            .order_by(Reservation.date.desc(), Reservation.customer_name)
            .limit(limit or settings.linkable_reservations_limit)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars())
