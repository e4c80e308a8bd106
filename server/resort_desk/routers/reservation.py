"""Reservation router for booking operations."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.exceptions import ProblemDetailsException
from ..schemas.common import DeleteResponse, IdRequest
from ..schemas.reservation import (
    CreateReservationRequest,
    LinkableReservation,
    LinkableReservationsResponse,
    Reservation,
    SearchReservationsRequest,
    SearchReservationsResponse,
    UpdateReservationRequest,
    UpdateReservationStatusRequest,
)
from ..services.reservation_service import ReservationService, effective_sort

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/reservation", tags=["reservation"])

DB_DEPENDENCY = Depends(get_db)


def _convert_reservation_to_schema(reservation_model) -> Reservation:
    """Convert reservation model (links loaded) to schema."""
    accommodation = reservation_model.accommodation
    ticket = reservation_model.ticket
    return Reservation(
        id=str(reservation_model.id),
        reservation_type=reservation_model.reservation_type,
        customer_name=reservation_model.customer_name,
        phone=reservation_model.phone,
        date=reservation_model.date,
        headcount=reservation_model.headcount,
        accommodation_id=str(reservation_model.accommodation_id) if reservation_model.accommodation_id else None,
        accommodation_name=accommodation.name if accommodation else None,
        ticket_id=str(reservation_model.ticket_id) if reservation_model.ticket_id else None,
        ticket_name=ticket.name if ticket else None,
        pickup_location=reservation_model.pickup_location,
        pickup_time=reservation_model.pickup_time,
        total_amount=reservation_model.total_amount,
        deposit=reservation_model.deposit,
        balance=reservation_model.balance,
        notes=reservation_model.notes,
        status=reservation_model.status,
        created_at=reservation_model.created_at
    )


@router.post("/search", response_model=SearchReservationsResponse)
async def search_reservations(
    request: SearchReservationsRequest,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """
    Search reservations.

    Without dates the search covers today through the configured window;
    ``show_all`` lists every reservation.
    """
    reservation_service = ReservationService(db)

    try:
        reservations, date_from, date_to = await reservation_service.search_reservations(request)

        response_data = SearchReservationsResponse(
            items=[_convert_reservation_to_schema(r) for r in reservations],
            date_from=date_from,
            date_to=date_to,
            sort=effective_sort(request)
        )

        return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))

    except ProblemDetailsException:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error in reservation search",
            extra={"request": request.model_dump(mode="json"), "error": str(e)},
            exc_info=True
        )
        raise HTTPException(status_code=500, detail="Internal server error") from e


@router.post("/get", response_model=Reservation)
async def get_reservation(
    request: IdRequest,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """Get one reservation by ID."""
    reservation_service = ReservationService(db)

    try:
        reservation = await reservation_service.get_reservation_by_id_or_raise(request.id)
        response_data = _convert_reservation_to_schema(reservation)
        return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))

    except ProblemDetailsException:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error retrieving reservation",
            extra={"reservation_id": str(request.id), "error": str(e)},
            exc_info=True
        )
        raise HTTPException(status_code=500, detail="Internal server error") from e


@router.post("/create", response_model=Reservation)
async def create_reservation(
    request: CreateReservationRequest,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """Create a reservation; the balance is derived from total and deposit."""
    reservation_service = ReservationService(db)

    try:
        reservation = await reservation_service.create_reservation(request)
        response_data = _convert_reservation_to_schema(reservation)
        return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))

    except ProblemDetailsException:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error in reservation creation",
            extra={
                "customer_name": request.customer_name,
                "date": request.date.isoformat(),
                "error": str(e)
            },
            exc_info=True
        )
        raise HTTPException(status_code=500, detail="Internal server error") from e


@router.post("/update", response_model=Reservation)
async def update_reservation(
    request: UpdateReservationRequest,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """Update a reservation; omitted fields are kept."""
    reservation_service = ReservationService(db)

    try:
        reservation = await reservation_service.update_reservation(request)
        response_data = _convert_reservation_to_schema(reservation)
        return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))

    except ProblemDetailsException:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error in reservation update",
            extra={"reservation_id": str(request.id), "error": str(e)},
            exc_info=True
        )
        raise HTTPException(status_code=500, detail="Internal server error") from e


@router.post("/status", response_model=Reservation)
async def update_reservation_status(
    request: UpdateReservationStatusRequest,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """Change the status of a reservation, e.g. mark it completed."""
    reservation_service = ReservationService(db)

    try:
        reservation = await reservation_service.update_status(request)
        response_data = _convert_reservation_to_schema(reservation)
        return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))

    except ProblemDetailsException:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error changing reservation status",
            extra={
                "reservation_id": str(request.id),
                "status": request.status.value,
                "error": str(e)
            },
            exc_info=True
        )
        raise HTTPException(status_code=500, detail="Internal server error") from e


@router.post("/delete", response_model=DeleteResponse)
async def delete_reservation(
    request: IdRequest,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """Delete a reservation; linked sales are kept and unlinked."""
    reservation_service = ReservationService(db)

    try:
        await reservation_service.delete_reservation(request.id)
        response_data = DeleteResponse(id=str(request.id))
        return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))

    except ProblemDetailsException:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error in reservation deletion",
            extra={"reservation_id": str(request.id), "error": str(e)},
            exc_info=True
        )
        raise HTTPException(status_code=500, detail="Internal server error") from e


@router.post("/linkable", response_model=LinkableReservationsResponse)
async def list_linkable_reservations(db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    """List the reservations a sale can be linked to."""
    reservation_service = ReservationService(db)

    try:
        reservations = await reservation_service.list_linkable_reservations()

        response_data = LinkableReservationsResponse(
            items=[
                LinkableReservation(id=str(r.id), customer_name=r.customer_name, date=r.date)
                for r in reservations
            ]
        )

        return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))

    except ProblemDetailsException:
        raise

    except Exception as e:
        logger.error("Unexpected error listing linkable reservations", extra={"error": str(e)}, exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error") from e
