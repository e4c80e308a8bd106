"""Accommodation and room routers."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.exceptions import ProblemDetailsException
from ..schemas.accommodation import (
    Accommodation,
    AccommodationListResponse,
    AddRoomRequest,
    CreateAccommodationRequest,
    Room,
    UpdateAccommodationRequest,
    UpdateRoomRequest,
)
from ..schemas.common import DeleteResponse, IdRequest
from ..services.accommodation_service import AccommodationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/accommodation", tags=["accommodation"])
room_router = APIRouter(prefix="/v1/room", tags=["room"])

DB_DEPENDENCY = Depends(get_db)


def _convert_room_to_schema(room_model) -> Room:
    """Convert room model to schema."""
    return Room(
        id=str(room_model.id),
        accommodation_id=str(room_model.accommodation_id),
        name=room_model.name,
        capacity=room_model.capacity,
        price=room_model.price,
        notes=room_model.notes
    )


def _convert_accommodation_to_schema(accommodation_model) -> Accommodation:
    """Convert accommodation model (rooms loaded) to schema."""
    return Accommodation(
        id=str(accommodation_model.id),
        name=accommodation_model.name,
        contact=accommodation_model.contact,
        details=accommodation_model.details,
        rooms=[_convert_room_to_schema(room) for room in accommodation_model.rooms],
        created_at=accommodation_model.created_at
    )


def _internal_error(message: str, error: Exception, **context) -> HTTPException:
    logger.error(message, extra={**context, "error": str(error)}, exc_info=True)
    return HTTPException(status_code=500, detail="Internal server error")


@router.post("/list", response_model=AccommodationListResponse)
async def list_accommodations(db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    """List all accommodations with their room types, newest first."""
    service = AccommodationService(db)

    try:
        accommodations = await service.list_accommodations()
        response_data = AccommodationListResponse(
            items=[_convert_accommodation_to_schema(a) for a in accommodations]
        )
        return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))

    except ProblemDetailsException:
        raise

    except Exception as e:
        raise _internal_error("Unexpected error listing accommodations", e) from e


@router.post("/get", response_model=Accommodation)
async def get_accommodation(
    request: IdRequest,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """Get one accommodation by ID."""
    service = AccommodationService(db)

    try:
        accommodation = await service.get_accommodation_by_id_or_raise(request.id)
        response_data = _convert_accommodation_to_schema(accommodation)
        return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))

    except ProblemDetailsException:
        raise

    except Exception as e:
        raise _internal_error(
            "Unexpected error retrieving accommodation", e, accommodation_id=str(request.id)
        ) from e


@router.post("/create", response_model=Accommodation)
async def create_accommodation(
    request: CreateAccommodationRequest,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """Create an accommodation, optionally with its initial room types."""
    service = AccommodationService(db)

    try:
        accommodation = await service.create_accommodation(request)
        response_data = _convert_accommodation_to_schema(accommodation)
        return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))

    except ProblemDetailsException:
        raise

    except Exception as e:
        raise _internal_error(
            "Unexpected error in accommodation creation", e, name=request.name
        ) from e


@router.post("/update", response_model=Accommodation)
async def update_accommodation(
    request: UpdateAccommodationRequest,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """Update accommodation fields; omitted fields are kept."""
    service = AccommodationService(db)

    try:
        accommodation = await service.update_accommodation(request)
        response_data = _convert_accommodation_to_schema(accommodation)
        return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))

    except ProblemDetailsException:
        raise

    except Exception as e:
        raise _internal_error(
            "Unexpected error in accommodation update", e, accommodation_id=str(request.id)
        ) from e


@router.post("/delete", response_model=DeleteResponse)
async def delete_accommodation(
    request: IdRequest,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """
    Delete an accommodation and its room types.

    Reservations that referenced it are kept without a linked accommodation.
    """
    service = AccommodationService(db)

    try:
        await service.delete_accommodation(request.id)
        response_data = DeleteResponse(id=str(request.id))
        return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))

    except ProblemDetailsException:
        raise

    except Exception as e:
        raise _internal_error(
            "Unexpected error in accommodation deletion", e, accommodation_id=str(request.id)
        ) from e


@room_router.post("/add", response_model=Room)
async def add_room(
    request: AddRoomRequest,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """Add a room type to an accommodation."""
    service = AccommodationService(db)

    try:
        room = await service.add_room(request)
        response_data = _convert_room_to_schema(room)
        return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))

    except ProblemDetailsException:
        raise

    except Exception as e:
        raise _internal_error(
            "Unexpected error adding room", e, accommodation_id=str(request.accommodation_id)
        ) from e


@room_router.post("/update", response_model=Room)
async def update_room(
    request: UpdateRoomRequest,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """Update room type fields; omitted fields are kept."""
    service = AccommodationService(db)

    try:
        room = await service.update_room(request)
        response_data = _convert_room_to_schema(room)
        return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))

    except ProblemDetailsException:
        raise

    except Exception as e:
        raise _internal_error("Unexpected error updating room", e, room_id=str(request.id)) from e


@room_router.post("/delete", response_model=DeleteResponse)
async def delete_room(
    request: IdRequest,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """Delete a room type."""
    service = AccommodationService(db)

    try:
        await service.delete_room(request.id)
        response_data = DeleteResponse(id=str(request.id))
        return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))

    except ProblemDetailsException:
        raise

    except Exception as e:
        raise _internal_error("Unexpected error deleting room", e, room_id=str(request.id)) from e
