"""Accommodation service for lodging and room type operations."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..core.exceptions import NotFoundError
from ..models.accommodation import Accommodation, Room
from ..models.reservation import Reservation
from ..schemas.accommodation import (
    AddRoomRequest,
    CreateAccommodationRequest,
    UpdateAccommodationRequest,
    UpdateRoomRequest,
)

logger = logging.getLogger(__name__)

# Columns that may not be cleared by sending null
_REQUIRED_ACCOMMODATION_FIELDS = {"name"}
_REQUIRED_ROOM_FIELDS = {"name", "capacity", "price"}


class AccommodationService:
    """Service for accommodation-related operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_accommodations(self) -> list[Accommodation]:
        """
        List all accommodations with their room types.

        Returns:
            Accommodations ordered newest first
        """
        stmt = (
            select(Accommodation)
            .options(selectinload(Accommodation.rooms))
            .order_by(Accommodation.created_at.desc(), Accommodation.name)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars())

    async def get_accommodation_by_id(self, accommodation_id: UUID) -> Optional[Accommodation]:
        """
        Get accommodation by ID with its rooms loaded.

        Args:
            accommodation_id: Accommodation ID to search for

        Returns:
            Accommodation if found, None otherwise
        """
        stmt = (
            select(Accommodation)
            .options(selectinload(Accommodation.rooms))
            .where(Accommodation.id == accommodation_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_accommodation_by_id_or_raise(self, accommodation_id: UUID) -> Accommodation:
        """
        Get accommodation by ID or raise NotFoundError.

        Raises:
            NotFoundError: If accommodation not found
        """
        accommodation = await self.get_accommodation_by_id(accommodation_id)
        if not accommodation:
            logger.warning(
                "Accommodation not found",
                extra={"accommodation_id": str(accommodation_id)}
            )
            raise NotFoundError(
                resource_type="accommodation",
                resource_id=str(accommodation_id)
            )
        return accommodation

    async def create_accommodation(self, request: CreateAccommodationRequest) -> Accommodation:
        """
        Create a new accommodation, optionally with its initial room types.

        Args:
            request: Accommodation creation request

        Returns:
            Created accommodation entity
        """
        accommodation = Accommodation(
            name=request.name,
            contact=request.contact,
            details=request.details,
            rooms=[Room(**room.model_dump()) for room in request.rooms],
        )

        self.db.add(accommodation)
        await self.db.commit()

        logger.info(
            "Accommodation created successfully",
            extra={
                "accommodation_id": str(accommodation.id),
                "name": accommodation.name,
                "rooms": len(request.rooms)
            }
        )

        return await self.get_accommodation_by_id_or_raise(accommodation.id)

    async def update_accommodation(self, request: UpdateAccommodationRequest) -> Accommodation:
        """
        Apply a partial update to an accommodation.

        Raises:
            NotFoundError: If accommodation not found
        """
        accommodation = await self.get_accommodation_by_id_or_raise(request.id)

        changes = request.model_dump(exclude_unset=True, exclude={"id"})
        for field, value in changes.items():
            if value is None and field in _REQUIRED_ACCOMMODATION_FIELDS:
                continue
            setattr(accommodation, field, value)

        await self.db.commit()

        logger.info(
            "Accommodation updated",
            extra={"accommodation_id": str(request.id), "fields": sorted(changes)}
        )

        return await self.get_accommodation_by_id_or_raise(request.id)

    async def delete_accommodation(self, accommodation_id: UUID) -> None:
        """
        Delete an accommodation and its rooms.

        Reservations that referenced it are kept and unlinked.

        Raises:
            NotFoundError: If accommodation not found
        """
        accommodation = await self.get_accommodation_by_id_or_raise(accommodation_id)

        unlinked = await self.db.execute(
            update(Reservation)
            .where(Reservation.accommodation_id == accommodation_id)
            .values(accommodation_id=None)
        )
        await self.db.delete(accommodation)
        await self.db.commit()

        logger.info(
            "Accommodation deleted",
            extra={
                "accommodation_id": str(accommodation_id),
                "unlinked_reservations": unlinked.rowcount
            }
        )

    async def get_room_by_id_or_raise(self, room_id: UUID) -> Room:
        """
        Get room by ID or raise NotFoundError.

        Raises:
            NotFoundError: If room not found
        """
        room = await self.db.get(Room, room_id)
        if not room:
            logger.warning("Room not found", extra={"room_id": str(room_id)})
            raise NotFoundError(resource_type="room", resource_id=str(room_id))
        return room

    async def add_room(self, request: AddRoomRequest) -> Room:
        """
        Add a room type to an accommodation.

        Raises:
            NotFoundError: If accommodation not found
        """
        await self.get_accommodation_by_id_or_raise(request.accommodation_id)

        room = Room(**request.model_dump())
        self.db.add(room)
        await self.db.commit()
        await self.db.refresh(room)

        logger.info(
            "Room added",
            extra={
                "room_id": str(room.id),
                "accommodation_id": str(room.accommodation_id),
                "name": room.name
            }
        )

        return room

    async def update_room(self, request: UpdateRoomRequest) -> Room:
        """
        Apply a partial update to a room type.

        Raises:
            NotFoundError: If room not found
        """
        room = await self.get_room_by_id_or_raise(request.id)

        changes = request.model_dump(exclude_unset=True, exclude={"id"})
        for field, value in changes.items():
            if value is None and field in _REQUIRED_ROOM_FIELDS:
                continue
            setattr(room, field, value)

        await self.db.commit()
        await self.db.refresh(room)

        logger.info("Room updated", extra={"room_id": str(room.id), "fields": sorted(changes)})

        return room

    async def delete_room(self, room_id: UUID) -> None:
        """
        Delete a room type.

        Raises:
            NotFoundError: If room not found
        """
        room = await self.get_room_by_id_or_raise(room_id)
        await self.db.delete(room)
        await self.db.commit()

        logger.info("Room deleted", extra={"room_id": str(room_id)})
