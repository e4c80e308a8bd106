"""Unit tests for accommodation service."""

from datetime import date
from uuid import uuid4

import pytest

from resort_desk.core.exceptions import NotFoundError
from resort_desk.schemas.accommodation import (
    AddRoomRequest,
    CreateAccommodationRequest,
    UpdateAccommodationRequest,
    UpdateRoomRequest,
)
from resort_desk.schemas.reservation import CreateReservationRequest
from resort_desk.services.accommodation_service import AccommodationService
from resort_desk.services.reservation_service import ReservationService


@pytest.mark.asyncio
async def test_create_accommodation_with_rooms(test_session, sample_accommodation_data):
    """Test creating an accommodation together with its room types."""
    service = AccommodationService(test_session)

    accommodation = await service.create_accommodation(
        CreateAccommodationRequest(**sample_accommodation_data)
    )

    assert accommodation.id is not None
    assert accommodation.name == "길조호텔"
    assert accommodation.created_at is not None
    assert sorted(room.name for room in accommodation.rooms) == ["스탠다드", "패밀리"]
    family = next(room for room in accommodation.rooms if room.name == "패밀리")
    assert family.capacity == 4
    assert family.notes == "온돌"


@pytest.mark.asyncio
async def test_room_defaults(test_session):
    """Rooms default to two guests and a zero price."""
    service = AccommodationService(test_session)
    accommodation = await service.create_accommodation(
        CreateAccommodationRequest(name="산장", rooms=[{"name": "다락방"}])
    )

    room = accommodation.rooms[0]
    assert room.capacity == 2
    assert room.price == 0


@pytest.mark.asyncio
async def test_get_accommodation_not_found(test_session):
    """Test that a missing accommodation raises NotFoundError."""
    service = AccommodationService(test_session)

    assert await service.get_accommodation_by_id(uuid4()) is None
    with pytest.raises(NotFoundError):
        await service.get_accommodation_by_id_or_raise(uuid4())


@pytest.mark.asyncio
async def test_update_accommodation_is_partial(test_session, sample_accommodation_data):
    """Omitted fields keep their values; a null name is ignored."""
    service = AccommodationService(test_session)
    created = await service.create_accommodation(
        CreateAccommodationRequest(**sample_accommodation_data)
    )

    updated = await service.update_accommodation(
        UpdateAccommodationRequest(id=created.id, name=None, contact="033-999-0000")
    )

    assert updated.name == "길조호텔"
    assert updated.contact == "033-999-0000"
    assert updated.details == sample_accommodation_data["details"]
    assert len(updated.rooms) == 2


@pytest.mark.asyncio
async def test_list_accommodations(test_session, sample_accommodation_data):
    """Test listing accommodations includes their rooms."""
    service = AccommodationService(test_session)
    await service.create_accommodation(CreateAccommodationRequest(**sample_accommodation_data))
    await service.create_accommodation(CreateAccommodationRequest(name="바다펜션"))

    accommodations = await service.list_accommodations()

    assert {a.name for a in accommodations} == {"길조호텔", "바다펜션"}
    hotel = next(a for a in accommodations if a.name == "길조호텔")
    assert len(hotel.rooms) == 2


@pytest.mark.asyncio
async def test_room_lifecycle(test_session):
    """Test adding, updating and deleting a room type."""
    service = AccommodationService(test_session)
    accommodation = await service.create_accommodation(CreateAccommodationRequest(name="길조호텔"))

    room = await service.add_room(
        AddRoomRequest(accommodation_id=accommodation.id, name="스위트", capacity=6, price=350000)
    )
    assert room.accommodation_id == accommodation.id

    room = await service.update_room(UpdateRoomRequest(id=room.id, price=320000))
    assert room.price == 320000
    assert room.capacity == 6

    reloaded = await service.get_accommodation_by_id_or_raise(accommodation.id)
    assert [r.name for r in reloaded.rooms] == ["스위트"]

    await service.delete_room(room.id)
    reloaded = await service.get_accommodation_by_id_or_raise(accommodation.id)
    assert reloaded.rooms == []


@pytest.mark.asyncio
async def test_add_room_to_missing_accommodation(test_session):
    """Test adding a room to an unknown accommodation."""
    service = AccommodationService(test_session)

    with pytest.raises(NotFoundError):
        await service.add_room(AddRoomRequest(accommodation_id=uuid4(), name="스탠다드"))


@pytest.mark.asyncio
async def test_delete_accommodation_unlinks_reservations(test_session, sample_accommodation_data):
    """Reservations survive the deletion of their accommodation."""
    service = AccommodationService(test_session)
    reservation_service = ReservationService(test_session)

    accommodation = await service.create_accommodation(
        CreateAccommodationRequest(**sample_accommodation_data)
    )
    reservation = await reservation_service.create_reservation(
        CreateReservationRequest(
            customer_name="홍길동",
            date=date(2026, 1, 10),
            accommodation_id=accommodation.id,
        )
    )

    await service.delete_accommodation(accommodation.id)

    assert await service.get_accommodation_by_id(accommodation.id) is None
    kept = await reservation_service.get_reservation_by_id_or_raise(reservation.id)
    assert kept.accommodation_id is None
    assert kept.accommodation is None
