"""Unit tests for ticket service."""

from datetime import date
from uuid import uuid4

import pytest

from resort_desk.core.exceptions import NotFoundError
from resort_desk.schemas.reservation import CreateReservationRequest
from resort_desk.schemas.ticket import CreateTicketRequest, UpdateTicketRequest
from resort_desk.services.reservation_service import ReservationService
from resort_desk.services.ticket_service import TicketService


@pytest.mark.asyncio
async def test_create_and_list_tickets(test_session, sample_ticket_data):
    """Test creating tickets and listing them."""
    service = TicketService(test_session)

    ticket = await service.create_ticket(CreateTicketRequest(**sample_ticket_data))
    await service.create_ticket(CreateTicketRequest(name="오전권", price=40000))

    assert ticket.id is not None
    assert ticket.price == 65000

    tickets = await service.list_tickets()
    assert {t.name for t in tickets} == {"종일권", "오전권"}


@pytest.mark.asyncio
async def test_update_ticket_keeps_omitted_fields(test_session, sample_ticket_data):
    """Test a partial ticket update."""
    service = TicketService(test_session)
    ticket = await service.create_ticket(CreateTicketRequest(**sample_ticket_data))

    updated = await service.update_ticket(UpdateTicketRequest(id=ticket.id, price=70000))

    assert updated.name == "종일권"
    assert updated.price == 70000


@pytest.mark.asyncio
async def test_update_missing_ticket(test_session):
    """Test updating an unknown ticket."""
    service = TicketService(test_session)

    with pytest.raises(NotFoundError):
        await service.update_ticket(UpdateTicketRequest(id=uuid4(), price=1000))


@pytest.mark.asyncio
async def test_delete_ticket_unlinks_reservations(test_session, sample_ticket_data):
    """Reservations keep existing without the deleted ticket."""
    service = TicketService(test_session)
    reservation_service = ReservationService(test_session)

    ticket = await service.create_ticket(CreateTicketRequest(**sample_ticket_data))
    reservation = await reservation_service.create_reservation(
        CreateReservationRequest(
            reservation_type="day",
            customer_name="김철수",
            date=date(2026, 1, 11),
            ticket_id=ticket.id,
        )
    )
    assert reservation.ticket.name == "종일권"

    await service.delete_ticket(ticket.id)

    assert await service.get_ticket_by_id(ticket.id) is None
    kept = await reservation_service.get_reservation_by_id_or_raise(reservation.id)
    assert kept.ticket_id is None
