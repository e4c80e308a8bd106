"""Ticket service for leisure pass operations."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import NotFoundError
from ..models.reservation import Reservation
from ..models.ticket import Ticket
from ..schemas.ticket import CreateTicketRequest, UpdateTicketRequest

logger = logging.getLogger(__name__)


class TicketService:
    """Service for ticket-related operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_tickets(self) -> list[Ticket]:
        """List all tickets, newest first."""
        stmt = select(Ticket).order_by(Ticket.created_at.desc(), Ticket.name)
        result = await self.db.execute(stmt)
        return list(result.scalars())

    async def get_ticket_by_id(self, ticket_id: UUID) -> Optional[Ticket]:
        """Get ticket by ID, None when missing."""
        return await self.db.get(Ticket, ticket_id)

    async def get_ticket_by_id_or_raise(self, ticket_id: UUID) -> Ticket:
        """
        Get ticket by ID or raise NotFoundError.

        Raises:
            NotFoundError: If ticket not found
        """
        ticket = await self.get_ticket_by_id(ticket_id)
        if not ticket:
            logger.warning("Ticket not found", extra={"ticket_id": str(ticket_id)})
            raise NotFoundError(resource_type="ticket", resource_id=str(ticket_id))
        return ticket

    async def create_ticket(self, request: CreateTicketRequest) -> Ticket:
        """Create a new ticket."""
        ticket = Ticket(name=request.name, price=request.price)

        self.db.add(ticket)
        await self.db.commit()
        await self.db.refresh(ticket)

        logger.info(
            "Ticket created successfully",
            extra={"ticket_id": str(ticket.id), "name": ticket.name, "price": ticket.price}
        )

        return ticket

    async def update_ticket(self, request: UpdateTicketRequest) -> Ticket:
        """
        Apply a partial update to a ticket.

        Raises:
            NotFoundError: If ticket not found
        """
        ticket = await self.get_ticket_by_id_or_raise(request.id)

        if request.name is not None:
            ticket.name = request.name
        if request.price is not None:
            ticket.price = request.price

        await self.db.commit()
        await self.db.refresh(ticket)

        logger.info(
            "Ticket updated",
            extra={"ticket_id": str(ticket.id), "name": ticket.name, "price": ticket.price}
        )

        return ticket

    async def delete_ticket(self, ticket_id: UUID) -> None:
        """
        Delete a ticket; reservations that used it are kept and unlinked.

        Raises:
            NotFoundError: If ticket not found
        """
        ticket = await self.get_ticket_by_id_or_raise(ticket_id)

        await self.db.execute(
            update(Reservation)
            .where(Reservation.ticket_id == ticket_id)
            .values(ticket_id=None)
        )
        await self.db.delete(ticket)
        await self.db.commit()

        logger.info("Ticket deleted", extra={"ticket_id": str(ticket_id)})
