"""Ticket router for leisure pass management."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.exceptions import ProblemDetailsException
from ..schemas.common import DeleteResponse, IdRequest
from ..schemas.ticket import CreateTicketRequest, Ticket, TicketListResponse, UpdateTicketRequest
from ..services.ticket_service import TicketService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/ticket", tags=["ticket"])

DB_DEPENDENCY = Depends(get_db)


def _convert_ticket_to_schema(ticket_model) -> Ticket:
    """Convert ticket model to schema."""
    return Ticket(
        id=str(ticket_model.id),
        name=ticket_model.name,
        price=ticket_model.price
    )


@router.post("/list", response_model=TicketListResponse)
async def list_tickets(db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    """List all tickets, newest first."""
    ticket_service = TicketService(db)

    try:
        tickets = await ticket_service.list_tickets()
        response_data = TicketListResponse(items=[_convert_ticket_to_schema(t) for t in tickets])
        return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))

    except ProblemDetailsException:
        raise

    except Exception as e:
        logger.error("Unexpected error listing tickets", extra={"error": str(e)}, exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error") from e


@router.post("/create", response_model=Ticket)
async def create_ticket(
    request: CreateTicketRequest,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """Create a new ticket."""
    ticket_service = TicketService(db)

    try:
        ticket = await ticket_service.create_ticket(request)
        response_data = _convert_ticket_to_schema(ticket)
        return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))

    except ProblemDetailsException:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error in ticket creation",
            extra={"name": request.name, "error": str(e)},
            exc_info=True
        )
        raise HTTPException(status_code=500, detail="Internal server error") from e


@router.post("/update", response_model=Ticket)
async def update_ticket(
    request: UpdateTicketRequest,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """Update ticket name and/or price."""
    ticket_service = TicketService(db)

    try:
        ticket = await ticket_service.update_ticket(request)
        response_data = _convert_ticket_to_schema(ticket)
        return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))

    except ProblemDetailsException:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error in ticket update",
            extra={"ticket_id": str(request.id), "error": str(e)},
            exc_info=True
        )
        raise HTTPException(status_code=500, detail="Internal server error") from e


@router.post("/delete", response_model=DeleteResponse)
async def delete_ticket(
    request: IdRequest,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """Delete a ticket; reservations that used it lose the link."""
    ticket_service = TicketService(db)

    try:
        await ticket_service.delete_ticket(request.id)
        response_data = DeleteResponse(id=str(request.id))
        return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))

    except ProblemDetailsException:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error in ticket deletion",
            extra={"ticket_id": str(request.id), "error": str(e)},
            exc_info=True
        )
        raise HTTPException(status_code=500, detail="Internal server error") from e
