"""Sale router for revenue line items."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.exceptions import ProblemDetailsException
from ..schemas.common import DeleteResponse, IdRequest
from ..schemas.sale import CreateSaleRequest, Sale, SaleListResponse
from ..services.sale_service import SaleService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/sale", tags=["sale"])

DB_DEPENDENCY = Depends(get_db)


def _convert_sale_to_schema(sale_model) -> Sale:
    """Convert sale model (reservation loaded) to schema."""
    reservation = sale_model.reservation
    return Sale(
        id=str(sale_model.id),
        reservation_id=str(sale_model.reservation_id) if sale_model.reservation_id else None,
        customer_name=reservation.customer_name if reservation else None,
        item_name=sale_model.item_name,
        amount=sale_model.amount,
        category=sale_model.category,
        created_at=sale_model.created_at
    )


@router.post("/list", response_model=SaleListResponse)
async def list_sales(db: AsyncSession = DB_DEPENDENCY) -> JSONResponse:
    """List all sales, newest first, with their total."""
    sale_service = SaleService(db)

    try:
        sales, total_amount = await sale_service.list_sales()
        response_data = SaleListResponse(
            items=[_convert_sale_to_schema(s) for s in sales],
            total_amount=total_amount
        )
        return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))

    except ProblemDetailsException:
        raise

    except Exception as e:
        logger.error("Unexpected error listing sales", extra={"error": str(e)}, exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error") from e


@router.post("/create", response_model=Sale)
async def create_sale(
    request: CreateSaleRequest,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """
    Record a sale.

    ``reservation_id`` may be omitted, empty or "none" for walk-in sales.
    """
    sale_service = SaleService(db)

    try:
        sale = await sale_service.create_sale(request)
        response_data = _convert_sale_to_schema(sale)
        return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))

    except ProblemDetailsException:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error recording sale",
            extra={
                "item_name": request.item_name,
                "amount": request.amount,
                "error": str(e)
            },
            exc_info=True
        )
        raise HTTPException(status_code=500, detail="Internal server error") from e


@router.post("/delete", response_model=DeleteResponse)
async def delete_sale(
    request: IdRequest,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """Delete a sale."""
    sale_service = SaleService(db)

    try:
        await sale_service.delete_sale(request.id)
        response_data = DeleteResponse(id=str(request.id))
        return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))

    except ProblemDetailsException:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error deleting sale",
            extra={"sale_id": str(request.id), "error": str(e)},
            exc_info=True
        )
        raise HTTPException(status_code=500, detail="Internal server error") from e
