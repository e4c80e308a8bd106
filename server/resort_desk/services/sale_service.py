"""Sale service for revenue line items."""

import logging
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..core.exceptions import NotFoundError
from ..core.observability import metrics_collector
from ..models.reservation import Reservation
from ..models.sale import Sale
from ..schemas.sale import CreateSaleRequest

logger = logging.getLogger(__name__)


class SaleService:
    """Service for sale-related operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_sales(self) -> tuple[list[Sale], int]:
        """
        List all sales with their linked reservation.

        Returns:
            Sales ordered newest first, and the sum of their amounts
        """
        stmt = (
            select(Sale)
            .options(selectinload(Sale.reservation))
            .order_by(Sale.created_at.desc())
        )
        result = await self.db.execute(stmt)
        sales = list(result.scalars())
        return sales, sum(sale.amount for sale in sales)

    async def list_sales_between(self, start: datetime, end: datetime) -> list[Sale]:
        """Sales with ``start <= created_at < end``, oldest first."""
        stmt = (
            select(Sale)
            .where(Sale.created_at >= start, Sale.created_at < end)
            .order_by(Sale.created_at)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars())

    async def get_sale_by_id(self, sale_id: UUID) -> Optional[Sale]:
        """Get sale by ID with its reservation loaded."""
        stmt = (
            select(Sale)
            .options(selectinload(Sale.reservation))
            .where(Sale.id == sale_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_sale_by_id_or_raise(self, sale_id: UUID) -> Sale:
        """
        Get sale by ID or raise NotFoundError.

        Raises:
            NotFoundError: If sale not found
        """
        sale = await self.get_sale_by_id(sale_id)
        if not sale:
            logger.warning("Sale not found", extra={"sale_id": str(sale_id)})
            raise NotFoundError(resource_type="sale", resource_id=str(sale_id))
        return sale

    async def create_sale(self, request: CreateSaleRequest) -> Sale:
        """
        Record a sale, optionally linked to a reservation.

        Raises:
            NotFoundError: If the linked reservation does not exist
        """
        if request.reservation_id is not None:
            if await self.db.get(Reservation, request.reservation_id) is None:
                raise NotFoundError(
                    resource_type="reservation",
                    resource_id=str(request.reservation_id)
                )

        sale = Sale(
            reservation_id=request.reservation_id,
            item_name=request.item_name,
            amount=request.amount,
            category=request.category.value,
        )
        if request.created_at is not None:
            # Naive values are taken as UTC
            created_at = request.created_at
            if created_at.tzinfo is not None:
                created_at = created_at.astimezone(timezone.utc).replace(tzinfo=None)
            sale.created_at = created_at

        self.db.add(sale)
        await self.db.commit()

        metrics_collector.record_sale(sale.category, sale.amount)

        logger.info(
            "Sale recorded",
            extra={
                "sale_id": str(sale.id),
                "category": sale.category,
                "amount": sale.amount,
                "reservation_id": str(sale.reservation_id) if sale.reservation_id else None
            }
        )

        return await self.get_sale_by_id_or_raise(sale.id)

    async def delete_sale(self, sale_id: UUID) -> None:
        """
        Delete a sale.

        Raises:
            NotFoundError: If sale not found
        """
        sale = await self.get_sale_by_id_or_raise(sale_id)
        await self.db.delete(sale)
        await self.db.commit()

        logger.info("Sale deleted", extra={"sale_id": str(sale_id)})
