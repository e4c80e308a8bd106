"""Unit tests for sale service."""

from datetime import date, datetime, timedelta, timezone
from uuid import uuid4

import pytest

from resort_desk.core.exceptions import NotFoundError
from resort_desk.schemas.reservation import CreateReservationRequest
from resort_desk.schemas.sale import CreateSaleRequest
from resort_desk.services.reservation_service import ReservationService
from resort_desk.services.sale_service import SaleService


@pytest.mark.asyncio
async def test_create_walk_in_sale(test_session, sample_sale_data):
    """A sale without a reservation is a walk-in sale."""
    service = SaleService(test_session)

    sale = await service.create_sale(CreateSaleRequest(**sample_sale_data, reservation_id="none"))

    assert sale.id is not None
    assert sale.reservation_id is None
    assert sale.reservation is None
    assert sale.category == "ski"
    assert sale.created_at is not None


@pytest.mark.asyncio
async def test_create_linked_sale(test_session):
    """A linked sale exposes the reservation's customer."""
    reservation = await ReservationService(test_session).create_reservation(
        CreateReservationRequest(customer_name="홍길동", date=date(2026, 10, 19))
    )
    service = SaleService(test_session)

    sale = await service.create_sale(
        CreateSaleRequest(reservation_id=str(reservation.id), item_name="객실료", amount=120000, category="room")
    )

    assert sale.reservation_id == reservation.id
    assert sale.reservation.customer_name == "홍길동"


@pytest.mark.asyncio
async def test_sale_times_stored_in_utc(test_session, sample_sale_data):
    """Offset timestamps and the default both land as naive UTC."""
    service = SaleService(test_session)
    seoul = timezone(timedelta(hours=9))

    back_dated = await service.create_sale(
        CreateSaleRequest(**sample_sale_data, created_at=datetime(2026, 10, 19, 9, 0, tzinfo=seoul))
    )
    naive = await service.create_sale(
        CreateSaleRequest(**sample_sale_data, created_at=datetime(2026, 10, 19, 9, 0))
    )
    before = datetime.now(timezone.utc).replace(tzinfo=None)
    live = await service.create_sale(CreateSaleRequest(**sample_sale_data))
    after = datetime.now(timezone.utc).replace(tzinfo=None)

    assert back_dated.created_at == datetime(2026, 10, 19, 0, 0)
    assert naive.created_at == datetime(2026, 10, 19, 9, 0)
    assert live.created_at.tzinfo is None
    assert before - timedelta(seconds=1) <= live.created_at <= after + timedelta(seconds=1)


@pytest.mark.asyncio
async def test_create_sale_unknown_reservation(test_session, sample_sale_data):
    """Test linking a sale to an unknown reservation."""
    service = SaleService(test_session)

    with pytest.raises(NotFoundError):
        await service.create_sale(CreateSaleRequest(**sample_sale_data, reservation_id=uuid4()))


@pytest.mark.asyncio
async def test_list_sales_newest_first_with_total(test_session):
    """Test the sale list order and total."""
    service = SaleService(test_session)
    await service.create_sale(
        CreateSaleRequest(item_name="식사", amount=30000, category="food", created_at=datetime(2026, 10, 1, 12, 0))
    )
    await service.create_sale(
        CreateSaleRequest(item_name="리프트권", amount=70000, category="ski", created_at=datetime(2026, 10, 3, 9, 0))
    )
    await service.create_sale(
        CreateSaleRequest(item_name="기념품", amount=5000, created_at=datetime(2026, 10, 2, 18, 30))
    )

    sales, total = await service.list_sales()

    assert [s.item_name for s in sales] == ["리프트권", "기념품", "식사"]
    assert total == 105000
    assert sales[1].category == "other"


@pytest.mark.asyncio
async def test_list_sales_between(test_session):
    """The window is inclusive at the start and exclusive at the end."""
    service = SaleService(test_session)
    await service.create_sale(
        CreateSaleRequest(item_name="자정", amount=1000, created_at=datetime(2026, 10, 19, 0, 0))
    )
    await service.create_sale(
        CreateSaleRequest(item_name="다음날", amount=1000, created_at=datetime(2026, 10, 20, 0, 0))
    )

    sales = await service.list_sales_between(datetime(2026, 10, 19), datetime(2026, 10, 20))

    assert [s.item_name for s in sales] == ["자정"]


@pytest.mark.asyncio
async def test_delete_sale(test_session, sample_sale_data):
    """Test deleting a sale."""
    service = SaleService(test_session)
    sale = await service.create_sale(CreateSaleRequest(**sample_sale_data))

    await service.delete_sale(sale.id)

    assert await service.get_sale_by_id(sale.id) is None
    with pytest.raises(NotFoundError):
        await service.delete_sale(sale.id)
