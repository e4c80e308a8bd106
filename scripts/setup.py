#!/usr/bin/env python3
"""Setup script for the resort desk API: migrate the schema and seed sample data."""

import asyncio
import logging
import sys
from datetime import date, timedelta
from pathlib import Path

# Add the server directory to the Python path
server_dir = Path(__file__).parent.parent / "server"
sys.path.insert(0, str(server_dir))

from alembic import command  # noqa: E402
from alembic.config import Config  # noqa: E402
from sqlalchemy import func, select  # noqa: E402

from resort_desk.core.database import async_session_factory, close_db  # noqa: E402
from resort_desk.models import (  # noqa: E402
    Accommodation,
    Profile,
    ProfileRole,
    Reservation,
    ReservationStatus,
    ReservationType,
    Room,
    Sale,
    SaleCategory,
    Ticket,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def setup_database():
    """Apply all Alembic migrations."""
    logger.info("Running database migrations...")

    alembic_cfg = Config(str(server_dir / "db" / "alembic.ini"))
    command.upgrade(alembic_cfg, "head")

    logger.info("Database migrations completed")


async def create_sample_data():
    """Create a hotel, passes, a few reservations and sales, and an admin profile."""
    logger.info("Creating sample data...")

    async with async_session_factory() as db:
        existing = await db.execute(select(func.count()).select_from(Accommodation))
        if existing.scalar_one() > 0:
            logger.info("Sample data already exists, skipping...")
            return

        try:
            hotel = Accommodation(
                name="길조호텔",
                contact="033-123-4567",
                details="스키장 셔틀 운행",
                rooms=[
                    Room(name="스탠다드", capacity=2, price=120000),
                    Room(name="패밀리", capacity=4, price=180000, notes="온돌"),
                ],
            )
            full_day = Ticket(name="종일권", price=65000)
            half_day = Ticket(name="오전권", price=40000)
            db.add_all([hotel, full_day, half_day])
            await db.flush()

            today = date.today()
            stay = Reservation(
                reservation_type=ReservationType.ACCOMMODATION.value,
                customer_name="홍길동",
                phone="010-1234-5678",
                date=today,
                headcount=4,
                accommodation_id=hotel.id,
                pickup_location="동서울터미널",
                pickup_time="14:00",
                total_amount=300000,
                deposit=100000,
                balance=200000,
                status=ReservationStatus.BOOKED.value,
            )
            visit = Reservation(
                reservation_type=ReservationType.DAY.value,
                customer_name="김철수",
                date=today + timedelta(days=1),
                headcount=2,
                ticket_id=full_day.id,
                total_amount=130000,
                deposit=0,
                balance=130000,
                status=ReservationStatus.BOOKED.value,
            )
            db.add_all([stay, visit])
            await db.flush()

            db.add_all([
                Sale(reservation_id=stay.id, item_name="객실 예약금", amount=100000, category=SaleCategory.ROOM.value),
                Sale(item_name="스키 렌탈", amount=45000, category=SaleCategory.SKI.value),
                Sale(item_name="조식", amount=24000, category=SaleCategory.FOOD.value),
            ])

            db.add(Profile(email="admin@example.com", name="관리자", role=ProfileRole.ADMIN.value))

            await db.commit()
            logger.info("Sample data created successfully!")

        except Exception as e:
            await db.rollback()
            logger.error(f"Failed to create sample data: {e}")
            raise


async def seed():
    try:
        await create_sample_data()
    finally:
        await close_db()


def main():
    """Main setup function."""
    logger.info("Starting resort desk API setup...")

    setup_database()
    asyncio.run(seed())

    logger.info("Setup completed successfully!")
    logger.info("You can now start the API server with: cd server && uvicorn resort_desk.main:app --reload")


if __name__ == "__main__":
    main()
