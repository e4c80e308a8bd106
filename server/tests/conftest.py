"""Test configuration and fixtures."""

from datetime import date
from uuid import UUID, uuid4

import jwt
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from resort_desk.core.config import settings
from resort_desk.core.database import Base, get_db
from resort_desk.models import *  # noqa: F403 - Import all models
from resort_desk.models.profile import Profile, ProfileRole

# Test database URL (in-memory SQLite for speed)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


def make_token(user_id: UUID, email: str = "staff@example.com", secret: str | None = None) -> str:
    """Issue an HS256 token the way the identity provider does."""
    return jwt.encode(
        {"sub": str(user_id), "email": email},
        secret or settings.bearer_token_secret,
        algorithm="HS256",
    )


def _auth_headers(user_id: UUID, email: str = "staff@example.com", secret: str | None = None) -> dict:
    return {"Authorization": f"Bearer {make_token(user_id, email, secret)}"}


@pytest.fixture
def auth_headers():
    """Build Authorization headers for any caller id."""
    return _auth_headers


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create a test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def test_session(test_engine):
    """Create a test database session."""
    async_session = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def test_app(test_session):
    """Create a test FastAPI application without lifespan or observability."""
    from fastapi import FastAPI
    from fastapi.exceptions import RequestValidationError
    from fastapi.middleware.cors import CORSMiddleware

    from resort_desk.core.exceptions import (
        ProblemDetailsException,
        generic_exception_handler,
        problem_details_handler,
        request_validation_handler,
    )
    from resort_desk.core.middleware import RequestIDMiddleware
    from resort_desk.main import register_routes

    app = FastAPI(
        title="Resort Desk API (Test)",
        description="Test version of the API",
        version="1.0.0-test",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIDMiddleware)

    app.add_exception_handler(ProblemDetailsException, problem_details_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    register_routes(app)

    # Override database dependency
    async def override_get_db():
        yield test_session

    app.dependency_overrides[get_db] = override_get_db

    yield app

    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def test_client(test_app):
    """Create a test HTTP client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture(scope="function")
async def admin_profile(test_session):
    """An admin staff profile stored in the database."""
    profile = Profile(
        id=uuid4(),
        email="admin@example.com",
        name="관리자",
        phone="010-0000-0000",
        role=ProfileRole.ADMIN.value,
    )
    test_session.add(profile)
    await test_session.commit()
    await test_session.refresh(profile)
    return profile


@pytest.fixture
def admin_headers(admin_profile):
    """Authorization headers of the admin profile."""
    return _auth_headers(admin_profile.id, admin_profile.email)


@pytest.fixture
def sample_accommodation_data():
    """Sample accommodation with two room types."""
    return {
        "name": "길조호텔",
        "contact": "033-123-4567",
        "details": "스키장 셔틀 운행",
        "rooms": [
            {"name": "스탠다드", "capacity": 2, "price": 120000},
            {"name": "패밀리", "capacity": 4, "price": 180000, "notes": "온돌"},
        ],
    }


@pytest.fixture
def sample_ticket_data():
    """Sample ticket data for testing."""
    return {"name": "종일권", "price": 65000}


@pytest.fixture
def sample_reservation_data():
    """Sample reservation data for testing."""
    return {
        "reservation_type": "accommodation",
        "customer_name": "홍길동",
        "phone": "010-1234-5678",
        "date": date.today().isoformat(),
        "headcount": 4,
        "pickup_location": "동서울터미널",
        "pickup_time": "14:00",
        "total_amount": 300000,
        "deposit": 100000,
        "notes": "늦은 체크인",
    }


@pytest.fixture
def sample_sale_data():
    """Sample sale data for testing."""
    return {
        "item_name": "스키 렌탈",
        "amount": 45000,
        "category": "ski",
    }
