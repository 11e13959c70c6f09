"""
Fixtures for integration tests.

Provides:
- In-memory SQLite database with seeded tenors
- Test client for FastAPI app wired to that database
- Helpers to onboard verified customers with limits
"""

from functools import partial
from typing import AsyncGenerator, Awaitable, Callable, Dict, Optional

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from multifinance.main import app
from multifinance.core.dependencies import get_unit_of_work_factory
from multifinance.infrastructure.database import Base, get_db_session, seed_tenors
from multifinance.infrastructure.locking import KeyedLock
from multifinance.infrastructure.repositories import SqlAlchemyUnitOfWork
from multifinance.service.financing import financing_settings


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory SQLite async engine with the schema and tenors."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with AsyncSession(engine, expire_on_commit=False) as session:
        await seed_tenors(session, financing_settings.default_tenors)
        await session.commit()

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def test_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def customer_locks() -> KeyedLock:
    """A lock registry private to one test."""
    return KeyedLock()


@pytest.fixture
def uow_factory(session_factory, customer_locks):
    return partial(SqlAlchemyUnitOfWork, session_factory, customer_locks)


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
    uow_factory,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client backed by the in-memory database.

    Every request gets its own session and every unit of work its own
    session, as in production, so concurrent requests behave the same way.
    """
    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    def override_get_unit_of_work_factory():
        return uow_factory

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_unit_of_work_factory] = override_get_unit_of_work_factory

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Helper Fixtures
# =============================================================================

def customer_payload(nik: str = "3201010101900001", **overrides) -> dict:
    """Registration body for a customer."""
    payload = {
        "nik": nik,
        "full_name": "Budi Santoso",
        "legal_name": "Budi Santoso",
        "birth_place": "Bandung",
        "birth_date": "1990-01-01",
        "salary": 8500000,
        "ktp_photo_url": f"https://img.example.com/ktp/{nik}.jpg",
        "selfie_photo_url": f"https://img.example.com/selfie/{nik}.jpg",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def register_payload() -> Callable[..., dict]:
    return customer_payload


OnboardCustomer = Callable[..., Awaitable[int]]


@pytest.fixture
def onboard_customer(client: AsyncClient) -> OnboardCustomer:
    """
    Register a customer, record a verification decision and set limits.

    Returns the new customer's id.
    """
    async def _onboard(
        nik: str = "3201010101900001",
        limits: Optional[Dict[int, float]] = None,
        status: Optional[str] = "VERIFIED",
    ) -> int:
        response = await client.post("/v1/customers", json=customer_payload(nik))
        assert response.status_code == 201, response.text
        customer_id = response.json()["id"]

        if status is not None:
            response = await client.post(
                f"/v1/admin/customers/{customer_id}/verify",
                json={"status": status},
            )
            assert response.status_code == 200, response.text

        if limits:
            response = await client.post(
                f"/v1/admin/customers/{customer_id}/limits",
                json={
                    "limits": [
                        {"tenor_months": months, "limit_amount": amount}
                        for months, amount in limits.items()
                    ]
                },
            )
            assert response.status_code == 200, response.text

        return customer_id

    return _onboard


def transaction_payload(
    nik: str = "3201010101900001",
    tenor_months: int = 6,
    otr_amount: float = 40000,
    admin_fee: float = 0,
    asset_name: str = "Honda Vario 125",
) -> dict:
    return {
        "customer_nik": nik,
        "tenor_months": tenor_months,
        "asset_name": asset_name,
        "otr_amount": otr_amount,
        "admin_fee": admin_fee,
    }


@pytest.fixture
def make_transaction_payload() -> Callable[..., dict]:
    return transaction_payload
