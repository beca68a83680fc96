"""Shared pytest fixtures for unit and integration tests."""

import os
from datetime import date
from decimal import Decimal
from typing import Optional

# Must be set before utilbill.config is imported
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select

from utilbill.api.deps import get_database
from utilbill.config import settings
from utilbill.database import Database
from utilbill.main import app
from utilbill.models import Bill, Meter, Payment, User, Utility


@pytest.fixture
def api_base() -> str:
    """Base URL for API requests."""
    return f"http://test{settings.API_V1_PREFIX}"


@pytest.fixture
async def database(tmp_path):
    """Fresh SQLite file database per test (file-backed so several connections can share it)."""
    db = Database(
        f"sqlite+aiosqlite:///{tmp_path / 'billing.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
    )
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
async def async_client(database: Database, api_base: str):
    """Async HTTP client against the app, bound to the test database."""
    app.dependency_overrides[get_database] = lambda: database
    transport = ASGITransport(app=app)
    client = AsyncClient(transport=transport, base_url=api_base, timeout=30.0)
    yield client
    await client.aclose()
    app.dependency_overrides.clear()


@pytest.fixture
async def meter_id(database: Database) -> int:
    """A user with one electricity meter."""
    async with database.session_factory() as session:
        user = User(name="Jane Doe", email="jane@example.com", password="not-a-hash", role="user")
        utility = Utility(utility_name="Electricity")
        session.add_all([user, utility])
        await session.flush()
        meter = Meter(meter_number="MTR-0001", user_id=user.user_id, utility_id=utility.utility_id)
        session.add(meter)
        await session.commit()
        return meter.meter_id


@pytest.fixture
def make_bill(database: Database, meter_id: int):
    """Factory inserting a bill and returning its id."""

    async def _make(status: str = "unpaid", amount: str = "450.00", bill_id: Optional[int] = None) -> int:
        async with database.session_factory() as session:
            bill = Bill(
                bill_id=bill_id,
                meter_id=meter_id,
                bill_month=date(2026, 9, 1),
                amount=Decimal(amount),
                due_date=date(2026, 10, 15),
                status=status,
            )
            session.add(bill)
            await session.commit()
            return bill.bill_id

    return _make


async def get_bill_status(database: Database, bill_id: int) -> Optional[str]:
    async with database.session_factory() as session:
        return await session.scalar(select(Bill.status).where(Bill.bill_id == bill_id))


async def count_payments(database: Database, bill_id: Optional[int] = None) -> int:
    async with database.session_factory() as session:
        stmt = select(func.count()).select_from(Payment)
        if bill_id is not None:
            stmt = stmt.where(Payment.bill_id == bill_id)
        return await session.scalar(stmt)
