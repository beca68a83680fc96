"""API Dependencies"""

from typing import Annotated, AsyncGenerator
from fastapi import Depends, Path, Request
from sqlalchemy.ext.asyncio import AsyncSession

from utilbill.database import Database
from utilbill.models.base import MAX_ID
from utilbill.services.billing_store import BillingStore
from utilbill.services.settlement_service import SettlementService

# Positive ids that fit the INTEGER key columns
RecordId = Annotated[int, Path(gt=0, le=MAX_ID)]


def get_database(request: Request) -> Database:
    """Database opened by the application lifespan"""
    return request.app.state.database


async def get_db(database: Database = Depends(get_database)) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency function to get a database session.

    Services commit their own work; anything left open is rolled back.

    Yields:
        AsyncSession: Database session
    """
    async with database.session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


def get_settlement_service(database: Database = Depends(get_database)) -> SettlementService:
    """Settlement engine bound to the application's store"""
    return SettlementService(BillingStore(database.session_factory))
