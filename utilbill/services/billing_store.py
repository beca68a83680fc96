"""Billing Store - transactional data access used by payment settlement"""

from datetime import datetime
from typing import Optional

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from utilbill.core.db_errors import ConstraintKind, classify_integrity_error
from utilbill.core.logging import get_logger
from utilbill.models.billing import Bill, Payment
from utilbill.models.enums import BillStatus

logger = get_logger(__name__)

# Drivers raise OverflowError for ints beyond the column type before any SQL runs
_STORE_ERRORS = (SQLAlchemyError, OverflowError)


class StoreError(Exception):
    """A store round trip failed. The original SQLAlchemy error is chained."""


class UniqueViolation(StoreError):
    """Insert rejected by a uniqueness constraint"""

    def __init__(self, field: str) -> None:
        super().__init__(f"unique constraint violated on {field}")
        self.field = field


class SettlementTransaction:
    """
    One open store transaction.

    Obtained from BillingStore.begin(); the caller must finish it with
    commit() or rollback() and always call close().
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def insert_payment(
        self,
        bill_id: int,
        payment_method: str,
        transaction_ref: Optional[str],
        payment_date: datetime,
    ) -> int:
        """Insert a payment row and return its id"""
        payment = Payment(
            bill_id=bill_id,
            payment_method=payment_method,
            transaction_ref=transaction_ref,
            payment_date=payment_date,
        )
        self._session.add(payment)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            violation = classify_integrity_error(exc)
            if violation is not None and violation.kind == ConstraintKind.UNIQUE:
                raise UniqueViolation(violation.column or violation.constraint or "unknown") from exc
            raise StoreError("payment insert failed") from exc
        except _STORE_ERRORS as exc:
            raise StoreError("payment insert failed") from exc
        return payment.payment_id

    async def update_bill_status(self, bill_id: int, status: BillStatus) -> int:
        """Set the bill status and return the number of rows affected"""
        stmt = (
            update(Bill)
            .where(Bill.bill_id == bill_id)
            .values(status=status.value)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self._session.execute(stmt)
        except _STORE_ERRORS as exc:
            raise StoreError("bill status update failed") from exc
        return result.rowcount

    async def commit(self) -> None:
        try:
            await self._session.commit()
        except _STORE_ERRORS as exc:
            raise StoreError("commit failed") from exc

    async def rollback(self) -> None:
        try:
            await self._session.rollback()
        except _STORE_ERRORS as exc:
            raise StoreError("rollback failed") from exc

    async def close(self) -> None:
        """Release the connection. Rolls back anything still open."""
        try:
            await self._session.close()
        except SQLAlchemyError:
            # The unit of work has already been committed or rolled back here
            logger.warning("Failed to release store session", exc_info=True)


class BillingStore:
    """Narrow store interface consumed by SettlementService"""

    def __init__(self, session_factory: async_sessionmaker) -> None:
        self._session_factory = session_factory

    async def find_bill_by_id(self, bill_id: int) -> Optional[Bill]:
        """Short read outside any settlement transaction"""
        try:
            async with self._session_factory() as session:
                return await session.get(Bill, bill_id)
        except _STORE_ERRORS as exc:
            raise StoreError("bill lookup failed") from exc

    async def begin(self) -> SettlementTransaction:
        """Open a session and start its transaction on a live connection"""
        session = self._session_factory()
        try:
            await session.begin()
            # Acquire the connection now so BEGIN is emitted here, not at first write
            await session.connection()
        except _STORE_ERRORS as exc:
            await session.close()
            raise StoreError("begin failed") from exc
        return SettlementTransaction(session)
