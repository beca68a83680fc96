"""Settlement Service - records a payment and marks its bill paid atomically"""

import re
from typing import Any, NoReturn, Optional

from utilbill.core.exceptions import (
    BillingError,
    ConflictError,
    InternalError,
    InvalidArgumentError,
    NotFoundError,
)
from utilbill.core.logging import get_logger
from utilbill.models.base import MAX_ID
from utilbill.models.enums import BillStatus
from utilbill.schemas.billing import PaymentSettlement
from utilbill.services.billing_store import BillingStore, SettlementTransaction, StoreError, UniqueViolation
from utilbill.utils.time import get_utc_now

logger = get_logger(__name__)

_POSITIVE_INT_RE = re.compile(r"\+?[0-9]+")
_MAX_ID_DIGITS = len(str(MAX_ID))

_CONFLICT_MESSAGES = {
    "bill_id": "Payment already exists for this bill",
    "transaction_ref": "Transaction reference is duplicated",
}
_DEFAULT_CONFLICT_MESSAGE = "Payment already exists or transaction reference is duplicated"


class SettlementService:
    """
    Payment settlement engine.

    The early status check only rejects obvious double payments cheaply.
    Correctness under concurrency comes from the transaction plus the unique
    constraints on payments.bill_id and payments.transaction_ref: the first
    committer wins and the second insert fails with a unique violation.

    The service holds no state between calls and never retries. Callers may
    retry on InternalError (``error.retryable``) only.
    """

    def __init__(self, store: BillingStore) -> None:
        self.store = store

    @staticmethod
    def parse_bill_id(value: Any) -> int:
        """Accept an int, an integral float or a string of digits in 1..MAX_ID"""
        if isinstance(value, bool):
            raise InvalidArgumentError("Invalid bill_id")
        if isinstance(value, int):
            bill_id = value
        elif isinstance(value, float) and value.is_integer():
            bill_id = int(value)
        elif isinstance(value, str) and _POSITIVE_INT_RE.fullmatch(value.strip()):
            digits = value.strip().lstrip("+").lstrip("0")
            # Bound the length before int() so huge strings never reach the parser
            if len(digits) > _MAX_ID_DIGITS:
                raise InvalidArgumentError("Invalid bill_id")
            bill_id = int(digits or "0")
        else:
            raise InvalidArgumentError("Invalid bill_id")
        if bill_id <= 0 or bill_id > MAX_ID:
            raise InvalidArgumentError("Invalid bill_id")
        return bill_id

    @staticmethod
    def normalize_method(value: Any) -> str:
        method = "" if value is None else str(value).strip()
        if not method:
            raise InvalidArgumentError("payment_method is required")
        return method

    @staticmethod
    def normalize_reference(value: Any) -> Optional[str]:
        """Trimmed reference, or None when absent or blank"""
        if value is None:
            return None
        return str(value).strip() or None

    async def settle_payment(
        self,
        bill_id: Any,
        payment_method: Any,
        transaction_ref: Any = None,
    ) -> PaymentSettlement:
        """
        Insert a payment for the bill and flip the bill to "paid".

        Args:
            bill_id: Bill to settle (positive integer)
            payment_method: Free-form method label, required
            transaction_ref: Optional external reference, unique across payments

        Returns:
            PaymentSettlement with the new payment id

        Raises:
            InvalidArgumentError: Malformed input; the store is not touched
            NotFoundError: Bill does not exist
            ConflictError: Bill already paid, or duplicate payment/reference
            InternalError: Store failure; the transaction was rolled back
        """
        bill_id = self.parse_bill_id(bill_id)
        method = self.normalize_method(payment_method)
        reference = self.normalize_reference(transaction_ref)

        try:
            bill = await self.store.find_bill_by_id(bill_id)
        except StoreError as exc:
            logger.error("Bill lookup failed", extra={"bill_id": bill_id}, exc_info=True)
            raise InternalError("Failed to load bill") from exc

        if bill is None:
            logger.warning("Settlement rejected: bill not found", extra={"bill_id": bill_id})
            raise NotFoundError("Bill not found")
        if BillStatus.is_paid(bill.status):
            logger.warning("Settlement rejected: bill already paid", extra={"bill_id": bill_id})
            raise ConflictError("Bill is already paid")

        try:
            tx = await self.store.begin()
        except StoreError as exc:
            logger.error("Could not begin settlement transaction", extra={"bill_id": bill_id}, exc_info=True)
            raise InternalError("Failed to start payment transaction") from exc

        try:
            payment_id = await self._apply(tx, bill_id, method, reference)
        finally:
            await tx.close()

        logger.info(
            "Payment settled",
            extra={
                "bill_id": bill_id,
                "payment_id": payment_id,
                "payment_method": method,
                "transaction_ref": reference,
            },
        )
        return PaymentSettlement(payment_id=payment_id, bill_id=bill_id, bill_status=BillStatus.PAID)

    async def _apply(
        self,
        tx: SettlementTransaction,
        bill_id: int,
        method: str,
        reference: Optional[str],
    ) -> int:
        try:
            payment_id = await tx.insert_payment(bill_id, method, reference, get_utc_now())
        except UniqueViolation as exc:
            message = _CONFLICT_MESSAGES.get(exc.field, _DEFAULT_CONFLICT_MESSAGE)
            await self._abort(tx, bill_id, ConflictError(message), exc)
        except StoreError as exc:
            await self._abort(tx, bill_id, InternalError("Failed to record payment"), exc)

        try:
            rows = await tx.update_bill_status(bill_id, BillStatus.PAID)
        except StoreError as exc:
            await self._abort(tx, bill_id, InternalError("Failed to update bill status"), exc)

        if not rows:
            # Bill deleted after the lookup
            await self._abort(tx, bill_id, NotFoundError("Bill not found during update"))

        try:
            await tx.commit()
        except StoreError as exc:
            await self._abort(tx, bill_id, InternalError("Failed to commit payment"), exc)

        return payment_id

    async def _abort(
        self,
        tx: SettlementTransaction,
        bill_id: int,
        error: BillingError,
        cause: Optional[BaseException] = None,
    ) -> NoReturn:
        """Single exit for every failure inside the transaction: roll back, then raise"""
        try:
            await tx.rollback()
        except StoreError as rollback_exc:
            logger.error(
                "Rollback failed after settlement error",
                extra={"bill_id": bill_id, "original_error": error.message},
                exc_info=True,
            )
            raise InternalError("Failed to roll back payment transaction") from rollback_exc

        if isinstance(error, InternalError):
            logger.error(
                error.message,
                extra={"bill_id": bill_id},
                exc_info=(type(cause), cause, cause.__traceback__) if cause else None,
            )
        else:
            logger.warning(
                f"Settlement rejected: {error.message}",
                extra={"bill_id": bill_id, "error_code": error.code},
            )
        raise error from cause
