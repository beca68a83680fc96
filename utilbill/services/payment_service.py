"""Payment Service - read and administrative removal of payments

Payments are created only through SettlementService.
"""

from typing import List
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from utilbill.core.logging import get_logger
from utilbill.models.billing import Payment

logger = get_logger(__name__)


class PaymentService:

    @staticmethod
    async def list_payments(db: AsyncSession) -> List[Payment]:
        result = await db.execute(select(Payment).order_by(Payment.payment_id))
        return list(result.scalars().all())

    @staticmethod
    async def delete_payment(db: AsyncSession, payment_id: int) -> int:
        """
        Remove a payment record.

        The bill keeps its "paid" status. Reverting it is an open product
        decision, so this only removes the payment row.
        """
        result = await db.execute(delete(Payment).where(Payment.payment_id == payment_id))
        await db.commit()
        if result.rowcount:
            logger.warning(
                "Payment deleted; bill status left unchanged",
                extra={"payment_id": payment_id},
            )
        return result.rowcount
