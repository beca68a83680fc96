"""Bill Service"""

from typing import List, Optional
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from utilbill.models.billing import Bill
from utilbill.schemas.billing import BillCreate
from utilbill.services.constraints import translate_integrity_error


class BillService:

    @staticmethod
    async def list_bills(db: AsyncSession) -> List[Bill]:
        result = await db.execute(select(Bill).order_by(Bill.bill_id))
        return list(result.scalars().all())

    @staticmethod
    async def get_bill_by_id(db: AsyncSession, bill_id: int) -> Optional[Bill]:
        return await db.get(Bill, bill_id)

    @staticmethod
    async def create_bill(db: AsyncSession, data: BillCreate) -> Bill:
        """Create a bill. Status may only be set to "paid" here for imported history."""
        bill = Bill(
            meter_id=data.meter_id,
            bill_month=data.bill_month,
            amount=data.amount,
            due_date=data.due_date,
            status=data.status.value,
        )
        db.add(bill)
        try:
            await db.commit()
        except IntegrityError as exc:
            await db.rollback()
            raise translate_integrity_error(
                exc, foreign_key="Selected meter does not exist"
            ) from exc
        await db.refresh(bill)
        return bill

    @staticmethod
    async def delete_bill(db: AsyncSession, bill_id: int) -> int:
        """Delete a bill; its payment cascades."""
        result = await db.execute(delete(Bill).where(Bill.bill_id == bill_id))
        await db.commit()
        return result.rowcount
