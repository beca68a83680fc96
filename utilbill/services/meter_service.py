"""Meter Service"""

from typing import List
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from utilbill.models.meter import Meter
from utilbill.schemas.meter import MeterCreate
from utilbill.services.constraints import translate_integrity_error


class MeterService:

    @staticmethod
    async def list_meters(db: AsyncSession) -> List[Meter]:
        result = await db.execute(select(Meter).order_by(Meter.meter_id))
        return list(result.scalars().all())

    @staticmethod
    async def create_meter(db: AsyncSession, data: MeterCreate) -> Meter:
        """
        Register a meter for an existing user and utility.

        Existence of the user and utility is enforced by the foreign keys,
        not by a prior lookup.
        """
        meter = Meter(
            meter_number=data.meter_number,
            user_id=data.user_id,
            utility_id=data.utility_id,
        )
        db.add(meter)
        try:
            await db.commit()
        except IntegrityError as exc:
            await db.rollback()
            raise translate_integrity_error(
                exc,
                unique={"*": "Meter number already exists"},
                foreign_key="Selected user or utility does not exist",
                not_null="meter_number, user_id and utility_id are required",
            ) from exc
        await db.refresh(meter)
        return meter

    @staticmethod
    async def delete_meter(db: AsyncSession, meter_id: int) -> int:
        result = await db.execute(delete(Meter).where(Meter.meter_id == meter_id))
        await db.commit()
        return result.rowcount
