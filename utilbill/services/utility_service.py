"""Utility Service"""

from typing import List
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from utilbill.core.exceptions import ConflictError
from utilbill.core.db_errors import ConstraintKind, classify_integrity_error
from utilbill.models.utility import Utility
from utilbill.schemas.utility import UtilityCreate
from utilbill.services.constraints import translate_integrity_error


class UtilityService:

    @staticmethod
    async def list_utilities(db: AsyncSession) -> List[Utility]:
        result = await db.execute(select(Utility).order_by(Utility.utility_id))
        return list(result.scalars().all())

    @staticmethod
    async def create_utility(db: AsyncSession, data: UtilityCreate) -> Utility:
        utility = Utility(utility_name=data.utility_name)
        db.add(utility)
        try:
            await db.commit()
        except IntegrityError as exc:
            await db.rollback()
            raise translate_integrity_error(
                exc, unique={"*": "Utility already exists"}
            ) from exc
        await db.refresh(utility)
        return utility

    @staticmethod
    async def delete_utility(db: AsyncSession, utility_id: int) -> int:
        try:
            result = await db.execute(delete(Utility).where(Utility.utility_id == utility_id))
            await db.commit()
        except IntegrityError as exc:
            await db.rollback()
            violation = classify_integrity_error(exc)
            if violation is not None and violation.kind == ConstraintKind.FOREIGN_KEY:
                raise ConflictError("Utility is still referenced by meters") from exc
            raise translate_integrity_error(exc) from exc
        return result.rowcount
