"""Utility Endpoints"""

from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from utilbill.api.deps import RecordId, get_db
from utilbill.schemas.responses import DeletedResponse
from utilbill.schemas.utility import UtilityCreate, UtilityCreated, UtilityResponse
from utilbill.services.utility_service import UtilityService

router = APIRouter()


@router.get("", response_model=List[UtilityResponse])
async def list_utilities(db: AsyncSession = Depends(get_db)) -> List[UtilityResponse]:
    utilities = await UtilityService.list_utilities(db)
    return [UtilityResponse.model_validate(u) for u in utilities]


@router.post("", response_model=UtilityCreated)
async def create_utility(utility_in: UtilityCreate, db: AsyncSession = Depends(get_db)) -> UtilityCreated:
    utility = await UtilityService.create_utility(db, utility_in)
    return UtilityCreated(utility_id=utility.utility_id)


@router.delete("/{utility_id}", response_model=DeletedResponse)
async def delete_utility(utility_id: RecordId, db: AsyncSession = Depends(get_db)) -> DeletedResponse:
    deleted = await UtilityService.delete_utility(db, utility_id)
    return DeletedResponse(deleted=deleted)
