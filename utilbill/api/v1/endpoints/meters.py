"""Meter Endpoints"""

from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from utilbill.api.deps import RecordId, get_db
from utilbill.schemas.meter import MeterCreate, MeterCreated, MeterResponse
from utilbill.schemas.responses import DeletedResponse
from utilbill.services.meter_service import MeterService

router = APIRouter()


@router.get("", response_model=List[MeterResponse])
async def list_meters(db: AsyncSession = Depends(get_db)) -> List[MeterResponse]:
    meters = await MeterService.list_meters(db)
    return [MeterResponse.model_validate(m) for m in meters]


@router.post("", response_model=MeterCreated)
async def create_meter(meter_in: MeterCreate, db: AsyncSession = Depends(get_db)) -> MeterCreated:
    """Register a meter. user_id and utility_id must reference existing rows."""
    meter = await MeterService.create_meter(db, meter_in)
    return MeterCreated(meter_id=meter.meter_id)


@router.delete("/{meter_id}", response_model=DeletedResponse)
async def delete_meter(meter_id: RecordId, db: AsyncSession = Depends(get_db)) -> DeletedResponse:
    deleted = await MeterService.delete_meter(db, meter_id)
    return DeletedResponse(deleted=deleted)
