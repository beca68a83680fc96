"""Bill Endpoints"""

from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from utilbill.api.deps import RecordId, get_db
from utilbill.core.exceptions import NotFoundError
from utilbill.schemas.billing import BillCreate, BillCreated, BillResponse
from utilbill.schemas.responses import DeletedResponse
from utilbill.services.bill_service import BillService

router = APIRouter()


@router.get("", response_model=List[BillResponse])
async def list_bills(db: AsyncSession = Depends(get_db)) -> List[BillResponse]:
    bills = await BillService.list_bills(db)
    return [BillResponse.model_validate(b) for b in bills]


@router.get("/{bill_id}", response_model=BillResponse)
async def get_bill(bill_id: RecordId, db: AsyncSession = Depends(get_db)) -> BillResponse:
    bill = await BillService.get_bill_by_id(db, bill_id)
    if not bill:
        raise NotFoundError("Not found")
    return BillResponse.model_validate(bill)


@router.post("", response_model=BillCreated)
async def create_bill(bill_in: BillCreate, db: AsyncSession = Depends(get_db)) -> BillCreated:
    bill = await BillService.create_bill(db, bill_in)
    return BillCreated(bill_id=bill.bill_id)


@router.delete("/{bill_id}", response_model=DeletedResponse)
async def delete_bill(bill_id: RecordId, db: AsyncSession = Depends(get_db)) -> DeletedResponse:
    deleted = await BillService.delete_bill(db, bill_id)
    return DeletedResponse(deleted=deleted)
