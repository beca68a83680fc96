"""Payment Endpoints"""

from typing import List
from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from utilbill.api.deps import RecordId, get_db, get_settlement_service
from utilbill.core.rate_limit import PAYMENT_RATE_LIMIT, limiter
from utilbill.schemas.billing import PaymentCreate, PaymentResponse, PaymentSettlement
from utilbill.schemas.responses import DeletedResponse, ErrorResponse
from utilbill.services.payment_service import PaymentService
from utilbill.services.settlement_service import SettlementService

router = APIRouter()


@router.get("", response_model=List[PaymentResponse])
async def list_payments(db: AsyncSession = Depends(get_db)) -> List[PaymentResponse]:
    payments = await PaymentService.list_payments(db)
    return [PaymentResponse.model_validate(p) for p in payments]


@router.post(
    "",
    response_model=PaymentSettlement,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid bill_id or missing payment_method"},
        404: {"model": ErrorResponse, "description": "Bill not found"},
        409: {"model": ErrorResponse, "description": "Bill already paid or duplicate transaction_ref"},
        500: {"model": ErrorResponse, "description": "Store failure; nothing was written"},
    },
)
@limiter.limit(PAYMENT_RATE_LIMIT)
async def settle_payment(
    request: Request,
    payment_in: PaymentCreate,
    service: SettlementService = Depends(get_settlement_service),
) -> PaymentSettlement:
    """
    Pay a bill.

    Inserts the payment and marks the bill paid in one transaction.
    """
    return await service.settle_payment(
        payment_in.bill_id,
        payment_in.payment_method,
        payment_in.transaction_ref,
    )


@router.delete("/{payment_id}", response_model=DeletedResponse)
async def delete_payment(payment_id: RecordId, db: AsyncSession = Depends(get_db)) -> DeletedResponse:
    """Remove a payment record. The bill stays "paid"."""
    deleted = await PaymentService.delete_payment(db, payment_id)
    return DeletedResponse(deleted=deleted)
