"""Bill and Payment Pydantic Schemas"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field

from utilbill.models.base import MAX_ID
from utilbill.models.enums import BillStatus


class BillCreate(BaseModel):
    meter_id: int = Field(..., gt=0, le=MAX_ID)
    bill_month: date
    amount: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    due_date: date
    status: BillStatus = BillStatus.UNPAID


class BillResponse(BaseModel):
    bill_id: int
    meter_id: int
    bill_month: date
    amount: Decimal
    due_date: date
    status: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class BillCreated(BaseModel):
    bill_id: int


class PaymentCreate(BaseModel):
    """
    Settlement request body.

    Fields are loosely typed on purpose: SettlementService owns the
    validation rules so they hold for every caller, not only HTTP.
    """
    bill_id: Any = None
    payment_method: Any = None
    transaction_ref: Any = None


class PaymentResponse(BaseModel):
    payment_id: int
    bill_id: int
    payment_method: str
    payment_date: datetime
    transaction_ref: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class PaymentSettlement(BaseModel):
    """Result of a successful settlement"""
    payment_id: int
    bill_id: int
    bill_status: BillStatus = BillStatus.PAID
