"""Billing Models: bills and their settlement payments"""

from sqlalchemy import CheckConstraint, Column, Date, DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from utilbill.models.base import BaseModel, CreatedAtMixin
from utilbill.models.enums import BillStatus
from utilbill.utils.time import get_utc_now


class Bill(BaseModel, CreatedAtMixin):
    """
    Billing-period charge against a meter.

    Status moves to "paid" only through settlement, and at most once.
    """
    __tablename__ = "bills"
    __table_args__ = (
        CheckConstraint(
            "status IN ({})".format(", ".join(f"'{s.value}'" for s in BillStatus)),
            name="status",
        ),
        CheckConstraint("amount >= 0", name="amount_non_negative"),
    )

    bill_id = Column(Integer, primary_key=True, autoincrement=True)
    meter_id = Column(Integer, ForeignKey("meters.meter_id", ondelete="CASCADE"), nullable=False, index=True)
    bill_month = Column(Date, nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    due_date = Column(Date, nullable=False)
    status = Column(String(16), nullable=False, default=BillStatus.UNPAID.value, index=True)

    meter = relationship("Meter", back_populates="bills")
    payment = relationship("Payment", back_populates="bill", uselist=False, passive_deletes=True)

    def __repr__(self) -> str:
        return f"<Bill {self.bill_id} {self.amount} - {self.status}>"


class Payment(BaseModel):
    """
    Settlement record for exactly one bill.

    bill_id is unique, which is what serializes concurrent settlements of the
    same bill. transaction_ref is unique when present.
    """
    __tablename__ = "payments"

    payment_id = Column(Integer, primary_key=True, autoincrement=True)
    bill_id = Column(Integer, ForeignKey("bills.bill_id", ondelete="CASCADE"), nullable=False, unique=True)
    payment_method = Column(Text, nullable=False)
    payment_date = Column(DateTime, nullable=False, default=get_utc_now)
    transaction_ref = Column(Text, nullable=True, unique=True)

    bill = relationship("Bill", back_populates="payment")

    def __repr__(self) -> str:
        return f"<Payment {self.payment_id} bill={self.bill_id} via {self.payment_method}>"
