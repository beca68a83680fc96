"""Models Package - Export all models for easy imports"""

from utilbill.models.base import BaseModel, CreatedAtMixin
from utilbill.models.enums import BillStatus, UserRole
from utilbill.models.user import User
from utilbill.models.utility import Utility
from utilbill.models.meter import Meter
from utilbill.models.billing import Bill, Payment


__all__ = [
    # Base classes
    "BaseModel",
    "CreatedAtMixin",

    # Enums
    "BillStatus",
    "UserRole",

    # Tables
    "User",
    "Utility",
    "Meter",
    "Bill",
    "Payment",
]
