"""Centralized Enum Definitions"""

import enum


class UserRole(str, enum.Enum):
    """User roles"""
    ADMIN = "admin"
    USER = "user"

    @classmethod
    def normalize(cls, value) -> "UserRole":
        """Map any input to a known role; unknown or missing values become USER"""
        text = str(value or "").strip().lower()
        for role in cls:
            if role.value == text:
                return role
        return cls.USER


class BillStatus(str, enum.Enum):
    """Bill lifecycle status"""
    UNPAID = "unpaid"
    OVERDUE = "overdue"
    PAID = "paid"

    @classmethod
    def is_paid(cls, value) -> bool:
        """Case-insensitive check against the stored status string"""
        return str(value or "").strip().lower() == cls.PAID.value
