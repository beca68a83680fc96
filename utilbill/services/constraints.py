"""Helpers for turning integrity errors into API errors"""

from typing import Dict, Optional

from sqlalchemy.exc import IntegrityError

from utilbill.core.db_errors import ConstraintKind, classify_integrity_error
from utilbill.core.exceptions import BillingError, ConflictError, InternalError, InvalidArgumentError


def translate_integrity_error(
    exc: IntegrityError,
    unique: Optional[Dict[str, str]] = None,
    foreign_key: Optional[str] = None,
    not_null: Optional[str] = None,
) -> BillingError:
    """
    Pick the API error for a failed write.

    Args:
        exc: Error raised by flush/commit
        unique: Conflict message per column; "*" matches any column
        foreign_key: Message for a missing referenced row (400)
        not_null: Message for a missing required column (400)
    """
    violation = classify_integrity_error(exc)
    if violation is None:
        return InternalError("Database write failed")

    if violation.kind == ConstraintKind.UNIQUE and unique:
        message = unique.get(violation.column or "", unique.get("*"))
        if message:
            return ConflictError(message)
    if violation.kind == ConstraintKind.FOREIGN_KEY and foreign_key:
        return InvalidArgumentError(foreign_key)
    if violation.kind == ConstraintKind.NOT_NULL and not_null:
        return InvalidArgumentError(not_null)
    if violation.kind == ConstraintKind.CHECK:
        return InvalidArgumentError("Value rejected by database constraint")
    return InternalError("Database write failed")
