"""Domain Error Taxonomy"""

from fastapi import status


class BillingError(Exception):
    """
    Base class for errors surfaced to API callers.

    Each subclass maps to exactly one HTTP status code. Only internal
    failures are worth retrying; conflicts and missing records are final.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_ERROR"
    retryable: bool = False

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(BillingError):
    """Malformed or missing input. Raised before the store is touched."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "INVALID_ARGUMENT"


class NotFoundError(BillingError):
    """Referenced record does not exist"""

    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"


class ConflictError(BillingError):
    """Bill already paid, or a uniqueness constraint was violated"""

    status_code = status.HTTP_409_CONFLICT
    code = "CONFLICT"


class InternalError(BillingError):
    """Store or transport failure"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "INTERNAL_ERROR"
    retryable = True
