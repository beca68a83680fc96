"""Standardized API Response Schemas"""

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """Error details structure"""
    code: str
    message: str


class ErrorResponse(BaseModel):
    """
    Standard error response envelope.

    Example:
        {
            "success": false,
            "error": {
                "code": "CONFLICT",
                "message": "Bill is already paid"
            }
        }
    """
    success: bool = False
    error: ErrorDetail


class DeletedResponse(BaseModel):
    """Number of rows removed by a DELETE"""
    deleted: int


class UpdatedResponse(BaseModel):
    """Number of rows changed by a PUT"""
    updated: int
