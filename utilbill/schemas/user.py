"""User Pydantic Schemas"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from utilbill.models.enums import UserRole


class UserBase(BaseModel):
    """Fields shared by create and update payloads"""
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=1, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)

    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        return v.lower()

    @field_validator("phone")
    @classmethod
    def blank_phone_to_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None


class UserCreate(UserBase):
    """Schema for creating a user"""
    password: str = Field(..., min_length=1)
    role: Optional[str] = None


class UserUpdate(UserBase):
    """Schema for updating a user. Omitting role keeps the stored one."""
    role: Optional[str] = None


class UserResponse(BaseModel):
    """User as returned by the API (never includes the password hash)"""
    user_id: int
    name: str
    email: str
    phone: Optional[str] = None
    role: UserRole
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    @field_validator("role", mode="before")
    @classmethod
    def normalize_role(cls, v) -> UserRole:
        return UserRole.normalize(v)


class UserCreated(BaseModel):
    user_id: int
    role: UserRole
