"""Meter Pydantic Schemas"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from utilbill.models.base import MAX_ID


class MeterCreate(BaseModel):
    meter_number: str = Field(..., min_length=1, max_length=100)
    user_id: int = Field(..., gt=0, le=MAX_ID)
    utility_id: int = Field(..., gt=0, le=MAX_ID)

    model_config = ConfigDict(str_strip_whitespace=True)


class MeterResponse(BaseModel):
    meter_id: int
    meter_number: str
    user_id: int
    utility_id: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class MeterCreated(BaseModel):
    meter_id: int
