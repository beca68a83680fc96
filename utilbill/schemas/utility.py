"""Utility Pydantic Schemas"""

from pydantic import BaseModel, ConfigDict, Field


class UtilityCreate(BaseModel):
    utility_name: str = Field(..., min_length=1, max_length=100)

    model_config = ConfigDict(str_strip_whitespace=True)


class UtilityResponse(BaseModel):
    utility_id: int
    utility_name: str

    model_config = ConfigDict(from_attributes=True)


class UtilityCreated(BaseModel):
    utility_id: int
