"""Pydantic schemas for the admin reporting API."""

from pydantic import BaseModel, ConfigDict, Field


class BestProfessionResponse(BaseModel):
    profession: str


class BestClientItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    paid: int  # cents
    full_name: str = Field(..., serialization_alias="fullName")
