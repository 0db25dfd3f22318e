"""Schemas for the view helper endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class StatusResponse(BaseModel):
    query: str
    result: int | str


class HolidaysResponse(BaseModel):
    year: int
    holidays: list[str]


class ParcelResponse(BaseModel):
    service: str
    waybill: str
    url: str


class AvatarResponse(BaseModel):
    url: str


class SMSCreate(BaseModel):
    to: str = Field(min_length=1, max_length=20)
    text: str = Field(min_length=1)
    sender: str | None = Field(default=None, max_length=12)


class SMSResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    sender: str = Field(validation_alias="from_")
    to: str
    text: str
    status: str
