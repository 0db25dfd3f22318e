"""Coupon schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from opencloset.models.coupon import CouponStatus, CouponType


class CouponCreate(BaseModel):
    code: str | None = Field(default=None, max_length=64)
    type: CouponType = CouponType.DEFAULT
    price: int = Field(default=0, ge=0)
    free_shipping: bool | None = None
    status: CouponStatus | None = None
    expires_date: datetime | None = None
    event_id: int | None = None
    desc: str | None = None


class CouponResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    code: str
    type: str
    price: int
    free_shipping: bool | None = None
    status: str | None = None
    expires_date: datetime | None = None
    event_id: int | None = None
    desc: str | None = None


class CouponValidateRequest(BaseModel):
    code: str = Field(max_length=64)


class ApplyCouponRequest(BaseModel):
    code: str = Field(max_length=64)
