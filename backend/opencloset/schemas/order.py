"""Order and OrderDetail schemas."""

from pydantic import BaseModel, ConfigDict


class OrderDetailResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    clothes_code: str | None = None
    name: str | None = None
    price: int
    final_price: int
    desc: str | None = None


class OrderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int | None = None
    coupon_id: int | None = None
    status_id: int | None = None
    online: bool
    additional_day: int
    misc: str | None = None
    order_details: list[OrderDetailResponse] = []
