from opencloset.schemas.coupon import (
    ApplyCouponRequest,
    CouponCreate,
    CouponResponse,
    CouponValidateRequest,
)
from opencloset.schemas.helper import (
    AvatarResponse,
    HolidaysResponse,
    ParcelResponse,
    SMSCreate,
    SMSResponse,
    StatusResponse,
)
from opencloset.schemas.order import OrderDetailResponse, OrderResponse

__all__ = [
    "ApplyCouponRequest",
    "AvatarResponse",
    "CouponCreate",
    "CouponResponse",
    "CouponValidateRequest",
    "HolidaysResponse",
    "OrderDetailResponse",
    "OrderResponse",
    "ParcelResponse",
    "SMSCreate",
    "SMSResponse",
    "StatusResponse",
]
