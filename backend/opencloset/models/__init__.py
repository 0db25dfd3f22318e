from opencloset.models.clothes import Clothes
from opencloset.models.coupon import Coupon, CouponStatus, CouponType
from opencloset.models.event import Event
from opencloset.models.order import Order, OrderDetail
from opencloset.models.sms import SMS
from opencloset.models.status import EARLY_ONLINE_STATUSES, STATUS_LABELS, Status
from opencloset.models.user import Gender, User

__all__ = [
    "Clothes",
    "Coupon",
    "CouponStatus",
    "CouponType",
    "EARLY_ONLINE_STATUSES",
    "Event",
    "Gender",
    "Order",
    "OrderDetail",
    "SMS",
    "STATUS_LABELS",
    "Status",
    "User",
]
