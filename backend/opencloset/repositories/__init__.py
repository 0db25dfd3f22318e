from opencloset.repositories.clothes_repository import ClothesRepository
from opencloset.repositories.coupon_repository import CouponRepository
from opencloset.repositories.event_repository import EventRepository
from opencloset.repositories.order_repository import OrderDetailRepository, OrderRepository
from opencloset.repositories.sms_repository import SMSRepository
from opencloset.repositories.user_repository import UserRepository

__all__ = [
    "ClothesRepository",
    "CouponRepository",
    "EventRepository",
    "OrderDetailRepository",
    "OrderRepository",
    "SMSRepository",
    "UserRepository",
]
