"""Coupon model for rental discounts."""

from enum import Enum

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text, func

from opencloset.core.database import Base


class CouponType(str, Enum):
    DEFAULT = "default"
    RATE = "rate"
    SUIT = "suit"


class CouponStatus(str, Enum):
    UNUSED = "unused"
    RESERVED = "reserved"
    PROVIDED = "provided"
    USED = "used"
    DISCARDED = "discarded"
    EXPIRED = "expired"

    @classmethod
    def parse(cls, value: str | None) -> "CouponStatus":
        """Parse a stored status string.

        Empty values mean the coupon was never handed out. Legacy values are
        matched case-insensitively and may carry extra text around the
        terminal keywords (e.g. ``"discard"``, ``"Expired at 2016-05-01"``).
        """
        text = (value or "").strip().lower()
        if not text:
            return cls.UNUSED
        for status in cls:
            if status.value == text:
                return status
        if "used" in text:
            return cls.USED
        if "discard" in text:
            return cls.DISCARDED
        if "expir" in text:
            return cls.EXPIRED
        raise ValueError(f"Unknown coupon status: {value!r}")

    @property
    def is_terminal(self) -> bool:
        return self in (CouponStatus.USED, CouponStatus.DISCARDED, CouponStatus.EXPIRED)

    @property
    def is_available(self) -> bool:
        return self in (CouponStatus.UNUSED, CouponStatus.PROVIDED)


class Coupon(Base):
    """Coupon model for rental discounts."""

    __tablename__ = "coupon"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(64), unique=True, index=True, nullable=False)
    type = Column(String(16), nullable=False, default=CouponType.DEFAULT.value)
    price = Column(Integer, nullable=False, default=0)
    free_shipping = Column(Boolean, nullable=True)
    status = Column(String(32), nullable=True)
    expires_date = Column(DateTime(timezone=True), nullable=True)
    event_id = Column(Integer, ForeignKey("event.id", ondelete="SET NULL"), nullable=True, index=True)
    desc = Column(Text, nullable=True)

    create_date = Column(DateTime(timezone=True), server_default=func.now())
    update_date = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    @property
    def coupon_status(self) -> CouponStatus:
        return CouponStatus.parse(self.status)  # type: ignore[arg-type]

    @property
    def coupon_type(self) -> CouponType:
        return CouponType(self.type)
