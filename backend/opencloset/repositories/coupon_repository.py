"""Coupon repository for data access."""

from sqlalchemy.orm import Session

from opencloset.models.coupon import Coupon, CouponStatus
from opencloset.schemas.coupon import CouponCreate


class CouponRepository:
    """Repository for Coupon model."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, coupon_id: int) -> Coupon | None:
        """Get a coupon by ID."""
        return self.db.query(Coupon).filter(Coupon.id == coupon_id).first()

    def get_by_code(self, code: str) -> Coupon | None:
        """Get a coupon by its canonical code."""
        return self.db.query(Coupon).filter(Coupon.code == code).first()

    def create(self, data: CouponCreate, code: str) -> Coupon:
        """Create a new coupon with an already normalized code."""
        coupon = Coupon(
            code=code,
            type=data.type.value,
            price=data.price,
            free_shipping=data.free_shipping,
            status=data.status.value if data.status else None,
            expires_date=data.expires_date,
            event_id=data.event_id,
            desc=data.desc,
        )
        self.db.add(coupon)
        self.db.commit()
        self.db.refresh(coupon)
        return coupon

    def set_status(self, coupon: Coupon, status: CouponStatus) -> Coupon:
        """Persist a coupon status transition."""
        coupon.status = status.value  # type: ignore[assignment]
        self.db.commit()
        self.db.refresh(coupon)
        return coupon
