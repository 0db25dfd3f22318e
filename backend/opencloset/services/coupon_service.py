"""Coupon validation and reassignment between orders."""

import logging
from collections.abc import Callable
from datetime import datetime

from sqlalchemy.orm import Session

from opencloset.models.coupon import Coupon, CouponStatus
from opencloset.models.order import Order
from opencloset.models.shared import as_utc, utc_now
from opencloset.repositories.coupon_repository import CouponRepository
from opencloset.repositories.event_repository import EventRepository
from opencloset.repositories.order_repository import OrderRepository
from opencloset.services import coupon_code
from opencloset.services.audit_trail import AuditTrail
from opencloset.services.coupon_errors import (
    CouponEventEndedError,
    CouponExpiredError,
    CouponNotFoundError,
    CouponNotUsableError,
)

logger = logging.getLogger(__name__)


def coupon_status(coupon: Coupon) -> CouponStatus:
    """Parse the stored status of a coupon.

    Raises:
        CouponNotUsableError: If the stored status is not a known status.
    """
    try:
        return coupon.coupon_status
    except ValueError as e:
        raise CouponNotUsableError(str(coupon.status)) from e


def _format_date(dt: datetime | None) -> str:
    """Format a datetime to YYYY-MM-DD, or return empty string if None."""
    if dt is None:
        return ""
    return dt.strftime("%Y-%m-%d")


class CouponService:
    """Service for validating coupon codes and moving coupons between orders."""

    def __init__(self, db: Session, clock: Callable[[], datetime] = utc_now):
        self.db = db
        self.clock = clock
        self.coupon_repo = CouponRepository(db)
        self.event_repo = EventRepository(db)
        self.order_repo = OrderRepository(db)

    def validate(self, code: str) -> Coupon:
        """Validate a coupon code and return the usable coupon.

        Validation is not read-only: a coupon that is already reserved or
        provided is released from the orders holding it, and a coupon past its
        expiry is marked expired before the error is raised.

        Args:
            code: The code as typed by the customer.

        Returns:
            The usable Coupon.

        Raises:
            CouponInvalidFormatError: If the code fails the format check.
            CouponNotFoundError: If no coupon has the code.
            CouponNotUsableError: If the coupon is used, discarded, expired or
                has an unknown status.
            CouponExpiredError: If the coupon's own expiry has passed.
            CouponEventEndedError: If the coupon's event has ended.
        """
        normalized = coupon_code.parse(code)

        coupon = self.coupon_repo.get_by_code(normalized)
        if not coupon:
            raise CouponNotFoundError()

        status = coupon_status(coupon)
        if status.is_terminal:
            logger.info("Coupon %s is not usable: %s", coupon.code, coupon.status)
            raise CouponNotUsableError(str(coupon.status))

        if status is not CouponStatus.UNUSED:
            self.transfer(coupon)

        now = self.clock()
        if coupon.expires_date and as_utc(coupon.expires_date) < now:  # type: ignore[arg-type]
            self.coupon_repo.set_status(coupon, CouponStatus.EXPIRED)
            logger.info("Coupon %s expired at %s", coupon.code, coupon.expires_date)
            raise CouponExpiredError()

        if coupon.event_id:
            event = self.event_repo.get_by_id(coupon.event_id)  # type: ignore[arg-type]
            if event and event.end_date and as_utc(event.end_date) < now:  # type: ignore[arg-type]
                raise CouponEventEndedError(
                    str(event.title),
                    _format_date(event.start_date),  # type: ignore[arg-type]
                    _format_date(event.end_date),  # type: ignore[arg-type]
                )

        return coupon

    def transfer(self, coupon: Coupon, destination: Order | None = None) -> None:
        """Detach a coupon from the orders holding it and attach it to another.

        Without a destination the coupon is only released. Used, discarded and
        expired coupons are left untouched.

        Args:
            coupon: The coupon to move.
            destination: The order that should hold the coupon afterwards.

        Raises:
            CouponNotUsableError: If the coupon has an unknown status.
        """
        status = coupon_status(coupon)
        if status.is_terminal:
            logger.info("Coupon %s is %s, nothing to transfer", coupon.code, coupon.status)
            return

        if status is CouponStatus.RESERVED:
            orders = self.order_repo.get_by_coupon_id(coupon.id)  # type: ignore[arg-type]
            if not orders:
                logger.warning("Reserved coupon %s is not held by any order", coupon.code)

            detached: list[int] = []
            for order in orders:
                order.coupon_id = None  # type: ignore[assignment]
                order.misc = (  # type: ignore[assignment]
                    AuditTrail.parse(order.misc)  # type: ignore[arg-type]
                    .append(f"{coupon.code} 쿠폰이 다른 주문서에 사용되어 해제되었습니다")
                    .render()
                )
                self.order_repo.save(order)
                detached.append(order.id)  # type: ignore[arg-type]
                logger.info("Coupon %s detached from order %s", coupon.code, order.id)

            if destination is None:
                return

            if detached:
                ids = ", ".join(str(order_id) for order_id in detached)
                entry = f"{coupon.code} 쿠폰을 주문서 {ids}에서 옮겨왔습니다"
            else:
                entry = f"{coupon.code} 쿠폰이 사용되었습니다"
            destination.coupon_id = coupon.id
            destination.misc = (  # type: ignore[assignment]
                AuditTrail.parse(destination.misc).append(entry).render()  # type: ignore[arg-type]
            )
            self.order_repo.save(destination)
            logger.info("Coupon %s attached to order %s", coupon.code, destination.id)
            return

        if status.is_available:
            self.coupon_repo.set_status(coupon, CouponStatus.RESERVED)
            logger.debug("Coupon %s reserved", coupon.code)
            if destination is not None:
                destination.coupon_id = coupon.id
                self.order_repo.save(destination)
                logger.info("Coupon %s attached to order %s", coupon.code, destination.id)
