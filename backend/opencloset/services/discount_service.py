"""Discount line items for orders holding a coupon."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy.orm import Session

from opencloset.core.config import Settings, settings
from opencloset.models.coupon import Coupon, CouponType
from opencloset.models.order import Order, OrderDetail
from opencloset.models.status import EARLY_ONLINE_STATUSES
from opencloset.repositories.clothes_repository import ClothesRepository
from opencloset.repositories.coupon_repository import CouponRepository
from opencloset.repositories.event_repository import EventRepository
from opencloset.repositories.order_repository import OrderDetailRepository
from opencloset.repositories.user_repository import UserRepository
from opencloset.services.coupon_errors import CouponNotUsableError
from opencloset.services.coupon_service import coupon_status
from opencloset.services.formatting import commify
from opencloset.services.late_fee import extension_price

logger = logging.getLogger(__name__)

COUPON_MARKER = "coupon"
ADDITIONAL = "additional"
RENTAL_DISCOUNT_NAME = "3+ rental discount"
RENTAL_DISCOUNT_TAG = "3+ rental"
FREE_SHIPPING_NAME = "free shipping coupon"
SUIT_DISCOUNT_NAME = "single-item discount coupon"

# Priced categories (jacket, pants, ...) are the only lowercase detail names.
_CATEGORY_NAME = re.compile(r"^[a-z]")


@dataclass(frozen=True)
class DiscountPolicy:
    """Prices and rates the discount computation depends on."""

    shipping_fee: int
    extension_rate: float
    suit_max_price: int
    suit_max_prices: Mapping[str, int] = field(default_factory=dict)

    @classmethod
    def from_settings(cls, config: Settings = settings) -> DiscountPolicy:
        return cls(
            shipping_fee=config.SHIPPING_FEE,
            extension_rate=config.EXTENSION_RATE,
            suit_max_price=config.SUIT_COUPON_MAX_PRICE,
            suit_max_prices=config.suit_coupon_max_prices,
        )


def _percent(amount: int, rate: int) -> int:
    value = Decimal(amount) * Decimal(rate) / Decimal(100)
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class DiscountService:
    """Service that turns an order's coupon into discount line items."""

    def __init__(self, db: Session, policy: DiscountPolicy | None = None):
        self.db = db
        self.policy = policy or DiscountPolicy.from_settings()
        self.clothes_repo = ClothesRepository(db)
        self.coupon_repo = CouponRepository(db)
        self.detail_repo = OrderDetailRepository(db)
        self.event_repo = EventRepository(db)
        self.user_repo = UserRepository(db)

    def apply(self, order: Order) -> bool:
        """Append the discount for the order's coupon.

        Running it again on the same order is a no-op, since the order then
        already carries a coupon line.

        Args:
            order: The order holding the coupon.

        Returns:
            True if discount lines were added, False if there was nothing to do.
        """
        if not order.coupon_id:
            return False

        coupon = self.coupon_repo.get_by_id(order.coupon_id)  # type: ignore[arg-type]
        if coupon is None:
            logger.warning("Order %s references missing coupon %s", order.id, order.coupon_id)
            return False
        try:
            status = coupon_status(coupon)
        except CouponNotUsableError:
            logger.warning("Coupon %s has unknown status %r", coupon.code, coupon.status)
            return False
        if status.is_terminal:
            logger.info("Coupon %s is %s, no discount for order %s", coupon.code, coupon.status, order.id)
            return False

        details = self.detail_repo.get_by_order_id(order.id)  # type: ignore[arg-type]
        if any(COUPON_MARKER in (detail.name or "") for detail in details):
            logger.debug("Order %s already has a coupon discount", order.id)
            return False

        details = self._drop_rental_discounts(order, details)

        coupon_type = coupon.coupon_type
        desc = ADDITIONAL if order.online else None
        if coupon_type is CouponType.DEFAULT:
            price = int(coupon.price)  # type: ignore[arg-type]
            self.detail_repo.create(
                order_id=order.id,  # type: ignore[arg-type]
                name=f"{commify(price)} won discount coupon",
                price=-price,
                final_price=-price,
            )
        elif coupon_type is CouponType.RATE:
            price_sum, final_price_sum = self._discount_base(order, details)
            rate = int(coupon.price)  # type: ignore[arg-type]
            self.detail_repo.create(
                order_id=order.id,  # type: ignore[arg-type]
                name=f"{rate}% discount coupon",
                price=-_percent(price_sum, rate),
                final_price=-_percent(final_price_sum, rate),
                desc=desc,
            )
        elif coupon_type is CouponType.SUIT:
            price_sum, final_price_sum = self._discount_base(order, details)
            cap = self._suit_cap(coupon, order)
            if price_sum > cap:
                price_sum = final_price_sum = cap
            self.detail_repo.create(
                order_id=order.id,  # type: ignore[arg-type]
                name=SUIT_DISCOUNT_NAME,
                price=-price_sum,
                final_price=-final_price_sum,
                desc=desc,
            )

        if order.online and self._free_shipping(coupon):
            fee = self.policy.shipping_fee
            self.detail_repo.create(
                order_id=order.id,  # type: ignore[arg-type]
                name=FREE_SHIPPING_NAME,
                price=-fee,
                final_price=-fee,
                desc=ADDITIONAL,
            )

        logger.info("Applied %s coupon %s to order %s", coupon.type, coupon.code, order.id)
        return True

    def _drop_rental_discounts(
        self, order: Order, details: list[OrderDetail]
    ) -> list[OrderDetail]:
        """Remove the 3+ rental discount, which never stacks with a coupon."""
        remaining: list[OrderDetail] = []
        for detail in details:
            if detail.name == RENTAL_DISCOUNT_NAME and detail.desc == ADDITIONAL:
                logger.info("Removing %s from order %s", RENTAL_DISCOUNT_NAME, order.id)
                self.detail_repo.delete(detail)
                continue

            if (detail.desc or "").startswith(RENTAL_DISCOUNT_TAG):
                self._restore_price(order, detail)
            remaining.append(detail)
        return remaining

    def _restore_price(self, order: Order, detail: OrderDetail) -> None:
        clothes = (
            self.clothes_repo.get_by_code(detail.clothes_code)  # type: ignore[arg-type]
            if detail.clothes_code
            else None
        )
        if clothes is None:
            logger.warning("Detail %s has no clothes to restore its price from", detail.id)
            return

        price = extension_price(
            int(clothes.price),  # type: ignore[arg-type]
            int(order.additional_day or 0),  # type: ignore[arg-type]
            self.policy.extension_rate,
        )
        detail.price = price  # type: ignore[assignment]
        detail.final_price = price  # type: ignore[assignment]
        detail.desc = None  # type: ignore[assignment]
        self.detail_repo.save(detail)

    def _discount_base(self, order: Order, details: list[OrderDetail]) -> tuple[int, int]:
        """Sum price and final price of the details a discount is computed on."""
        if order.online and order.status_id in EARLY_ONLINE_STATUSES:
            qualifying = [d for d in details if d.name and _CATEGORY_NAME.match(d.name)]
        else:
            qualifying = [d for d in details if d.clothes_code]

        price_sum = sum(int(d.price or 0) for d in qualifying)  # type: ignore[arg-type]
        final_price_sum = sum(int(d.final_price or 0) for d in qualifying)  # type: ignore[arg-type]
        return price_sum, final_price_sum

    def _suit_cap(self, coupon: Coupon, order: Order) -> int:
        if coupon.price:
            return int(coupon.price)  # type: ignore[arg-type]

        if order.user_id:
            user = self.user_repo.get_by_id(order.user_id)  # type: ignore[arg-type]
            if user and user.gender in self.policy.suit_max_prices:
                return self.policy.suit_max_prices[user.gender]  # type: ignore[index]
        return self.policy.suit_max_price

    def _free_shipping(self, coupon: Coupon) -> bool:
        if coupon.free_shipping:
            return True
        if coupon.event_id:
            event = self.event_repo.get_by_id(coupon.event_id)  # type: ignore[arg-type]
            return bool(event and event.free_shipping)
        return False
