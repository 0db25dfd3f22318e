"""Tests for CouponService validation and transfer logic."""

import logging
from datetime import UTC, datetime, timedelta
from unittest.mock import MagicMock

import pytest

from opencloset.models.coupon import CouponStatus
from opencloset.services.coupon_errors import (
    CouponEventEndedError,
    CouponExpiredError,
    CouponInvalidFormatError,
    CouponNotFoundError,
    CouponNotUsableError,
)
from opencloset.services.coupon_service import CouponService

CODE = "ABCT-123F-XYQV"
NOW = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)


@pytest.fixture
def coupon_service(db_session):
    """Create a CouponService with a fixed clock."""
    return CouponService(db_session, clock=lambda: NOW)


class TestValidate:
    @pytest.mark.parametrize("code", ["", "ABCT-123F", "ABCU-123F-XYQV", "not a coupon"])
    def test_malformed_code_never_touches_database(self, code):
        db = MagicMock()
        with pytest.raises(CouponInvalidFormatError):
            CouponService(db).validate(code)
        db.query.assert_not_called()
        db.commit.assert_not_called()

    def test_not_found(self, coupon_service):
        with pytest.raises(CouponNotFoundError) as exc_info:
            coupon_service.validate(CODE)
        assert exc_info.value.status_code == 404

    def test_unused_coupon_is_returned(self, coupon_service, make_coupon):
        coupon = make_coupon()
        assert coupon_service.validate(CODE).id == coupon.id
        assert coupon.status is None

    def test_code_is_normalized_before_lookup(self, coupon_service, make_coupon):
        coupon = make_coupon()
        assert coupon_service.validate("abct123fxyqv").id == coupon.id

    @pytest.mark.parametrize("status", ["used", "USED", "discarded", "Discard", "expired"])
    def test_terminal_status_is_not_usable(
        self, coupon_service, make_coupon, make_order, status
    ):
        coupon = make_coupon(status=status)
        order = make_order(coupon_id=coupon.id)

        with pytest.raises(CouponNotUsableError) as exc_info:
            coupon_service.validate(CODE)

        assert exc_info.value.status == status
        assert status in exc_info.value.message
        assert coupon.status == status
        assert order.coupon_id == coupon.id

    def test_unknown_status_is_not_usable(self, coupon_service, make_coupon):
        make_coupon(status="pending")

        with pytest.raises(CouponNotUsableError) as exc_info:
            coupon_service.validate(CODE)

        assert exc_info.value.status == "pending"
        assert exc_info.value.status_code == 400

    def test_provided_coupon_becomes_reserved(self, coupon_service, make_coupon):
        coupon = make_coupon(status="provided")
        coupon_service.validate(CODE)
        assert coupon.status == CouponStatus.RESERVED.value

    def test_reserved_coupon_is_released(
        self, coupon_service, make_coupon, make_order, db_session
    ):
        coupon = make_coupon(status="reserved")
        order = make_order(coupon_id=coupon.id, misc="prior note")

        assert coupon_service.validate(CODE).id == coupon.id

        db_session.refresh(order)
        assert order.coupon_id is None
        assert order.misc.startswith("prior note\n")
        assert CODE in order.misc
        assert coupon.status == CouponStatus.RESERVED.value

    def test_expired_coupon_is_marked_expired(
        self, coupon_service, make_coupon, db_session
    ):
        coupon = make_coupon(expires_date=NOW - timedelta(seconds=1))

        with pytest.raises(CouponExpiredError):
            coupon_service.validate(CODE)

        db_session.expire_all()
        assert coupon.status == CouponStatus.EXPIRED.value

    def test_future_expiry_is_valid(self, coupon_service, make_coupon):
        coupon = make_coupon(expires_date=NOW + timedelta(days=1))
        assert coupon_service.validate(CODE).id == coupon.id

    def test_expiry_at_current_instant_is_valid(self, coupon_service, make_coupon, db_session):
        coupon = make_coupon(expires_date=NOW)
        assert coupon_service.validate(CODE).id == coupon.id

        db_session.expire_all()
        assert coupon.status is None

    def test_ended_event(self, coupon_service, make_coupon, make_event):
        event = make_event(
            title="Spring Promotion",
            start_date=datetime(2026, 3, 1, tzinfo=UTC),
            end_date=datetime(2026, 5, 31, tzinfo=UTC),
        )
        coupon = make_coupon(event_id=event.id)

        with pytest.raises(CouponEventEndedError) as exc_info:
            coupon_service.validate(CODE)

        message = exc_info.value.message
        assert "Spring Promotion" in message
        assert "2026-03-01" in message
        assert "2026-05-31" in message
        assert coupon.status is None

    def test_running_event(self, coupon_service, make_coupon, make_event):
        event = make_event(end_date=NOW + timedelta(days=7))
        coupon = make_coupon(event_id=event.id)
        assert coupon_service.validate(CODE).id == coupon.id

    def test_event_ending_at_current_instant_is_valid(self, coupon_service, make_coupon, make_event):
        event = make_event(end_date=NOW)
        coupon = make_coupon(event_id=event.id)
        assert coupon_service.validate(CODE).id == coupon.id

    def test_event_without_end_date(self, coupon_service, make_coupon, make_event):
        event = make_event()
        coupon = make_coupon(event_id=event.id)
        assert coupon_service.validate(CODE).id == coupon.id


class TestTransfer:
    def test_reserved_coupon_moves_to_destination(
        self, coupon_service, make_coupon, make_order, db_session
    ):
        coupon = make_coupon(status="reserved")
        order_a = make_order(coupon_id=coupon.id, misc="first memo")
        order_b = make_order(coupon_id=coupon.id)
        order_c = make_order()

        coupon_service.transfer(coupon, order_c)

        db_session.expire_all()
        assert order_a.coupon_id is None
        assert order_b.coupon_id is None
        assert order_a.misc.split("\n")[0] == "first memo"
        assert len(order_a.misc.split("\n")) == 2
        assert CODE in order_b.misc
        assert order_c.coupon_id == coupon.id
        assert f"{order_a.id}, {order_b.id}" in order_c.misc
        assert coupon.status == CouponStatus.RESERVED.value

    def test_detach_only(self, coupon_service, make_coupon, make_order, db_session):
        coupon = make_coupon(status="reserved")
        order = make_order(coupon_id=coupon.id)

        coupon_service.transfer(coupon)

        db_session.expire_all()
        assert order.coupon_id is None
        assert order.misc

    def test_orphan_reserved_coupon_logs_warning(
        self, coupon_service, make_coupon, make_order, caplog
    ):
        coupon = make_coupon(status="reserved")
        order = make_order()

        with caplog.at_level(logging.WARNING):
            coupon_service.transfer(coupon, order)

        assert "not held by any order" in caplog.text
        assert order.coupon_id == coupon.id
        assert CODE in order.misc

    @pytest.mark.parametrize("status", [None, "", "provided"])
    def test_available_coupon_is_reserved_and_attached(
        self, coupon_service, make_coupon, make_order, status
    ):
        coupon = make_coupon(status=status)
        order = make_order()

        coupon_service.transfer(coupon, order)

        assert coupon.status == CouponStatus.RESERVED.value
        assert order.coupon_id == coupon.id
        assert order.misc is None

    @pytest.mark.parametrize("status", ["used", "Discarded", "EXPIRED"])
    def test_terminal_coupon_is_left_alone(
        self, coupon_service, make_coupon, make_order, db_session, status
    ):
        coupon = make_coupon(status=status)
        holder = make_order(coupon_id=coupon.id)
        destination = make_order()

        coupon_service.transfer(coupon, destination)

        db_session.expire_all()
        assert coupon.status == status
        assert holder.coupon_id == coupon.id
        assert holder.misc is None
        assert destination.coupon_id is None

    def test_unknown_status_raises(self, coupon_service, make_coupon, make_order):
        coupon = make_coupon(status="pending")
        destination = make_order()

        with pytest.raises(CouponNotUsableError):
            coupon_service.transfer(coupon, destination)

        assert destination.coupon_id is None
