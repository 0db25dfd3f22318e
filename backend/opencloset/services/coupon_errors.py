"""Errors raised while validating a coupon code.

Every error carries a message that is shown to the customer as is, and the
HTTP status the error handler responds with.
"""


class CouponError(ValueError):
    """Base class for user-facing coupon failures."""

    status_code = 400
    default_message = "사용할 수 없는 쿠폰입니다"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class CouponInvalidFormatError(CouponError):
    default_message = "유효하지 않은 코드"


class CouponNotFoundError(CouponError):
    status_code = 404
    default_message = "쿠폰을 찾을 수 없습니다"


class CouponNotUsableError(CouponError):
    def __init__(self, status: str):
        self.status = status
        super().__init__(f"사용할 수 없는 쿠폰입니다: {status}")


class CouponExpiredError(CouponError):
    default_message = "사용기한이 지난 쿠폰입니다"


class CouponEventEndedError(CouponError):
    def __init__(self, title: str, start: str, end: str):
        self.title = title
        super().__init__(f"{title} 이벤트가 종료되었습니다 ({start} ~ {end})")
