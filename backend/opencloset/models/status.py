"""Workflow status identifiers shared by orders and clothes."""

from enum import IntEnum


class Status(IntEnum):
    RENTABLE = 1
    RENTAL = 2
    RENTALESS = 3
    RESERVATION = 4
    CLEANING = 5
    REPAIR = 6
    LOST = 7
    DISCARD = 8
    RETURNED = 9
    PARTIAL_RETURNED = 10
    RETURNING = 11
    NOT_VISITED = 12
    VISITED = 13
    BOOKED = 14
    SHIPPING_BOOKED = 15
    MEASUREMENT = 16
    SELECT = 17
    BOX = 18
    PAYMENT = 19
    FITTING_ROOM1 = 20
    FITTING_ROOM2 = 21
    FITTING_ROOM3 = 22
    FITTING_ROOM4 = 23
    FITTING_ROOM5 = 24
    FITTING_ROOM6 = 25
    FITTING_ROOM7 = 26
    FITTING_ROOM8 = 27
    FITTING_ROOM9 = 28
    FITTING_ROOM10 = 29
    FITTING_ROOM11 = 30
    FITTING_ROOM12 = 31
    FITTING_ROOM13 = 32
    FITTING_ROOM14 = 33
    FITTING_ROOM15 = 34
    FITTING_ROOM16 = 35
    FITTING_ROOM17 = 36
    FITTING_ROOM18 = 37
    FITTING_ROOM19 = 38
    FITTING_ROOM20 = 39
    NO_RENTAL = 40
    CANCEL_BOX = 41
    REFUND = 42
    NO_SIZE = 43
    BOXED = 44
    RECYCLE_1 = 45
    RECYCLE_2 = 46
    UNUSABLE = 47
    CHOOSE_CLOTHES = 48
    CHOOSE_ADDRESS = 49
    PAYMENT_DONE = 50
    WAITING_DEPOSIT = 51
    PAYBACK = 52

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]


STATUS_LABELS: dict[Status, str] = {
    Status.RENTABLE: "대여가능",
    Status.RENTAL: "대여중",
    Status.RENTALESS: "대여불가",
    Status.RESERVATION: "예약",
    Status.CLEANING: "세탁",
    Status.REPAIR: "수선",
    Status.LOST: "분실",
    Status.DISCARD: "폐기",
    Status.RETURNED: "반납",
    Status.PARTIAL_RETURNED: "부분반납",
    Status.RETURNING: "반납배송중",
    Status.NOT_VISITED: "방문안함",
    Status.VISITED: "방문",
    Status.BOOKED: "방문예약",
    Status.SHIPPING_BOOKED: "배송예약",
    Status.MEASUREMENT: "치수측정",
    Status.SELECT: "의류준비",
    Status.BOX: "포장",
    Status.PAYMENT: "결제대기",
    **{Status(20 + i): f"탈의{i + 1:02d}" for i in range(20)},
    Status.NO_RENTAL: "대여안함",
    Status.CANCEL_BOX: "포장취소",
    Status.REFUND: "환불",
    Status.NO_SIZE: "사이즈없음",
    Status.BOXED: "포장완료",
    Status.RECYCLE_1: "재활용(옷캔)",
    Status.RECYCLE_2: "재활용(비백)",
    Status.UNUSABLE: "사용못함",
    Status.CHOOSE_CLOTHES: "의류선택",
    Status.CHOOSE_ADDRESS: "주소선택",
    Status.PAYMENT_DONE: "결제완료",
    Status.WAITING_DEPOSIT: "입금대기",
    Status.PAYBACK: "환불대기",
}

# Online orders in these states still list every priced category as a detail.
EARLY_ONLINE_STATUSES = frozenset(
    {
        Status.CHOOSE_CLOTHES,
        Status.CHOOSE_ADDRESS,
        Status.PAYMENT,
        Status.PAYMENT_DONE,
        Status.WAITING_DEPOSIT,
        Status.PAYBACK,
    }
)
