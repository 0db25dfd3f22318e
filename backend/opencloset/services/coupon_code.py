"""Checksum-bearing coupon codes.

A code is three dash-delimited parts of four symbols each. The last symbol of
a part is a check digit computed from the first three and the part's position,
so typos are caught before the database is queried.
"""

import re
import secrets

from opencloset.services.coupon_errors import CouponInvalidFormatError

SYMBOLS = "0123456789ABCDEFGHJKLMNPQRTUVWXY"
PARTS = 3
PART_LENGTH = 4

_SYMBOL_INDEX = {symbol: index for index, symbol in enumerate(SYMBOLS)}
_LOOKALIKES = str.maketrans("OIZS", "0125")
_NON_ALNUM = re.compile(r"[^0-9A-Z]+")


def normalize(code: str) -> str:
    """Upper-case, fix look-alike letters and drop separators."""
    return _NON_ALNUM.sub("", code.upper().translate(_LOOKALIKES))


def check_digit(data: str, position: int) -> str:
    """Compute the check symbol of a part from its first three symbols."""
    check = position
    for symbol in data[: PART_LENGTH - 1]:
        check = check * 19 + _SYMBOL_INDEX[symbol]
    return SYMBOLS[check % 31]


def parse(code: str | None) -> str:
    """Return the canonical ``XXXX-XXXX-XXXX`` form of a code.

    Raises:
        CouponInvalidFormatError: If the code has the wrong length or a part
            fails its checksum.
    """
    symbols = normalize(code or "")
    if len(symbols) != PARTS * PART_LENGTH:
        raise CouponInvalidFormatError()

    parts = [symbols[i : i + PART_LENGTH] for i in range(0, len(symbols), PART_LENGTH)]
    for position, part in enumerate(parts, start=1):
        if part[-1] != check_digit(part, position):
            raise CouponInvalidFormatError()
    return "-".join(parts)


def generate() -> str:
    """Generate a random valid code."""
    parts = []
    for position in range(1, PARTS + 1):
        data = "".join(secrets.choice(SYMBOLS) for _ in range(PART_LENGTH - 1))
        parts.append(data + check_digit(data, position))
    return "-".join(parts)
