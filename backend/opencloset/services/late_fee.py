"""Late fee arithmetic for rentals extended past their return date."""

from decimal import ROUND_HALF_UP, Decimal


def extension_price(price: int, additional_day: int, extension_rate: float) -> int:
    """Price of a rental extended by ``additional_day`` days.

    Each extra day adds ``extension_rate`` of the base price.
    """
    rate = Decimal(str(extension_rate))
    total = Decimal(price) * (1 + rate * (additional_day or 0))
    return int(total.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
