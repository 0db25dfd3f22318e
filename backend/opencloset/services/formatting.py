"""Small formatting helpers used by templates and line-item names."""

import hashlib
from datetime import date
from decimal import Decimal, InvalidOperation
from urllib.parse import urlencode

from opencloset.core.config import settings


def commify(number: object) -> str:
    """Format a number with thousands separators.

    >>> commify(10000)
    '10,000'
    """
    if number is None:
        return ""
    try:
        value = Decimal(str(number).replace(",", "").strip())
    except InvalidOperation:
        return str(number)
    return f"{value:,}"


def age(birth: int | str | None, today: date | None = None) -> int | None:
    """Age in years from a birth year."""
    if not birth:
        return None
    try:
        year = int(birth)
    except (TypeError, ValueError):
        return None
    today = today or date.today()
    return today.year - year


def code2decimal(code: str | None) -> int | None:
    """Decimal value of a clothes code.

    Clothes codes are base-36 numbers padded with a leading zero,
    e.g. ``0J001``.
    """
    if not code:
        return None
    digits = code.strip().upper()
    if len(digits) > 1:
        digits = digits.removeprefix("0")
    try:
        return int(digits, 36)
    except ValueError:
        return None


def avatar_url(email: str | None, size: int | None = None, default: str | None = None) -> str:
    """Gravatar URL for an email address."""
    digest = hashlib.md5((email or "").strip().lower().encode("utf-8")).hexdigest()
    params: dict[str, str | int] = {}
    if size:
        params["s"] = size
    if default:
        params["d"] = default
    url = f"{settings.GRAVATAR_URL}/{digest}"
    if params:
        url = f"{url}?{urlencode(params)}"
    return url
