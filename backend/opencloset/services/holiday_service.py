"""Public holidays, with extra days off read from an INI file."""

from __future__ import annotations

import configparser
import logging
from pathlib import Path

import holidays as holiday_calendar

from opencloset.core.config import settings

logger = logging.getLogger(__name__)


def _extra_holidays(year: int, path: str | Path | None) -> list[str]:
    """Read ``MMDD`` keys from the ``[YYYY]`` section of an INI file."""
    if not path:
        return []

    parser = configparser.ConfigParser()
    if not parser.read(path, encoding="utf-8"):
        logger.warning("Extra holidays file %s not found", path)
        return []

    section = str(year)
    if not parser.has_section(section):
        return []
    return [f"{year}-{mmdd[:2]}-{mmdd[2:]}" for mmdd in parser.options(section)]


def get_holidays(year: int | str | None, extra_path: str | Path | None = None) -> list[str]:
    """Sorted ``YYYY-MM-DD`` holidays of a year in Korea.

    Args:
        year: Four digit year.
        extra_path: INI file with company days off; defaults to the
            ``EXTRA_HOLIDAYS_PATH`` setting.
    """
    if not year:
        return []
    year = int(year)

    days = {day.isoformat() for day in holiday_calendar.country_holidays("KR", years=year)}
    if extra_path is None:
        extra_path = settings.EXTRA_HOLIDAYS_PATH
    days.update(_extra_holidays(year, extra_path))
    return sorted(days)
