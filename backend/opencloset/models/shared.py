"""Shared model utilities used across all models."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes read back from SQLite as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
