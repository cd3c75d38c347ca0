# src/whycookin/db/time.py
"""Time utilities for database models."""

from datetime import UTC, datetime, time


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(UTC)


def start_of_today() -> datetime:
    """Return midnight (UTC) of the current day."""
    return datetime.combine(utcnow().date(), time.min, tzinfo=UTC)
