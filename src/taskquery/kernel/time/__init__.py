"""Kernel time – UTC helpers used for task timestamps."""
from __future__ import annotations

from datetime import UTC, datetime
from typing import Any


def utc_now() -> datetime:
    """Shorthand for ``datetime.now(UTC)``."""
    return datetime.now(UTC)


def to_utc(value: Any) -> Any:
    """Normalise datetimes to aware UTC; other values pass through.

    Naive datetimes are taken to be UTC.
    """
    if not isinstance(value, datetime):
        return value
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


__all__ = ["to_utc", "utc_now"]
