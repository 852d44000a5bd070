"""Utilities for dealing with timestamps.

Telemetry events and log records carry aware UTC datetimes; the helpers
below are the single source of truth for obtaining them.
"""
from __future__ import annotations

from datetime import datetime, timezone


def now_utc() -> datetime:
    """Return the current UTC datetime with tzinfo."""

    return datetime.now(timezone.utc)


def from_unix_timestamp(value: float) -> datetime:
    """Convert UNIX seconds to an aware UTC datetime."""

    return datetime.fromtimestamp(value, tz=timezone.utc)
