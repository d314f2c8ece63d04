"""Timestamp helpers for console status lines."""

from __future__ import annotations

from datetime import datetime, timezone

from passcraft.core.defaults import TIMESTAMP_FORMAT


def get_time_now(now: datetime | None = None) -> str:
    """Format *now* (default: current time) as UTC ``YYYY-MM-DD HH:MM:SS``.

    Naive datetimes are assumed to already be UTC.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.strftime(TIMESTAMP_FORMAT)
