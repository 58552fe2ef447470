"""Date helpers for Trade Scout.

Event dates stay free text end to end; only the prompt date and export
timestamps are produced here.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional


def format_long_date(value: Optional[date] = None) -> str:
    """Format a date as ``Month D, YYYY`` (e.g. ``October 19, 2026``).

    Args:
        value: Date to format; defaults to today in local time.

    Returns:
        Long-form English date string.
    """
    if value is None:
        value = date.today()
    return f"{value:%B} {value.day}, {value.year}"


def epoch_millis(now: Optional[datetime] = None) -> int:
    """Return a Unix timestamp in milliseconds.

    Args:
        now: Moment to convert; defaults to the current UTC time.

    Returns:
        Milliseconds since the Unix epoch.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    return int(now.timestamp() * 1000)
