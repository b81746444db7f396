"""Window helpers and growth arithmetic for the analytics service."""

from collections.abc import Iterator
from datetime import date, datetime, timedelta

from app.core.constants import GROWTH_RATE_PRECISION


def get_window_boundaries(period_days: int, now: datetime) -> tuple[datetime, datetime]:
    """Get the trailing window ending at ``now``.

    Args:
        period_days: Window length in days.
        now: End of the window (UTC).

    Returns:
        Tuple of (start, end) where start is exactly ``period_days`` before now.
    """
    return now - timedelta(days=period_days), now


def get_previous_window(start: datetime, end: datetime) -> tuple[datetime, datetime]:
    """Get the window of the same duration immediately before ``start``.

    Args:
        start: Start of current window.
        end: End of current window.

    Returns:
        Tuple of (previous_start, previous_end); previous_end equals ``start``
        and is meant to be used as an exclusive bound.
    """
    duration = end - start
    return start - duration, start


def calculate_growth_rate(current: int | float, previous: int | float) -> float:
    """Calculate percentage change between two windows.

    Args:
        current: Current window value.
        previous: Previous window value.

    Returns:
        Percentage change rounded to 2 decimal places, or 0.0 when the
        previous window is empty (there is no baseline to grow from).
    """
    if previous <= 0:
        return 0.0
    return round(((current - previous) / previous) * 100, GROWTH_RATE_PRECISION)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day from ``start`` to ``end`` inclusive."""
    current = start
    while current <= end:
        yield current
        current = current + timedelta(days=1)
