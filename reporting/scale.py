"""Automatic scale selection for report date ranges."""

from __future__ import annotations

from datetime import date

from .dto import Scale

YEAR_SCALE_MIN_DAYS = 361
MONTH_SCALE_MIN_DAYS = 61


def select_scale(start: date, end: date) -> Scale:
    """Pick the bucket granularity for a date range.

    Args:
        start: Range start.
        end: Range end.

    Returns:
        `Scale.year` above 360 days, `Scale.month` above 60 days, otherwise
        `Scale.day`.
    """

    days = (end - start).days
    if days >= YEAR_SCALE_MIN_DAYS:
        return Scale.year
    if days >= MONTH_SCALE_MIN_DAYS:
        return Scale.month
    return Scale.day
