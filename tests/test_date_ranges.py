"""Unit tests for predefined report date ranges."""

from __future__ import annotations

from datetime import date

import pytest

from dateutil.relativedelta import relativedelta

from reporting import DateRange, UnknownDateRange, list_predefined_ranges, resolve_predefined_range
from reporting.ranges import parse_offset

pytestmark = pytest.mark.unit

TODAY = date(2024, 3, 10)


def test_list_predefined_ranges_keys_in_display_order() -> None:
    """The picker offers the fixed presets in a stable order."""

    assert list(list_predefined_ranges()) == ["d7", "d30", "lastweek", "lastmonth"]


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("d7", DateRange(start=date(2024, 3, 3), end=date(2024, 3, 10))),
        ("d30", DateRange(start=date(2024, 2, 9), end=date(2024, 3, 10))),
        ("lastweek", DateRange(start=date(2024, 2, 25), end=date(2024, 3, 3))),
        ("lastmonth", DateRange(start=date(2024, 1, 10), end=date(2024, 2, 10))),
    ],
)
def test_resolve_predefined_range(key: str, expected: DateRange) -> None:
    """Relative offsets resolve against the supplied reference date."""

    assert resolve_predefined_range(key, today=TODAY) == expected


def test_resolve_predefined_range_rejects_unknown_key() -> None:
    """Unknown keys raise instead of falling back to a default range."""

    with pytest.raises(UnknownDateRange):
        resolve_predefined_range("d90", today=TODAY)


def test_predefined_range_as_json_describes_offsets() -> None:
    """Offsets are described relative to now; a missing end means today."""

    payload = {key: preset.as_json() for key, preset in list_predefined_ranges().items()}

    assert payload == {
        "d7": {"label": "Last 7 days", "startDate": "-7 days", "endDate": None},
        "d30": {"label": "Last 30 days", "startDate": "-30 days", "endDate": None},
        "lastweek": {"label": "Last Week", "startDate": "-2 weeks", "endDate": "-1 week"},
        "lastmonth": {"label": "Last Month", "startDate": "-2 months", "endDate": "-1 month"},
    }


@pytest.mark.parametrize(
    ("offset", "expected"),
    [
        ("-7 days", relativedelta(days=-7)),
        ("-1 day", relativedelta(days=-1)),
        ("-2 weeks", relativedelta(weeks=-2)),
        ("-1 week", relativedelta(weeks=-1)),
        ("-1 month", relativedelta(months=-1)),
    ],
)
def test_parse_offset_supports_days_weeks_and_months(offset: str, expected: relativedelta) -> None:
    """Offsets keep their original unit and parse into calendar deltas."""

    assert parse_offset(offset) == expected


@pytest.mark.parametrize("offset", ["-2 fortnights", "two weeks", "-7"])
def test_parse_offset_rejects_unknown_forms(offset: str) -> None:
    """Offsets outside `<amount> <unit>` form are rejected."""

    with pytest.raises(ValueError):
        parse_offset(offset)
