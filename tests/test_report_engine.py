"""Golden tests for report assembly."""

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from reporting import (
    DateRange,
    InvalidRange,
    MalformedInput,
    NativeFormats,
    Orientation,
    RawCount,
    Scale,
    build_report,
)

pytestmark = pytest.mark.unit

US_FORMATS = NativeFormats(
    short_date="M/d/yy",
    decimal="#,##0.###",
    percent="#,##0%",
    currency="¤#,##0.00",
)
WEEK = DateRange(start=date(2024, 1, 1), end=date(2024, 1, 8))


def _build(raw, date_range: DateRange = WEEK, native: NativeFormats = US_FORMATS):
    return build_report(date_range, raw, orientation=Orientation.ltr, native_formats=native)


def test_build_report_week_scenario() -> None:
    """One active day in a 7-day range yields a dense daily series."""

    report = _build([RawCount(date=date(2024, 1, 3), count=5)])

    assert report.scale == Scale.day
    assert report.total == 5
    assert report.report.rows == (
        ("2024-01-01", 0),
        ("2024-01-02", 0),
        ("2024-01-03", 5),
        ("2024-01-04", 0),
        ("2024-01-05", 0),
        ("2024-01-06", 0),
        ("2024-01-07", 0),
    )


def test_build_report_total_matches_row_sum_under_month_scale() -> None:
    """Dropped mid-month rows do not leak into the total."""

    date_range = DateRange(start=date(2024, 1, 1), end=date(2024, 6, 1))
    raw = [
        RawCount(date=date(2024, 2, 1), count=3),
        RawCount(date=date(2024, 2, 14), count=11),
        RawCount(date=date(2024, 5, 1), count=2),
    ]
    report = _build(raw, date_range)

    assert report.scale == Scale.month
    assert report.total == 5
    assert report.total == sum(count for _, count in report.report.rows)


def test_build_report_is_deterministic() -> None:
    """Identical inputs produce identical reports."""

    raw = [RawCount(date=date(2024, 1, 2), count=1), RawCount(date=date(2024, 1, 5), count=4)]
    assert _build(raw) == _build(raw)
    assert _build(raw).as_json() == _build(raw).as_json()


def test_build_report_accepts_pairs_with_string_and_datetime_dates() -> None:
    """Row sources may hand back ISO strings or datetimes instead of dates."""

    raw = [("2024-01-02", 2), (datetime(2024, 1, 4, 23, 59, tzinfo=timezone.utc), 3)]
    report = _build(raw)

    counts = dict(report.report.rows)
    assert counts["2024-01-02"] == 2
    assert counts["2024-01-04"] == 3
    assert report.total == 5


@pytest.mark.parametrize(
    "raw",
    [
        [RawCount(date=date(2024, 1, 2), count=-1)],
        [("2024-13-45", 1)],
        [("yesterday", 1)],
        [(date(2024, 1, 2), True)],
        [(date(2024, 1, 2), 1.5)],
        [(20240102, 1)],
        [(date(2024, 1, 2),)],
    ],
)
def test_build_report_rejects_malformed_rows(raw) -> None:
    """Malformed rows fail the build instead of being clamped or coerced."""

    with pytest.raises(MalformedInput):
        _build(raw)


def test_build_report_validates_range_before_rows() -> None:
    """A reversed range fails fast, even when rows are also malformed."""

    reversed_range = DateRange(start=date(2024, 1, 8), end=date(2024, 1, 1))
    with pytest.raises(InvalidRange):
        _build([("not-a-date", -3)], reversed_range)


def test_build_report_empty_range_has_no_rows() -> None:
    """A zero-length range is valid and produces an empty series."""

    report = _build([], DateRange(start=date(2024, 1, 1), end=date(2024, 1, 1)))

    assert report.report.rows == ()
    assert report.total == 0


def test_report_as_json_matches_chart_payload() -> None:
    """The JSON envelope carries columns, rows, formats, scale and total."""

    report = build_report(
        DateRange(start=date(2024, 1, 1), end=date(2024, 1, 3)),
        [RawCount(date=date(2024, 1, 2), count=4)],
        orientation=Orientation.rtl,
        native_formats=NativeFormats(short_date="dd/MM/yyyy", decimal="??", percent="#0%", currency="¤#0.00"),
    )

    assert report.as_json() == {
        "formats": {
            "shortDateFormats": {"day": "%d/%m", "month": "%m/%Y", "year": "%Y"},
            "percentFormat": ",.0%",
            "currencyFormat": "$.2f",
        },
        "orientation": "rtl",
        "report": {
            "columns": [{"type": "date", "label": "Date"}, {"type": "number", "label": "Count"}],
            "rows": [["2024-01-01", 0], ["2024-01-02", 4]],
        },
        "scale": "day",
        "total": 4,
    }
