"""DTO types returned by the reporting core.

DTOs are plain, immutable data containers. `as_json()` methods produce the
payload shape consumed by the chart front-end.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from typing import Any

from .errors import InvalidRange


class Scale(StrEnum):
    """Aggregation granularity of a report series."""

    day = "day"
    month = "month"
    year = "year"


class Orientation(StrEnum):
    """Text direction of the requesting locale."""

    ltr = "ltr"
    rtl = "rtl"


class ColumnType(StrEnum):
    """Data type of a report table column."""

    date = "date"
    number = "number"


@dataclass(frozen=True, slots=True)
class DateRange:
    """A report date range.

    Attributes:
        start: First day covered by the series.
        end: Range end; buckets start strictly before it.
    """

    start: date
    end: date

    def validate(self) -> DateRange:
        """Return self when `start <= end`, otherwise raise InvalidRange."""

        if self.start > self.end:
            raise InvalidRange(
                f"Range start {self.start.isoformat()} is after range end {self.end.isoformat()}."
            )
        return self


@dataclass(frozen=True, slots=True)
class RawCount:
    """A sparse activity count for a single day.

    Attributes:
        date: Day on which the activity happened.
        count: Number of events on that day.
    """

    date: date
    count: int


@dataclass(frozen=True, slots=True)
class Bucket:
    """One slot of a dense report series."""

    label: date
    count: int


@dataclass(frozen=True, slots=True)
class Column:
    """Column descriptor of a report data table."""

    type: ColumnType
    label: str

    def as_json(self) -> dict[str, str]:
        """Return a JSON-serializable representation."""

        return {"type": str(self.type), "label": self.label}


@dataclass(frozen=True)
class ReportDataTable:
    """Columns plus `[date, count]` rows.

    Attributes:
        columns: Column descriptors, date first.
        rows: Rows ordered by increasing date label (ISO `YYYY-MM-DD`).
    """

    columns: tuple[Column, ...]
    rows: tuple[tuple[str, int], ...]

    def as_json(self) -> dict[str, Any]:
        """Return a JSON-serializable representation."""

        return {
            "columns": [column.as_json() for column in self.columns],
            "rows": [[label, count] for label, count in self.rows],
        }


@dataclass(frozen=True, slots=True)
class ShortDateFormats:
    """Chart date formats for each scale."""

    day: str
    month: str
    year: str

    def as_json(self) -> dict[str, str]:
        """Return a JSON-serializable representation."""

        return {"day": self.day, "month": self.month, "year": self.year}


@dataclass(frozen=True, slots=True)
class NativeFormats:
    """Locale-native pattern strings supplied by a locale provider.

    Attributes:
        short_date: Short date pattern (e.g. `M/d/yy`).
        decimal: Decimal number pattern (e.g. `#,##0.###`).
        percent: Percent pattern (e.g. `#,##0%`).
        currency: Currency pattern; `¤` stands for the currency symbol.
    """

    short_date: str
    decimal: str = ""
    percent: str = ""
    currency: str = ""


@dataclass(frozen=True, slots=True)
class FormatSet:
    """Chart format specifiers for a report.

    Attributes:
        short_date_formats: Date formats per scale.
        decimal_format: Decimal specifier, or None when the locale pattern is unknown.
        percent_format: Percent specifier, or None when unknown.
        currency_format: Currency specifier, or None when unknown.
    """

    short_date_formats: ShortDateFormats
    decimal_format: str | None = None
    percent_format: str | None = None
    currency_format: str | None = None

    def as_json(self) -> dict[str, Any]:
        """Return the JSON payload, omitting absent number formats."""

        payload: dict[str, Any] = {"shortDateFormats": self.short_date_formats.as_json()}
        optional = {
            "decimalFormat": self.decimal_format,
            "percentFormat": self.percent_format,
            "currencyFormat": self.currency_format,
        }
        payload.update({key: value for key, value in optional.items() if value is not None})
        return payload


@dataclass(frozen=True)
class Report:
    """A complete chart report envelope."""

    formats: FormatSet
    orientation: Orientation
    report: ReportDataTable
    scale: Scale
    total: int

    def as_json(self) -> dict[str, Any]:
        """Return a JSON-serializable representation."""

        return {
            "formats": self.formats.as_json(),
            "orientation": str(self.orientation),
            "report": self.report.as_json(),
            "scale": str(self.scale),
            "total": self.total,
        }
