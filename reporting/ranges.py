"""Predefined relative date ranges offered by report pickers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from dateutil.relativedelta import relativedelta

from .dto import DateRange
from .errors import UnknownDateRange

_OFFSET_UNITS = {"day": "days", "week": "weeks", "month": "months"}


@dataclass(frozen=True, slots=True)
class DateRangePreset:
    """A named range relative to "today".

    Attributes:
        key: Stable identifier used in query strings.
        label: Human-friendly label.
        start_offset: Offset of the range start from today, e.g. `-2 weeks`.
        end_offset: Offset of the range end from today; None means today.
    """

    key: str
    label: str
    start_offset: str
    end_offset: str | None = None

    def resolve(self, *, today: date) -> DateRange:
        """Return the concrete DateRange for `today`."""

        end = today if self.end_offset is None else today + parse_offset(self.end_offset)
        return DateRange(start=today + parse_offset(self.start_offset), end=end)

    def as_json(self) -> dict[str, str | None]:
        """Return a JSON-serializable representation."""

        return {"label": self.label, "startDate": self.start_offset, "endDate": self.end_offset}


PREDEFINED_RANGES: tuple[DateRangePreset, ...] = (
    DateRangePreset(key="d7", label="Last 7 days", start_offset="-7 days"),
    DateRangePreset(key="d30", label="Last 30 days", start_offset="-30 days"),
    DateRangePreset(key="lastweek", label="Last Week", start_offset="-2 weeks", end_offset="-1 week"),
    DateRangePreset(key="lastmonth", label="Last Month", start_offset="-2 months", end_offset="-1 month"),
)


def parse_offset(offset: str) -> relativedelta:
    """Parse a relative offset such as `-7 days` or `-1 month`.

    Args:
        offset: Signed amount followed by `day`, `week` or `month` (singular or plural).

    Returns:
        The equivalent relativedelta.

    Raises:
        ValueError: When the offset is not in `<amount> <unit>` form.
    """

    amount, unit = offset.split()
    field = _OFFSET_UNITS.get(unit.lower().removesuffix("s"))
    if field is None:
        raise ValueError(f"Unsupported offset unit: {offset!r}.")
    return relativedelta(**{field: int(amount)})


def list_predefined_ranges() -> dict[str, DateRangePreset]:
    """Return predefined ranges keyed by their stable key, in display order."""

    return {preset.key: preset for preset in PREDEFINED_RANGES}


def resolve_predefined_range(key: str, *, today: date) -> DateRange:
    """Resolve a predefined range key against `today`.

    Raises:
        UnknownDateRange: When `key` is not a predefined range.
    """

    preset = list_predefined_ranges().get(key)
    if preset is None:
        raise UnknownDateRange(f"Unknown date range: {key!r}.")
    return preset.resolve(today=today)
