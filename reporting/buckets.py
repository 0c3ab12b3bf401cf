"""Dense bucket generation for sparse daily counts.

Raw rows only exist for days with activity. This module walks the requested
range one scale unit at a time and emits a bucket for every step, filling the
count from the raw row dated exactly on the bucket's first day (or zero).
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime

from dateutil.relativedelta import relativedelta

from .dto import Bucket, DateRange, RawCount, Scale
from .errors import InvalidRange, MalformedInput

MAX_BUCKETS = 10_000

_SCALE_STEPS: dict[Scale, relativedelta] = {
    Scale.day: relativedelta(days=1),
    Scale.month: relativedelta(months=1),
    Scale.year: relativedelta(years=1),
}


def coerce_date(value: object) -> date:
    """Coerce a raw row date into a `date`.

    Args:
        value: A `date`, a `datetime` (truncated to its day), or an ISO
            `YYYY-MM-DD` string.

    Returns:
        The parsed date.

    Raises:
        MalformedInput: When the value cannot be interpreted as a day.
    """

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as exc:
            raise MalformedInput(f"Unparsable raw row date: {value!r}.") from exc
    raise MalformedInput(f"Unsupported raw row date: {value!r}.")


def coerce_raw_counts(raw: Iterable[RawCount | tuple[object, object]]) -> tuple[RawCount, ...]:
    """Validate raw rows and normalize their dates.

    Args:
        raw: RawCount rows or `(date, count)` pairs from a row source.

    Returns:
        RawCount rows with `date` values.

    Raises:
        MalformedInput: On an unparsable date or a negative/non-integer count.
    """

    rows: list[RawCount] = []
    for item in raw:
        if isinstance(item, RawCount):
            raw_date, count = item.date, item.count
        else:
            try:
                raw_date, count = item
            except (TypeError, ValueError) as exc:
                raise MalformedInput(f"Raw row must be a (date, count) pair: {item!r}.") from exc
        if isinstance(count, bool) or not isinstance(count, int):
            raise MalformedInput(f"Raw row count must be an integer: {count!r}.")
        if count < 0:
            raise MalformedInput(f"Raw row count must not be negative: {count}.")
        rows.append(RawCount(date=coerce_date(raw_date), count=count))
    return tuple(rows)


def estimate_bucket_count(start: date, end: date, scale: Scale) -> int:
    """Return an upper bound on the buckets `fill_buckets` would emit."""

    if scale == Scale.day:
        return (end - start).days
    if scale == Scale.month:
        return (end.year - start.year) * 12 + (end.month - start.month) + 1
    return end.year - start.year + 1


def fill_buckets(
    start: date,
    end: date,
    scale: Scale,
    raw: Iterable[RawCount | tuple[object, object]],
) -> tuple[Bucket, ...]:
    """Build the dense bucket sequence for a range.

    Buckets are labelled `start + n * unit` for every step strictly before
    `end`. A raw row contributes only when its day equals a bucket's first day,
    so under month/year scale a row dated mid-bucket is dropped rather than
    folded into the enclosing bucket. When several rows share a day the last
    one wins.

    Args:
        start: Range start (first bucket label).
        end: Range end (exclusive bound for bucket labels).
        scale: Bucket width.
        raw: Sparse daily counts, validated with `coerce_raw_counts`; rows
            outside `[start, end]` are ignored.

    Returns:
        Buckets ordered by increasing label.

    Raises:
        InvalidRange: When `start > end` or the range would exceed MAX_BUCKETS.
        MalformedInput: When a raw row has an unusable date or count.
    """

    DateRange(start=start, end=end).validate()
    if estimate_bucket_count(start, end, scale) > MAX_BUCKETS:
        raise InvalidRange(f"Range {start.isoformat()}..{end.isoformat()} is too long for {scale} buckets.")

    counts_by_day: dict[str, int] = {}
    for row in coerce_raw_counts(raw):
        if start <= row.date <= end:
            counts_by_day[row.date.isoformat()] = row.count

    step = _SCALE_STEPS[scale]
    buckets: list[Bucket] = []
    cursor = start
    while cursor < end:
        bucket_start = cursor
        buckets.append(Bucket(label=bucket_start, count=counts_by_day.get(bucket_start.isoformat(), 0)))
        try:
            cursor = start + step * len(buckets)
        except (OverflowError, ValueError):
            # The next step lies past date.max, so it is past `end` as well.
            break
    return tuple(buckets)
