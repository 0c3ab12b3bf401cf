"""Report assembly entry points.

`build_report` composes scale selection, bucket filling and format translation
into the envelope returned to chart clients.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .buckets import fill_buckets
from .dto import (
    Bucket,
    Column,
    ColumnType,
    DateRange,
    FormatSet,
    NativeFormats,
    Orientation,
    RawCount,
    Report,
    ReportDataTable,
    Scale,
)
from .formats import translate_formats
from .scale import select_scale

DEFAULT_DATE_LABEL = "Date"
DEFAULT_COUNT_LABEL = "Count"


def assemble_report(
    buckets: Sequence[Bucket],
    *,
    formats: FormatSet,
    orientation: Orientation,
    scale: Scale,
    date_label: str = DEFAULT_DATE_LABEL,
    count_label: str = DEFAULT_COUNT_LABEL,
) -> Report:
    """Package a dense bucket sequence into a Report.

    Args:
        buckets: Dense buckets ordered by label.
        formats: Chart formats for the requesting locale.
        orientation: Text direction for the requesting locale.
        scale: Scale the buckets were generated at.
        date_label: Label of the date column.
        count_label: Label of the count column.

    Returns:
        Report whose `total` is the sum of the bucket counts.
    """

    rows = tuple((bucket.label.isoformat(), bucket.count) for bucket in buckets)
    table = ReportDataTable(
        columns=(
            Column(type=ColumnType.date, label=date_label),
            Column(type=ColumnType.number, label=count_label),
        ),
        rows=rows,
    )
    return Report(
        formats=formats,
        orientation=orientation,
        report=table,
        scale=scale,
        total=sum(count for _, count in rows),
    )


def build_report(
    date_range: DateRange,
    raw: Iterable[RawCount | tuple[object, object]],
    *,
    orientation: Orientation,
    native_formats: NativeFormats,
    date_label: str = DEFAULT_DATE_LABEL,
    count_label: str = DEFAULT_COUNT_LABEL,
) -> Report:
    """Build a gap-filled report from sparse daily counts.

    Args:
        date_range: Requested range.
        raw: Sparse daily counts from a row source.
        orientation: Text direction of the requesting locale.
        native_formats: Locale-native patterns to translate for the chart.
        date_label: Label of the date column.
        count_label: Label of the count column.

    Returns:
        The assembled Report.

    Raises:
        InvalidRange: When the range is reversed or too long.
        MalformedInput: When a raw row is unusable.
    """

    date_range.validate()
    scale = select_scale(date_range.start, date_range.end)
    buckets = fill_buckets(date_range.start, date_range.end, scale, raw)
    return assemble_report(
        buckets,
        formats=translate_formats(native_formats),
        orientation=orientation,
        scale=scale,
        date_label=date_label,
        count_label=count_label,
    )
