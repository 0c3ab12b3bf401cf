"""Pure reporting package for chartsite.

This package turns sparse daily counts into dense chart series and translates
locale patterns into chart formats. It must not import Django or perform any
database I/O.
"""

from .dto import DateRange, NativeFormats, Orientation, RawCount, Report, Scale
from .engine import build_report
from .errors import InvalidRange, MalformedInput, ReportError, UnknownDateRange
from .ranges import list_predefined_ranges, resolve_predefined_range
from .scale import select_scale

__all__ = [
    "DateRange",
    "InvalidRange",
    "MalformedInput",
    "NativeFormats",
    "Orientation",
    "RawCount",
    "Report",
    "ReportError",
    "Scale",
    "UnknownDateRange",
    "build_report",
    "list_predefined_ranges",
    "resolve_predefined_range",
    "select_scale",
]
