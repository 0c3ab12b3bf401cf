"""Exceptions raised by the reporting core."""

from __future__ import annotations


class ReportError(ValueError):
    """Base class for report-building failures."""


class InvalidRange(ReportError):
    """Raised when a date range cannot produce a bounded series."""


class MalformedInput(ReportError):
    """Raised when a raw count row has an unusable date or count."""


class UnknownDateRange(ReportError):
    """Raised when a predefined date range key is not recognized."""
