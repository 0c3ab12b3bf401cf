"""Service-layer functions for the charts app.

Services in `charts` coordinate Django concerns (ORM queries, settings, the
active translation) with the pure `reporting` package.
"""

from __future__ import annotations

import logging

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.exceptions import ImproperlyConfigured
from django.db.models import Count
from django.db.models.functions import TruncDate
from django.utils.translation import get_language, get_language_bidi
from django.utils.translation import gettext as _

from reporting import DateRange, NativeFormats, Orientation, RawCount, Report, build_report

logger = logging.getLogger(__name__)


def fetch_raw_counts(date_range: DateRange, *, group_id: int | None = None) -> list[RawCount]:
    """Count users who joined on each day of a range.

    Args:
        date_range: Inclusive day range to query.
        group_id: Optional `auth.Group` id restricting the users counted.

    Returns:
        One RawCount per day with at least one new user, ordered by day.
    """

    users = get_user_model().objects.filter(
        date_joined__date__gte=date_range.start,
        date_joined__date__lte=date_range.end,
    )
    if group_id is not None:
        users = users.filter(groups__id=group_id)
    rows = (
        users.annotate(day=TruncDate("date_joined"))
        .values("day")
        .annotate(total=Count("id"))
        .order_by("day")
    )
    return [RawCount(date=row["day"], count=row["total"]) for row in rows]


def native_formats(language: str | None = None) -> NativeFormats:
    """Return the native patterns configured for a language.

    Lookup falls back from a regional code (`de-at`) to its base language
    (`de`) and then to `settings.CHART_DEFAULT_LOCALE`.

    Args:
        language: Language code; defaults to the active translation.

    Returns:
        NativeFormats for the best matching configured locale.

    Raises:
        ImproperlyConfigured: When not even the default locale is configured.
    """

    configured: dict[str, dict[str, str]] = settings.CHART_LOCALE_FORMATS
    code = (language or get_language() or settings.CHART_DEFAULT_LOCALE).lower().replace("_", "-")
    candidates = (code, code.split("-")[0], settings.CHART_DEFAULT_LOCALE)
    for candidate in candidates:
        patterns = configured.get(candidate)
        if patterns is not None:
            if candidate != code:
                logger.debug("No chart formats for %s; using %s", code, candidate)
            return NativeFormats(**patterns)
    raise ImproperlyConfigured(f"CHART_LOCALE_FORMATS has no entry for {settings.CHART_DEFAULT_LOCALE!r}.")


def current_orientation() -> Orientation:
    """Return the text direction of the active translation."""

    return Orientation.rtl if get_language_bidi() else Orientation.ltr


def new_users_report(date_range: DateRange, *, group_id: int | None = None) -> Report:
    """Build the new-users chart report for the active locale.

    Args:
        date_range: Requested range.
        group_id: Optional `auth.Group` id restricting the users counted.

    Returns:
        The assembled Report.

    Raises:
        InvalidRange: When the range is reversed or too long.
    """

    date_range.validate()
    raw = fetch_raw_counts(date_range, group_id=group_id)
    report = build_report(
        date_range,
        raw,
        orientation=current_orientation(),
        native_formats=native_formats(),
        date_label=_("Date"),
        count_label=_("Count"),
    )
    logger.info(
        "Built new users report: start=%s end=%s group=%s scale=%s rows=%s total=%s",
        date_range.start,
        date_range.end,
        group_id,
        report.scale,
        len(report.report.rows),
        report.total,
    )
    return report
