"""JSON views for chart reports."""

from __future__ import annotations

import logging

from django.contrib.auth.decorators import login_required
from django.http import HttpRequest, JsonResponse
from django.utils.translation import gettext as _
from django.views.decorators.http import require_GET

from charts.forms import NewUsersReportForm
from charts.services import new_users_report
from reporting import ReportError, list_predefined_ranges

logger = logging.getLogger(__name__)


@login_required
@require_GET
def new_users_report_view(request: HttpRequest) -> JsonResponse:
    """Return the new-users report for the requested range and group."""

    form = NewUsersReportForm(request.GET)
    if not form.is_valid():
        logger.warning("Rejected new users report request: %s", form.errors.as_json())
        return JsonResponse({"ok": False, "errors": form.errors.get_json_data()}, status=400)

    try:
        report = new_users_report(form.selected_range(), group_id=form.selected_group_id())
    except ReportError as exc:
        logger.warning("New users report failed: %s", exc)
        return JsonResponse({"ok": False, "error": str(exc)}, status=400)
    return JsonResponse({"ok": True, **report.as_json()})


@login_required
@require_GET
def date_ranges_view(request: HttpRequest) -> JsonResponse:
    """Return the predefined date ranges offered by report pickers."""

    ranges = {
        key: {**preset.as_json(), "label": _(preset.label)}
        for key, preset in list_predefined_ranges().items()
    }
    return JsonResponse({"ok": True, "dateRanges": ranges})
