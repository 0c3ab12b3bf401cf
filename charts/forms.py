"""Forms for chart report requests."""

from __future__ import annotations

from datetime import date

from django import forms
from django.contrib.auth.models import Group
from django.utils import timezone

from reporting import DateRange, list_predefined_ranges, resolve_predefined_range


class NewUsersReportForm(forms.Form):
    """Validate the query string of a new-users report request.

    Either a predefined `date_range` key or both `start_date` and `end_date`
    must be provided. Range ordering is left to the reporting core so a
    reversed range surfaces as `InvalidRange`.
    """

    date_range = forms.ChoiceField(
        required=False,
        choices=(),
        label="Date range",
        help_text="Predefined range; overrides start and end dates.",
    )
    start_date = forms.DateField(
        required=False,
        widget=forms.DateInput(attrs={"type": "date"}),
        label="Start date",
    )
    end_date = forms.DateField(
        required=False,
        widget=forms.DateInput(attrs={"type": "date"}),
        label="End date",
    )
    user_group = forms.ModelChoiceField(
        required=False,
        queryset=Group.objects.all(),
        label="User group",
        empty_label="All users",
    )

    def __init__(self, *args, today: date | None = None, **kwargs) -> None:
        """Initialize the form with the date predefined ranges resolve against.

        Args:
            *args: Positional args forwarded to `forms.Form`.
            today: Reference date for predefined ranges; defaults to the local date.
            **kwargs: Keyword args forwarded to `forms.Form`.
        """

        super().__init__(*args, **kwargs)
        self._today = today or timezone.localdate()
        self.fields["date_range"].choices = [("", "Custom")] + [
            (key, preset.label) for key, preset in list_predefined_ranges().items()
        ]

    def clean(self) -> dict[str, object]:
        """Resolve predefined ranges and require explicit bounds otherwise."""

        cleaned = super().clean()
        key = cleaned.get("date_range")
        if key:
            resolved = resolve_predefined_range(str(key), today=self._today)
            cleaned["start_date"] = resolved.start
            cleaned["end_date"] = resolved.end
            return cleaned

        for field in ("start_date", "end_date"):
            if not cleaned.get(field) and field not in self.errors:
                self.add_error(field, "Provide a date or choose a predefined range.")
        return cleaned

    def selected_range(self) -> DateRange:
        """Return the requested DateRange; only valid after `is_valid()`."""

        return DateRange(start=self.cleaned_data["start_date"], end=self.cleaned_data["end_date"])

    def selected_group_id(self) -> int | None:
        """Return the selected group id, or None for all users."""

        group = self.cleaned_data.get("user_group")
        return None if group is None else group.pk
