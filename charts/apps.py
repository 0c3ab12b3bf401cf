"""App configuration for the charts Django app."""

from __future__ import annotations

from django.apps import AppConfig


class ChartsConfig(AppConfig):
    """Configuration for the `charts` app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "charts"
