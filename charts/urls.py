"""URL configuration for chart report views."""

from __future__ import annotations

from django.urls import path

from charts import views

app_name = "charts"

urlpatterns = [
    path("new-users/", views.new_users_report_view, name="new_users_report"),
    path("date-ranges/", views.date_ranges_view, name="date_ranges"),
]
