"""URL configuration for core views."""

from __future__ import annotations

from django.urls import path

from core import views

app_name = "core"

urlpatterns = [
    path("", views.project_list, name="project_list"),
    path("projects/<int:project_id>/wave/", views.wave_chart, name="wave_chart"),
    path("projects/<int:project_id>/wave.svg", views.wave_chart_svg, name="wave_chart_svg"),
    path("api/projects/<int:project_id>/wave/", views.wave_chart_api, name="wave_chart_api"),
    path("api/projects/<int:project_id>/wave/hit/", views.wave_chart_hit_api, name="wave_chart_hit_api"),
]
