"""API URL configuration."""
from __future__ import annotations

from django.urls import path

from backend.api.views import TemperatureView, ThreadInfoView, ToolsView, WeatherView

urlpatterns = [
    path("weather", WeatherView.as_view(), name="weather"),
    path("temperature", TemperatureView.as_view(), name="temperature"),
    path("tools", ToolsView.as_view(), name="tools"),
    path("threads/info", ThreadInfoView.as_view(), name="thread-info"),
]
