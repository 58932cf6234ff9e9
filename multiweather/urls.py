"""URL configuration for the weather service."""
from __future__ import annotations

from django.urls import path, re_path

from multiweather.api.views import WeatherView, hello

urlpatterns = [
    path("", hello, name="hello"),
    # Everything after the prefix is the city, slashes included.
    re_path(r"^weather/(?P<city>.*)$", WeatherView.as_view(), name="weather"),
]
