"""HTTP views for the greeting and the averaged weather lookup."""
from __future__ import annotations

import logging
import time
from datetime import timedelta
from typing import Dict, Optional

from django.apps import apps
from django.http import HttpResponse
from rest_framework import status
from rest_framework.negotiation import BaseContentNegotiation
from rest_framework.renderers import JSONRenderer
from rest_framework.response import Response
from rest_framework.views import APIView

from multiweather.core.abstractions import TemperatureProvider, WeatherResult
from multiweather.core.providers.base import ProviderError


logger = logging.getLogger(__name__)

PLAIN_TEXT = "text/plain; charset=utf-8"


def default_aggregator() -> TemperatureProvider:
    return apps.get_app_config("api").aggregator


def lookup(city: str, aggregator: TemperatureProvider) -> WeatherResult:
    """Query ``aggregator`` for ``city`` and time the call."""
    begin = time.perf_counter()
    temp = aggregator.temperature(city)
    return WeatherResult(city=city, temp=temp, took=timedelta(seconds=time.perf_counter() - begin))


def format_took(took: timedelta) -> str:
    """Render a duration the way people read it: ``812.5µs``, ``1.25s``, ``1m2.5s``, ``1h2m0s``."""
    seconds = took.total_seconds()
    if seconds <= 0:
        return "0s"
    if seconds < 1e-6:
        return f"{round(seconds * 1e9)}ns"
    if seconds < 1e-3:
        return f"{_trim(seconds * 1e6)}µs"
    if seconds < 1:
        return f"{_trim(seconds * 1e3)}ms"
    minutes, rest = divmod(seconds, 60)
    hours, minutes = divmod(int(minutes), 60)
    if hours:
        return f"{hours}h{minutes}m{_trim(rest)}s"
    if minutes:
        return f"{minutes}m{_trim(rest)}s"
    return f"{_trim(rest)}s"


def _trim(value: float) -> str:
    return f"{value:.3f}".rstrip("0").rstrip(".")


def _serialize_result(result: WeatherResult) -> Dict[str, object]:
    return {"city": result.city, "temp": result.temp, "took": format_took(result.took)}


class JSONOnlyNegotiation(BaseContentNegotiation):
    """Always answer JSON, whatever the Accept header or ``format`` parameter say."""

    def select_parser(self, request, parsers):
        return parsers[0] if parsers else None

    def select_renderer(self, request, renderers, format_suffix=None):
        return (renderers[0], renderers[0].media_type)


def hello(request) -> HttpResponse:
    return HttpResponse("hello!\n", content_type=PLAIN_TEXT)


class WeatherView(APIView):
    """Return the mean temperature of a city over every configured provider."""

    renderer_classes = [JSONRenderer]
    content_negotiation_class = JSONOnlyNegotiation
    aggregator: Optional[TemperatureProvider] = None

    def get_aggregator(self) -> TemperatureProvider:
        return self.aggregator or default_aggregator()

    def get(self, request, city: str = "", *args, **kwargs):  # noqa: D401
        """Return ``{city, temp, took}`` or a plain-text 500 on upstream failure."""
        try:
            result = lookup(city, self.get_aggregator())
        except ProviderError as exc:
            logger.error("Weather lookup for %r failed: %s", city, exc)
            response = HttpResponse(f"{exc}\n", content_type=PLAIN_TEXT, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
            response["X-Content-Type-Options"] = "nosniff"
            return response
        return Response(_serialize_result(result), status=status.HTTP_200_OK)
