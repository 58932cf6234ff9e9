"""Average the temperature reported by several providers."""
from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

import requests

from multiweather.core.abstractions import TemperatureProvider
from multiweather.core.providers.base import ProviderError, RequestConfig
from multiweather.core.providers.openweathermap import OpenWeatherMapProvider
from multiweather.core.providers.wunderground import WundergroundProvider
from multiweather.secrets import Secrets


logger = logging.getLogger(__name__)


class TemperatureAggregator(TemperatureProvider):
    """Query every provider in order and return the mean temperature.

    Providers are called one after another. The first failure is re-raised
    as is and the remaining providers are skipped.
    """

    name = "aggregate"

    def __init__(self, providers: Iterable[TemperatureProvider]) -> None:
        self._providers: Tuple[TemperatureProvider, ...] = tuple(providers)
        if not self._providers:
            raise ValueError("at least one provider is required")

    @property
    def providers(self) -> Tuple[TemperatureProvider, ...]:
        return self._providers

    def temperature(self, city: str) -> float:
        total = 0.0
        for provider in self._providers:
            try:
                total += provider.temperature(city)
            except ProviderError as exc:
                logger.warning("Weather provider %s failed for %r: %s", provider.name, city, exc)
                raise
        return total / len(self._providers)


def build_aggregator(
    secrets: Secrets,
    *,
    session: Optional[requests.Session] = None,
    request_config: Optional[RequestConfig] = None,
    openweathermap_url: Optional[str] = None,
    wunderground_url: Optional[str] = None,
) -> TemperatureAggregator:
    """Wire the default providers with the keys from ``secrets``."""
    session = session or requests.Session()
    return TemperatureAggregator(
        [
            OpenWeatherMapProvider(
                secrets.openweathermap_api_key,
                base_url=openweathermap_url,
                session=session,
                request_config=request_config,
            ),
            WundergroundProvider(
                secrets.wunderground_api_key,
                base_url=wunderground_url,
                session=session,
                request_config=request_config,
            ),
        ]
    )


__all__ = ["TemperatureAggregator", "build_aggregator"]
