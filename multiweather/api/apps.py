"""Application config that loads the upstream keys once at startup."""
from __future__ import annotations

import logging

from django.apps import AppConfig
from django.conf import settings

from multiweather.core.providers.base import RequestConfig
from multiweather.core.services.aggregator import TemperatureAggregator, build_aggregator
from multiweather.secrets import Secrets, load_secrets


logger = logging.getLogger(__name__)


class ApiConfig(AppConfig):
    name = "multiweather.api"
    label = "api"

    secrets: Secrets
    aggregator: TemperatureAggregator

    def ready(self) -> None:
        # A missing or broken secrets file aborts django.setup().
        self.secrets = load_secrets(settings.WEATHER_SECRETS_FILE)
        self.aggregator = build_aggregator(
            self.secrets,
            request_config=RequestConfig(timeout=settings.WEATHER_UPSTREAM_TIMEOUT),
            openweathermap_url=settings.OPENWEATHERMAP_URL,
            wunderground_url=settings.WUNDERGROUND_URL,
        )
        logger.info(
            "Weather providers ready: %s",
            ", ".join(provider.name for provider in self.aggregator.providers),
        )
