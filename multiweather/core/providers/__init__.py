from .base import (
    DecodeError,
    HTTPTemperatureProvider,
    ProviderError,
    RequestConfig,
    UpstreamConnectionError,
    UpstreamStatusError,
)
from .openweathermap import OpenWeatherMapProvider
from .wunderground import WundergroundProvider

__all__ = [
    "DecodeError",
    "HTTPTemperatureProvider",
    "OpenWeatherMapProvider",
    "ProviderError",
    "RequestConfig",
    "UpstreamConnectionError",
    "UpstreamStatusError",
    "WundergroundProvider",
]
