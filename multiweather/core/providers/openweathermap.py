"""OpenWeatherMap current weather provider."""
from __future__ import annotations

from typing import Optional

from .base import HTTPTemperatureProvider, _lookup_float


class OpenWeatherMapProvider(HTTPTemperatureProvider):
    """Integration with the OpenWeatherMap current weather endpoint.

    The endpoint reports ``main.temp`` in Kelvin when no ``units`` parameter
    is sent, so no conversion is needed.
    """

    name = "openweathermap"
    base_url = "http://api.openweathermap.org/data/2.5/weather"

    def __init__(self, api_key: str, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self._api_key = api_key
        self.base_url = base_url or self.base_url

    @property
    def api_key(self) -> str:
        return self._api_key

    def temperature(self, city: str) -> float:
        params = {"q": city, "appid": self.api_key}
        response = self._get(self.base_url, params=params)
        kelvin = _lookup_float(self._json(response), "main", "temp")
        self._log.info("%s: %s: %.2f", self.name, city, kelvin)
        return kelvin


__all__ = ["OpenWeatherMapProvider"]
