"""Weather Underground conditions provider."""
from __future__ import annotations

from typing import Optional
from urllib.parse import quote

from .base import HTTPTemperatureProvider, _lookup_float
from ..abstractions import celsius_to_kelvin


class WundergroundProvider(HTTPTemperatureProvider):
    """Integration with the Weather Underground ``conditions`` feature.

    The key and the city are path segments, and the observation is reported
    in Celsius.
    """

    name = "wunderground"
    base_url = "http://api.wunderground.com/api"

    def __init__(self, api_key: str, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self._api_key = api_key
        self.base_url = (base_url or self.base_url).rstrip("/")

    @property
    def api_key(self) -> str:
        return self._api_key

    def temperature(self, city: str) -> float:
        response = self._get(self._conditions_url(city))
        celsius = _lookup_float(self._json(response), "current_observation", "temp_c")
        kelvin = celsius_to_kelvin(celsius)
        self._log.info("%s: %s: %.2f", self.name, city, kelvin)
        return kelvin

    def _conditions_url(self, city: str) -> str:
        key = quote(self.api_key, safe="")
        return f"{self.base_url}/{key}/conditions/q/{quote(city, safe='')}.json"


__all__ = ["WundergroundProvider"]
