"""Core abstractions for the weather domain."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Protocol


KELVIN_OFFSET = 273.15


def celsius_to_kelvin(value: float) -> float:
    return value + KELVIN_OFFSET


@dataclass(frozen=True, slots=True)
class WeatherResult:
    """Averaged temperature for a city and how long the lookup took."""

    city: str
    temp: float
    took: timedelta


class TemperatureProvider(Protocol):
    """A data source capable of reporting the current temperature of a city."""

    name: str

    def temperature(self, city: str) -> float:
        """Return the temperature in Kelvin or raise ``ProviderError``."""
        ...


__all__ = ["KELVIN_OFFSET", "TemperatureProvider", "WeatherResult", "celsius_to_kelvin"]
