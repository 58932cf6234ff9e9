"""Upstream API keys read from a local TOML file at startup."""
from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from django.core.exceptions import ImproperlyConfigured


logger = logging.getLogger(__name__)

OPENWEATHERMAP_KEY = "OpenWeatherMapApiKey"
WUNDERGROUND_KEY = "WeatherUndergroundApiKey"


@dataclass(frozen=True)
class Secrets:
    """API keys for every upstream provider. Opaque, never logged."""

    openweathermap_api_key: str
    wunderground_api_key: str

    def __repr__(self) -> str:
        return "Secrets(openweathermap_api_key='***', wunderground_api_key='***')"


def load_secrets(path: str | Path) -> Secrets:
    """Read the secrets file.

    Expected layout::

        OpenWeatherMapApiKey = "..."
        WeatherUndergroundApiKey = "..."

    Raises :class:`ImproperlyConfigured` when the file cannot be read, is not
    valid TOML, or lacks one of the keys.
    """

    path = Path(path)
    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except OSError as exc:
        raise ImproperlyConfigured(f"Cannot read secrets file {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ImproperlyConfigured(f"Invalid secrets file {path}: {exc}") from exc

    secrets = Secrets(
        openweathermap_api_key=_require_string(data, OPENWEATHERMAP_KEY, path),
        wunderground_api_key=_require_string(data, WUNDERGROUND_KEY, path),
    )
    logger.info("Loaded upstream API keys from %s", path)
    return secrets


def _require_string(data: Dict[str, Any], key: str, path: Path) -> str:
    value = data.get(key)
    if value is None:
        raise ImproperlyConfigured(f"{key} is missing from {path}")
    if not isinstance(value, str):
        raise ImproperlyConfigured(f"{key} in {path} must be a string")
    return value


__all__ = ["Secrets", "load_secrets"]
