from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Optional

import requests
from requests import Response


class ProviderError(RuntimeError):
    """Base provider error."""


class UpstreamConnectionError(ProviderError):
    """Raised when the upstream could not be reached."""


class UpstreamStatusError(ProviderError):
    """Raised when the upstream answers with anything but HTTP 200."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Got return code {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class DecodeError(ProviderError):
    """Raised when the upstream body is not the JSON we expect."""


@dataclass
class RequestConfig:
    # None waits for the upstream indefinitely.
    timeout: Optional[float] = None


class HTTPTemperatureProvider:
    """Base class for providers backed by a JSON-over-HTTP API."""

    name = "http"

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._log = logging.getLogger(f"{self.__module__}.{self.__class__.__name__}")

    def temperature(self, city: str) -> float:
        raise NotImplementedError

    def _handle_response(self, response: Response) -> Response:
        if response.status_code != 200:
            self._log.error("Provider returned %s: %s", response.status_code, response.text)
            raise UpstreamStatusError(response.status_code, response.text)
        return response

    def _get(self, url: str, **kwargs: Any) -> Response:
        try:
            response = self.session.get(url, timeout=self.request_config.timeout, **kwargs)
        except requests.RequestException as exc:
            self._log.error("Request to %s failed: %s", self.name, exc)
            raise UpstreamConnectionError(str(exc)) from exc
        return self._handle_response(response)

    def _json(self, response: Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            self._log.error("Failed to decode JSON", exc_info=exc)
            raise DecodeError(f"{self.name}: invalid json: {exc}") from exc


def _lookup_float(payload: Any, *path: str) -> float:
    """Walk ``path`` through nested JSON objects and return a float."""

    value = payload
    for key in path:
        if not isinstance(value, dict) or key not in value:
            raise DecodeError(f"missing {'.'.join(path)} in response")
        value = value[key]
    # bool is an int subclass.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"{'.'.join(path)} is not a number")
    try:
        number = float(value)
    except OverflowError as exc:
        raise DecodeError(f"{'.'.join(path)} is out of range") from exc
    if not math.isfinite(number):
        raise DecodeError(f"{'.'.join(path)} is not finite")
    return number


__all__ = [
    "DecodeError",
    "HTTPTemperatureProvider",
    "ProviderError",
    "RequestConfig",
    "UpstreamConnectionError",
    "UpstreamStatusError",
]
