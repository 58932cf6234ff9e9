from __future__ import annotations

import pytest
import requests

from multiweather.core.providers.base import (
    DecodeError,
    ProviderError,
    RequestConfig,
    UpstreamConnectionError,
    UpstreamStatusError,
)
from multiweather.core.providers.openweathermap import OpenWeatherMapProvider
from multiweather.core.providers.wunderground import WundergroundProvider

from stubs import OWM_URL, WU_URL


def make_owm(**kwargs) -> OpenWeatherMapProvider:
    return OpenWeatherMapProvider(api_key="owm-key", base_url=OWM_URL, **kwargs)


def make_wu(**kwargs) -> WundergroundProvider:
    return WundergroundProvider(api_key="wu-key", base_url=WU_URL, **kwargs)


def test_openweathermap_returns_kelvin_as_reported(requests_mock):
    requests_mock.get(OWM_URL, json={"name": "Boston", "main": {"temp": 280.32}})

    assert make_owm().temperature("boston") == pytest.approx(280.32)

    request = requests_mock.last_request
    assert request.qs == {"q": ["boston"], "appid": ["owm-key"]}


def test_openweathermap_sends_city_verbatim(requests_mock):
    requests_mock.get(OWM_URL, json={"main": {"temp": 290}})

    make_owm().temperature("são paulo")

    assert requests_mock.last_request.qs["q"] == ["são paulo"]


def test_wunderground_converts_zero_celsius(requests_mock):
    requests_mock.get(
        f"{WU_URL}/wu-key/conditions/q/Boston.json",
        json={"current_observation": {"temp_c": 0}},
    )

    assert make_wu().temperature("Boston") == pytest.approx(273.15)


def test_wunderground_converts_celsius(requests_mock):
    requests_mock.get(
        f"{WU_URL}/wu-key/conditions/q/Boston.json",
        json={"current_observation": {"temp_c": 8.85}},
    )

    assert make_wu().temperature("Boston") == pytest.approx(282.0)


def test_wunderground_quotes_city_in_path(requests_mock):
    requests_mock.get(
        f"{WU_URL}/wu-key/conditions/q/New%20York.json",
        json={"current_observation": {"temp_c": -3.5}},
    )

    assert make_wu().temperature("New York") == pytest.approx(269.65)


@pytest.mark.parametrize("status_code", [401, 404, 500, 503])
def test_non_200_status_carries_code_and_body(requests_mock, status_code):
    requests_mock.get(OWM_URL, status_code=status_code, text="city not found")

    with pytest.raises(UpstreamStatusError) as excinfo:
        make_owm().temperature("Atlantis")

    assert excinfo.value.status_code == status_code
    assert excinfo.value.body == "city not found"
    assert str(excinfo.value) == f"Got return code {status_code}: city not found"


def test_other_success_codes_are_rejected(requests_mock):
    requests_mock.get(f"{WU_URL}/wu-key/conditions/q/Boston.json", status_code=204, text="")

    with pytest.raises(UpstreamStatusError) as excinfo:
        make_wu().temperature("Boston")

    assert excinfo.value.status_code == 204


def test_malformed_json_raises_decode_error(requests_mock):
    requests_mock.get(OWM_URL, text="{not json")

    with pytest.raises(DecodeError):
        make_owm().temperature("Boston")


def test_wunderground_malformed_json_raises_decode_error(requests_mock):
    requests_mock.get(f"{WU_URL}/wu-key/conditions/q/Boston.json", text="<html>oops</html>")

    with pytest.raises(DecodeError):
        make_wu().temperature("Boston")


@pytest.mark.parametrize(
    "body",
    [
        "{}",
        '{"main": {}}',
        '{"main": null}',
        '{"main": {"temp": "warm"}}',
        '{"main": {"temp": "280"}}',
        '{"main": {"temp": true}}',
        '{"main": {"temp": 1' + "0" * 400 + "}}",
        '{"main": {"temp": NaN}}',
        '{"main": {"temp": Infinity}}',
        '{"main": {"temp": -Infinity}}',
        "[1, 2, 3]",
    ],
)
def test_unexpected_schema_raises_decode_error(requests_mock, body):
    requests_mock.get(OWM_URL, text=body)

    with pytest.raises(DecodeError):
        make_owm().temperature("Boston")


def test_connection_failure_is_wrapped(requests_mock):
    requests_mock.get(OWM_URL, exc=requests.exceptions.ConnectionError("connection refused"))

    with pytest.raises(UpstreamConnectionError) as excinfo:
        make_owm().temperature("Boston")

    assert "connection refused" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, requests.exceptions.ConnectionError)


def test_every_failure_is_a_provider_error(requests_mock):
    requests_mock.get(OWM_URL, exc=requests.exceptions.Timeout("slow"))

    with pytest.raises(ProviderError):
        make_owm(request_config=RequestConfig(timeout=0.5)).temperature("Boston")


def test_request_timeout_is_forwarded(requests_mock):
    requests_mock.get(OWM_URL, json={"main": {"temp": 280}})

    make_owm(request_config=RequestConfig(timeout=2.5)).temperature("Boston")
    make_owm().temperature("Boston")

    assert requests_mock.request_history[0].timeout == 2.5
    assert requests_mock.request_history[1].timeout is None


def test_api_key_accessors():
    assert make_owm().api_key == "owm-key"
    assert make_wu().api_key == "wu-key"
