"""Weather provider coverage with the HTTP layer stubbed out."""

from pathlib import Path
import sys

import pytest
import requests

sys.path.append(str(Path(__file__).resolve().parents[1]))

from models.context import WeatherSnapshot
from tools import weather_provider
from tools.weather_provider import Location, MockWeatherProvider, OpenWeatherProvider, map_weather_condition

NYC = Location(latitude=40.7128, longitude=-74.0060, city="New York", country="US")


class _FakeResponse:
    def __init__(self, payload: dict, status: int = 200) -> None:
        self._payload = payload
        self.status_code = status

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"status {self.status_code}")

    def json(self) -> dict:
        return self._payload


def _payload(main: str = "Clouds", description: str = "partly cloudy", temp: float = 58.6) -> dict:
    return {
        "weather": [{"main": main, "description": description}],
        "main": {"temp": temp, "feels_like": 55.2, "humidity": 61},
        "wind": {"speed": 7.4},
        "name": "New York",
    }


@pytest.mark.parametrize(
    "main, description, expected",
    [
        ("Clear", "clear sky", "sunny"),
        ("Clouds", "partly cloudy", "partly-cloudy"),
        ("Clouds", "overcast clouds", "cloudy"),
        ("Drizzle", "light drizzle", "rainy"),
        ("Snow", "snow", "snowy"),
        ("Squall", "squalls", "stormy"),
        ("Mist", "mist", "partly-cloudy"),
        ("Haze", "clouds of haze", "cloudy"),
    ],
)
def test_condition_mapping(main, description, expected):
    assert map_weather_condition(main, description) == expected


def test_missing_api_key_uses_fallback_without_network(monkeypatch):
    def _fail(*_, **__):
        raise AssertionError("network should not be used")

    monkeypatch.setattr(weather_provider.requests, "get", _fail)
    snapshot = OpenWeatherProvider(api_key=None).get_current_weather(NYC)
    assert snapshot.temperature == 72.0
    assert snapshot.location == "New York, US"


def test_successful_fetch_maps_and_rounds(monkeypatch):
    calls = []

    def _fake_get(url, params, timeout):
        calls.append(params)
        return _FakeResponse(_payload())

    monkeypatch.setattr(weather_provider.requests, "get", _fake_get)
    provider = OpenWeatherProvider(api_key="key", clock=lambda: 100.0)
    snapshot = provider.get_current_weather(NYC)

    assert snapshot.temperature == 59.0
    assert snapshot.condition == "partly-cloudy"
    assert snapshot.wind_speed == 7.0
    assert snapshot.feels_like == 55.0
    assert calls[0]["units"] == "imperial"


def test_results_are_cached_per_location(monkeypatch):
    now = {"t": 0.0}
    calls = []

    def _fake_get(url, params, timeout):
        calls.append(params)
        return _FakeResponse(_payload(temp=40))

    monkeypatch.setattr(weather_provider.requests, "get", _fake_get)
    provider = OpenWeatherProvider(api_key="key", cache_seconds=600, clock=lambda: now["t"])
    provider.get_current_weather(NYC)
    now["t"] = 300.0
    provider.get_current_weather(NYC)
    assert len(calls) == 1
    now["t"] = 700.0
    provider.get_current_weather(NYC)
    assert len(calls) == 2


def test_request_errors_fall_back(monkeypatch):
    def _raise(*_, **__):
        raise requests.Timeout("slow")

    monkeypatch.setattr(weather_provider.requests, "get", _raise)
    snapshot = OpenWeatherProvider(api_key="key").get_current_weather(NYC)
    assert snapshot.condition == "partly-cloudy"
    assert snapshot.temperature == 72.0


def test_http_errors_fall_back(monkeypatch):
    monkeypatch.setattr(weather_provider.requests, "get", lambda *_, **__: _FakeResponse({}, status=500))
    assert OpenWeatherProvider(api_key="key").get_current_weather(NYC).temperature == 72.0


def test_schema_errors_fall_back(monkeypatch):
    monkeypatch.setattr(weather_provider.requests, "get", lambda *_, **__: _FakeResponse({"weather": []}))
    assert OpenWeatherProvider(api_key="key").get_current_weather(NYC).temperature == 72.0


def test_mock_provider_returns_fixed_snapshot():
    snapshot = WeatherSnapshot(temperature=15, condition="snowy")
    assert MockWeatherProvider(snapshot).get_current_weather(NYC) is snapshot
