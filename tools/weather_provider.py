"""Weather provider abstractions supplying the recommendation context."""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

import requests
from pydantic import BaseModel, Field, ValidationError

from models.context import WeatherSnapshot
from tools.observability import instrument_call

LOGGER = logging.getLogger(__name__)

CURRENT_WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"


class _Condition(BaseModel):
    main: str = "unknown"
    description: str = ""


class _Main(BaseModel):
    temp: float
    feels_like: float | None = None
    humidity: float = 0.0


class _Wind(BaseModel):
    speed: float = 0.0


class _CurrentWeatherResponse(BaseModel):
    weather: List[_Condition] = []
    main: _Main
    wind: _Wind = _Wind()


class CoordinatesInput(BaseModel):
    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float
    city: str = ""
    country: str = ""

    @property
    def label(self) -> str:
        return ", ".join(part for part in (self.city, self.country) if part)


def map_weather_condition(main: str, description: str) -> str:
    """Collapse provider condition labels onto the context's condition enum."""

    main_lower = main.lower()
    desc_lower = description.lower()
    if main_lower == "clear":
        return "sunny"
    if main_lower == "clouds":
        return "partly-cloudy" if "partly" in desc_lower else "cloudy"
    if main_lower in {"rain", "drizzle"}:
        return "rainy"
    if main_lower == "snow":
        return "snowy"
    if main_lower in {"thunderstorm", "squall"}:
        return "stormy"

    if "sunny" in desc_lower or "clear" in desc_lower:
        return "sunny"
    if "cloud" in desc_lower:
        return "cloudy"
    if "rain" in desc_lower:
        return "rainy"
    if "snow" in desc_lower:
        return "snowy"
    if "storm" in desc_lower:
        return "stormy"
    return "partly-cloudy"


class WeatherProvider(ABC):
    """Abstract weather provider interface."""

    @abstractmethod
    def get_current_weather(self, location: Location) -> WeatherSnapshot:
        """Return the current weather for a location."""


class OpenWeatherProvider(WeatherProvider):
    """OpenWeather provider with schema validation, caching and graceful fallbacks."""

    def __init__(
        self,
        api_key: str | None = None,
        timeout_seconds: float = 5.0,
        units: str = "imperial",
        cache_seconds: float = 600.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.api_key = api_key
        self.timeout_seconds = timeout_seconds
        self.units = units
        self.cache_seconds = cache_seconds
        self._clock = clock
        self._cache: Dict[Tuple[float, float], Tuple[float, WeatherSnapshot]] = {}

    def _fallback_snapshot(self, location: Location, reason: str) -> WeatherSnapshot:
        LOGGER.warning("Using fallback weather snapshot", extra={"reason": reason})
        return WeatherSnapshot(
            temperature=72.0,
            condition="partly-cloudy",
            humidity=50.0,
            wind_speed=5.0,
            location=location.label or None,
            feels_like=72.0,
        )

    @instrument_call("openweather_current", input_model=CoordinatesInput)
    def _request_current(self, lat: float, lon: float) -> dict:
        params = {"lat": lat, "lon": lon, "appid": self.api_key, "units": self.units}
        response = requests.get(CURRENT_WEATHER_URL, params=params, timeout=self.timeout_seconds)
        response.raise_for_status()
        return response.json()

    def get_current_weather(self, location: Location) -> WeatherSnapshot:
        if not self.api_key:
            return self._fallback_snapshot(location, "missing_api_key")

        cache_key = (round(location.latitude, 4), round(location.longitude, 4))
        cached = self._cache.get(cache_key)
        now = self._clock()
        if cached and now - cached[0] < self.cache_seconds:
            return cached[1]

        try:
            payload = self._request_current(lat=location.latitude, lon=location.longitude)
            parsed = _CurrentWeatherResponse.model_validate(payload)
        except (requests.Timeout, requests.RequestException) as exc:
            LOGGER.error("Weather API unreachable", exc_info=exc)
            return self._fallback_snapshot(location, "request_error")
        except ValidationError as exc:
            LOGGER.error("Weather payload schema validation failed", exc_info=exc)
            return self._fallback_snapshot(location, "schema_validation")

        condition = parsed.weather[0] if parsed.weather else _Condition()
        snapshot = WeatherSnapshot(
            temperature=float(round(parsed.main.temp)),
            condition=map_weather_condition(condition.main, condition.description),
            humidity=parsed.main.humidity,
            wind_speed=float(round(parsed.wind.speed)),
            location=location.label or None,
            feels_like=float(round(parsed.main.feels_like)) if parsed.main.feels_like is not None else None,
        )
        self._cache[cache_key] = (now, snapshot)
        return snapshot


class MockWeatherProvider(WeatherProvider):
    """Offline deterministic weather provider for tests and demos."""

    def __init__(self, snapshot: WeatherSnapshot | None = None) -> None:
        self.snapshot = snapshot or WeatherSnapshot(
            temperature=65.0,
            condition="sunny",
            humidity=40.0,
            wind_speed=4.0,
        )

    def get_current_weather(self, location: Location) -> WeatherSnapshot:
        LOGGER.info("Returning mock weather", extra={"city": location.city})
        return self.snapshot


__all__ = [
    "Location",
    "WeatherProvider",
    "OpenWeatherProvider",
    "MockWeatherProvider",
    "map_weather_condition",
]
