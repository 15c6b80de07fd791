"""Recommendation context records supplied by the caller per generation run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from models.taxonomy import normalize_color_name, normalize_occasion, normalize_optional


@dataclass(frozen=True)
class WeatherSnapshot:
    """Weather reading in imperial units."""

    temperature: float
    condition: str = "partly-cloudy"
    humidity: float = 0.0
    wind_speed: float = 0.0
    location: Optional[str] = None
    feels_like: Optional[float] = None
    uv_index: Optional[int] = None


@dataclass(frozen=True)
class UserPreferences:
    style: Optional[str] = None
    colors: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "style", normalize_optional(self.style))
        raw_colors = (self.colors,) if isinstance(self.colors, str) else self.colors or ()
        colors = tuple(normalize_color_name(color) for color in raw_colors if color)
        object.__setattr__(self, "colors", tuple(color for color in colors if color))

    def prefers_color(self, color: Optional[str]) -> bool:
        return bool(color) and normalize_color_name(color) in self.colors

    def prefers_style(self, style: Optional[str]) -> bool:
        return self.style is not None and normalize_optional(style) == self.style


@dataclass(frozen=True)
class RecommendationContext:
    """Environment of a single generation request.

    ``time_of_day`` is part of the contract but does not influence scoring.
    """

    occasion: str
    weather: Optional[WeatherSnapshot] = None
    user_preferences: UserPreferences = field(default_factory=UserPreferences)
    season: str = ""
    time_of_day: str = "morning"

    def __post_init__(self) -> None:
        object.__setattr__(self, "occasion", normalize_occasion(self.occasion))

    @property
    def temperature(self) -> Optional[float]:
        return self.weather.temperature if self.weather else None


__all__ = ["WeatherSnapshot", "UserPreferences", "RecommendationContext"]
