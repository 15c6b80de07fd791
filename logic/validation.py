"""Pydantic schemas and helpers for validating HTTP payloads at the engine edge."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional, Sequence, Union

from pydantic import BaseModel, Field

from models.context import RecommendationContext, UserPreferences, WeatherSnapshot
from models.outfit import OutfitScore
from models.taxonomy import Formality, Occasion, Season, TimeOfDay, WeatherCondition
from models.wardrobe_item import WardrobeItem


class WardrobeItemPayload(BaseModel):
    """A catalog item as sent by clients; storage category names are accepted."""

    id: Union[int, str]
    category: str = Field(min_length=1)
    color: Optional[str] = None
    style: Optional[str] = None
    # "all" is the storage label for year-round pieces
    season: Optional[Union[Season, Literal["all"]]] = None
    formality: Formality = "casual"
    pattern: Optional[str] = None
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    last_worn: Optional[datetime] = None
    image_url: Optional[str] = None
    tags: List[str] = []
    worn_count: int = Field(default=0, ge=0)
    favorite: bool = False


class WeatherPayload(BaseModel):
    temperature: float
    condition: WeatherCondition = "partly-cloudy"
    humidity: float = Field(default=0.0, ge=0, le=100)
    wind_speed: float = Field(default=0.0, ge=0)
    location: Optional[str] = None
    feels_like: Optional[float] = None
    uv_index: Optional[int] = None


class PreferencesPayload(BaseModel):
    style: Optional[str] = None
    colors: List[str] = []


class GenerateOutfitsRequest(BaseModel):
    """Envelope for an outfit generation call."""

    wardrobe: List[WardrobeItemPayload] = []
    occasion: Occasion = "casual"
    weather: Optional[WeatherPayload] = None
    preferences: PreferencesPayload = PreferencesPayload()
    season: str = ""
    time_of_day: TimeOfDay = "morning"
    count: Optional[int] = Field(default=None, ge=1, le=50)


class OutfitScorePayload(BaseModel):
    items: List[Dict[str, Any]]
    score: float = Field(ge=0, le=1)
    breakdown: Dict[str, float]
    reasoning: List[str] = []


class GenerateOutfitsResponse(BaseModel):
    outfits: List[OutfitScorePayload]
    requested: int
    diagnostics: Optional[Dict[str, Any]] = None


class ValidationResult(BaseModel):
    """Error body returned with a 422 when a request payload is rejected."""

    status: Literal["needs_review"] = "needs_review"
    message: str
    details: List[Dict[str, Any]]


def validation_failure(message: str, errors: Sequence[Dict[str, Any]]) -> Dict[str, Any]:
    """Wrap JSON-safe pydantic error entries in the review payload shape."""

    return ValidationResult(message=message, details=list(errors)).model_dump()


def to_wardrobe_items(request: GenerateOutfitsRequest) -> List[WardrobeItem]:
    items = []
    for payload in request.wardrobe:
        # "all" is the storage default and carries no seasonal signal
        season = None if payload.season == "all" else payload.season
        items.append(
            WardrobeItem(
                item_id=str(payload.id),
                category=payload.category,
                color=payload.color,
                style=payload.style,
                season=season,
                formality=payload.formality,
                pattern=payload.pattern,
                rating=payload.rating,
                last_worn=payload.last_worn,
                image_url=payload.image_url,
                tags=list(payload.tags),
                worn_count=payload.worn_count,
                favorite=payload.favorite,
            )
        )
    return items


def to_context(request: GenerateOutfitsRequest) -> RecommendationContext:
    weather = None
    if request.weather is not None:
        weather = WeatherSnapshot(**request.weather.model_dump())
    return RecommendationContext(
        occasion=request.occasion,
        weather=weather,
        user_preferences=UserPreferences(
            style=request.preferences.style,
            colors=tuple(request.preferences.colors),
        ),
        season=request.season,
        time_of_day=request.time_of_day,
    )


def to_response(
    outfits: List[OutfitScore], requested: int, diagnostics: Optional[Dict[str, Any]] = None
) -> GenerateOutfitsResponse:
    return GenerateOutfitsResponse(
        outfits=[OutfitScorePayload(**outfit.to_dict()) for outfit in outfits],
        requested=requested,
        diagnostics=diagnostics,
    )


__all__ = [
    "WardrobeItemPayload",
    "WeatherPayload",
    "PreferencesPayload",
    "GenerateOutfitsRequest",
    "OutfitScorePayload",
    "GenerateOutfitsResponse",
    "ValidationResult",
    "validation_failure",
    "to_wardrobe_items",
    "to_context",
    "to_response",
]
