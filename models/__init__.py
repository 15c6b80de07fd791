"""Model package exports."""

from models.taxonomy import *  # noqa: F401,F403
from models.context import RecommendationContext, UserPreferences, WeatherSnapshot
from models.outfit import OutfitScore, ScoreBreakdown
from models.wardrobe_item import WardrobeItem, from_raw_metadata

__all__ = [
    "WardrobeItem",
    "from_raw_metadata",
    "RecommendationContext",
    "UserPreferences",
    "WeatherSnapshot",
    "OutfitScore",
    "ScoreBreakdown",
]
