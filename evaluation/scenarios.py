"""Evaluation scenarios exercising occasions, weather and wardrobe shapes."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

from models.context import UserPreferences, WeatherSnapshot

EVALUATION_NOW = datetime(2025, 11, 30, 9, 0)


@dataclass
class EvaluationScenario:
    name: str
    description: str
    occasion: str
    weather: Optional[WeatherSnapshot]
    wardrobe_items: List[Dict[str, object]]
    expectations: Dict[str, object]
    preferences: UserPreferences = field(default_factory=UserPreferences)
    seed: int = 7
    now: datetime = EVALUATION_NOW


def _item(item_id: str, category: str, **attributes: object) -> Dict[str, object]:
    return {"id": item_id, "category": category, **attributes}


def _casual_basics() -> List[Dict[str, object]]:
    return [
        _item("tee_black", "tops", color="black", style="casual"),
        _item("jeans_white", "bottoms", color="white", style="casual"),
        _item("sneakers_black", "shoes", color="black", style="casual"),
    ]


def _business_wardrobe() -> List[Dict[str, object]]:
    return [
        _item("shirt_white", "tops", color="white", style="classic", formality="business", rating=5),
        _item("shirt_blue", "tops", color="blue", style="classic", formality="business"),
        _item("trousers_gray", "bottoms", color="gray", style="classic", formality="business"),
        _item("trousers_navy", "bottoms", color="navy", style="classic", formality="business"),
        _item("loafers_brown", "shoes", color="brown", style="classic", formality="business"),
        _item("coat_black", "outerwear", color="black", style="classic", formality="business", season="winter"),
    ]


def _party_wardrobe() -> List[Dict[str, object]]:
    return [
        _item("tee_white", "tops", color="white", style="trendy", pattern="striped"),
        _item("jeans_blue", "bottoms", color="blue", style="trendy"),
        _item("sneakers_white", "shoes", color="white", style="trendy"),
        _item("bag_black", "accessories", color="black", style="trendy"),
        _item("scarf_floral", "accessories", color="red", style="trendy", pattern="floral"),
    ]


SCENARIOS: List[EvaluationScenario] = [
    EvaluationScenario(
        name="casual_neutral_palette",
        description="Black and white basics on a day without weather data.",
        occasion="casual",
        weather=None,
        wardrobe_items=_casual_basics(),
        expectations={
            "min_outfits": 1,
            "required_categories": ["top", "bottom", "footwear"],
            "min_color_score": 0.8,
            "reasoning": "Excellent color harmony",
        },
    ),
    EvaluationScenario(
        name="formal_with_casual_wardrobe",
        description="A formal occasion cannot be dressed from casual pieces.",
        occasion="formal",
        weather=None,
        wardrobe_items=_casual_basics(),
        expectations={"max_outfits": 0},
    ),
    EvaluationScenario(
        name="freezing_summer_wardrobe",
        description="Summer-only wardrobe on a freezing day yields nothing.",
        occasion="casual",
        weather=WeatherSnapshot(temperature=20, condition="snowy"),
        wardrobe_items=[{**raw, "season": "summer"} for raw in _casual_basics()],
        expectations={"max_outfits": 0},
    ),
    EvaluationScenario(
        name="business_cold_morning",
        description="Business occasion requires a layer on a cold morning.",
        occasion="business",
        weather=WeatherSnapshot(temperature=28, condition="cloudy"),
        wardrobe_items=_business_wardrobe(),
        expectations={"min_outfits": 1, "required_categories": ["top", "bottom", "footwear", "outerwear"]},
        preferences=UserPreferences(style="classic", colors=("navy",)),
    ),
    EvaluationScenario(
        name="party_single_bold_pattern",
        description="Party outfits carry an accessory and never two bold patterns.",
        occasion="party",
        weather=WeatherSnapshot(temperature=65, condition="sunny"),
        wardrobe_items=_party_wardrobe(),
        expectations={"min_outfits": 1, "required_categories": ["top", "bottom", "footwear", "accessory"]},
    ),
]


__all__ = ["EvaluationScenario", "SCENARIOS", "EVALUATION_NOW"]
