"""Canonical taxonomy definitions for wardrobe items and recommendation tables.

This module centralises the labels for categories, occasions, formalities and
colors together with the fixed lookup tables the outfit engine relies on.
Helper functions keep normalisation consistent across models, logic and the
HTTP layer.
"""

from typing import Dict, FrozenSet, Literal, Optional, Tuple


def _normalize_key(value: str) -> str:
    """Normalise a free-form string into a taxonomy key."""

    return value.strip().lower().replace("_", "-")


# Storage uses plural labels (tops/bottoms/dresses/shoes/accessories).
CATEGORY_ALIASES: Dict[str, str] = {
    "tops": "top",
    "bottoms": "bottom",
    "dresses": "dress",
    "shoes": "footwear",
    "shoe": "footwear",
    "footwears": "footwear",
    "accessories": "accessory",
    "outerwears": "outerwear",
}

Occasion = Literal["casual", "work", "formal", "party", "sport", "date", "business"]
Formality = Literal["casual", "business", "formal", "sporty"]
Season = Literal["spring", "summer", "fall", "winter"]
TimeOfDay = Literal["morning", "afternoon", "evening"]
WeatherCondition = Literal["sunny", "partly-cloudy", "cloudy", "rainy", "snowy", "stormy"]

DEFAULT_FORMALITY = "casual"
DEFAULT_REQUIRED_CATEGORIES: Tuple[str, ...] = ("top", "bottom", "footwear")

REQUIRED_CATEGORIES: Dict[str, Tuple[str, ...]] = {
    "casual": ("top", "bottom", "footwear"),
    "work": ("top", "bottom", "footwear", "outerwear"),
    "formal": ("top", "bottom", "footwear", "outerwear", "accessory"),
    "party": ("top", "bottom", "footwear", "accessory"),
    "sport": ("top", "bottom", "footwear"),
    "date": ("top", "bottom", "footwear", "accessory"),
    "business": ("top", "bottom", "footwear", "outerwear"),
}

ACCEPTED_FORMALITY: Dict[str, Tuple[str, ...]] = {
    "casual": ("casual",),
    "work": ("business", "formal"),
    "formal": ("formal",),
    "party": ("casual", "formal"),
    "sport": ("casual",),
    "date": ("casual", "business"),
    "business": ("business", "formal"),
}

COMPLEMENTARY_PAIRS: Tuple[FrozenSet[str], ...] = (
    frozenset({"black", "white"}),
    frozenset({"blue", "orange"}),
    frozenset({"red", "green"}),
    frozenset({"purple", "yellow"}),
)
NEUTRAL_COLORS: FrozenSet[str] = frozenset({"black", "white", "gray", "navy", "brown"})
BOLD_PATTERNS: FrozenSet[str] = frozenset({"striped", "floral", "geometric"})

COLD_THRESHOLD_F = 32
HOT_THRESHOLD_F = 80
MILD_RANGE_F = (50, 70)

COLOR_MAP = {
    "navy blue": "navy",
    "grey": "gray",
    "off white": "white",
    "off-white": "white",
}


def normalize_category(value: Optional[str]) -> str:
    """Map a raw category label onto the canonical vocabulary.

    Unknown labels are returned lower-cased so that they simply never match a
    required category.
    """

    if not value:
        return ""
    key = _normalize_key(value)
    return CATEGORY_ALIASES.get(key, key)


def normalize_occasion(value: Optional[str]) -> str:
    return _normalize_key(value) if value else ""


def normalize_color_name(raw_string: Optional[str]) -> str:
    """Map a raw color string to a lower-case canonical color name."""

    if not raw_string:
        return ""
    key = raw_string.strip().lower()
    return COLOR_MAP.get(key, key)


def normalize_optional(value: Optional[str]) -> Optional[str]:
    """Lower-case and trim an optional tag, collapsing blanks to ``None``."""

    if value is None:
        return None
    key = str(value).strip().lower()
    return key or None


def required_categories_for(occasion: str) -> Tuple[str, ...]:
    return REQUIRED_CATEGORIES.get(normalize_occasion(occasion), DEFAULT_REQUIRED_CATEGORIES)


def accepted_formalities_for(occasion: str) -> Tuple[str, ...]:
    """Return formalities accepted for an occasion, empty for unknown ones."""

    return ACCEPTED_FORMALITY.get(normalize_occasion(occasion), ())


__all__ = [
    "CATEGORY_ALIASES",
    "Occasion",
    "Formality",
    "Season",
    "TimeOfDay",
    "WeatherCondition",
    "DEFAULT_FORMALITY",
    "DEFAULT_REQUIRED_CATEGORIES",
    "REQUIRED_CATEGORIES",
    "ACCEPTED_FORMALITY",
    "COMPLEMENTARY_PAIRS",
    "NEUTRAL_COLORS",
    "BOLD_PATTERNS",
    "COLD_THRESHOLD_F",
    "HOT_THRESHOLD_F",
    "MILD_RANGE_F",
    "normalize_category",
    "normalize_occasion",
    "normalize_color_name",
    "normalize_optional",
    "required_categories_for",
    "accepted_formalities_for",
]
