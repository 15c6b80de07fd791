"""Deterministic suitability filters applied before candidate assembly."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from models.context import RecommendationContext
from models.taxonomy import COLD_THRESHOLD_F, HOT_THRESHOLD_F
from models.wardrobe_item import WardrobeItem


@dataclass(frozen=True)
class FilteringResult:
    """Captures the outcome of a single filtering step."""

    items: List[WardrobeItem]
    removed: Dict[str, str]
    debug: Dict[str, object]


def unsuitability_reason(item: WardrobeItem, context: RecommendationContext) -> Optional[str]:
    """Return why an item cannot be worn in this context, or ``None``."""

    temperature = context.temperature
    if temperature is not None:
        if temperature < COLD_THRESHOLD_F and item.season == "summer":
            return "summer item too light for freezing weather"
        if temperature > HOT_THRESHOLD_F and item.season == "winter":
            return "winter item too warm for hot weather"
    if context.occasion == "formal" and item.formality == "casual":
        return "too casual for formal occasion"
    if context.occasion == "sport" and item.formality == "formal":
        return "too formal for sport"
    return None


def is_item_suitable(item: WardrobeItem, context: RecommendationContext) -> bool:
    return unsuitability_reason(item, context) is None


def filter_by_category(
    items: List[WardrobeItem], category: str, context: RecommendationContext
) -> FilteringResult:
    """Keep items of ``category`` that pass weather and occasion suitability."""

    removed: Dict[str, str] = {}
    kept: List[WardrobeItem] = []
    for item in items:
        if item.category != category:
            continue
        reason = unsuitability_reason(item, context)
        if reason:
            removed[item.item_id] = reason
        else:
            kept.append(item)

    debug = {
        "category": category,
        "kept_count": len(kept),
        "removed_count": len(removed),
        "occasion": context.occasion,
        "temperature": context.temperature,
    }
    return FilteringResult(items=kept, removed=removed, debug=debug)


__all__ = [
    "FilteringResult",
    "unsuitability_reason",
    "is_item_suitable",
    "filter_by_category",
]
