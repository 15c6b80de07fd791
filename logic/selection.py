"""Preference-weighted random selection of wardrobe items."""

from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import Protocol, Sequence, TypeVar

from models.context import RecommendationContext
from models.wardrobe_item import WardrobeItem

logger = logging.getLogger(__name__)

T = TypeVar("T")

NEVER_WORN_DAYS = 365
DEFAULT_RATING = 3
PREFERRED_COLOR_BOOST = 1.5
PREFERRED_STYLE_BOOST = 1.3
MAX_VARIETY_BOOST = 2.0


class RandomSource(Protocol):
    def random(self) -> float:
        ...


def days_since_worn(item: WardrobeItem, now: datetime) -> int:
    """Whole days since the item was last worn, never negative."""

    if item.last_worn is None:
        return NEVER_WORN_DAYS
    elapsed = (now - item.last_worn).total_seconds() / 86400
    return max(0, math.floor(elapsed))


def calculate_item_weight(item: WardrobeItem, context: RecommendationContext, now: datetime) -> float:
    weight = 1.0
    preferences = context.user_preferences
    if preferences.prefers_color(item.color):
        weight *= PREFERRED_COLOR_BOOST
    if preferences.prefers_style(item.style):
        weight *= PREFERRED_STYLE_BOOST
    weight *= (item.rating or DEFAULT_RATING) / DEFAULT_RATING
    weight *= min(MAX_VARIETY_BOOST, 1 + days_since_worn(item, now) / 30)
    return weight


def weighted_random_selection(items: Sequence[T], weights: Sequence[float], rng: RandomSource) -> T:
    """Roulette-wheel pick: probability of each item is proportional to its weight.

    Raises ``ValueError`` for an empty sequence or mismatched lengths.
    """

    if not items:
        raise ValueError("cannot select from an empty sequence")
    if len(items) != len(weights):
        raise ValueError("items and weights must have the same length")

    total_weight = sum(weights)
    if total_weight <= 0:
        logger.debug("Non-positive total weight, falling back to uniform pick")
        index = min(int(rng.random() * len(items)), len(items) - 1)
        return items[index]

    remaining = rng.random() * total_weight
    for item, weight in zip(items, weights):
        remaining -= weight
        if remaining <= 0:
            return item
    # float residue
    return items[-1]


__all__ = [
    "RandomSource",
    "NEVER_WORN_DAYS",
    "days_since_worn",
    "calculate_item_weight",
    "weighted_random_selection",
]
