"""Randomised outfit candidate generation with transparent diagnostics."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional, Sequence, Tuple

from logic.contextual_filtering import filter_by_category
from logic.outfit_rules import validity_failures
from logic.selection import RandomSource, calculate_item_weight, weighted_random_selection
from models.context import RecommendationContext
from models.taxonomy import required_categories_for
from models.wardrobe_item import WardrobeItem

logger = logging.getLogger(__name__)

DEFAULT_ATTEMPT_BUDGET = 100


@dataclass(frozen=True)
class CategoryPool:
    """Suitable items of one category with their selection weights."""

    category: str
    items: List[WardrobeItem]
    weights: List[float]


@dataclass(frozen=True)
class CandidateGenerationResult:
    outfits: List[List[WardrobeItem]]
    diagnostics: Dict[str, object]


def build_category_pools(
    wardrobe: Sequence[WardrobeItem],
    categories: Sequence[str],
    context: RecommendationContext,
    now: datetime,
) -> Tuple[List[CategoryPool], Dict[str, str]]:
    """Filter and weight the wardrobe once per required category."""

    pools: List[CategoryPool] = []
    removed: Dict[str, str] = {}
    for category in categories:
        result = filter_by_category(list(wardrobe), category, context)
        removed.update(result.removed)
        weights = [calculate_item_weight(item, context, now) for item in result.items]
        pools.append(CategoryPool(category=category, items=result.items, weights=weights))
        logger.debug("Category %s has %s suitable items", category, len(result.items))
    return pools, removed


def generate_single_outfit(pools: Sequence[CategoryPool], rng: RandomSource) -> Optional[List[WardrobeItem]]:
    """Pick one item per required category, or ``None`` when one is empty."""

    outfit: List[WardrobeItem] = []
    for pool in pools:
        if not pool.items:
            return None
        outfit.append(weighted_random_selection(pool.items, pool.weights, rng))
    return outfit


def generate_valid_outfits(
    wardrobe: Sequence[WardrobeItem],
    context: RecommendationContext,
    rng: RandomSource,
    now: datetime,
    attempt_budget: int = DEFAULT_ATTEMPT_BUDGET,
) -> CandidateGenerationResult:
    """Spend the whole attempt budget and keep every candidate passing validity.

    The budget is not reduced when enough outfits are found; fewer valid
    outfits than requested is a normal outcome.
    """

    categories = required_categories_for(context.occasion)
    pools, removed = build_category_pools(wardrobe, categories, context, now)
    empty = [pool.category for pool in pools if not pool.items]

    outfits: List[List[WardrobeItem]] = []
    rejections: Dict[str, int] = {}
    aborted = 0
    for _ in range(max(0, attempt_budget)):
        outfit = generate_single_outfit(pools, rng)
        if outfit is None:
            aborted += 1
            continue
        failures = validity_failures(outfit)
        if failures:
            for failure in failures:
                rejections[failure] = rejections.get(failure, 0) + 1
            continue
        outfits.append(outfit)

    if empty:
        logger.info("No suitable items for required categories %s", empty)
    logger.info(
        "Generated %s valid outfits from %s attempts for occasion=%s",
        len(outfits),
        attempt_budget,
        context.occasion,
    )
    diagnostics: Dict[str, object] = {
        "required_categories": list(categories),
        "empty_categories": empty,
        "unsuitable": removed,
        "attempts": max(0, attempt_budget),
        "aborted": aborted,
        "rejections": rejections,
        "valid": len(outfits),
    }
    return CandidateGenerationResult(outfits=outfits, diagnostics=diagnostics)


__all__ = [
    "DEFAULT_ATTEMPT_BUDGET",
    "CategoryPool",
    "CandidateGenerationResult",
    "build_category_pools",
    "generate_single_outfit",
    "generate_valid_outfits",
]
