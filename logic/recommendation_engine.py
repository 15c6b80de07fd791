"""Outfit recommendation engine: generate candidates, score them, rank them."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, List, Optional, Sequence

from logic.outfit_builder import DEFAULT_ATTEMPT_BUDGET, generate_valid_outfits
from logic.outfit_scoring import score_outfit
from logic.selection import RandomSource
from models.context import RecommendationContext
from models.outfit import OutfitScore
from models.wardrobe_item import WardrobeItem
from stylist_app.logging_config import get_logger, log_event, operation_context

logger = get_logger(__name__)

DEFAULT_COUNT = 6


@dataclass(frozen=True)
class EngineSettings:
    attempt_budget: int = DEFAULT_ATTEMPT_BUDGET
    default_count: int = DEFAULT_COUNT
    random_seed: Optional[int] = None


@dataclass(frozen=True)
class RecommendationResult:
    outfits: List[OutfitScore]
    diagnostics: Dict[str, object]


class OutfitRecommendationEngine:
    """Stateless two-phase engine.

    Settings are immutable and every call draws from its own random source,
    so a single engine can serve concurrent requests. Equal scores keep no
    particular order.
    """

    def __init__(
        self,
        settings: EngineSettings | None = None,
        clock: Callable[[], datetime] | None = None,
        rng_factory: Callable[[], RandomSource] | None = None,
    ) -> None:
        self.settings = settings or EngineSettings()
        self._clock = clock or datetime.now
        self._rng_factory = rng_factory or self._default_rng_factory

    def _default_rng_factory(self) -> RandomSource:
        return random.Random(self.settings.random_seed)

    def generate_outfits(
        self,
        wardrobe: Sequence[WardrobeItem],
        context: RecommendationContext,
        count: int | None = None,
        rng: RandomSource | None = None,
    ) -> List[OutfitScore]:
        """Return up to ``count`` outfits sorted by descending total score."""

        return self.generate_with_diagnostics(wardrobe, context, count=count, rng=rng).outfits

    def generate_with_diagnostics(
        self,
        wardrobe: Sequence[WardrobeItem],
        context: RecommendationContext,
        count: int | None = None,
        rng: RandomSource | None = None,
    ) -> RecommendationResult:
        requested = self.settings.default_count if count is None else count
        with operation_context("engine:generate_outfits") as correlation_id:
            log_event(
                logger,
                logging.INFO,
                "engine_call_started",
                correlation_id=correlation_id,
                wardrobe_size=len(wardrobe),
                occasion=context.occasion,
                has_weather=context.weather is not None,
                count=requested,
            )
            if requested <= 0 or not wardrobe:
                diagnostics: Dict[str, object] = {"valid": 0, "returned": 0, "attempts": 0}
                log_event(logger, logging.INFO, "engine_call_completed", correlation_id=correlation_id, **diagnostics)
                return RecommendationResult(outfits=[], diagnostics=diagnostics)

            now = self._clock()
            source = rng or self._rng_factory()
            generation = generate_valid_outfits(
                wardrobe, context, source, now, attempt_budget=self.settings.attempt_budget
            )
            scored = [score_outfit(outfit, context, now) for outfit in generation.outfits]
            scored.sort(key=lambda outfit: outfit.score, reverse=True)
            top = scored[:requested]

            diagnostics = dict(generation.diagnostics)
            diagnostics["returned"] = len(top)
            diagnostics["best_score"] = top[0].score if top else None
            log_event(
                logger,
                logging.INFO,
                "engine_call_completed",
                correlation_id=correlation_id,
                valid=generation.diagnostics["valid"],
                returned=len(top),
                aborted=generation.diagnostics["aborted"],
                rejections=generation.diagnostics["rejections"],
            )
            return RecommendationResult(outfits=top, diagnostics=diagnostics)


def generate_outfits(
    wardrobe: Sequence[WardrobeItem],
    context: RecommendationContext,
    count: int = DEFAULT_COUNT,
    rng: RandomSource | None = None,
) -> List[OutfitScore]:
    """Convenience wrapper around a default-configured engine."""

    return OutfitRecommendationEngine().generate_outfits(wardrobe, context, count=count, rng=rng)


__all__ = [
    "DEFAULT_COUNT",
    "EngineSettings",
    "RecommendationResult",
    "OutfitRecommendationEngine",
    "generate_outfits",
]
