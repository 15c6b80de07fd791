"""Six-factor scoring and reasoning for candidate outfits."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Sequence

from models.color_theory import matching_rules, present_colors
from models.context import RecommendationContext
from models.outfit import OutfitScore, ScoreBreakdown
from models.taxonomy import COLD_THRESHOLD_F, HOT_THRESHOLD_F, MILD_RANGE_F, accepted_formalities_for
from models.wardrobe_item import WardrobeItem

NO_WEATHER_SCORE = 0.8
REASONING_THRESHOLD = 0.8


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


@dataclass(frozen=True)
class StyleRule:
    """A style heuristic whose raw value is scaled by ``weight``."""

    name: str
    description: str
    weight: float
    apply: Callable[[Sequence[WardrobeItem], RecommendationContext], float]


def _layering(items: Sequence[WardrobeItem], context: RecommendationContext) -> float:
    categories = {item.category for item in items}
    return 0.2 if {"outerwear", "top"} <= categories else 0.0


def _balance(items: Sequence[WardrobeItem], context: RecommendationContext) -> float:
    return 0.2 if len(items) >= 3 else 0.1


STYLE_RULES = (
    StyleRule("layering", "Good layering for weather versatility", 0.1, _layering),
    StyleRule("balance", "Balanced proportions", 0.1, _balance),
)


def weather_score(outfit: Sequence[WardrobeItem], context: RecommendationContext) -> float:
    temperature = context.temperature
    if temperature is None:
        return NO_WEATHER_SCORE
    score = 0.5
    low, high = MILD_RANGE_F
    for item in outfit:
        if temperature < COLD_THRESHOLD_F and item.season == "winter":
            score += 0.2
        elif temperature > HOT_THRESHOLD_F and item.season == "summer":
            score += 0.2
        elif low <= temperature <= high:
            score += 0.1
    return _clamp(score)


def occasion_score(outfit: Sequence[WardrobeItem], context: RecommendationContext) -> float:
    accepted = accepted_formalities_for(context.occasion)
    formality_match = any(item.formality in accepted for item in outfit)
    coverage = min(1.0, len(outfit) / 3)
    return _clamp((0.7 if formality_match else 0.3) + coverage * 0.3)


def style_score(
    outfit: Sequence[WardrobeItem],
    context: RecommendationContext,
    rules: Sequence[StyleRule] = STYLE_RULES,
) -> float:
    score = 0.5
    # An untagged item counts as one more distinct style.
    styles = {item.style for item in outfit}
    if len(styles) == 1:
        score += 0.3
    elif len(styles) == 2:
        score += 0.1
    for rule in rules:
        score += rule.apply(outfit, context) * rule.weight
    return _clamp(score)


def color_score(outfit: Sequence[WardrobeItem], context: RecommendationContext) -> float:
    colors = present_colors(item.color for item in outfit)
    if len(colors) < 2:
        return 0.5
    score = 0.5 + sum(rule.bonus for rule in matching_rules(colors))
    preferred = [color for color in colors if context.user_preferences.prefers_color(color)]
    score += (len(preferred) / len(colors)) * 0.2
    return _clamp(score)


def variety_score(outfit: Sequence[WardrobeItem], now: datetime) -> float:
    """Penalise pieces already worn on the current calendar date."""

    if not outfit:
        return 1.0
    today = now.date()
    worn_today = [item for item in outfit if item.last_worn and item.last_worn.date() == today]
    return max(0.2, 1 - len(worn_today) / len(outfit))


def user_preference_score(outfit: Sequence[WardrobeItem], context: RecommendationContext) -> float:
    preferences = context.user_preferences
    score = 0.5
    for item in outfit:
        if preferences.prefers_style(item.style):
            score += 0.1
        if preferences.prefers_color(item.color):
            score += 0.1
        if item.rating and item.rating >= 4:
            score += 0.1
    return _clamp(score)


def generate_reasoning(breakdown: ScoreBreakdown, context: RecommendationContext) -> List[str]:
    reasoning: List[str] = []
    if breakdown.weather > REASONING_THRESHOLD:
        reasoning.append("Perfect for current weather conditions")
    if breakdown.occasion > REASONING_THRESHOLD:
        reasoning.append(f"Well-suited for {context.occasion} occasion")
    if breakdown.style > REASONING_THRESHOLD:
        reasoning.append("Cohesive, well-balanced style")
    if breakdown.color > REASONING_THRESHOLD:
        reasoning.append("Excellent color harmony")
    if breakdown.variety > REASONING_THRESHOLD:
        reasoning.append("Fresh combination you haven't worn recently")
    if breakdown.user_preference > REASONING_THRESHOLD:
        reasoning.append("Matches your style preferences")
    return reasoning


def score_outfit(outfit: Sequence[WardrobeItem], context: RecommendationContext, now: datetime) -> OutfitScore:
    """Score an outfit on all six factors; the total is their plain mean."""

    breakdown = ScoreBreakdown(
        weather=weather_score(outfit, context),
        occasion=occasion_score(outfit, context),
        style=style_score(outfit, context),
        color=color_score(outfit, context),
        variety=variety_score(outfit, now),
        user_preference=user_preference_score(outfit, context),
    )
    values = breakdown.values()
    total = sum(values) / len(values)
    return OutfitScore(
        items=list(outfit),
        score=total,
        breakdown=breakdown,
        reasoning=generate_reasoning(breakdown, context),
    )


__all__ = [
    "StyleRule",
    "STYLE_RULES",
    "weather_score",
    "occasion_score",
    "style_score",
    "color_score",
    "variety_score",
    "user_preference_score",
    "generate_reasoning",
    "score_outfit",
]
