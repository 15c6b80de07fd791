"""Color harmony rules shared by outfit validation and scoring."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence

from models.taxonomy import COMPLEMENTARY_PAIRS, NEUTRAL_COLORS, normalize_color_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HarmonyRule:
    """A named color rule and the bonus it adds to the color score."""

    name: str
    applies: Callable[[Sequence[str]], bool]
    bonus: float


def present_colors(colors: Iterable[Optional[str]]) -> List[str]:
    """Drop missing colors and normalise the rest, keeping duplicates."""

    normalised = [normalize_color_name(color) for color in colors if color]
    return [color for color in normalised if color]


def monochrome(color_list: Iterable[Optional[str]]) -> bool:
    """Return True when the colors collapse to at most two tones."""

    unique_colors = set(present_colors(color_list))
    result = len(unique_colors) <= 2
    logger.debug("monochrome check %s -> %s", unique_colors, result)
    return result


def complementary(color_list: Iterable[Optional[str]]) -> bool:
    """Return True when both members of a complementary pair are present."""

    unique_colors = set(present_colors(color_list))
    result = any(pair <= unique_colors for pair in COMPLEMENTARY_PAIRS)
    logger.debug("complementary check %s -> %s", unique_colors, result)
    return result


def neutral_base(color_list: Iterable[Optional[str]]) -> bool:
    """Return True when at least one neutral anchors the palette."""

    result = bool(set(present_colors(color_list)) & NEUTRAL_COLORS)
    logger.debug("neutral base check -> %s", result)
    return result


HARMONY_RULES: tuple = (
    HarmonyRule(name="monochromatic", applies=monochrome, bonus=0.3),
    HarmonyRule(name="complementary", applies=complementary, bonus=0.4),
    HarmonyRule(name="neutral_base", applies=neutral_base, bonus=0.2),
)


def matching_rules(color_list: Iterable[Optional[str]]) -> List[HarmonyRule]:
    colors = present_colors(color_list)
    return [rule for rule in HARMONY_RULES if rule.applies(colors)]


def has_color_harmony(color_list: Iterable[Optional[str]]) -> bool:
    """Fewer than two colors always pass; otherwise any rule must apply."""

    colors = present_colors(color_list)
    if len(colors) < 2:
        return True
    return bool(matching_rules(colors))


__all__ = [
    "HarmonyRule",
    "HARMONY_RULES",
    "present_colors",
    "monochrome",
    "complementary",
    "neutral_base",
    "matching_rules",
    "has_color_harmony",
]
