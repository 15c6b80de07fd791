"""Validity rules applied to a fully assembled outfit candidate."""

from __future__ import annotations

from typing import List, Sequence

from models.color_theory import has_color_harmony
from models.taxonomy import BOLD_PATTERNS
from models.wardrobe_item import WardrobeItem


def has_good_color_harmony(outfit: Sequence[WardrobeItem]) -> bool:
    return has_color_harmony(item.color for item in outfit)


def has_good_pattern_combination(outfit: Sequence[WardrobeItem]) -> bool:
    """At most one bold pattern per outfit."""

    bold = [item.pattern for item in outfit if item.pattern in BOLD_PATTERNS]
    return len(bold) <= 1


def has_consistent_formality(outfit: Sequence[WardrobeItem]) -> bool:
    formalities = {item.formality for item in outfit}
    return not {"formal", "casual"} <= formalities


def validity_failures(outfit: Sequence[WardrobeItem]) -> List[str]:
    """Return the names of the rules the outfit breaks."""

    failures: List[str] = []
    if not has_good_color_harmony(outfit):
        failures.append("color_clash")
    if not has_good_pattern_combination(outfit):
        failures.append("pattern_conflict")
    if not has_consistent_formality(outfit):
        failures.append("formality_mix")
    return failures


def is_valid_outfit(outfit: Sequence[WardrobeItem]) -> bool:
    return not validity_failures(outfit)


__all__ = [
    "has_good_color_harmony",
    "has_good_pattern_combination",
    "has_consistent_formality",
    "validity_failures",
    "is_valid_outfit",
]
