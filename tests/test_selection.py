"""Tests for weighted random selection and per-item weights."""

from datetime import datetime, timedelta
from pathlib import Path
import random
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.selection import calculate_item_weight, days_since_worn, weighted_random_selection
from models.context import RecommendationContext, UserPreferences
from models.wardrobe_item import WardrobeItem

NOW = datetime(2025, 11, 30, 9, 0)


class ScriptedRandom:
    """Random source returning a fixed sequence of values."""

    def __init__(self, *values: float) -> None:
        self._values = list(values)

    def random(self) -> float:
        return self._values.pop(0)


def test_equal_weights_hit_each_interval():
    items = ["a", "b", "c"]
    weights = [1, 1, 1]
    rng = ScriptedRandom(0.1, 0.5, 0.9)
    picks = [weighted_random_selection(items, weights, rng) for _ in range(3)]
    assert picks == ["a", "b", "c"]


def test_boundaries_belong_to_the_lower_item():
    items = ["a", "b", "c"]
    weights = [1.0, 1.0, 2.0]
    rng = ScriptedRandom(0.0, 0.25, 0.5, 0.75)
    picks = [weighted_random_selection(items, weights, rng) for _ in range(4)]
    assert picks == ["a", "a", "b", "c"]


def test_top_of_range_selects_last_item():
    assert weighted_random_selection(["a", "b", "c"], [1, 1, 1], ScriptedRandom(0.9999999)) == "c"


def test_selection_frequency_is_proportional_to_weight():
    rng = random.Random(1234)
    draws = [weighted_random_selection(["light", "heavy"], [1, 3], rng) for _ in range(10000)]
    share = draws.count("heavy") / len(draws)
    assert 0.72 < share < 0.78


def test_zero_total_weight_falls_back_to_uniform_pick():
    rng = ScriptedRandom(0.0, 0.99)
    assert weighted_random_selection(["a", "b"], [0, 0], rng) == "a"
    assert weighted_random_selection(["a", "b"], [0, 0], rng) == "b"


def test_selection_rejects_bad_input():
    with pytest.raises(ValueError):
        weighted_random_selection([], [], ScriptedRandom(0.5))
    with pytest.raises(ValueError):
        weighted_random_selection(["a"], [1, 2], ScriptedRandom(0.5))


def test_days_since_worn_defaults_and_clamps():
    assert days_since_worn(WardrobeItem(item_id="1", category="top"), NOW) == 365
    worn = WardrobeItem(item_id="2", category="top", last_worn=NOW - timedelta(days=10, hours=5))
    assert days_since_worn(worn, NOW) == 10
    future = WardrobeItem(item_id="3", category="top", last_worn=NOW + timedelta(days=3))
    assert days_since_worn(future, NOW) == 0


def test_item_weight_without_preferences_is_capped_variety_boost():
    context = RecommendationContext(occasion="casual")
    item = WardrobeItem(item_id="1", category="top")
    assert calculate_item_weight(item, context, NOW) == pytest.approx(2.0)


def test_item_weight_combines_all_multipliers():
    context = RecommendationContext(
        occasion="casual", user_preferences=UserPreferences(style="casual", colors=("black",))
    )
    item = WardrobeItem(item_id="1", category="top", color="Black", style="casual", rating=5)
    assert calculate_item_weight(item, context, NOW) == pytest.approx(1.5 * 1.3 * (5 / 3) * 2)


def test_recently_worn_item_weighs_less():
    context = RecommendationContext(occasion="casual")
    item = WardrobeItem(item_id="1", category="top", rating=3, last_worn=NOW - timedelta(days=15))
    assert calculate_item_weight(item, context, NOW) == pytest.approx(1.5)
    today = WardrobeItem(item_id="2", category="top", last_worn=NOW)
    assert calculate_item_weight(today, context, NOW) == pytest.approx(1.0)
