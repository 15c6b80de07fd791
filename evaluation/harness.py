"""Lightweight evaluation harness for deterministic engine scenarios."""

from __future__ import annotations

import random
from typing import Dict, List

from evaluation.scenarios import EvaluationScenario, SCENARIOS
from logic.outfit_rules import has_good_pattern_combination
from logic.recommendation_engine import EngineSettings, OutfitRecommendationEngine
from models.context import RecommendationContext
from models.outfit import OutfitScore
from models.wardrobe_item import from_raw_metadata


def _evaluate_expectations(expectations: Dict[str, object], outfits: List[OutfitScore]) -> Dict[str, object]:
    checks: Dict[str, bool] = {}
    if "min_outfits" in expectations:
        checks["min_outfits"] = len(outfits) >= int(expectations["min_outfits"])
    if "max_outfits" in expectations:
        checks["max_outfits"] = len(outfits) <= int(expectations["max_outfits"])
    if expectations.get("required_categories"):
        required = sorted(expectations["required_categories"])
        checks["required_categories"] = all(
            sorted(item.category for item in outfit.items) == required for outfit in outfits
        )
    if "min_color_score" in expectations:
        threshold = float(expectations["min_color_score"])
        checks["min_color_score"] = any(outfit.breakdown.color >= threshold for outfit in outfits)
    if expectations.get("reasoning"):
        checks["reasoning"] = any(expectations["reasoning"] in outfit.reasoning for outfit in outfits)
    checks["sorted"] = all(a.score >= b.score for a, b in zip(outfits, outfits[1:]))
    checks["single_bold_pattern"] = all(has_good_pattern_combination(outfit.items) for outfit in outfits)
    return {"passed": all(checks.values()), "checks": checks}


def run_scenario(scenario: EvaluationScenario, count: int = 6) -> Dict[str, object]:
    engine = OutfitRecommendationEngine(settings=EngineSettings(), clock=lambda: scenario.now)
    wardrobe = [from_raw_metadata(raw) for raw in scenario.wardrobe_items]
    context = RecommendationContext(
        occasion=scenario.occasion,
        weather=scenario.weather,
        user_preferences=scenario.preferences,
    )
    outfits = engine.generate_outfits(wardrobe, context, count=count, rng=random.Random(scenario.seed))
    evaluation = _evaluate_expectations(scenario.expectations, outfits)
    return {
        "scenario": scenario.name,
        "passed": evaluation["passed"],
        "checks": evaluation["checks"],
        "outfit_count": len(outfits),
        "best_score": outfits[0].score if outfits else None,
    }


def run_evaluation_suite() -> List[Dict[str, object]]:
    return [run_scenario(scenario) for scenario in SCENARIOS]


def run_smoke_checks() -> List[str]:
    results = run_evaluation_suite()
    return [f"{result['scenario']}: {'passed' if result['passed'] else 'failed'}" for result in results]


__all__ = ["run_evaluation_suite", "run_scenario", "run_smoke_checks"]
