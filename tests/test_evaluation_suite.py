from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

from evaluation.harness import run_evaluation_suite, run_scenario, run_smoke_checks
from evaluation.scenarios import SCENARIOS


def test_evaluation_scenarios_pass():
    results = run_evaluation_suite()
    assert len(results) == len(SCENARIOS)
    for result in results:
        assert result["passed"], f"Scenario {result['scenario']} failed checks: {result['checks']}"


def test_impossible_scenarios_return_no_outfits():
    by_name = {scenario.name: scenario for scenario in SCENARIOS}
    for name in ("formal_with_casual_wardrobe", "freezing_summer_wardrobe"):
        result = run_scenario(by_name[name])
        assert result["outfit_count"] == 0
        assert result["best_score"] is None


def test_scenarios_are_reproducible():
    scenario = SCENARIOS[0]
    assert run_scenario(scenario)["best_score"] == run_scenario(scenario)["best_score"]


def test_smoke_checks_report_each_scenario():
    lines = run_smoke_checks()
    assert lines == [f"{scenario.name}: passed" for scenario in SCENARIOS]
