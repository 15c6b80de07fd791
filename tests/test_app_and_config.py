"""Application container, configuration and logging helpers."""

import json
import logging
from pathlib import Path
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.validation import GenerateOutfitsRequest
from stylist_app.app import InsufficientWardrobeError, StylistApp
from stylist_app.config import StylistConfig
from stylist_app.logging_config import (
    CORRELATION_ID,
    JsonFormatter,
    operation_context,
    redact_for_log,
)
from tools.weather_provider import Location, MockWeatherProvider


def _app(**config) -> StylistApp:
    return StylistApp(config=StylistConfig(**config), weather_provider=MockWeatherProvider())


def _request(size: int = 3, **extra) -> GenerateOutfitsRequest:
    wardrobe = [
        {"id": 1, "category": "tops", "color": "navy"},
        {"id": 2, "category": "bottoms", "color": "gray"},
        {"id": 3, "category": "shoes", "color": "brown"},
    ][:size]
    return GenerateOutfitsRequest.model_validate({"wardrobe": wardrobe, **extra})


def test_config_from_env_reads_yaml_and_env_overrides(tmp_path, monkeypatch):
    config_file = tmp_path / "staging.yaml"
    config_file.write_text(
        "# staging\nattempt_budget: 40\ndefault_city: \"Boston\"\nrandom_seed: 9\n"
    )
    monkeypatch.setenv("APP_CONFIG_PATH", str(config_file))
    monkeypatch.setenv("DEFAULT_COUNT", "3")
    monkeypatch.delenv("ATTEMPT_BUDGET", raising=False)

    config = StylistConfig.from_env()

    assert config.attempt_budget == 40
    assert config.default_count == 3
    assert config.default_city == "Boston"
    settings = config.engine_settings()
    assert settings.attempt_budget == 40
    assert settings.random_seed == 9


def test_config_defaults(monkeypatch):
    for key in ("APP_ENV", "APP_CONFIG_PATH", "ATTEMPT_BUDGET", "DEFAULT_COUNT", "RANDOM_SEED", "MIN_WARDROBE_SIZE"):
        monkeypatch.delenv(key, raising=False)
    config = StylistConfig.from_env()
    assert config.attempt_budget == 100
    assert config.default_count == 6
    assert config.min_wardrobe_size == 2
    assert config.random_seed is None


def test_recommend_enforces_minimum_wardrobe_size():
    with pytest.raises(InsufficientWardrobeError):
        _app().recommend(_request(size=1))


def test_recommend_uses_configured_default_count():
    response = _app(default_count=2).recommend(_request(occasion="casual"))
    assert response["requested"] == 2
    assert len(response["outfits"]) == 2
    assert response["diagnostics"]["valid"] == 100


def test_current_weather_defaults_to_configured_location():
    app = _app(default_city="Oslo")
    assert app.default_location().city == "Oslo"
    assert app.current_weather().condition == "sunny"
    assert app.current_weather(Location(latitude=1.0, longitude=2.0)).temperature == 65.0


def test_redaction_masks_sensitive_values():
    scrubbed = redact_for_log(
        {"image_url": "https://cdn/x.jpg", "note": "mail me@example.com", "nested": [{"latitude": 1.0}], "count": 3}
    )
    assert scrubbed["image_url"] == "[redacted]"
    assert scrubbed["note"] == "mail [redacted-email]"
    assert scrubbed["nested"] == [{"latitude": "[redacted]"}]
    assert scrubbed["count"] == 3


def test_json_formatter_includes_correlation_and_operation():
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "engine_call_started", None, None)
    record.event = "engine_call_started"
    record.occasion = "casual"
    record.city = "Paris"
    with operation_context("engine:generate_outfits", correlation_id="abc123"):
        payload = json.loads(JsonFormatter().format(record))
    assert payload["correlation_id"] == "abc123"
    assert payload["operation"] == "engine:generate_outfits"
    assert payload["occasion"] == "casual"
    assert payload["city"] == "[redacted]"


def test_operation_context_restores_previous_correlation():
    token = CORRELATION_ID.set("outer")
    try:
        with operation_context("inner", correlation_id="inner-id") as scoped:
            assert scoped == "inner-id"
        assert CORRELATION_ID.get() == "outer"
    finally:
        CORRELATION_ID.reset(token)
