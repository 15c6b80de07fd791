"""Configuration helpers for the outfit recommender service."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Optional

from logic.recommendation_engine import DEFAULT_COUNT, EngineSettings
from logic.outfit_builder import DEFAULT_ATTEMPT_BUDGET


@dataclass
class StylistConfig:
    """Configuration values for the recommender.

    Engine tuning (attempt budget, result count) lives next to collaborator
    settings such as the weather API key and the fallback location used when a
    request carries no coordinates.
    """

    attempt_budget: int = DEFAULT_ATTEMPT_BUDGET
    default_count: int = DEFAULT_COUNT
    min_wardrobe_size: int = 2
    weather_api_key: Optional[str] = None
    weather_units: str = "imperial"
    weather_cache_seconds: float = 600.0
    default_latitude: float = 40.7128
    default_longitude: float = -74.0060
    default_city: str = "New York"
    default_country: str = "US"
    random_seed: Optional[int] = None
    environment: str | None = None

    @classmethod
    def from_env(cls) -> "StylistConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default and is overridden key by key by environment variables.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("STYLIST_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = key.upper()
            return os.getenv(env_key, yaml_config.get(key, default))

        seed = get_value("random_seed")
        return cls(
            attempt_budget=int(get_value("attempt_budget", str(DEFAULT_ATTEMPT_BUDGET))),
            default_count=int(get_value("default_count", str(DEFAULT_COUNT))),
            min_wardrobe_size=int(get_value("min_wardrobe_size", "2")),
            weather_api_key=get_value("openweather_api_key"),
            weather_units=str(get_value("weather_units", "imperial")),
            weather_cache_seconds=float(get_value("weather_cache_seconds", "600")),
            default_latitude=float(get_value("default_latitude", "40.7128")),
            default_longitude=float(get_value("default_longitude", "-74.0060")),
            default_city=str(get_value("default_city", "New York")),
            default_country=str(get_value("default_country", "US")),
            random_seed=int(seed) if seed not in (None, "") else None,
            environment=env_name,
        )

    def engine_settings(self) -> EngineSettings:
        return EngineSettings(
            attempt_budget=self.attempt_budget,
            default_count=self.default_count,
            random_seed=self.random_seed,
        )

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a minimal YAML/INI-style config without external dependencies."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
