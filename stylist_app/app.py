"""Application container wiring configuration, engine and weather provider."""

import logging
from typing import Optional

from stylist_app.config import StylistConfig
from stylist_app.logging_config import configure_logging, get_logger, log_event, operation_context
from logic.recommendation_engine import OutfitRecommendationEngine
from logic.validation import GenerateOutfitsRequest, to_context, to_response, to_wardrobe_items
from models.context import WeatherSnapshot
from tools.weather_provider import Location, OpenWeatherProvider, WeatherProvider

LOGGER = get_logger(__name__)

NOT_ENOUGH_ITEMS_MESSAGE = "Not enough items in wardrobe to generate outfits"


class InsufficientWardrobeError(ValueError):
    """Raised when a wardrobe is below the minimum size for generation."""


class StylistApp:
    """Wires together the recommendation engine and its collaborators."""

    def __init__(
        self,
        config: StylistConfig | None = None,
        weather_provider: WeatherProvider | None = None,
        engine: OutfitRecommendationEngine | None = None,
    ) -> None:
        self.config = config or StylistConfig.from_env()
        configure_logging()
        self.engine = engine or OutfitRecommendationEngine(settings=self.config.engine_settings())
        self.weather_provider = weather_provider or OpenWeatherProvider(
            api_key=self.config.weather_api_key,
            units=self.config.weather_units,
            cache_seconds=self.config.weather_cache_seconds,
        )

    def default_location(self) -> Location:
        return Location(
            latitude=self.config.default_latitude,
            longitude=self.config.default_longitude,
            city=self.config.default_city,
            country=self.config.default_country,
        )

    def current_weather(self, location: Optional[Location] = None) -> WeatherSnapshot:
        return self.weather_provider.get_current_weather(location or self.default_location())

    def recommend(self, request: GenerateOutfitsRequest) -> dict:
        """Run the engine for a validated request and return the response payload.

        The minimum wardrobe size is enforced here rather than in the engine,
        which happily returns an empty list for any wardrobe.
        """

        with operation_context("app:recommend") as correlation_id:
            log_event(
                LOGGER,
                level=logging.INFO,
                event="app_call_started",
                method="recommend",
                correlation_id=correlation_id,
                wardrobe_size=len(request.wardrobe),
                occasion=request.occasion,
            )
            if len(request.wardrobe) < self.config.min_wardrobe_size:
                log_event(
                    LOGGER,
                    level=logging.WARNING,
                    event="app_wardrobe_too_small",
                    method="recommend",
                    correlation_id=correlation_id,
                    wardrobe_size=len(request.wardrobe),
                    minimum=self.config.min_wardrobe_size,
                )
                raise InsufficientWardrobeError(NOT_ENOUGH_ITEMS_MESSAGE)

            requested = request.count or self.config.default_count
            result = self.engine.generate_with_diagnostics(
                to_wardrobe_items(request), to_context(request), count=requested
            )
            response = to_response(result.outfits, requested, diagnostics=result.diagnostics)
            log_event(
                LOGGER,
                level=logging.INFO,
                event="app_call_completed",
                method="recommend",
                correlation_id=correlation_id,
                outfit_count=len(response.outfits),
            )
            return response.model_dump()


__all__ = ["StylistApp", "InsufficientWardrobeError", "NOT_ENOUGH_ITEMS_MESSAGE"]
