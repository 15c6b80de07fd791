"""FastAPI server exposing the outfit recommender."""

import logging

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from stylist_app.app import InsufficientWardrobeError, StylistApp
from stylist_app.logging_config import configure_logging, get_logger, log_event
from logic.validation import GenerateOutfitsRequest, validation_failure
from tools.weather_provider import Location

configure_logging()

LOGGER = get_logger(__name__)

stylist_app = StylistApp()
app = FastAPI(title="Outfit Recommender", version="0.1.0")


@app.exception_handler(RequestValidationError)
async def invalid_payload_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed payloads with the review-shaped 422 body."""

    errors = jsonable_encoder(exc.errors())
    log_event(
        LOGGER,
        logging.WARNING,
        "request_validation_failed",
        path=request.url.path,
        error_count=len(errors),
    )
    return JSONResponse(status_code=422, content=validation_failure("Invalid request payload", errors))


@app.get("/healthz")
async def healthcheck() -> dict:
    """Lightweight readiness probe."""

    return {
        "status": "ok",
        "service": "outfit-recommender",
        "environment": stylist_app.config.environment or "local",
    }


@app.post("/api/outfits/generate")
def generate_outfits(request: GenerateOutfitsRequest) -> dict:
    """Generate ranked outfits for the supplied wardrobe snapshot and context."""

    try:
        return stylist_app.recommend(request)
    except InsufficientWardrobeError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.get("/api/weather")
def current_weather(
    lat: float | None = Query(None, ge=-90, le=90),
    lon: float | None = Query(None, ge=-180, le=180),
    city: str = "",
    country: str = "",
) -> dict:
    """Return the current weather snapshot for coordinates or the default location."""

    location = None
    if lat is not None and lon is not None:
        location = Location(latitude=lat, longitude=lon, city=city, country=country)
    snapshot = stylist_app.current_weather(location)
    return snapshot.__dict__


def get_app() -> FastAPI:
    """Expose the FastAPI instance for ASGI servers."""

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:app", host="0.0.0.0", port=int("8080"), reload=False)
