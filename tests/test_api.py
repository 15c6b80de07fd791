"""HTTP surface tests using FastAPI's test client."""

from pathlib import Path
import sys

import pytest
from fastapi.testclient import TestClient

sys.path.append(str(Path(__file__).resolve().parents[1]))

from models.context import WeatherSnapshot
from server import api as api_module
from tools.weather_provider import MockWeatherProvider


@pytest.fixture()
def client(monkeypatch: pytest.MonkeyPatch) -> TestClient:
    monkeypatch.setattr(
        api_module.stylist_app,
        "weather_provider",
        MockWeatherProvider(WeatherSnapshot(temperature=61, condition="cloudy", location="Testville")),
    )
    return TestClient(api_module.app)


def _wardrobe() -> list:
    return [
        {"id": 1, "category": "tops", "color": "black", "style": "casual"},
        {"id": 2, "category": "bottoms", "color": "white", "style": "casual"},
        {"id": 3, "category": "shoes", "color": "black", "style": "casual", "season": "all"},
    ]


def test_healthz(client: TestClient) -> None:
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_generate_rejects_tiny_wardrobe(client: TestClient) -> None:
    response = client.post("/api/outfits/generate", json={"wardrobe": _wardrobe()[:1], "occasion": "casual"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Not enough items in wardrobe to generate outfits"


def test_generate_returns_ranked_outfits(client: TestClient) -> None:
    response = client.post(
        "/api/outfits/generate",
        json={
            "wardrobe": _wardrobe(),
            "occasion": "casual",
            "weather": {"temperature": 60, "condition": "sunny"},
            "preferences": {"style": "casual", "colors": ["black"]},
            "count": 3,
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert body["requested"] == 3
    assert len(body["outfits"]) == 3
    first = body["outfits"][0]
    assert {item["category"] for item in first["items"]} == {"top", "bottom", "footwear"}
    assert set(first["breakdown"]) == {"weather", "occasion", "style", "color", "variety", "userPreference"}
    assert "Excellent color harmony" in first["reasoning"]
    scores = [outfit["score"] for outfit in body["outfits"]]
    assert scores == sorted(scores, reverse=True)


def test_generate_may_return_no_outfits(client: TestClient) -> None:
    response = client.post("/api/outfits/generate", json={"wardrobe": _wardrobe(), "occasion": "formal"})
    assert response.status_code == 200
    assert response.json()["outfits"] == []


def test_generate_validates_payload(client: TestClient) -> None:
    response = client.post(
        "/api/outfits/generate",
        json={"wardrobe": _wardrobe(), "occasion": "brunch"},
    )
    assert response.status_code == 422
    body = response.json()
    assert body["status"] == "needs_review"
    assert body["message"] == "Invalid request payload"
    assert any(error["loc"][-1] == "occasion" for error in body["details"])
    bad_rating = _wardrobe()
    bad_rating[0]["rating"] = 9
    assert client.post("/api/outfits/generate", json={"wardrobe": bad_rating}).status_code == 422


def test_weather_endpoint_uses_provider(client: TestClient) -> None:
    response = client.get("/api/weather", params={"lat": 51.5, "lon": -0.12, "city": "London"})
    assert response.status_code == 200
    assert response.json()["temperature"] == 61
    assert client.get("/api/weather").json()["condition"] == "cloudy"
