"""Scored outfit schemas produced by the recommendation engine."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

from models.wardrobe_item import WardrobeItem

FACTORS = ("weather", "occasion", "style", "color", "variety", "user_preference")


@dataclass(frozen=True)
class ScoreBreakdown:
    weather: float
    occasion: float
    style: float
    color: float
    variety: float
    user_preference: float

    def values(self) -> List[float]:
        return [getattr(self, name) for name in FACTORS]

    def as_dict(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in FACTORS}

    def to_wire(self) -> Dict[str, float]:
        payload = self.as_dict()
        payload["userPreference"] = payload.pop("user_preference")
        return payload


@dataclass
class OutfitScore:
    """A candidate outfit with its total score, breakdown and reasoning."""

    items: List[WardrobeItem]
    score: float
    breakdown: ScoreBreakdown
    reasoning: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        items = []
        for item in self.items:
            raw = asdict(item)
            raw["last_worn"] = item.last_worn.isoformat() if item.last_worn else None
            raw["tags"] = list(item.tags)
            items.append(raw)
        return {
            "items": items,
            "score": self.score,
            "breakdown": self.breakdown.to_wire(),
            "reasoning": list(self.reasoning),
        }


__all__ = ["FACTORS", "ScoreBreakdown", "OutfitScore"]
