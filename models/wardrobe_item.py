"""Wardrobe item data model and helpers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple

from models.taxonomy import (
    DEFAULT_FORMALITY,
    normalize_category,
    normalize_color_name,
    normalize_optional,
)


def _ensure_list(value: Any) -> List[Any]:
    """Coerce a scalar or iterable into a list."""

    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        return list(value)
    return [value]


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO timestamp into a naive local datetime.

    Timezone-aware values are converted to local time so that calendar-date
    comparisons line up with the engine clock.
    """

    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, datetime.min.time())
    else:
        raw = str(value).strip()
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


@dataclass(frozen=True)
class WardrobeItem:
    """Represents a single clothing article in the user's wardrobe.

    Items are immutable so that scored outfits can share them with the
    caller's wardrobe; use ``dataclasses.replace`` to derive a changed copy.
    """

    item_id: str
    category: str
    color: Optional[str] = None
    style: Optional[str] = None
    season: Optional[str] = None
    formality: str = DEFAULT_FORMALITY
    pattern: Optional[str] = None
    rating: Optional[int] = None
    last_worn: Optional[datetime] = None
    image_url: Optional[str] = None
    tags: Tuple[str, ...] = ()
    worn_count: int = 0
    favorite: bool = False

    def __post_init__(self) -> None:
        normalised = {
            "item_id": str(self.item_id),
            "category": normalize_category(self.category),
            "color": normalize_color_name(self.color) or None,
            "style": normalize_optional(self.style),
            "season": normalize_optional(self.season),
            "formality": normalize_optional(self.formality) or DEFAULT_FORMALITY,
            "pattern": normalize_optional(self.pattern),
            # A zero rating carries no signal, same as an absent one.
            "rating": int(self.rating) if self.rating else None,
            "last_worn": parse_timestamp(self.last_worn),
            "tags": tuple(str(tag).strip() for tag in _ensure_list(self.tags) if str(tag).strip()),
            "worn_count": int(self.worn_count or 0),
        }
        for name, value in normalised.items():
            object.__setattr__(self, name, value)


def from_raw_metadata(metadata: Dict[str, Any]) -> WardrobeItem:
    """Factory to build a :class:`WardrobeItem` from a catalog row.

    Accepts the storage column names (``id``, plural categories) as well as the
    model's own field names.
    """

    item_id = metadata.get("item_id", metadata.get("id"))
    if item_id is None or item_id == "":
        raise ValueError("Missing required field for WardrobeItem: item_id")

    return WardrobeItem(
        item_id=str(item_id),
        category=str(metadata.get("category") or ""),
        color=metadata.get("color"),
        style=metadata.get("style"),
        season=metadata.get("season"),
        formality=metadata.get("formality") or DEFAULT_FORMALITY,
        pattern=metadata.get("pattern"),
        rating=metadata.get("rating"),
        last_worn=metadata.get("last_worn"),
        image_url=metadata.get("image_url"),
        tags=_ensure_list(metadata.get("tags")),
        worn_count=metadata.get("worn_count") or 0,
        favorite=bool(metadata.get("favorite", False)),
    )


__all__ = ["WardrobeItem", "from_raw_metadata", "parse_timestamp"]
