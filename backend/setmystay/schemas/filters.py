from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from setmystay.config import settings

ANY = "any"


class FilterState(BaseModel):
    """User-selected browse filters. ``any`` disables an equality predicate.

    ``FilterState()`` is the reset value used when a category is opened.
    """

    budget: int = Field(default_factory=lambda: settings.default_budget, ge=0)
    amenities: list[str] = []
    furnished_status: Literal["any", "Furnished", "Semi-Furnished", "Unfurnished"] = ANY
    property_type: str = ANY
    city: str = Field(default_factory=lambda: settings.default_city)
    locality: str = ANY
    room_type: str = ANY
    gender: str = ANY
    location_query: str = ""
    broker_status: Literal["any", "With Broker", "Without Broker"] = ANY
