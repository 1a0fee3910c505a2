from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

from setmystay.schemas.catalog import CatalogItem, ListingCategory
from setmystay.schemas.filters import FilterState
from setmystay.schemas.notification import Notification

DEFAULT_USER_PREFERENCES = "prefers 2BHK, non-smoker, budget under 25000"
DEFAULT_VIEWING_PATTERNS = "has viewed properties in Kharghar and Vashi"


class SmartSortStatus(StrEnum):
    SORTED = "sorted"
    FAILED = "failed"
    SUPERSEDED = "superseded"


class SmartSortRequest(BaseModel):
    filters: FilterState = Field(default_factory=FilterState)
    user_preferences: str = DEFAULT_USER_PREFERENCES
    viewing_patterns: str = DEFAULT_VIEWING_PATTERNS


class SmartSortResponse(BaseModel):
    category: ListingCategory
    status: SmartSortStatus
    items: list[CatalogItem]
    total: int
    notification: Notification | None = None
