from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from setmystay.schemas.catalog import ListingCategory
from setmystay.schemas.notification import Notification


class AdminLogin(BaseModel):
    password: str
    pin: str
    answer: str


class AdminSessionResponse(BaseModel):
    token: str
    notification: Notification


class StatusUpdate(BaseModel):
    status: Literal["approved", "rejected"]


class ModerationItem(BaseModel):
    id: str
    item_type: ListingCategory
    title: str
    locality: str
    rent: int
    moderation_status: str
    description: str
    media: list[str]


class ModerationListResponse(BaseModel):
    items: list[ModerationItem]
    total: int


class ModerationActionResponse(BaseModel):
    item_id: str
    moderation_status: str | None
    notification: Notification


class AnalyticsResponse(BaseModel):
    total_page_views: int
    total_unlocks: int
    total_listings: int
    pending_review: int
    last_updated: datetime
