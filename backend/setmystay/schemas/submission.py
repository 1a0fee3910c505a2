from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, PositiveInt, model_validator

from setmystay.schemas.catalog import BrokerStatus, CatalogItem, ListingCategory
from setmystay.schemas.notification import Notification

_CATEGORIES = {
    "PG": ListingCategory.PG,
    "Rental": ListingCategory.RENTAL,
    "Roommate": ListingCategory.ROOMMATE,
}


class ListingSubmission(BaseModel):
    """The "list your property" form."""

    property_type: Literal["PG", "Rental", "Roommate"]
    title: str = ""
    rent: PositiveInt
    city: str = Field(min_length=1)
    locality: str = Field(min_length=1)
    address: str = Field(min_length=1)
    owner_name: str = Field(min_length=1)
    phone: str = Field(pattern=r"^\+?\d{10,13}$")
    description: str = ""
    amenities: list[str] = []
    broker_status: BrokerStatus = "Without Broker"
    images: list[str] = []
    video_url: str | None = None

    @model_validator(mode="after")
    def require_title_for_properties(self) -> ListingSubmission:
        if self.property_type != "Roommate" and not self.title.strip():
            raise ValueError("Title is required for PG and rental listings")
        return self

    @property
    def category(self) -> ListingCategory:
        return _CATEGORIES[self.property_type]


class SubmissionResponse(BaseModel):
    item: CatalogItem
    fee: int
    moderation_status: str
    notification: Notification
