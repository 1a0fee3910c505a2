from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, TypeAdapter, model_validator

from setmystay.database import Base

FurnishedStatus = Literal["Furnished", "Semi-Furnished", "Unfurnished"]
BrokerStatus = Literal["With Broker", "Without Broker"]


class ListingCategory(StrEnum):
    PG = "pg"
    RENTAL = "rental"
    ROOMMATE = "roommate"

    @property
    def collection(self) -> str:
        """Name of the source collection this category is drawn from."""
        return "roommates" if self is ListingCategory.ROOMMATE else "listings"


def _decode_json_columns(data: Any, json_fields: dict[str, str]) -> Any:
    """Turn an ORM row into a dict, decoding JSON text columns.

    ``json_fields`` maps schema field name -> ORM ``*_list`` accessor.
    """
    if not isinstance(data, Base):
        return data
    result = {
        column.key: getattr(data, column.key)
        for column in data.__table__.columns
    }
    for field, accessor in json_fields.items():
        result[field] = getattr(data, accessor)
    result["property_type"] = data.property_type
    return result


class Bed(BaseModel):
    id: str
    status: Literal["vacant", "occupied"]


class ListingItem(BaseModel):
    id: str
    property_type: Literal["PG", "Rental"]
    title: str
    rent: int
    area: int = 0
    city: str
    locality: str
    state: str = ""
    complete_address: str
    partial_address: str
    owner_name: str
    contact_phone: str
    contact_email: str | None = None
    description: str = ""
    furnished_status: FurnishedStatus
    amenities: list[str] = []
    size: str
    images: list[str] = []
    video_url: str | None = None
    views: int = 0
    owner_id: str
    broker_status: BrokerStatus
    verification_document_url: str | None = None
    beds: list[Bed] | None = None

    model_config = {"from_attributes": True}

    @model_validator(mode="before")
    @classmethod
    def parse_json_fields(cls, data: Any) -> Any:
        return _decode_json_columns(
            data, {"amenities": "amenities_list", "images": "images_list", "beds": "beds_list"}
        )


class RoommateItem(BaseModel):
    id: str
    property_type: Literal["Roommate"] = "Roommate"
    owner_name: str
    age: int
    rent: int
    city: str
    locality: str
    state: str = ""
    complete_address: str
    partial_address: str
    contact_phone: str
    contact_email: str | None = None
    description: str = ""
    preferences: list[str] = []
    gender: str
    images: list[str] = []
    views: int = 0
    owner_id: str
    verification_document_url: str | None = None
    has_property: bool = False

    model_config = {"from_attributes": True}

    @model_validator(mode="before")
    @classmethod
    def parse_json_fields(cls, data: Any) -> Any:
        return _decode_json_columns(
            data, {"preferences": "preferences_list", "images": "images_list"}
        )


CatalogItem = Annotated[ListingItem | RoommateItem, Field(discriminator="property_type")]

catalog_items_adapter: TypeAdapter[list[CatalogItem]] = TypeAdapter(list[CatalogItem])


class ItemDetailResponse(BaseModel):
    item: CatalogItem
    is_unlocked: bool


class BrowseResponse(BaseModel):
    category: ListingCategory
    items: list[CatalogItem]
    total: int


class FeaturedResponse(BaseModel):
    properties: list[ListingItem]
    roommates: list[RoommateItem]
