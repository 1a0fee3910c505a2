from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from setmystay.database import get_db
from setmystay.dependencies import get_optional_visitor_store
from setmystay.schemas.catalog import (
    BrowseResponse,
    FeaturedResponse,
    ItemDetailResponse,
    ListingCategory,
)
from setmystay.schemas.filters import FilterState
from setmystay.services import catalog_service
from setmystay.services.entitlement_service import load_tracker
from setmystay.storage.base import KeyValueStore
from setmystay.utils.exceptions import ItemNotFoundError

router = APIRouter(prefix="/listings")


@router.get("/featured", response_model=FeaturedResponse)
def get_featured(
    db: Session = Depends(get_db),
    store: KeyValueStore = Depends(get_optional_visitor_store),
) -> FeaturedResponse:
    properties, roommates = catalog_service.featured(db)
    unlocked_ids = load_tracker(store).state.unlocked_ids
    return FeaturedResponse(
        properties=catalog_service.present_items(properties, unlocked_ids),
        roommates=catalog_service.present_items(roommates, unlocked_ids),
    )


@router.get("/items/{item_id}", response_model=ItemDetailResponse)
def get_item_detail(
    item_id: str,
    db: Session = Depends(get_db),
    store: KeyValueStore = Depends(get_optional_visitor_store),
) -> ItemDetailResponse:
    """Item detail; contact fields are masked until the visitor unlocks it."""
    try:
        item = catalog_service.get_item(db, item_id)
    except ItemNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    tracker = load_tracker(store)
    return catalog_service.present(item, tracker.is_unlocked(item.id))


@router.get("/{category}", response_model=BrowseResponse)
def browse_listings(
    category: ListingCategory,
    filters: Annotated[FilterState, Query()],
    db: Session = Depends(get_db),
    store: KeyValueStore = Depends(get_optional_visitor_store),
) -> BrowseResponse:
    items = catalog_service.browse(db, store, category, filters)
    unlocked_ids = load_tracker(store).state.unlocked_ids
    return BrowseResponse(
        category=category,
        items=catalog_service.present_items(items, unlocked_ids),
        total=len(items),
    )
