"""Catalog access: seeding, browsing, featured picks and detail redaction.

Listings (PG and Rental) and roommate profiles live in two collections.
Each visitor can hold a personal ordering of a collection (written by smart
sort); browsing applies it before filtering.
"""

from __future__ import annotations

import json
import logging
import random
from collections.abc import Collection, Iterable
from typing import TYPE_CHECKING

from sqlalchemy import func

from setmystay.data.seed import SEED_LISTINGS, SEED_ROOMMATES
from setmystay.models.listing import Listing, ModerationStatus
from setmystay.models.roommate import RoommateProfile
from setmystay.schemas.catalog import (
    ItemDetailResponse,
    ListingCategory,
    ListingItem,
    RoommateItem,
)
from setmystay.services.filter_service import filter_items
from setmystay.utils.exceptions import ItemNotFoundError

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

    from setmystay.schemas.filters import FilterState
    from setmystay.storage.base import KeyValueStore

logger = logging.getLogger(__name__)

ORDER_KEYS = {
    "listings": "setmystay_order_listings",
    "roommates": "setmystay_order_roommates",
}

REDACTED_NAME = "************"
REDACTED_PHONE = "**********"
REDACTED_EMAIL = "*****@*****.com"
REDACTED_ADDRESS = "*******************************"

FEATURED_COUNT = 3

_ROW_CLASSES = {"listings": Listing, "roommates": RoommateProfile}


# ── Row mapping ───────────────────────────────────────────────────────────


def _listing_row(data: dict, position: int, status: str) -> Listing:
    beds = data.get("beds")
    return Listing(
        **{k: v for k, v in data.items() if k not in ("amenities", "images", "beds")},
        amenities=json.dumps(data.get("amenities", [])),
        images=json.dumps(data.get("images", [])),
        beds=json.dumps(beds) if beds is not None else None,
        position=position,
        moderation_status=status,
    )


def _roommate_row(data: dict, position: int, status: str) -> RoommateProfile:
    return RoommateProfile(
        **{
            k: v for k, v in data.items()
            if k not in ("preferences", "images", "property_type")
        },
        preferences=json.dumps(data.get("preferences", [])),
        images=json.dumps(data.get("images", [])),
        position=position,
        moderation_status=status,
    )


def to_item(row: Listing | RoommateProfile) -> ListingItem | RoommateItem:
    if isinstance(row, Listing):
        return ListingItem.model_validate(row)
    return RoommateItem.model_validate(row)


# ── Seeding and writes ────────────────────────────────────────────────────


def seed_catalog(db: Session) -> int:
    """Insert the bundled catalog when both collections are empty."""
    if db.query(Listing).first() or db.query(RoommateProfile).first():
        return 0

    for position, data in enumerate(SEED_LISTINGS):
        db.add(_listing_row(data, position, ModerationStatus.APPROVED.value))
    for position, data in enumerate(SEED_ROOMMATES):
        db.add(_roommate_row(data, position, ModerationStatus.APPROVED.value))
    db.commit()

    seeded = len(SEED_LISTINGS) + len(SEED_ROOMMATES)
    logger.info("Seeded catalog with %d items", seeded)
    return seeded


def add_item(
    db: Session,
    item: ListingItem | RoommateItem,
    status: ModerationStatus = ModerationStatus.PENDING,
) -> Listing | RoommateProfile:
    """Store a new item ahead of everything already in its collection."""
    data = item.model_dump()
    if isinstance(item, ListingItem):
        first = db.query(func.min(Listing.position)).scalar()
        row = _listing_row(data, (first if first is not None else 1) - 1, status.value)
    else:
        first = db.query(func.min(RoommateProfile.position)).scalar()
        row = _roommate_row(data, (first if first is not None else 1) - 1, status.value)
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


# ── Reads ─────────────────────────────────────────────────────────────────


def find_row(db: Session, item_id: str) -> Listing | RoommateProfile | None:
    return (
        db.query(Listing).filter(Listing.id == item_id).first()
        or db.query(RoommateProfile).filter(RoommateProfile.id == item_id).first()
    )


def get_item(db: Session, item_id: str) -> ListingItem | RoommateItem:
    row = find_row(db, item_id)
    if not row or row.moderation_status == ModerationStatus.REJECTED.value:
        raise ItemNotFoundError(f"Item {item_id} not found")
    return to_item(row)


def list_collection(db: Session, collection: str) -> list[ListingItem | RoommateItem]:
    """All visible items of ``listings`` or ``roommates`` in catalog order."""
    row_class = _ROW_CLASSES[collection]
    rows = (
        db.query(row_class)
        .filter(row_class.moderation_status != ModerationStatus.REJECTED.value)
        .order_by(row_class.position.asc(), row_class.created_at.asc())
        .all()
    )
    return [to_item(row) for row in rows]


# ── Visitor ordering ──────────────────────────────────────────────────────


def load_visitor_order(store: KeyValueStore, collection: str) -> list[str]:
    raw = store.get(ORDER_KEYS[collection])
    if not raw:
        return []
    try:
        parsed = json.loads(raw)
    except (json.JSONDecodeError, ValueError):
        return []
    if not isinstance(parsed, list):
        return []
    return [i for i in parsed if isinstance(i, str)]


def save_visitor_order(store: KeyValueStore, collection: str, ids: list[str]) -> None:
    store.set(ORDER_KEYS[collection], json.dumps(ids))


def apply_visitor_order(
    items: list[ListingItem | RoommateItem], order_ids: list[str]
) -> list[ListingItem | RoommateItem]:
    """Put items named in ``order_ids`` first, in that order.

    Items the ordering does not mention (e.g. newer submissions) keep
    their catalog order after the ordered block.
    """
    if not order_ids:
        return list(items)
    by_id = {item.id: item for item in items}
    ordered = []
    seen: set[str] = set()
    for item_id in order_ids:
        if item_id in by_id and item_id not in seen:
            ordered.append(by_id[item_id])
            seen.add(item_id)
    return ordered + [item for item in items if item.id not in seen]


def visitor_collection(
    db: Session, store: KeyValueStore, collection: str
) -> list[ListingItem | RoommateItem]:
    items = list_collection(db, collection)
    return apply_visitor_order(items, load_visitor_order(store, collection))


def category_source(
    db: Session, store: KeyValueStore, category: ListingCategory
) -> list[ListingItem | RoommateItem]:
    """Items shown on a category tab before any filter is applied."""
    items = visitor_collection(db, store, category.collection)
    if category is ListingCategory.ROOMMATE:
        return [item for item in items if item.has_property]
    return items


def browse(
    db: Session,
    store: KeyValueStore,
    category: ListingCategory,
    filters: FilterState,
) -> list[ListingItem | RoommateItem]:
    return filter_items(category_source(db, store, category), filters, category)


def featured(
    db: Session, rng: random.Random | None = None
) -> tuple[list[ListingItem], list[RoommateItem]]:
    rng = rng or random.Random()
    listings = list_collection(db, "listings")
    roommates = [r for r in list_collection(db, "roommates") if r.has_property]
    return (
        rng.sample(listings, min(FEATURED_COUNT, len(listings))),
        rng.sample(roommates, min(FEATURED_COUNT, len(roommates))),
    )


# ── Presentation ──────────────────────────────────────────────────────────


def redact(item: ListingItem | RoommateItem) -> ListingItem | RoommateItem:
    """Copy of ``item`` with contact fields masked and any video withheld."""
    redactions = {
        "owner_name": REDACTED_NAME,
        "contact_phone": REDACTED_PHONE,
        "contact_email": REDACTED_EMAIL,
        "complete_address": REDACTED_ADDRESS,
    }
    if isinstance(item, ListingItem):
        redactions["video_url"] = None
    return item.model_copy(update=redactions)


def present(item: ListingItem | RoommateItem, unlocked: bool) -> ItemDetailResponse:
    """Detail payload, with contact fields masked unless unlocked."""
    if unlocked:
        return ItemDetailResponse(item=item, is_unlocked=True)
    return ItemDetailResponse(item=redact(item), is_unlocked=False)


def present_items(
    items: Iterable[ListingItem | RoommateItem], unlocked_ids: Collection[str]
) -> list[ListingItem | RoommateItem]:
    """List payload: every item the visitor has not unlocked is masked."""
    return [item if item.id in unlocked_ids else redact(item) for item in items]
