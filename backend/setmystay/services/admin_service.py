"""Admin dashboard: mock three-factor login, moderation, pricing, analytics.

The gate compares against configured values and has no lockout or hashing;
the dashboard is a mock and does not protect anything of value.
"""

from __future__ import annotations

import logging
import secrets
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from sqlalchemy import func

from setmystay.config import settings
from setmystay.models.listing import Listing, ModerationStatus
from setmystay.models.roommate import RoommateProfile
from setmystay.schemas.admin import AnalyticsResponse, ModerationItem
from setmystay.schemas.catalog import ListingCategory
from setmystay.services import catalog_service
from setmystay.services.entitlement_service import UNLOCKED_IDS_KEY, parse_unlocked_ids
from setmystay.storage.sql import VISITOR_NAMESPACE_PREFIX, values_for_key
from setmystay.utils.exceptions import AdminAuthError, ItemNotFoundError

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

    from setmystay.config import Settings
    from setmystay.storage.base import KeyValueStore

logger = logging.getLogger(__name__)

SESSION_KEY_PREFIX = "session:"


# ── Login gate ────────────────────────────────────────────────────────────


def verify_factors(
    password: str, pin: str, answer: str, config: Settings = settings
) -> None:
    """Check the three factors in order and report the first mismatch."""
    if password != config.admin_password:
        raise AdminAuthError("Incorrect password.")
    if pin != config.admin_pin:
        raise AdminAuthError("Incorrect OTP.")
    if answer.strip().lower() != config.admin_answer.strip().lower():
        raise AdminAuthError("Incorrect answer.")


def login(
    store: KeyValueStore, password: str, pin: str, answer: str, config: Settings = settings
) -> str:
    verify_factors(password, pin, answer, config)
    token = secrets.token_urlsafe(32)
    store.set(f"{SESSION_KEY_PREFIX}{token}", datetime.now(timezone.utc).isoformat())
    logger.info("Admin session opened")
    return token


def require_session(store: KeyValueStore, token: str | None) -> None:
    if not token or store.get(f"{SESSION_KEY_PREFIX}{token}") is None:
        raise AdminAuthError("Admin session required")


def logout(store: KeyValueStore, token: str) -> None:
    store.delete(f"{SESSION_KEY_PREFIX}{token}")
    logger.info("Admin session closed")


# ── Moderation ────────────────────────────────────────────────────────────


def _moderation_item(row: Listing | RoommateProfile) -> ModerationItem:
    if isinstance(row, Listing):
        item_type = (
            ListingCategory.PG if row.property_type == "PG" else ListingCategory.RENTAL
        )
        title = row.title
    else:
        item_type = ListingCategory.ROOMMATE
        title = row.owner_name
    return ModerationItem(
        id=row.id,
        item_type=item_type,
        title=title,
        locality=row.locality,
        rent=row.rent,
        moderation_status=row.moderation_status,
        description=row.description,
        media=row.images_list,
    )


def pending_items(db: Session) -> list[ModerationItem]:
    """Pending properties first, then pending roommate profiles."""
    pending = ModerationStatus.PENDING.value
    listings = (
        db.query(Listing)
        .filter(Listing.moderation_status == pending)
        .order_by(Listing.created_at.asc())
        .all()
    )
    roommates = (
        db.query(RoommateProfile)
        .filter(RoommateProfile.moderation_status == pending)
        .order_by(RoommateProfile.created_at.asc())
        .all()
    )
    return [_moderation_item(row) for row in [*listings, *roommates]]


def all_items(db: Session) -> list[ModerationItem]:
    """Every listing, then every roommate profile, whatever its status."""
    listings = db.query(Listing).order_by(Listing.position.asc(), Listing.created_at.asc()).all()
    roommates = (
        db.query(RoommateProfile)
        .order_by(RoommateProfile.position.asc(), RoommateProfile.created_at.asc())
        .all()
    )
    return [_moderation_item(row) for row in [*listings, *roommates]]


def _get_row_or_raise(db: Session, item_id: str) -> Listing | RoommateProfile:
    row = catalog_service.find_row(db, item_id)
    if not row:
        raise ItemNotFoundError(f"Item {item_id} not found")
    return row


def update_status(db: Session, item_id: str, status: ModerationStatus) -> Listing | RoommateProfile:
    row = _get_row_or_raise(db, item_id)
    row.moderation_status = status.value
    db.commit()
    db.refresh(row)
    logger.info("Item %s marked %s", item_id, status.value)
    return row


def delete_item(db: Session, item_id: str) -> None:
    row = _get_row_or_raise(db, item_id)
    db.delete(row)
    db.commit()
    logger.info("Item %s deleted", item_id)


# ── Analytics ─────────────────────────────────────────────────────────────


def analytics(db: Session) -> AnalyticsResponse:
    total_views = (db.query(func.coalesce(func.sum(Listing.views), 0)).scalar() or 0) + (
        db.query(func.coalesce(func.sum(RoommateProfile.views), 0)).scalar() or 0
    )
    total_unlocks = sum(
        len(parse_unlocked_ids(raw))
        for raw in values_for_key(db, UNLOCKED_IDS_KEY, VISITOR_NAMESPACE_PREFIX)
    )
    total_listings = db.query(Listing).count() + db.query(RoommateProfile).count()
    return AnalyticsResponse(
        total_page_views=int(total_views),
        total_unlocks=total_unlocks,
        total_listings=total_listings,
        pending_review=len(pending_items(db)),
        last_updated=datetime.now(timezone.utc),
    )
