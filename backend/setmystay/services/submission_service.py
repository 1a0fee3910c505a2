"""Visitor submissions from the "list your property" form.

The listing fee is simulated: it is looked up and reported, never charged.
Fields the form does not collect get fixed defaults.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from setmystay.models.listing import ModerationStatus
from setmystay.schemas.catalog import ListingItem, RoommateItem
from setmystay.schemas.notification import Notification
from setmystay.schemas.submission import SubmissionResponse
from setmystay.services import catalog_service, pricing_service

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

    from setmystay.schemas.submission import ListingSubmission
    from setmystay.storage.base import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_AREA = 1200
DEFAULT_STATE = "Maharashtra"
DEFAULT_FURNISHED_STATUS = "Furnished"
DEFAULT_SIZE = "2 BHK"
DEFAULT_ROOMMATE_AGE = 30
DEFAULT_ROOMMATE_GENDER = "Any"
NEW_OWNER_ID = "newUser"
LISTING_PLACEHOLDER_IMAGE = "https://placehold.co/600x400"
ROOMMATE_PLACEHOLDER_IMAGE = "https://placehold.co/400x400"

SUBMITTED_NOTIFICATION = Notification(
    title="Listing Submitted!",
    description="Your property is now live.",
)


def _new_item_id(db: Session) -> str:
    millis = int(time.time() * 1000)
    while catalog_service.find_row(db, f"new-{millis}") is not None:
        millis += 1
    return f"new-{millis}"


def build_item(submission: ListingSubmission, item_id: str) -> ListingItem | RoommateItem:
    partial_address = f"{submission.locality}, {submission.city}"

    if submission.property_type == "Roommate":
        return RoommateItem(
            id=item_id,
            owner_name=submission.owner_name,
            age=DEFAULT_ROOMMATE_AGE,
            rent=submission.rent,
            city=submission.city,
            locality=submission.locality,
            state=DEFAULT_STATE,
            complete_address=submission.address,
            partial_address=partial_address,
            contact_phone=submission.phone,
            description=submission.description,
            preferences=[],
            gender=DEFAULT_ROOMMATE_GENDER,
            images=submission.images or [ROOMMATE_PLACEHOLDER_IMAGE],
            views=0,
            owner_id=NEW_OWNER_ID,
            has_property=True,
        )

    return ListingItem(
        id=item_id,
        property_type=submission.property_type,
        title=submission.title,
        rent=submission.rent,
        area=DEFAULT_AREA,
        city=submission.city,
        locality=submission.locality,
        state=DEFAULT_STATE,
        complete_address=submission.address,
        partial_address=partial_address,
        owner_name=submission.owner_name,
        contact_phone=submission.phone,
        description=submission.description,
        furnished_status=DEFAULT_FURNISHED_STATUS,
        amenities=submission.amenities,
        size=DEFAULT_SIZE,
        images=submission.images or [LISTING_PLACEHOLDER_IMAGE],
        video_url=submission.video_url,
        views=0,
        owner_id=NEW_OWNER_ID,
        broker_status=submission.broker_status,
    )


def submit_listing(
    db: Session, pricing_store: KeyValueStore, submission: ListingSubmission
) -> SubmissionResponse:
    fee = pricing_service.listing_fee(
        pricing_service.get_pricing(pricing_store), submission.category
    )
    item = build_item(submission, _new_item_id(db))
    row = catalog_service.add_item(db, item, ModerationStatus.PENDING)

    logger.info(
        "Accepted %s submission %s (fee %d, pending moderation)",
        submission.property_type, item.id, fee,
    )
    return SubmissionResponse(
        item=catalog_service.to_item(row),
        fee=fee,
        moderation_status=row.moderation_status,
        notification=SUBMITTED_NOTIFICATION,
    )
