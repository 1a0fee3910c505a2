from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from setmystay.models.booking_inquiry import BookingInquiry
from setmystay.schemas.catalog import ListingItem
from setmystay.schemas.inquiry import InquiryCreatedResponse, InquiryResponse
from setmystay.schemas.notification import Notification
from setmystay.services import catalog_service
from setmystay.utils.exceptions import BedUnavailableError, ItemNotFoundError

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

    from setmystay.schemas.inquiry import InquiryCreate

logger = logging.getLogger(__name__)


def create_inquiry(
    db: Session, body: InquiryCreate, visitor_id: str | None = None
) -> InquiryCreatedResponse:
    """Record a visit request for one vacant bed of a listing."""
    item = catalog_service.get_item(db, body.listing_id)
    if not isinstance(item, ListingItem):
        raise ItemNotFoundError(f"Listing {body.listing_id} not found")

    bed = next((b for b in item.beds or [] if b.id == body.bed_id), None)
    if bed is None:
        raise ItemNotFoundError(f"Bed {body.bed_id} not found in listing {item.id}")
    if bed.status != "vacant":
        raise BedUnavailableError(f"Bed {bed.id} in listing {item.id} is {bed.status}")
    if not body.name.strip():
        raise ValueError("Please fill in all fields.")

    inquiry = BookingInquiry(
        listing_id=item.id,
        bed_id=bed.id,
        name=body.name.strip(),
        start_date=body.start_date,
        end_date=body.end_date,
        visitor_id=visitor_id,
    )
    db.add(inquiry)
    db.commit()
    db.refresh(inquiry)

    logger.info("Booking inquiry %d for bed %s of listing %s", inquiry.id, bed.id, item.id)
    return InquiryCreatedResponse(
        inquiry=InquiryResponse.model_validate(inquiry),
        notification=Notification(
            title="Inquiry Sent!",
            description=(
                f"Your inquiry for {item.title} has been sent. "
                "The owner will contact you shortly."
            ),
        ),
    )
