from setmystay.models.booking_inquiry import BookingInquiry
from setmystay.models.kv_entry import KeyValueEntry
from setmystay.models.listing import Listing, ModerationStatus
from setmystay.models.roommate import RoommateProfile

__all__ = [
    "BookingInquiry",
    "KeyValueEntry",
    "Listing",
    "ModerationStatus",
    "RoommateProfile",
]
