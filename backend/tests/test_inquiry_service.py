"""Tests for bed booking inquiries."""

from __future__ import annotations

import os
import sys
from datetime import date

import pytest
from pydantic import ValidationError

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from setmystay.models.booking_inquiry import BookingInquiry
from setmystay.schemas.inquiry import InquiryCreate
from setmystay.services.inquiry_service import create_inquiry
from setmystay.utils.exceptions import BedUnavailableError, ItemNotFoundError


def _make_inquiry(**overrides) -> InquiryCreate:
    defaults = dict(
        listing_id="pg-2",
        bed_id="R101",
        name="Ishaan",
        start_date=date(2026, 11, 1),
        end_date=date(2027, 4, 30),
    )
    defaults.update(overrides)
    return InquiryCreate(**defaults)


class TestCreateInquiry:
    def test_vacant_bed(self, seeded_db):
        response = create_inquiry(seeded_db, _make_inquiry(), visitor_id="visitor-1")

        assert response.inquiry.bed_id == "R101"
        assert response.notification.title == "Inquiry Sent!"
        assert "Single rooms for students, Kharghar" in response.notification.description

        stored = seeded_db.query(BookingInquiry).one()
        assert stored.visitor_id == "visitor-1"
        assert stored.listing_id == "pg-2"

    def test_occupied_bed(self, seeded_db):
        with pytest.raises(BedUnavailableError):
            create_inquiry(seeded_db, _make_inquiry(bed_id="R103"))

    def test_unknown_bed(self, seeded_db):
        with pytest.raises(ItemNotFoundError):
            create_inquiry(seeded_db, _make_inquiry(bed_id="Z9"))

    def test_listing_without_beds(self, seeded_db):
        with pytest.raises(ItemNotFoundError):
            create_inquiry(seeded_db, _make_inquiry(listing_id="prop-1", bed_id="B1"))

    def test_roommate_profile_is_not_bookable(self, seeded_db):
        with pytest.raises(ItemNotFoundError):
            create_inquiry(seeded_db, _make_inquiry(listing_id="rm-1"))

    def test_blank_name(self, seeded_db):
        with pytest.raises(ValueError):
            create_inquiry(seeded_db, _make_inquiry(name="   "))
        assert seeded_db.query(BookingInquiry).count() == 0


class TestInquiryDates:
    def test_end_before_start_rejected(self):
        with pytest.raises(ValidationError):
            _make_inquiry(start_date=date(2026, 11, 1), end_date=date(2026, 10, 31))

    def test_same_day_allowed(self):
        inquiry = _make_inquiry(start_date=date(2026, 11, 1), end_date=date(2026, 11, 1))
        assert inquiry.end_date == inquiry.start_date
