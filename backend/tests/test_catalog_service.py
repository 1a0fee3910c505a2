"""Tests for catalog seeding, browsing, visitor ordering and redaction."""

from __future__ import annotations

import os
import random
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from setmystay.models.listing import Listing, ModerationStatus
from setmystay.schemas.catalog import ListingCategory
from setmystay.schemas.filters import FilterState
from setmystay.services import catalog_service
from setmystay.services.catalog_service import (
    REDACTED_ADDRESS,
    REDACTED_EMAIL,
    REDACTED_NAME,
    REDACTED_PHONE,
)
from setmystay.storage.memory import InMemoryStore
from setmystay.utils.exceptions import ItemNotFoundError


def _ids(items) -> list[str]:
    return [item.id for item in items]


# ── Seeding ────────────────────────────────────────────────────────────────


class TestSeedCatalog:
    def test_seeds_empty_database(self, db):
        assert catalog_service.seed_catalog(db) == 12
        assert db.query(Listing).count() == 8

    def test_second_seed_is_noop(self, seeded_db):
        assert catalog_service.seed_catalog(seeded_db) == 0
        assert seeded_db.query(Listing).count() == 8

    def test_json_columns_round_trip(self, seeded_db):
        item = catalog_service.get_item(seeded_db, "pg-2")
        assert [bed.id for bed in item.beds] == ["R101", "R102", "R103"]
        assert "Meals" in item.amenities


# ── Browsing ───────────────────────────────────────────────────────────────


class TestBrowse:
    def test_default_rental_view(self, seeded_db):
        items = catalog_service.browse(
            seeded_db, InMemoryStore(), ListingCategory.RENTAL, FilterState()
        )
        assert _ids(items) == ["prop-1", "prop-2", "prop-3"]

    def test_default_pg_view(self, seeded_db):
        items = catalog_service.browse(
            seeded_db, InMemoryStore(), ListingCategory.PG, FilterState()
        )
        assert _ids(items) == ["pg-1", "pg-2", "pg-3"]

    def test_roommate_tab_only_shows_profiles_with_property(self, seeded_db):
        items = catalog_service.browse(
            seeded_db, InMemoryStore(), ListingCategory.ROOMMATE, FilterState()
        )
        assert _ids(items) == ["rm-1", "rm-2", "rm-4"]

    def test_rejected_items_hidden(self, seeded_db):
        seeded_db.get(Listing, "prop-2").moderation_status = ModerationStatus.REJECTED.value
        seeded_db.commit()

        items = catalog_service.browse(
            seeded_db, InMemoryStore(), ListingCategory.RENTAL, FilterState()
        )
        assert "prop-2" not in _ids(items)
        with pytest.raises(ItemNotFoundError):
            catalog_service.get_item(seeded_db, "prop-2")

    def test_unknown_item(self, seeded_db):
        with pytest.raises(ItemNotFoundError):
            catalog_service.get_item(seeded_db, "nope")


class TestVisitorOrder:
    def test_order_applied_before_filtering(self, seeded_db):
        store = InMemoryStore()
        catalog_service.save_visitor_order(store, "listings", ["prop-3", "prop-1"])

        items = catalog_service.browse(
            seeded_db, store, ListingCategory.RENTAL, FilterState()
        )
        assert _ids(items) == ["prop-3", "prop-1", "prop-2"]

    def test_order_is_per_store(self, seeded_db):
        store = InMemoryStore()
        catalog_service.save_visitor_order(store, "listings", ["prop-3"])

        items = catalog_service.browse(
            seeded_db, InMemoryStore(), ListingCategory.RENTAL, FilterState()
        )
        assert _ids(items)[0] == "prop-1"

    def test_corrupt_order_ignored(self):
        store = InMemoryStore({catalog_service.ORDER_KEYS["listings"]: "{bad"})
        assert catalog_service.load_visitor_order(store, "listings") == []

    def test_apply_skips_unknown_and_duplicate_ids(self, seeded_db):
        items = catalog_service.list_collection(seeded_db, "roommates")
        ordered = catalog_service.apply_visitor_order(items, ["rm-4", "gone", "rm-4"])
        assert _ids(ordered) == ["rm-4", "rm-1", "rm-2", "rm-3"]

    def test_new_items_lead_catalog_order(self, seeded_db):
        item = catalog_service.get_item(seeded_db, "prop-2").model_copy(
            update={"id": "new-1", "title": "Fresh listing"}
        )
        catalog_service.add_item(seeded_db, item)

        listings = catalog_service.list_collection(seeded_db, "listings")
        assert listings[0].id == "new-1"


# ── Featured and detail ────────────────────────────────────────────────────


class TestFeatured:
    def test_three_of_each(self, seeded_db):
        properties, roommates = catalog_service.featured(seeded_db, random.Random(7))
        assert len(properties) == 3
        assert len({p.id for p in properties}) == 3
        assert sorted(_ids(roommates)) == ["rm-1", "rm-2", "rm-4"]


class TestPresent:
    def test_locked_listing_is_masked(self, seeded_db):
        item = catalog_service.get_item(seeded_db, "prop-1")
        detail = catalog_service.present(item, unlocked=False)

        assert detail.is_unlocked is False
        assert detail.item.owner_name == REDACTED_NAME
        assert detail.item.contact_phone == REDACTED_PHONE
        assert detail.item.contact_email == REDACTED_EMAIL
        assert detail.item.complete_address == REDACTED_ADDRESS
        assert detail.item.video_url is None
        assert detail.item.partial_address == item.partial_address

    def test_unlocked_listing_is_complete(self, seeded_db):
        item = catalog_service.get_item(seeded_db, "prop-1")
        detail = catalog_service.present(item, unlocked=True)
        assert detail.item.contact_phone == "9820012345"
        assert detail.item.video_url == "https://example.com/videos/prop-1.mp4"

    def test_locked_roommate_is_masked(self, seeded_db):
        item = catalog_service.get_item(seeded_db, "rm-1")
        detail = catalog_service.present(item, unlocked=False)
        assert detail.item.owner_name == REDACTED_NAME
        assert detail.item.contact_phone == REDACTED_PHONE


class TestPresentItems:
    def test_masks_all_but_unlocked(self, seeded_db):
        items = catalog_service.list_collection(seeded_db, "listings")
        shown = catalog_service.present_items(items, {"prop-1"})

        by_id = {item.id: item for item in shown}
        assert by_id["prop-1"].contact_phone == "9820012345"
        for item_id in ("prop-2", "pg-1", "pg-2"):
            assert by_id[item_id].contact_phone == REDACTED_PHONE
            assert by_id[item_id].complete_address == REDACTED_ADDRESS
        assert _ids(shown) == _ids(items)

    def test_roommates_masked(self, seeded_db):
        items = catalog_service.list_collection(seeded_db, "roommates")
        shown = catalog_service.present_items(items, set())
        assert all(item.owner_name == REDACTED_NAME for item in shown)
