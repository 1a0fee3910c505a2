"""Unit tests for the smart sort service.

Tests cover:
- Parsing the LLM reply (plain, fenced, wrapped, malformed)
- Merging the sorted block into the full collection
- The full async smart_sort() flow with a mocked LLM: success, failure,
  and a response that was overtaken by a newer request
"""

from __future__ import annotations

import json
import os
import sys
from unittest.mock import AsyncMock, MagicMock

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from setmystay.schemas.catalog import ListingCategory
from setmystay.schemas.filters import FilterState
from setmystay.schemas.smart_sort import SmartSortStatus
from setmystay.services import catalog_service
from setmystay.services.catalog_service import REDACTED_NAME, REDACTED_PHONE
from setmystay.services.entitlement_service import UNLOCKED_IDS_KEY
from setmystay.services.smart_sort_service import (
    FAILED_NOTIFICATION,
    SORTED_NOTIFICATION,
    SmartSortGuard,
    _extract_ids,
    _parse_llm_response,
    merge_sorted,
    smart_sort,
)
from setmystay.storage.memory import InMemoryStore
from setmystay.utils.exceptions import SmartSortError


# ── Helpers ────────────────────────────────────────────────────────────────


def _make_llm(reply: str | None = None, error: Exception | None = None) -> MagicMock:
    llm = MagicMock()
    llm.complete = AsyncMock(return_value=reply, side_effect=error)
    return llm


def _reply(*ids: str) -> str:
    return json.dumps([{"id": i} for i in ids])


def _ids(items) -> list[str]:
    return [item.id for item in items]


async def _run(db, store, llm, guard=None, category=ListingCategory.RENTAL):
    return await smart_sort(
        db,
        store,
        llm,
        category,
        FilterState(),
        "prefers 2BHK",
        "viewed Kharghar",
        guard_key="visitor-1",
        guard=guard or SmartSortGuard(),
    )


# ── Parsing ────────────────────────────────────────────────────────────────


class TestParseResponse:
    def test_plain_array(self):
        assert _extract_ids(_parse_llm_response('[{"id": "a"}, {"id": "b"}]')) == ["a", "b"]

    def test_markdown_fences(self):
        raw = '```json\n[{"id": "a"}]\n```'
        assert _extract_ids(_parse_llm_response(raw)) == ["a"]

    def test_wrapped_object(self):
        assert _extract_ids({"listings": [{"id": "x"}]}) == ["x"]

    def test_bare_ids(self):
        assert _extract_ids(["x", "y"]) == ["x", "y"]

    def test_not_an_array(self):
        with pytest.raises(SmartSortError):
            _extract_ids({"sorted": True})

    def test_entry_without_id(self):
        with pytest.raises(SmartSortError):
            _extract_ids([{"title": "no id"}])


class TestMergeSorted:
    def test_sorted_block_then_remainder(self, seeded_db):
        full = catalog_service.list_collection(seeded_db, "listings")
        by_id = {item.id: item for item in full}
        current = [by_id["prop-1"], by_id["prop-2"]]
        sorted_items = [by_id["prop-2"], by_id["prop-1"]]

        merged = merge_sorted(sorted_items, full, current)
        assert _ids(merged) == [
            "prop-2", "prop-1", "prop-3", "prop-4", "pg-1", "pg-2", "pg-3", "pg-4",
        ]


# ── Guard ──────────────────────────────────────────────────────────────────


class TestSmartSortGuard:
    def test_latest_token_wins(self):
        guard = SmartSortGuard()
        first = guard.begin("k")
        second = guard.begin("k")
        assert not guard.is_current("k", first)
        assert guard.is_current("k", second)
        assert guard.finish("k", first) is False
        assert guard.finish("k", second) is True

    def test_state_transitions(self):
        guard = SmartSortGuard()
        assert guard.state("k") == "idle"
        first = guard.begin("k")
        second = guard.begin("k")
        guard.finish("k", first)
        assert guard.state("k") == "requesting"
        guard.finish("k", second)
        assert guard.state("k") == "idle"

    def test_idle_keys_are_dropped(self):
        guard = SmartSortGuard()
        for visitor in range(100):
            token = guard.begin(f"visitor-{visitor}:rental")
            guard.finish(f"visitor-{visitor}:rental", token)
        assert guard._entries == {}

    def test_tokens_restart_on_idle_key(self):
        guard = SmartSortGuard()
        guard.finish("k", guard.begin("k"))
        token = guard.begin("k")
        assert guard.finish("k", token) is True

# ── Full async smart_sort ──────────────────────────────────────────────────


class TestSmartSort:
    @pytest.mark.asyncio
    async def test_success_reorders_and_persists(self, seeded_db):
        store = InMemoryStore()
        llm = _make_llm(_reply("prop-3", "prop-1", "prop-2"))

        result = await _run(seeded_db, store, llm)

        assert result.status is SmartSortStatus.SORTED
        assert result.notification == SORTED_NOTIFICATION
        assert _ids(result.items) == ["prop-3", "prop-1", "prop-2"]
        assert catalog_service.load_visitor_order(store, "listings")[:4] == [
            "prop-3", "prop-1", "prop-2", "prop-4",
        ]

    @pytest.mark.asyncio
    async def test_order_persists_for_next_browse(self, seeded_db):
        store = InMemoryStore()
        await _run(seeded_db, store, _make_llm(_reply("prop-2", "prop-3", "prop-1")))

        items = catalog_service.browse(
            seeded_db, store, ListingCategory.RENTAL, FilterState()
        )
        assert _ids(items) == ["prop-2", "prop-3", "prop-1"]

    @pytest.mark.asyncio
    async def test_omitted_and_unknown_ids(self, seeded_db):
        store = InMemoryStore()
        llm = _make_llm(_reply("prop-3", "made-up", "prop-3"))

        result = await _run(seeded_db, store, llm)

        assert result.status is SmartSortStatus.SORTED
        assert _ids(result.items) == ["prop-3", "prop-1", "prop-2"]

    @pytest.mark.asyncio
    async def test_failure_keeps_previous_order(self, seeded_db):
        store = InMemoryStore()
        catalog_service.save_visitor_order(store, "listings", ["prop-2"])
        llm = _make_llm(error=RuntimeError("service unavailable"))

        result = await _run(seeded_db, store, llm)

        assert result.status is SmartSortStatus.FAILED
        assert result.notification == FAILED_NOTIFICATION
        assert _ids(result.items) == ["prop-2", "prop-1", "prop-3"]
        assert catalog_service.load_visitor_order(store, "listings") == ["prop-2"]
        llm.complete.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_malformed_reply_is_a_failure(self, seeded_db):
        store = InMemoryStore()
        result = await _run(seeded_db, store, _make_llm("I would rank prop-3 first."))

        assert result.status is SmartSortStatus.FAILED
        assert catalog_service.load_visitor_order(store, "listings") == []

    @pytest.mark.asyncio
    async def test_superseded_response_is_dropped(self, seeded_db):
        store = InMemoryStore()
        guard = SmartSortGuard()

        async def _overtaken(system_prompt, user_prompt):
            guard.begin("visitor-1:rental")
            return _reply("prop-3", "prop-2", "prop-1")

        llm = MagicMock()
        llm.complete = AsyncMock(side_effect=_overtaken)

        result = await _run(seeded_db, store, llm, guard=guard)

        assert result.status is SmartSortStatus.SUPERSEDED
        assert result.notification is None
        assert _ids(result.items) == ["prop-1", "prop-2", "prop-3"]
        assert catalog_service.load_visitor_order(store, "listings") == []

    @pytest.mark.asyncio
    async def test_guard_requesting_during_call(self, seeded_db):
        guard = SmartSortGuard()
        seen_states = []

        async def _record(system_prompt, user_prompt):
            seen_states.append(guard.state("visitor-1:rental"))
            return _reply("prop-1")

        llm = MagicMock()
        llm.complete = AsyncMock(side_effect=_record)

        await _run(seeded_db, InMemoryStore(), llm, guard=guard)

        assert seen_states == ["requesting"]
        assert guard.state("visitor-1:rental") == "idle"

    @pytest.mark.asyncio
    async def test_prompt_carries_masked_records(self, seeded_db):
        store = InMemoryStore({UNLOCKED_IDS_KEY: '["pg-1"]'})
        llm = _make_llm(_reply("prop-1"))

        await _run(seeded_db, store, llm)

        _, user_prompt = llm.complete.call_args.args
        assert "9820012345" not in user_prompt
        assert "Rajesh Patil" not in user_prompt
        assert "prefers 2BHK" in user_prompt
        assert "HAS UNLOCKED DETAILS: yes" in user_prompt

    @pytest.mark.asyncio
    async def test_roommate_order_is_separate(self, seeded_db):
        store = InMemoryStore()
        llm = _make_llm(_reply("rm-4", "rm-2", "rm-1"))

        result = await _run(seeded_db, store, llm, category=ListingCategory.ROOMMATE)

        assert _ids(result.items) == ["rm-4", "rm-2", "rm-1"]
        assert catalog_service.load_visitor_order(store, "listings") == []

    @pytest.mark.asyncio
    async def test_pending_pg_sort_not_superseded_by_rental_sort(self, seeded_db):
        store = InMemoryStore()
        guard = SmartSortGuard()
        rental_llm = _make_llm(_reply("prop-3", "prop-2", "prop-1"))

        async def _pg_reply(system_prompt, user_prompt):
            rental = await _run(seeded_db, store, rental_llm, guard=guard)
            assert rental.status is SmartSortStatus.SORTED
            return _reply("pg-3", "pg-1", "pg-2")

        pg_llm = MagicMock()
        pg_llm.complete = AsyncMock(side_effect=_pg_reply)

        result = await _run(seeded_db, store, pg_llm, guard=guard, category=ListingCategory.PG)

        assert result.status is SmartSortStatus.SORTED
        assert _ids(result.items) == ["pg-3", "pg-1", "pg-2"]
        rentals = catalog_service.browse(
            seeded_db, store, ListingCategory.RENTAL, FilterState()
        )
        assert _ids(rentals) == ["prop-3", "prop-2", "prop-1"]


class TestSmartSortMasking:
    @pytest.mark.asyncio
    async def test_sorted_items_masked_unless_unlocked(self, seeded_db):
        store = InMemoryStore({UNLOCKED_IDS_KEY: '["prop-2"]'})
        llm = _make_llm(_reply("prop-2", "prop-1", "prop-3"))

        result = await _run(seeded_db, store, llm)

        by_id = {item.id: item for item in result.items}
        assert by_id["prop-2"].contact_phone == "9867054321"
        assert by_id["prop-1"].contact_phone == REDACTED_PHONE
        assert by_id["prop-1"].owner_name == REDACTED_NAME
        assert by_id["prop-1"].video_url is None

    @pytest.mark.asyncio
    async def test_failed_items_masked(self, seeded_db):
        llm = _make_llm(error=RuntimeError("service unavailable"))

        result = await _run(seeded_db, InMemoryStore(), llm)

        assert result.status is SmartSortStatus.FAILED
        assert all(item.contact_phone == REDACTED_PHONE for item in result.items)
