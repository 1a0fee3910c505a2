"""Smart sort: reorder the visible listings with the configured LLM.

The LLM sees the currently filtered items (contact fields masked) plus the
visitor's free-text signals and answers with the same items reordered. The
reordered block is placed ahead of the rest of the collection and saved as
the visitor's ordering.

Only the most recent request per visitor and category may write: a
response that arrives after a newer request was issued is dropped.
Returned items are masked unless the visitor has unlocked them.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from setmystay.llm.prompts.smart_sort import (
    SMART_SORT_SYSTEM_PROMPT,
    build_smart_sort_user_prompt,
)
from setmystay.schemas.catalog import ListingCategory, ListingItem, RoommateItem
from setmystay.schemas.notification import Notification
from setmystay.schemas.smart_sort import SmartSortResponse, SmartSortStatus
from setmystay.services import catalog_service
from setmystay.services.entitlement_service import load_tracker
from setmystay.utils.exceptions import SmartSortError

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

    from setmystay.llm.base import LLMProvider
    from setmystay.schemas.filters import FilterState
    from setmystay.storage.base import KeyValueStore

logger = logging.getLogger(__name__)

Item = ListingItem | RoommateItem

SORTED_NOTIFICATION = Notification(
    title="AI Sort Complete!",
    description="Listings have been reordered based on your preferences.",
)
FAILED_NOTIFICATION = Notification(
    title="AI Sort Failed",
    description="Could not sort listings. Please try again.",
    variant="destructive",
)


# ── Single-flight guard ───────────────────────────────────────────────────


class SmartSortGuard:
    """Hands out increasing request tokens per key.

    A key is ``requesting`` while at least one request holds a token and
    ``idle`` otherwise. Only the holder of the latest token may apply its
    result. A key is forgotten once its last request finishes, so tokens
    restart from 1 for the next request on an idle key.
    """

    def __init__(self) -> None:
        # key -> (latest token, requests outstanding)
        self._entries: dict[str, tuple[int, int]] = {}

    def begin(self, key: str) -> int:
        latest, outstanding = self._entries.get(key, (0, 0))
        token = latest + 1
        self._entries[key] = (token, outstanding + 1)
        return token

    def finish(self, key: str, token: int) -> bool:
        """Release ``token``; True if it was still the latest for ``key``."""
        latest, outstanding = self._entries.get(key, (0, 0))
        if outstanding > 1:
            self._entries[key] = (latest, outstanding - 1)
        else:
            self._entries.pop(key, None)
        return token == latest

    def is_current(self, key: str, token: int) -> bool:
        entry = self._entries.get(key)
        return entry is not None and entry[0] == token

    def state(self, key: str) -> str:
        return "requesting" if key in self._entries else "idle"


smart_sort_guard = SmartSortGuard()


# ── LLM round trip ────────────────────────────────────────────────────────


def _parse_llm_response(raw_text: str) -> Any:
    """Parse JSON from LLM, stripping markdown fences if present."""
    text = raw_text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        text = text.rsplit("```", 1)[0]
    return json.loads(text.strip())


def _extract_ids(parsed: Any) -> list[str]:
    # Some models wrap the array: {"listings": [...]}
    if isinstance(parsed, dict) and isinstance(parsed.get("listings"), list):
        parsed = parsed["listings"]
    if not isinstance(parsed, list):
        raise SmartSortError(f"Expected a JSON array, got {type(parsed).__name__}")

    ids: list[str] = []
    for entry in parsed:
        if isinstance(entry, dict) and isinstance(entry.get("id"), str):
            ids.append(entry["id"])
        elif isinstance(entry, str):
            ids.append(entry)
        else:
            raise SmartSortError(f"Unrecognised entry in sorted listings: {entry!r}")
    return ids


async def request_sorted(
    llm: LLMProvider,
    current_items: Sequence[Item],
    user_preferences: str,
    viewing_patterns: str,
    has_unlocked_any: bool,
) -> list[Item]:
    """Ask the LLM to reorder ``current_items``.

    The returned records are matched back to ``current_items`` by id, so the
    stored catalog data never comes from the model.
    """
    records = [
        catalog_service.redact(item).model_dump(mode="json")
        for item in current_items
    ]
    user_prompt = build_smart_sort_user_prompt(
        records, user_preferences, viewing_patterns, has_unlocked_any
    )
    raw_response = await llm.complete(SMART_SORT_SYSTEM_PROMPT, user_prompt)

    try:
        parsed = _parse_llm_response(raw_response)
    except (json.JSONDecodeError, ValueError) as e:
        raise SmartSortError(
            f"Smart sort response was not valid JSON: {raw_response[:200]!r}"
        ) from e

    by_id = {item.id: item for item in current_items}
    return [by_id[i] for i in dict.fromkeys(_extract_ids(parsed)) if i in by_id]


def merge_sorted(
    sorted_items: Sequence[Item],
    full_collection: Sequence[Item],
    current_items: Sequence[Item],
) -> list[Item]:
    """Sorted block first, then everything outside the current view."""
    current_ids = {item.id for item in current_items}
    return list(sorted_items) + [
        item for item in full_collection if item.id not in current_ids
    ]


# ── Public API ────────────────────────────────────────────────────────────


async def smart_sort(
    db: Session,
    store: KeyValueStore,
    llm: LLMProvider,
    category: ListingCategory,
    filters: FilterState,
    user_preferences: str,
    viewing_patterns: str,
    guard_key: str,
    guard: SmartSortGuard = smart_sort_guard,
) -> SmartSortResponse:
    """Reorder the visitor's view of ``category``.

    On any failure the stored order is left alone and the pre-call view is
    returned together with a single failure notification.
    """
    current_items = catalog_service.browse(db, store, category, filters)
    unlocked_ids = load_tracker(store).state.unlocked_ids
    has_unlocked_any = bool(unlocked_ids)
    # Per category: PG and rental sorts touch disjoint items
    key = f"{guard_key}:{category.value}"

    logger.info(
        "Smart sort requested for %s: %d items, has_unlocked=%s",
        key, len(current_items), has_unlocked_any,
    )

    token = guard.begin(key)
    try:
        sorted_items = await request_sorted(
            llm, current_items, user_preferences, viewing_patterns, has_unlocked_any
        )
    except Exception:
        logger.exception("Smart sort failed for %s", key)
        return SmartSortResponse(
            category=category,
            status=SmartSortStatus.FAILED,
            items=catalog_service.present_items(current_items, unlocked_ids),
            total=len(current_items),
            notification=FAILED_NOTIFICATION,
        )
    finally:
        is_latest = guard.finish(key, token)

    if not is_latest:
        logger.info("Discarding superseded smart sort response for %s (token %d)", key, token)
        items = catalog_service.browse(db, store, category, filters)
        return SmartSortResponse(
            category=category,
            status=SmartSortStatus.SUPERSEDED,
            items=catalog_service.present_items(items, unlocked_ids),
            total=len(items),
        )

    full_collection = catalog_service.visitor_collection(db, store, category.collection)
    merged = merge_sorted(sorted_items, full_collection, current_items)
    catalog_service.save_visitor_order(store, category.collection, [i.id for i in merged])

    items = catalog_service.browse(db, store, category, filters)
    logger.info("Smart sort applied for %s: %d items reordered", key, len(sorted_items))
    return SmartSortResponse(
        category=category,
        status=SmartSortStatus.SORTED,
        items=catalog_service.present_items(items, unlocked_ids),
        total=len(items),
        notification=SORTED_NOTIFICATION,
    )
