"""Unlock credits and the unlimited plan, persisted in a key-value store.

A visitor either holds a number of single-use unlock credits or the
unlimited flag. Spending a credit on a listing adds its id to the unlocked
set permanently; the set is never pruned.

Persisted keys (all values are strings):

* ``setmystay_unlocks``: credit count, e.g. ``"3"``
* ``setmystay_isUnlimited``: ``"true"`` or ``"false"``
* ``setmystay_unlockedIds``: JSON array of item ids

Unreadable values are treated as missing.
"""

from __future__ import annotations

import json
import logging

from setmystay.schemas.entitlement import (
    UNLIMITED,
    ConsumeResult,
    ConsumeStatus,
    EntitlementState,
    GrantResult,
    UnlockPlan,
)
from setmystay.storage.base import KeyValueStore

logger = logging.getLogger(__name__)

UNLOCK_COUNT_KEY = "setmystay_unlocks"
UNLIMITED_KEY = "setmystay_isUnlimited"
UNLOCKED_IDS_KEY = "setmystay_unlockedIds"


def _parse_count(raw: str | None) -> int:
    if raw is None:
        return 0
    try:
        count = int(raw.strip())
    except ValueError:
        return 0
    return count if count >= 0 else 0


def parse_unlocked_ids(raw: str | None) -> set[str]:
    if not raw:
        return set()
    try:
        parsed = json.loads(raw)
    except (json.JSONDecodeError, ValueError):
        return set()
    if not isinstance(parsed, list) or not all(isinstance(i, str) for i in parsed):
        return set()
    return set(parsed)


def describe_plan(plan: UnlockPlan) -> str:
    if plan == UNLIMITED:
        return "You've subscribed to unlimited unlocks for one month."
    return f"You've added {plan} unlocks."


class EntitlementTracker:
    def __init__(self, store: KeyValueStore) -> None:
        self.store = store
        self.state = EntitlementState()

    def initialize(self) -> EntitlementState:
        self.state = EntitlementState(
            count=_parse_count(self.store.get(UNLOCK_COUNT_KEY)),
            is_unlimited=self.store.get(UNLIMITED_KEY) == "true",
            unlocked_ids=parse_unlocked_ids(self.store.get(UNLOCKED_IDS_KEY)),
        )
        return self.state

    # ── Persistence ───────────────────────────────────────────────────────

    def _persist_count(self) -> None:
        self.store.set(UNLOCK_COUNT_KEY, str(self.state.count))

    def _persist_unlimited(self) -> None:
        self.store.set(UNLIMITED_KEY, "true" if self.state.is_unlimited else "false")

    def _persist_unlocked_ids(self) -> None:
        self.store.set(UNLOCKED_IDS_KEY, json.dumps(sorted(self.state.unlocked_ids)))

    # ── Operations ────────────────────────────────────────────────────────

    def grant(self, plan: UnlockPlan) -> GrantResult:
        """Add credits, or switch on the unlimited plan."""
        if plan == UNLIMITED:
            self.state.is_unlimited = True
        elif isinstance(plan, int) and not isinstance(plan, bool) and plan > 0:
            self.state.count += plan
        else:
            raise ValueError(f"Unlock plan must be a positive integer or 'unlimited', got {plan!r}")

        self._persist_count()
        self._persist_unlimited()

        logger.info(
            "Granted plan=%s; count=%d unlimited=%s",
            plan, self.state.count, self.state.is_unlimited,
        )
        return GrantResult(
            plan=plan,
            title="Purchase Successful!",
            description=describe_plan(plan),
        )

    def consume(self, item_id: str) -> ConsumeResult:
        """Spend one unlock on ``item_id``.

        Running out of credits is an ordinary result, not an error: the
        caller is expected to offer a purchase.
        """
        if item_id in self.state.unlocked_ids:
            return ConsumeResult(
                item_id=item_id,
                status=ConsumeStatus.ALREADY_UNLOCKED,
                remaining=self.state.count,
                is_unlimited=self.state.is_unlimited,
            )

        if self.state.is_unlimited:
            self.state.unlocked_ids.add(item_id)
            self._persist_unlocked_ids()
            return ConsumeResult(
                item_id=item_id,
                status=ConsumeStatus.UNLOCKED,
                remaining=self.state.count,
                is_unlimited=True,
            )

        if self.state.count > 0:
            self.state.count -= 1
            self.state.unlocked_ids.add(item_id)
            self._persist_count()
            self._persist_unlocked_ids()
            return ConsumeResult(
                item_id=item_id,
                status=ConsumeStatus.UNLOCKED,
                remaining=self.state.count,
                message=f"You have {self.state.count} unlocks remaining.",
            )

        logger.info("Unlock of %s refused: no credits left", item_id)
        return ConsumeResult(
            item_id=item_id,
            status=ConsumeStatus.INSUFFICIENT_CREDITS,
            remaining=0,
        )

    def is_unlocked(self, item_id: str) -> bool:
        return item_id in self.state.unlocked_ids


def load_tracker(store: KeyValueStore) -> EntitlementTracker:
    tracker = EntitlementTracker(store)
    tracker.initialize()
    return tracker
