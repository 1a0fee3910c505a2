"""Unlock and listing prices, editable from the admin dashboard."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from setmystay.schemas.catalog import ListingCategory
from setmystay.schemas.pricing import PricingTable

if TYPE_CHECKING:
    from setmystay.schemas.entitlement import UnlockPlan
    from setmystay.storage.base import KeyValueStore

logger = logging.getLogger(__name__)

PRICING_KEY = "setmystay_pricing"

DEFAULT_PRICING = PricingTable(
    unlocks={"1": 49, "5": 199, "10": 399, "unlimited": 999},
    listings={
        ListingCategory.ROOMMATE: 149,
        ListingCategory.PG: 349,
        ListingCategory.RENTAL: 999,
    },
)


def get_pricing(store: KeyValueStore) -> PricingTable:
    raw = store.get(PRICING_KEY)
    if not raw:
        return DEFAULT_PRICING.model_copy(deep=True)
    try:
        return PricingTable.model_validate_json(raw)
    except ValidationError:
        logger.warning("Stored pricing is unreadable; falling back to defaults")
        return DEFAULT_PRICING.model_copy(deep=True)


def update_pricing(store: KeyValueStore, pricing: PricingTable) -> PricingTable:
    missing = set(ListingCategory) - set(pricing.listings)
    if missing:
        raise ValueError(
            f"Listing prices missing for: {', '.join(sorted(c.value for c in missing))}"
        )
    store.set(PRICING_KEY, pricing.model_dump_json())
    logger.info("Pricing updated: %s", json.dumps(pricing.model_dump(mode="json")))
    return pricing


def unlock_price(pricing: PricingTable, plan: UnlockPlan) -> int:
    try:
        return pricing.unlocks[str(plan)]
    except KeyError:
        raise ValueError(
            f"Unknown unlock plan {plan!r}. Available: {', '.join(pricing.unlocks)}"
        ) from None


def listing_fee(pricing: PricingTable, category: ListingCategory) -> int:
    return pricing.listings[category]
