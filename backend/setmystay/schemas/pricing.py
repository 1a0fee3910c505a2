from __future__ import annotations

from pydantic import BaseModel, NonNegativeInt, field_validator

from setmystay.schemas.catalog import ListingCategory


class PricingTable(BaseModel):
    """Prices in INR. ``unlocks`` is keyed by pack size or ``unlimited``."""

    unlocks: dict[str, NonNegativeInt]
    listings: dict[ListingCategory, NonNegativeInt]

    @field_validator("unlocks")
    @classmethod
    def check_unlock_plans(cls, value: dict[str, int]) -> dict[str, int]:
        for plan in value:
            if plan != "unlimited" and not (plan.isdigit() and int(plan) > 0):
                raise ValueError(f"Invalid unlock plan {plan!r}")
        return value
