"""Browse filters for listings and roommate profiles.

Filtering never reorders: the result keeps the relative order of the input.
"""

from __future__ import annotations

from collections.abc import Iterable

from setmystay.schemas.catalog import ListingCategory, ListingItem, RoommateItem
from setmystay.schemas.filters import ANY, FilterState

_CATEGORY_PROPERTY_TYPES = {
    ListingCategory.PG: "PG",
    ListingCategory.RENTAL: "Rental",
}

# Each entry: (filter_attr, listing_attr). Skipped when the filter is "any".
_LISTING_EQUALITY_CHECKS: list[tuple[str, str]] = [
    ("furnished_status", "furnished_status"),
    ("broker_status",    "broker_status"),
    ("city",             "city"),
    ("locality",         "locality"),
]

# The size label is matched against a different filter per category.
_SIZE_FILTER_ATTR = {
    ListingCategory.RENTAL: "property_type",
    ListingCategory.PG: "room_type",
}


def _equals_or_any(wanted: str, actual: str) -> bool:
    return wanted == ANY or wanted == actual


def _listing_matches(
    listing: ListingItem, filters: FilterState, category: ListingCategory
) -> bool:
    if category not in _CATEGORY_PROPERTY_TYPES:
        return False
    if listing.property_type != _CATEGORY_PROPERTY_TYPES[category]:
        return False
    if listing.rent > filters.budget:
        return False
    for filter_attr, listing_attr in _LISTING_EQUALITY_CHECKS:
        if not _equals_or_any(getattr(filters, filter_attr), getattr(listing, listing_attr)):
            return False
    if not _equals_or_any(getattr(filters, _SIZE_FILTER_ATTR[category]), listing.size):
        return False
    return set(filters.amenities).issubset(listing.amenities)


def _roommate_matches(
    profile: RoommateItem, filters: FilterState, category: ListingCategory
) -> bool:
    if category is not ListingCategory.ROOMMATE:
        return False
    if profile.rent > filters.budget:
        return False
    if not _equals_or_any(filters.gender, profile.gender):
        return False
    if filters.location_query:
        location = f"{profile.locality}, {profile.city}".lower()
        if filters.location_query.lower() not in location:
            return False
    return True


def matches(
    item: ListingItem | RoommateItem, filters: FilterState, category: ListingCategory
) -> bool:
    if isinstance(item, ListingItem):
        return _listing_matches(item, filters, category)
    if isinstance(item, RoommateItem):
        return _roommate_matches(item, filters, category)
    raise TypeError(f"Unsupported catalog item: {type(item).__name__}")


def filter_items(
    items: Iterable[ListingItem | RoommateItem],
    filters: FilterState,
    category: ListingCategory,
) -> list[ListingItem | RoommateItem]:
    """Return the items of ``category`` that pass every active filter."""
    return [item for item in items if matches(item, filters, category)]
