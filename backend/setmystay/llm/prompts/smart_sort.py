from __future__ import annotations

import json

SMART_SORT_SYSTEM_PROMPT = """You are an expert at prioritizing lists of properties based on user preferences and behavior.

You will be given:
1. A JSON array of listings (rentals, PG accommodations or roommate profiles)
2. The user's stated preferences
3. The user's viewing patterns
4. Whether the user has already unlocked contact details for any property

Sort the listings by relevance to the user, most relevant first, considering
their preferences, their viewing patterns and whether they have unlocked
details before.

OUTPUT RULES:
1. Return ONLY a JSON array containing the same listing objects you were given, reordered.
2. Do not add, drop, merge or edit listings. Copy every field unchanged.
3. No markdown, no explanation, no wrapping object."""


def build_smart_sort_user_prompt(
    listings: list[dict],
    user_preferences: str,
    viewing_patterns: str,
    has_unlocked_details: bool,
) -> str:
    return (
        f"Sort the following {len(listings)} listings for this user.\n\n"
        f"USER PREFERENCES:\n{user_preferences or '(none)'}\n\n"
        f"VIEWING PATTERNS:\n{viewing_patterns or '(none)'}\n\n"
        f"HAS UNLOCKED DETAILS: {'yes' if has_unlocked_details else 'no'}\n\n"
        f"LISTINGS:\n{json.dumps(listings, ensure_ascii=False)}\n\n"
        f"Return ONLY the reordered JSON array."
    )
