"""
MealMuse utility functions
"""

from __future__ import annotations
import re
from typing import List, Optional


# Measure & tag utilities

UNIT_EXPANSIONS = {
    "tsp": "teaspoon",
    "tbsp": "tablespoon",
    "cup": "cup",
    "oz": "ounce",
    "lb": "pound",
    "g": "gram",
    "kg": "kilogram",
    "ml": "milliliter",
    "l": "liter",
}

# Longest abbreviations first so "kg" wins over "g" at the same position.
_UNIT_RE = re.compile(
    r"\b("
    + "|".join(re.escape(u) for u in sorted(UNIT_EXPANSIONS, key=len, reverse=True))
    + r")\b",
    re.IGNORECASE,
)


def expand_units(measure: str) -> str:
    """Spell out abbreviated units in a measure ("2 tbsp" -> "2 tablespoon").

    Matching is case-insensitive and on whole words only. Every abbreviation
    is replaced in a single pass, so an expansion is never matched again.
    """
    return _UNIT_RE.sub(lambda m: UNIT_EXPANSIONS[m.group(1).lower()], measure).strip()


def split_tags(raw: Optional[str]) -> List[str]:
    """Split a comma separated tag field, trimming each tag."""
    if not raw:
        return []
    return [tag.strip() for tag in raw.split(",") if tag.strip()]


def blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None
