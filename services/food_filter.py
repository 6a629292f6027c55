"""Profile-based filtering of the food catalog.

Narrows the catalog to foods compatible with a user's dietary preference,
allergy list and regional cuisine preference. Filtering keeps input order.
"""

from typing import List, Iterable
from core.logger import get_logger
from data.cuisine_keywords import INDIAN_KEYWORDS, CONTINENTAL_KEYWORDS
from schemas.food_schema import FoodRecord

logger = get_logger("services.food_filter")


def split_terms(raw: str) -> List[str]:
    """Split a comma separated string into trimmed, lowercased, non-empty terms."""
    if not raw:
        return []
    return [t.strip().lower() for t in raw.split(",") if t.strip()]


def is_indian_cuisine(name: str) -> bool:
    lower = name.lower()
    return any(k in lower for k in INDIAN_KEYWORDS)


def is_continental_cuisine(name: str) -> bool:
    lower = name.lower()
    return any(k in lower for k in CONTINENTAL_KEYWORDS)


def matches_diet(food: FoodRecord, dietary_preference: str) -> bool:
    """Check the Veg/Non-Veg flag (and egg/milk tags for vegans)."""
    if dietary_preference == "vegan":
        if food.diet_type != "Veg":
            return False
        tags = (food.allergen_tags or "").lower()
        return "egg" not in tags and "milk" not in tags
    if dietary_preference == "vegetarian":
        return food.diet_type == "Veg"
    return True


def triggers_allergy(food: FoodRecord, allergy_terms: Iterable[str]) -> bool:
    """Return True when any allergen tag overlaps a user allergy term.

    Overlap is a substring match in either direction, so "nut" catches
    "peanut" and "peanut" catches "nut".
    """
    terms = list(allergy_terms)
    if not terms or not food.allergen_tags:
        return False
    for tag in split_terms(food.allergen_tags):
        if any(tag in term or term in tag for term in terms):
            return True
    return False


def matches_region(food: FoodRecord, region_food_style: str) -> bool:
    if region_food_style == "indian":
        return is_indian_cuisine(food.name)
    if region_food_style == "continental":
        return is_continental_cuisine(food.name)
    return True


def filter_foods(
    catalog: List[FoodRecord],
    dietary_preference: str = "",
    allergies: str = "",
    region_food_style: str = "",
) -> List[FoodRecord]:
    """Filter the catalog by diet type, allergies and region.

    Every rule must pass for a food to be kept. Unknown preference or region
    values apply no constraint.

    Args:
        catalog: Full list of food records.
        dietary_preference: 'vegetarian', 'non_vegetarian' or 'vegan'.
        allergies: Comma separated free-text allergy list.
        region_food_style: 'indian', 'continental' or 'mixed'.

    Returns:
        Foods passing all rules, in catalog order.
    """
    allergy_terms = split_terms(allergies)
    out = [
        f for f in catalog
        if matches_diet(f, dietary_preference)
        and not triggers_allergy(f, allergy_terms)
        and matches_region(f, region_food_style)
    ]
    logger.debug(
        "Filtered foods: %s -> %s (diet=%s allergies=%s region=%s)",
        len(catalog), len(out), dietary_preference, allergy_terms, region_food_style,
    )
    return out
