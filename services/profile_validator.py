"""Questionnaire validation for submitted profiles.

Mirrors the checks the multi-step form runs before it lets a user submit:
required answers and sane ranges for age, height and weight. The plan
generator does not call this; the API does, before generating.
"""

from typing import Dict
from core.logger import get_logger
from core.numeric import to_number
from schemas.profile_schema import UserProfile

logger = get_logger("services.profile_validator")

# field -> (min, max, message when out of range)
NUMERIC_RANGES = {
    "age": (10, 120, "Enter a valid age (10-120)"),
    "height": (50, 300, "Enter valid height (50-300 cm)"),
    "weight": (20, 400, "Enter valid weight (20-400 kg)"),
}

REQUIRED_MESSAGES = {
    "age": "Age is required",
    "gender": "Gender is required",
    "height": "Height is required",
    "weight": "Weight is required",
    "activity_level": "Activity level is required",
    "goal": "Goal is required",
    "dietary_preference": "Dietary preference is required",
    "meals_per_day": "Meals per day is required",
    "budget_range": "Budget range is required",
    "region_food_style": "Region/food style is required",
}


def validate_profile(profile: UserProfile) -> Dict[str, str]:
    """Return a mapping of field name to error message; empty when valid."""
    errors: Dict[str, str] = {}
    for field, message in REQUIRED_MESSAGES.items():
        value = (getattr(profile, field) or "").strip()
        if not value:
            errors[field] = message
            continue
        if field in NUMERIC_RANGES:
            low, high, range_message = NUMERIC_RANGES[field]
            # non-numeric text coerces to 0 and fails the range check; the web
            # form lets it through since its NaN comparisons are false
            if not low <= to_number(value) <= high:
                errors[field] = range_message
    if errors:
        logger.info("Profile rejected: %s", sorted(errors))
    return errors
