"""Pydantic schema package: catalog records, profiles and plans."""

from .food_schema import FoodRecord, CatalogStats
from .profile_schema import UserProfile, DietPlanRequest
from .plan_schema import Meal, EMPTY_MEAL, MealSlots, DayPlan, Macros, NutritionTargets, DietPlan, DayTotals, DietPlanResponse

__all__ = [
    "FoodRecord",
    "CatalogStats",
    "UserProfile",
    "DietPlanRequest",
    "Meal",
    "EMPTY_MEAL",
    "MealSlots",
    "DayPlan",
    "Macros",
    "NutritionTargets",
    "DietPlan",
    "DayTotals",
    "DietPlanResponse",
]
