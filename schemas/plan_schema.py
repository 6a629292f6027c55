"""Schemas for generated diet plans."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List


class Meal(BaseModel):
    """A composed meal with its actual aggregated nutrition."""

    model_config = ConfigDict(frozen=True)

    name: str
    calories: int
    protein: int
    carbs: int
    fats: int
    items: List[str] = []


EMPTY_MEAL = Meal(name="—", calories=0, protein=0, carbs=0, fats=0, items=[])


class MealSlots(BaseModel):
    """The four meal slots of a day, unused ones hold `EMPTY_MEAL`."""

    model_config = ConfigDict(frozen=True)

    breakfast: Meal = EMPTY_MEAL
    lunch: Meal = EMPTY_MEAL
    dinner: Meal = EMPTY_MEAL
    snacks: Meal = EMPTY_MEAL


class DayPlan(BaseModel):
    model_config = ConfigDict(frozen=True)

    day: str
    meals: MealSlots


class Macros(BaseModel):
    """Daily macronutrient targets in grams."""

    model_config = ConfigDict(frozen=True)

    protein: int
    carbs: int
    fats: int


class NutritionTargets(BaseModel):
    """Energy and macro targets derived from a profile."""

    model_config = ConfigDict(frozen=True)

    bmr: float
    tdee: int
    daily_calories: int
    macros: Macros
    hydration: float = Field(..., description="Liters of water per day")
    avoid_foods: List[str] = []


class DietPlan(BaseModel):
    """Complete 7-day plan returned to the caller."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    daily_calories: int
    macros: Macros
    hydration: float
    avoid_foods: List[str] = []
    weekly_plan: List[DayPlan] = Field(..., description="Monday through Sunday")


class DayTotals(BaseModel):
    """Actual calories and macros summed over a day's meals."""

    day: str
    calories: int
    protein: int
    carbs: int
    fats: int


class DietPlanResponse(BaseModel):
    """Plan plus the per-day actual totals and the seed that produced it.

    Serialized with camelCase keys (`dailyCalories`, `weeklyPlan`, `dailyTotals`)
    to match the profile payload.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    seed: int
    plan: DietPlan
    daily_totals: List[DayTotals]
