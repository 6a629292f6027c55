"""Nutrition calculation helpers.

Provides BMR/TDEE, goal-based calorie targets, macro allocation, hydration
and the foods-to-avoid list used by the plan generator.
"""

from typing import Dict, List
from core.logger import get_logger
from core.numeric import to_number, round_half_up
from schemas.plan_schema import Macros, NutritionTargets
from schemas.profile_schema import UserProfile
from services.food_filter import split_terms

logger = get_logger("services.nutrition_calculator")

ACTIVITY_MULTIPLIERS = {
    'sedentary': 1.2,
    'light': 1.375,
    'moderate': 1.55,
    'heavy': 1.725,
}

GOAL_CALORIE_FACTORS = {
    'weight_loss': 0.8,
    'weight_gain': 1.15,
    'muscle_building': 1.2,
}

# protein / carbs / fats share of total calories
MACRO_RATIOS = {
    'muscle_building': (0.35, 0.40, 0.25),
    'weight_loss': (0.30, 0.35, 0.35),
    'weight_gain': (0.25, 0.50, 0.25),
}
DEFAULT_MACRO_RATIOS = (0.25, 0.50, 0.25)

GOAL_AVOID_FOODS = {
    'weight_loss': ["fried foods", "sugary drinks", "processed snacks"],
    'muscle_building': ["alcohol", "excessive sugar"],
}


class NutritionCalculator:
    """Class-based nutrition calculator used across the app."""

    def calculate_bmr(self, age: float, height_cm: float, weight_kg: float, gender: str) -> float:
        """Calculate BMR using the Mifflin-St Jeor equation."""
        if gender == 'male':
            return 10 * weight_kg + 6.25 * height_cm - 5 * age + 5
        else:
            return 10 * weight_kg + 6.25 * height_cm - 5 * age - 161

    def calculate_tdee(self, bmr: float, activity_level: str) -> int:
        """Estimate TDEE from BMR and activity multiplier, rounded to kcal."""
        val = round_half_up(bmr * ACTIVITY_MULTIPLIERS.get(activity_level, 1.2))
        logger.debug("TDEE calculated: %s", val)
        return val

    def calculate_target_calories(self, tdee: float, goal: str) -> int:
        """Derive a daily calorie target from TDEE based on a goal."""
        factor = GOAL_CALORIE_FACTORS.get(goal)
        val = round_half_up(tdee * factor) if factor else round_half_up(tdee)
        logger.debug("Target calories for goal %s: %s", goal, val)
        return val

    def calculate_macros(self, target_calories: float, goal: str) -> Dict[str, int]:
        """Allocate macronutrient targets (grams) from a calorie target.

        Each macro is rounded on its own, so the grams converted back to
        kcal need not add up to `target_calories` exactly.
        """
        protein_r, carbs_r, fats_r = MACRO_RATIOS.get(goal, DEFAULT_MACRO_RATIOS)
        macros = {
            'protein': round_half_up(target_calories * protein_r / 4),
            'carbs': round_half_up(target_calories * carbs_r / 4),
            'fats': round_half_up(target_calories * fats_r / 9),
        }
        logger.debug("Macros calculated: %s", macros)
        return macros

    def calculate_hydration(self, weight_kg: float) -> float:
        """Daily water intake in liters, one decimal place."""
        return round_half_up(weight_kg * 0.033, 1)

    def build_avoid_foods(self, allergies: str, goal: str) -> List[str]:
        """Combine allergy terms with goal-specific foods, first occurrence wins."""
        candidates = split_terms(allergies) + GOAL_AVOID_FOODS.get(goal, [])
        return list(dict.fromkeys(c for c in candidates if c))

    def compute_targets(self, profile: UserProfile) -> NutritionTargets:
        """Compute all energy and macro targets for a questionnaire profile.

        Unparseable numeric fields count as 0; the result is then degenerate
        but still well formed.
        """
        age = to_number(profile.age)
        height = to_number(profile.height)
        weight = to_number(profile.weight)

        bmr = self.calculate_bmr(age, height, weight, profile.gender)
        tdee = self.calculate_tdee(bmr, profile.activity_level)
        daily_calories = self.calculate_target_calories(tdee, profile.goal)
        macros = self.calculate_macros(daily_calories, profile.goal)

        targets = NutritionTargets(
            bmr=bmr,
            tdee=tdee,
            daily_calories=daily_calories,
            macros=Macros(**macros),
            hydration=self.calculate_hydration(weight),
            avoid_foods=self.build_avoid_foods(profile.allergies, profile.goal),
        )
        logger.info(
            "Targets: bmr=%.2f tdee=%s calories=%s macros=%s",
            bmr, tdee, daily_calories, macros,
        )
        return targets


# export singleton
nutrition_calculator = NutritionCalculator()
__all__ = ["NutritionCalculator", "nutrition_calculator"]
