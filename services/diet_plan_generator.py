"""Diet plan generator service.

Turns a questionnaire profile and the food catalog into a complete 7-day
plan: nutrition targets from the calculator, a profile-filtered catalog and
one composed meal per active slot per day.
"""

from typing import List
from core.logger import get_logger
from schemas.food_schema import FoodRecord
from schemas.plan_schema import DietPlan
from schemas.profile_schema import UserProfile
from services.food_filter import filter_foods
from services.nutrition_calculator import NutritionCalculator, nutrition_calculator
from services.plan_assembler import assemble_week

logger = get_logger("services.diet_plan_generator")


class DietPlanGenerator:
    """Class-based plan generator.

    Generation is a pure function of its inputs, so one instance can serve
    concurrent requests.
    """

    def __init__(self, calculator: NutritionCalculator = nutrition_calculator):
        self.calculator = calculator

    def generate(self, profile: UserProfile, catalog: List[FoodRecord], seed: int = 0) -> DietPlan:
        """Generate a diet plan for `profile` from `catalog`.

        Args:
            profile: Questionnaire answers.
            catalog: Full food catalog; it is filtered here.
            seed: Base shuffle seed. Calling again with another seed is how
                a plan is regenerated.

        Returns:
            A `DietPlan` with targets and seven day plans.
        """
        targets = self.calculator.compute_targets(profile)
        foods = filter_foods(
            catalog,
            dietary_preference=profile.dietary_preference,
            allergies=profile.allergies,
            region_food_style=profile.region_food_style,
        )
        if not foods:
            logger.warning("No foods left after filtering %s catalog entries", len(catalog))

        weekly_plan = assemble_week(foods, targets.daily_calories, profile.meals_per_day, seed)
        plan = DietPlan(
            daily_calories=targets.daily_calories,
            macros=targets.macros,
            hydration=targets.hydration,
            avoid_foods=targets.avoid_foods,
            weekly_plan=weekly_plan,
        )
        logger.info(
            "Generated plan: calories=%s foods=%s/%s seed=%s",
            plan.daily_calories, len(foods), len(catalog), seed,
        )
        return plan


# export a default instance
diet_plan_service = DietPlanGenerator()
