"""Meal composition from a pool of foods.

A meal is built by shuffling the pool with a seeded linear-congruential
generator and greedily taking foods until the running calorie total lands
near the slot's target. The same (pool, target, seed) always yields the same
meal; a new seed is how a plan gets regenerated.
"""

from typing import List, Sequence, TypeVar
from core.logger import get_logger
from core.numeric import round_half_up
from schemas.food_schema import FoodRecord
from schemas.plan_schema import Meal

logger = get_logger("services.meal_composer")

T = TypeVar("T")

LCG_MULTIPLIER = 1103515245
LCG_INCREMENT = 12345
LCG_MODULUS = 2 ** 31 - 1

MAX_ITEMS = 5
LOW_FACTOR = 0.85
HIGH_FACTOR = 1.20
OVERSIZED_FACTOR = 1.5

NO_MATCH_ITEM = "No matching foods in dataset"


def shuffle_with_seed(items: Sequence[T], seed: int) -> List[T]:
    """Return a seeded Fisher-Yates permutation of `items`.

    The input is not modified.
    """
    out = list(items)
    s = seed
    for i in range(len(out) - 1, 0, -1):
        s = (s * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        j = s % (i + 1)
        out[i], out[j] = out[j], out[i]
    return out


def placeholder_meal(target_calories: int) -> Meal:
    """Meal reported when a slot has no foods to choose from."""
    return Meal(
        name="Meal",
        calories=target_calories,
        protein=round_half_up(target_calories * 0.25 / 4),
        carbs=round_half_up(target_calories * 0.5 / 4),
        fats=round_half_up(target_calories * 0.25 / 9),
        items=[NO_MATCH_ITEM],
    )


def select_foods(shuffled: List[FoodRecord], target_calories: int) -> List[FoodRecord]:
    """Greedily pick foods until the calorie total reaches the target window."""
    low = round_half_up(target_calories * LOW_FACTOR)
    high = round_half_up(target_calories * HIGH_FACTOR)

    selected: List[FoodRecord] = []
    total = 0.0
    for food in shuffled:
        if len(selected) >= MAX_ITEMS or total >= high:
            break
        # one oversized item should not make up the whole meal
        if not selected and food.calories > target_calories * OVERSIZED_FACTOR:
            continue
        selected.append(food)
        total += food.calories
        if total >= low:
            break

    if not selected and shuffled:
        selected.append(shuffled[0])
    return selected


def meal_name(selected: List[FoodRecord]) -> str:
    if len(selected) == 1:
        return selected[0].name
    return " + ".join(f.name for f in selected[:2])


def compose_meal(pool: List[FoodRecord], target_calories: int, seed: int) -> Meal:
    """Compose one meal approximating `target_calories` from `pool`.

    Args:
        pool: Candidate foods for the slot.
        target_calories: Calorie target for the slot.
        seed: Shuffle seed, unique per day and slot.

    Returns:
        A `Meal` whose calories and macros are the sums of the chosen foods.
    """
    if not pool:
        logger.warning("Empty pool for target %s kcal, using placeholder meal", target_calories)
        return placeholder_meal(target_calories)

    selected = select_foods(shuffle_with_seed(pool, seed), target_calories)
    meal = Meal(
        name=meal_name(selected),
        calories=round_half_up(sum(f.calories for f in selected)),
        protein=round_half_up(sum(f.protein_g for f in selected)),
        carbs=round_half_up(sum(f.carbs_g for f in selected)),
        fats=round_half_up(sum(f.fat_g for f in selected)),
        items=[f.name for f in selected],
    )
    logger.debug("Composed meal (seed=%s target=%s): %s %s kcal", seed, target_calories, meal.items, meal.calories)
    return meal
