"""Weekly plan assembly.

Buckets the filtered catalog by meal type, splits the daily calorie target
across the active meal slots and composes every slot of a Monday-Sunday week.
"""

from typing import Dict, List, Optional
from core.logger import get_logger
from core.numeric import to_number, round_half_up
from schemas.food_schema import FoodRecord
from schemas.plan_schema import DayPlan, MealSlots
from services.meal_composer import compose_meal

logger = get_logger("services.plan_assembler")

DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]

MEAL_SLOTS = ("breakfast", "lunch", "dinner", "snacks")

# dataset category -> meal slot; dessert and snack both feed snacks
CATEGORY_TO_MEAL = {
    "breakfast": "breakfast",
    "lunch": "lunch",
    "dinner": "dinner",
    "snack": "snacks",
    "dessert": "snacks",
}

SLOT_SEED_OFFSETS = {"breakfast": 1, "lunch": 2, "dinner": 3, "snacks": 4}

# meals per day -> calorie share of each active slot
MEAL_SHARES: Dict[int, Dict[str, float]] = {
    2: {"breakfast": 0.50, "lunch": 0.50},
    3: {"breakfast": 0.28, "lunch": 0.38, "dinner": 0.34},
    4: {"breakfast": 0.25, "lunch": 0.35, "dinner": 0.30, "snacks": 0.10},
    5: {"breakfast": 0.22, "lunch": 0.28, "dinner": 0.28, "snacks": 0.22},
}
DEFAULT_MEALS_PER_DAY = 4

BUCKET_CAP = 80
FALLBACK_CAP = 50
FALLBACK_MAX_CALORIES = 800
DAY_SEED_STRIDE = 1000


def bucket_by_meal(foods: List[FoodRecord]) -> Dict[str, List[FoodRecord]]:
    """Group foods into meal slots, backfilling empty slots.

    Each slot keeps at most 80 foods in catalog order. A slot with no foods
    of its own gets up to 50 foods from the whole pool with
    0 < calories < 800.
    """
    buckets: Dict[str, List[FoodRecord]] = {slot: [] for slot in MEAL_SLOTS}
    for f in foods:
        slot = CATEGORY_TO_MEAL.get(f.category)
        if slot and len(buckets[slot]) < BUCKET_CAP:
            buckets[slot].append(f)

    fallback = [f for f in foods if 0 < f.calories < FALLBACK_MAX_CALORIES][:FALLBACK_CAP]
    for slot, bucket in buckets.items():
        if not bucket:
            logger.debug("No foods for %s, using %s fallback foods", slot, len(fallback))
            buckets[slot] = list(fallback)
    return buckets


def resolve_meals_per_day(meals_per_day) -> float:
    """Parse the meals-per-day answer and clamp it to 2..5 (blank means 4)."""
    count = to_number(meals_per_day) or DEFAULT_MEALS_PER_DAY
    return min(5, max(2, count))


def slot_shares(meals_per_day) -> Dict[str, float]:
    count = resolve_meals_per_day(meals_per_day)
    return MEAL_SHARES.get(count, MEAL_SHARES[DEFAULT_MEALS_PER_DAY])


def build_day(
    day_index: int,
    buckets: Dict[str, List[FoodRecord]],
    daily_calories: int,
    shares: Dict[str, float],
    seed: int,
) -> DayPlan:
    day_seed = seed + day_index * DAY_SEED_STRIDE
    meals = {
        slot: compose_meal(
            buckets[slot],
            round_half_up(daily_calories * share),
            day_seed + SLOT_SEED_OFFSETS[slot],
        )
        for slot, share in shares.items()
    }
    return DayPlan(day=DAYS[day_index], meals=MealSlots(**meals))


def assemble_week(
    foods: List[FoodRecord],
    daily_calories: int,
    meals_per_day="4",
    seed: int = 0,
    buckets: Optional[Dict[str, List[FoodRecord]]] = None,
) -> List[DayPlan]:
    """Build the seven day plans for a filtered food pool.

    Args:
        foods: Catalog already filtered for the user's profile.
        daily_calories: Daily calorie target split across the slots.
        meals_per_day: Questionnaire answer, 2 to 5.
        seed: Base seed; each day and slot derives its own from it.
        buckets: Pre-bucketed pool, computed from `foods` when omitted.

    Returns:
        Seven `DayPlan` objects, Monday first. Slots not used at the chosen
        meal count hold the empty meal.
    """
    if buckets is None:
        buckets = bucket_by_meal(foods)
    shares = slot_shares(meals_per_day)
    week = [build_day(i, buckets, daily_calories, shares, seed) for i in range(len(DAYS))]
    logger.debug("Assembled week: slots=%s seed=%s", list(shares), seed)
    return week
