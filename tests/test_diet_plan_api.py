"""Tests for the foods and diet plan endpoints."""
import pytest
from database import init_db
from database.database import ReadSessionLocal
from core.exceptions import ProfileValidationError
from api.foods import list_foods, food_stats
from api.diet_plans import create_diet_plan, regenerate_diet_plan, download_diet_plan_pdf
from schemas.profile_schema import DietPlanRequest, UserProfile
from main import health


@pytest.fixture(scope="module", autouse=True)
def setup_db():
    """Initialize and seed the database before tests."""
    init_db()


@pytest.fixture
def db():
    session = ReadSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def profile():
    return UserProfile(
        age="30", gender="male", height="175", weight="70",
        activity_level="moderate", goal="maintenance",
        dietary_preference="vegetarian", allergies="",
        meals_per_day="3", budget_range="medium", region_food_style="mixed",
    )


def test_init_db_is_idempotent():
    assert init_db() == 0


def test_health(db):
    assert health(db=db) == {"status": "healthy", "database": "connected"}


def test_list_foods_returns_catalog(db):
    foods = list_foods(db=db)
    assert len(foods) == 40
    assert foods[0].name == "Masala Dosa"


def test_food_stats(db):
    stats = food_stats(db=db)
    assert stats.total_foods == 40
    assert stats.by_category["dessert"] == 3
    assert stats.by_diet_type["Veg"] + stats.by_diet_type["Non-Veg"] == 40


def test_create_plan_defaults_to_seed_zero(db, profile):
    res = create_diet_plan(request=DietPlanRequest(profile=profile), db=db)
    assert res.seed == 0
    assert res.plan.daily_calories == 2602
    assert len(res.plan.weekly_plan) == 7
    assert len(res.daily_totals) == 7
    monday = res.plan.weekly_plan[0].meals
    assert res.daily_totals[0].calories == (
        monday.breakfast.calories + monday.lunch.calories + monday.dinner.calories + monday.snacks.calories
    )


def test_plan_response_uses_camel_case_keys(db, profile):
    res = create_diet_plan(request=DietPlanRequest(profile=profile), db=db)
    body = res.model_dump(by_alias=True)
    assert {"seed", "plan", "dailyTotals"} == set(body)
    assert {"dailyCalories", "macros", "hydration", "avoidFoods", "weeklyPlan"} == set(body["plan"])
    assert body["plan"]["dailyCalories"] == 2602
    assert set(body["plan"]["weeklyPlan"][0]["meals"]) == {"breakfast", "lunch", "dinner", "snacks"}


def test_create_plan_is_reproducible(db, profile):
    first = create_diet_plan(request=DietPlanRequest(profile=profile, seed=42), db=db)
    second = create_diet_plan(request=DietPlanRequest(profile=profile, seed=42), db=db)
    assert first == second


def test_regenerate_without_seed_uses_clock(db, profile):
    res = regenerate_diet_plan(request=DietPlanRequest(profile=profile), db=db)
    assert res.seed > 0


def test_invalid_profile_is_rejected(db, profile):
    bad = profile.model_copy(update={"age": "7", "budget_range": ""})
    with pytest.raises(ProfileValidationError) as exc_info:
        create_diet_plan(request=DietPlanRequest(profile=bad), db=db)
    assert exc_info.value.status_code == 400
    assert set(exc_info.value.errors) == {"age", "budget_range"}


def test_pdf_download(db, profile):
    res = download_diet_plan_pdf(request=DietPlanRequest(profile=profile, seed=3), db=db)
    assert res.media_type == "application/pdf"
    assert res.body.startswith(b"%PDF")
    assert "diet-plan.pdf" in res.headers["content-disposition"]
