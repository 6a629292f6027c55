"""Tests for day totals, macro split and the PDF report."""
from schemas.plan_schema import DayPlan, DayTotals, Meal, MealSlots, EMPTY_MEAL, DietPlan, Macros
from schemas.profile_schema import UserProfile
from services.report_renderer import day_totals, goal_label, macro_split, render_plan_pdf, weekly_totals


def _day(name="Monday"):
    return DayPlan(day=name, meals=MealSlots(
        breakfast=Meal(name="Idli", calories=210, protein=7, carbs=38, fats=2, items=["Idli"]),
        lunch=Meal(name="Dal + Rice", calories=420, protein=15, carbs=68, fats=10, items=["Dal", "Rice"]),
        dinner=EMPTY_MEAL,
        snacks=EMPTY_MEAL,
    ))


def _plan(days=7):
    names = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
    return DietPlan(
        daily_calories=1800,
        macros=Macros(protein=113, carbs=225, fats=50),
        hydration=2.1,
        avoid_foods=["peanut", "fried foods"],
        weekly_plan=[_day(names[i % 7]) for i in range(days)],
    )


def test_day_totals_sum_actual_meals():
    totals = day_totals(_day())
    assert (totals.calories, totals.protein, totals.carbs, totals.fats) == (630, 22, 106, 12)


def test_weekly_totals_one_per_day():
    totals = weekly_totals(_plan())
    assert [t.day for t in totals][:2] == ["Monday", "Tuesday"]
    assert len(totals) == 7


def test_macro_split_percentages():
    split = macro_split(DayTotals(day="Monday", calories=0, protein=25, carbs=50, fats=25))
    assert split == {"protein": 25, "carbs": 50, "fats": 25}


def test_macro_split_defaults_when_empty():
    split = macro_split(DayTotals(day="Monday", calories=0, protein=0, carbs=0, fats=0))
    assert split == {"protein": 33, "carbs": 34, "fats": 33}


def test_goal_label():
    assert goal_label("muscle_building") == "Muscle Building"
    assert goal_label("custom") == "custom"


def test_render_pdf_returns_document():
    profile = UserProfile(goal="weight_loss", dietary_preference="vegetarian", region_food_style="indian")
    pdf = render_plan_pdf(_plan(), profile)
    assert pdf.startswith(b"%PDF")
    assert len(pdf) > 500


def test_render_pdf_paginates_long_plans():
    profile = UserProfile(goal="maintenance")
    short = render_plan_pdf(_plan(days=1), profile)
    long = render_plan_pdf(_plan(days=21), profile)
    assert long.startswith(b"%PDF")
    assert len(long) > len(short)
