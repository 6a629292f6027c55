"""Printable report for a generated diet plan.

Builds an A4 PDF with the daily targets followed by every day of the week,
its actual totals and each meal with its foods. Also exposes the day-total
helpers the API uses so the numbers in the report and the JSON agree.
"""

import io
from typing import Dict, List
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas
from core.logger import get_logger
from core.numeric import round_half_up
from schemas.plan_schema import DayPlan, DayTotals, DietPlan
from schemas.profile_schema import UserProfile
from services.plan_assembler import MEAL_SLOTS

logger = get_logger("services.report_renderer")

GOAL_LABELS = {
    "weight_loss": "Weight Loss",
    "weight_gain": "Weight Gain",
    "muscle_building": "Muscle Building",
    "maintenance": "Maintenance",
}

MEAL_LABELS = {
    "breakfast": "Breakfast",
    "lunch": "Lunch",
    "dinner": "Dinner",
    "snacks": "Snacks",
}

MARGIN_MM = 15
TOP_MM = 20
LINE_MM = 6
ITEM_LINE_MM = 4
PAGE_BREAK_MM = 270


def goal_label(goal: str) -> str:
    return GOAL_LABELS.get(goal, goal)


def day_totals(day_plan: DayPlan) -> DayTotals:
    """Sum the actual calories and macros of a day's four meal slots."""
    meals = [getattr(day_plan.meals, slot) for slot in MEAL_SLOTS]
    return DayTotals(
        day=day_plan.day,
        calories=sum(m.calories for m in meals),
        protein=sum(m.protein for m in meals),
        carbs=sum(m.carbs for m in meals),
        fats=sum(m.fats for m in meals),
    )


def weekly_totals(plan: DietPlan) -> List[DayTotals]:
    return [day_totals(d) for d in plan.weekly_plan]


def macro_split(totals: DayTotals) -> Dict[str, int]:
    """Percentage of total macro grams coming from protein, carbs and fats."""
    grams = totals.protein + totals.carbs + totals.fats
    if grams <= 0:
        return {"protein": 33, "carbs": 34, "fats": 33}
    protein = round_half_up(totals.protein / grams * 100)
    carbs = round_half_up(totals.carbs / grams * 100)
    return {"protein": protein, "carbs": carbs, "fats": max(0, 100 - protein - carbs)}


class _PageWriter:
    """Top-down text cursor over a reportlab canvas, measured in mm."""

    def __init__(self, c: canvas.Canvas):
        self.c = c
        self.page_height = A4[1]
        self.y = TOP_MM

    def text(self, text: str, size: int = 10, bold: bool = False, indent: float = 0, advance: float = LINE_MM):
        self.c.setFont("Helvetica-Bold" if bold else "Helvetica", size)
        self.c.drawString((MARGIN_MM + indent) * mm, self.page_height - self.y * mm, text)
        self.y += advance

    def skip(self, amount: float):
        self.y += amount

    def ensure_room(self):
        if self.y > PAGE_BREAK_MM:
            self.c.showPage()
            self.y = TOP_MM


def render_plan_pdf(plan: DietPlan, profile: UserProfile) -> bytes:
    """Render `plan` as a PDF document and return its bytes.

    Meals with no calories or no items (unused slots) are left out.
    """
    buffer = io.BytesIO()
    c = canvas.Canvas(buffer, pagesize=A4)
    c.setTitle("Your Personalized Diet Plan")
    page = _PageWriter(c)

    page.text("Your Personalized Diet Plan", size=18, bold=True)
    page.skip(4)
    page.text(f"Goal: {goal_label(profile.goal)} | {profile.dietary_preference} | {profile.region_food_style} cuisine")
    page.text(
        f"Daily target: {plan.daily_calories} kcal | Protein: {plan.macros.protein}g | "
        f"Carbs: {plan.macros.carbs}g | Fats: {plan.macros.fats}g"
    )
    page.text(f"Hydration: {plan.hydration}L water/day")
    if plan.avoid_foods:
        page.text(f"Avoid: {', '.join(plan.avoid_foods)}")
    page.skip(6)

    for day_plan in plan.weekly_plan:
        page.ensure_room()
        totals = day_totals(day_plan)
        page.text(day_plan.day, size=12, bold=True)
        page.text(f"Total: {totals.calories} kcal | P: {totals.protein}g | C: {totals.carbs}g | F: {totals.fats}g")
        page.skip(2)
        for slot in MEAL_SLOTS:
            meal = getattr(day_plan.meals, slot)
            if meal.calories <= 0 or not meal.items:
                continue
            page.text(
                f"  {MEAL_LABELS[slot]}: {meal.name} ({meal.calories} kcal, "
                f"P:{meal.protein}g C:{meal.carbs}g F:{meal.fats}g)"
            )
            for item in meal.items:
                page.text(f"    • {item}", size=9, indent=2, advance=ITEM_LINE_MM)
            page.skip(2)
        page.skip(4)

    c.save()
    data = buffer.getvalue()
    logger.info("Rendered diet plan PDF: %s bytes", len(data))
    return data
