"""Diet plan endpoints.

Validates a questionnaire profile, generates a 7-day plan from the stored
catalog and returns it as JSON or as a downloadable PDF. Regenerating is a
new request with a different seed; nothing is stored between requests.
"""

import time
from fastapi import APIRouter, Body, Depends
from fastapi.responses import Response
from sqlalchemy.orm import Session
from database import get_read_session
from core.exceptions import InsufficientDataError, ProfileValidationError
from core.logger import get_logger
from core.repository import FoodRepository
from schemas.plan_schema import DietPlan, DietPlanResponse
from schemas.profile_schema import DietPlanRequest
from services.diet_plan_generator import diet_plan_service
from services.profile_validator import validate_profile
from services.report_renderer import render_plan_pdf, weekly_totals

logger = get_logger("api.diet_plans")
router = APIRouter(prefix="/api/diet-plan", tags=["diet-plan"])


def _generate(request: DietPlanRequest, db: Session, seed: int) -> DietPlan:
    """Validate the profile and run the generator against the stored catalog.

    Raises:
        ProfileValidationError: If the profile fails the questionnaire checks.
        InsufficientDataError: If the catalog is empty.
    """
    errors = validate_profile(request.profile)
    if errors:
        raise ProfileValidationError(errors)

    catalog = FoodRepository(db).list_records()
    if not catalog:
        raise InsufficientDataError("No foods available. Please load the food dataset first.")
    return diet_plan_service.generate(request.profile, catalog, seed=seed)


def _response(plan: DietPlan, seed: int) -> DietPlanResponse:
    return DietPlanResponse(seed=seed, plan=plan, daily_totals=weekly_totals(plan))


@router.post("", response_model=DietPlanResponse)
def create_diet_plan(request: DietPlanRequest = Body(...), db: Session = Depends(get_read_session)):
    """Generate a plan; the seed defaults to 0 so the first plan is reproducible."""
    seed = request.seed if request.seed is not None else 0
    return _response(_generate(request, db, seed), seed)


@router.post("/regenerate", response_model=DietPlanResponse)
def regenerate_diet_plan(request: DietPlanRequest = Body(...), db: Session = Depends(get_read_session)):
    """Generate a fresh variation; without a seed the current time in ms is used."""
    seed = request.seed if request.seed is not None else int(time.time() * 1000)
    logger.info("Regenerating plan with seed %s", seed)
    return _response(_generate(request, db, seed), seed)


@router.post("/pdf", response_class=Response)
def download_diet_plan_pdf(request: DietPlanRequest = Body(...), db: Session = Depends(get_read_session)):
    """Generate a plan and return it as a PDF attachment."""
    seed = request.seed if request.seed is not None else 0
    pdf = render_plan_pdf(_generate(request, db, seed), request.profile)
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="diet-plan.pdf"'},
    )
