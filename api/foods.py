"""Foods API router.

Serves the raw food catalog used by the frontend, plus a small summary of
what it contains.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from database import get_read_session
from database.models import Food
from core.logger import get_logger
from core.repository import FoodRepository
from schemas.food_schema import FoodRecord, CatalogStats

logger = get_logger("api.foods")
router = APIRouter(prefix="/api", tags=["foods"])


@router.get("/foods", response_model=List[FoodRecord])
def list_foods(db: Session = Depends(get_read_session)):
    """Return the full food dataset."""
    foods = FoodRepository(db).list_records()
    logger.debug("Serving %s foods", len(foods))
    return foods


@router.get("/foods/stats", response_model=CatalogStats)
def food_stats(db: Session = Depends(get_read_session)):
    """Return the number of foods overall, per category and per diet type."""
    repo = FoodRepository(db)
    return CatalogStats(
        total_foods=repo.count(),
        by_category=repo.count_by(Food.category),
        by_diet_type=repo.count_by(Food.diet_type),
    )
