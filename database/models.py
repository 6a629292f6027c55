"""SQLAlchemy ORM models for the diet plan service.

Only the food catalog is stored. Generated plans are returned to the caller
and never persisted.
"""

from sqlalchemy import Column, Integer, String, Float, DateTime
from sqlalchemy.orm import declarative_base
from datetime import datetime

Base = declarative_base()


class Food(Base):
    """ORM model for one row of the nutrition dataset.

    Columns mirror `schemas.food_schema.FoodRecord`; `allergen_tags` is the
    raw comma-joined allergen string.
    """

    __tablename__ = "foods"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    calories = Column(Float, nullable=False)
    protein_g = Column(Float, nullable=False, default=0.0)
    carbs_g = Column(Float, nullable=False, default=0.0)
    fat_g = Column(Float, nullable=False, default=0.0)
    fiber_g = Column(Float, nullable=False, default=0.0)
    sodium_mg = Column(Float, nullable=False, default=0.0)
    sugar_g = Column(Float, nullable=False, default=0.0)
    cholesterol_mg = Column(Float, nullable=False, default=0.0)
    glycemic_index = Column(Float, nullable=False, default=0.0)
    category = Column(String, nullable=False, default="", index=True)
    diet_type = Column(String, nullable=False, default="")
    allergen_tags = Column(String, nullable=False, default="")
    created_at = Column(DateTime, default=datetime.utcnow)
