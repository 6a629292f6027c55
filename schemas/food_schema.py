"""Schemas for food catalog records."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Dict


class FoodRecord(BaseModel):
    """One row of the nutrition dataset.

    Records are immutable snapshots; the generator only reads them.
    `allergen_tags` is a comma-joined lowercase string and may be empty.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., examples=["Masala Dosa"])
    calories: float = Field(0.0, examples=[168.0], description="Energy in kcal")
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0
    fiber_g: float = 0.0
    sodium_mg: float = 0.0
    sugar_g: float = 0.0
    cholesterol_mg: float = 0.0
    glycemic_index: float = 0.0
    category: str = Field("", examples=["breakfast"], description="breakfast, lunch, dinner, snack or dessert")
    diet_type: str = Field("", examples=["Veg"], description="'Veg' or 'Non-Veg'")
    allergen_tags: str = Field("", examples=["gluten,milk"])


class CatalogStats(BaseModel):
    """Summary of the loaded catalog."""

    total_foods: int
    by_category: Dict[str, int]
    by_diet_type: Dict[str, int]
