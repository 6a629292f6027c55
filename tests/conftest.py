"""Shared test setup.

Points the database and log directory at a throwaway location before any
application module is imported, and provides a factory for food records.
"""
import os
import tempfile

import pytest

_TMP_DIR = tempfile.mkdtemp(prefix="diet-plan-tests-")
os.environ["WRITE_DATABASE_URL"] = "sqlite:///" + os.path.join(_TMP_DIR, "test.db")
os.environ["READ_DATABASE_URL"] = os.environ["WRITE_DATABASE_URL"]
os.environ["LOG_DIR"] = os.path.join(_TMP_DIR, "logs")

from schemas.food_schema import FoodRecord  # noqa: E402


@pytest.fixture
def make_food():
    """Return a factory building FoodRecords with sensible defaults."""
    def _make(name, calories=100.0, category="lunch", diet_type="Veg", allergen_tags="",
              protein_g=5.0, carbs_g=10.0, fat_g=3.0):
        return FoodRecord(
            name=name,
            calories=calories,
            protein_g=protein_g,
            carbs_g=carbs_g,
            fat_g=fat_g,
            category=category,
            diet_type=diet_type,
            allergen_tags=allergen_tags,
        )
    return _make
