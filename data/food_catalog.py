"""Loader for the comprehensive food nutrition dataset.

This module provides:
- parse_food_csv_line(line): one dataset row -> FoodRecord (or None)
- load_food_catalog(csv_path): the whole dataset as a list of FoodRecords

Rows have twelve fixed columns followed by an allergens column. Allergen
lists are not quoted and may themselves contain commas, so rows are split
by hand and every token from the thirteenth on is joined back into the
allergens field. Numeric columns are coerced with pandas; rows whose
calories are not a number are dropped (a blank cell counts as 0), other bad
numbers become 0.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional
import pandas as pd

from core.exceptions import CatalogLoadError
from core.logger import get_logger
from schemas.food_schema import FoodRecord

logger = get_logger("data.food_catalog")

DEFAULT_DATASET_PATH = Path(__file__).resolve().parent / "fixtures" / "comprehensive_food_dataset.csv"
FOOD_DATASET_PATH = os.getenv("FOOD_DATASET_PATH", str(DEFAULT_DATASET_PATH))

HEADER_NAME = "food_name"
MIN_COLUMNS = 12

# dataset column -> FoodRecord field
COLUMNS = {
    "food_name": "name",
    "calories_kcal": "calories",
    "protein_g": "protein_g",
    "carbs_g": "carbs_g",
    "fat_g": "fat_g",
    "fiber_g": "fiber_g",
    "sodium_mg": "sodium_mg",
    "sugar_g": "sugar_g",
    "cholesterol_mg": "cholesterol_mg",
    "glycemic_index": "glycemic_index",
    "category": "category",
    "veg_nonveg": "diet_type",
    "allergens": "allergen_tags",
}
NUMERIC_FIELDS = [
    "calories", "protein_g", "carbs_g", "fat_g", "fiber_g",
    "sodium_mg", "sugar_g", "cholesterol_mg", "glycemic_index",
]


def split_row(line: str) -> Optional[List[str]]:
    """Split a raw dataset line into exactly thirteen tokens.

    Returns None for short rows and for the header row.
    """
    parts = line.split(",")
    if len(parts) < MIN_COLUMNS or parts[0] == HEADER_NAME:
        return None
    allergens = ",".join(parts[12:]) if len(parts) > 13 else (parts[12] if len(parts) > 12 else "")
    return parts[:12] + [allergens]


def _rows_to_records(rows: List[List[str]]) -> List[FoodRecord]:
    if not rows:
        return []
    df = pd.DataFrame(rows, columns=list(COLUMNS)).rename(columns=COLUMNS)
    for c in NUMERIC_FIELDS:
        # blank cells read as 0, text that is not a number becomes NaN
        df[c] = pd.to_numeric(df[c].str.strip().replace("", "0"), errors="coerce")

    invalid = df["calories"].isna() | (df["calories"] < 0)
    if invalid.any():
        logger.debug("Dropping %s rows with invalid calories", int(invalid.sum()))
    df = df[~invalid].copy()
    df[NUMERIC_FIELDS] = df[NUMERIC_FIELDS].fillna(0.0).astype(float)

    df["name"] = df["name"].str.strip()
    df["category"] = df["category"].str.strip().str.lower()
    df["diet_type"] = df["diet_type"].str.strip()
    df["allergen_tags"] = df["allergen_tags"].str.strip()
    return [FoodRecord(**row) for row in df.to_dict(orient="records")]


def parse_food_csv_line(line: str) -> Optional[FoodRecord]:
    """Parse one dataset row, returning None when the row is discarded."""
    row = split_row(line)
    if row is None:
        return None
    records = _rows_to_records([row])
    return records[0] if records else None


def load_food_catalog(csv_path: Optional[str] = None) -> List[FoodRecord]:
    """Read the dataset file and return its valid rows as FoodRecords.

    Args:
        csv_path: Path to the CSV file; defaults to `FOOD_DATASET_PATH`.

    Raises:
        CatalogLoadError: If the file cannot be read.
    """
    path = csv_path or FOOD_DATASET_PATH
    logger.info("Loading food dataset: %s", path)
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogLoadError(str(path), str(exc)) from exc

    lines = [line for line in raw.splitlines() if line.strip()]
    rows = [r for r in (split_row(line) for line in lines) if r is not None]
    records = _rows_to_records(rows)
    logger.info("Loaded %s foods (%s lines read)", len(records), len(lines))
    return records
