"""Database helpers: engines, session factories and DB initialization.

Provides read/write session factories and an `init_db` helper that creates
the tables and seeds the food catalog from the dataset CSV when the table is
empty.
"""

import os
from typing import Optional
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from .models import Base, Food
from core.logger import get_logger

logger = get_logger("database")

# Read/Write partitioning pattern
# Point READ_DATABASE_URL at a replica in production; by default both use the same SQLite file.
WRITE_DATABASE_URL = os.getenv("WRITE_DATABASE_URL", "sqlite:///diet.db")
READ_DATABASE_URL = os.getenv("READ_DATABASE_URL", WRITE_DATABASE_URL)

# Engines
write_engine = create_engine(WRITE_DATABASE_URL, connect_args={"check_same_thread": False})
read_engine = create_engine(READ_DATABASE_URL, connect_args={"check_same_thread": False})

# Session factories
WriteSessionLocal = sessionmaker(bind=write_engine)
ReadSessionLocal = sessionmaker(bind=read_engine)


def init_db(csv_path: Optional[str] = None) -> int:
    """Create tables and seed the food catalog.

    Seeding only happens when the foods table is empty, so calling this on
    every startup is safe.

    Args:
        csv_path: Dataset to seed from; defaults to `FOOD_DATASET_PATH`.

    Returns:
        Number of foods inserted.
    """
    # deferred: core.repository imports database.models
    from data.food_catalog import load_food_catalog
    from core.repository import FoodRepository

    Base.metadata.create_all(bind=write_engine)
    session = WriteSessionLocal()
    try:
        repo = FoodRepository(session)
        if repo.count() > 0:
            return 0
        records = load_food_catalog(csv_path)
        repo.add_records(records)
        logger.info("Seeded %s foods into the database", len(records))
        return len(records)
    finally:
        session.close()


# Dependency for FastAPI endpoints
def get_read_session():
    """Yield a read-only SQLAlchemy session for the request scope.

    Used by the catalog and plan endpoints, which never write.
    """
    db = ReadSessionLocal()
    try:
        yield db
    finally:
        db.close()
