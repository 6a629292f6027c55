"""Repository classes for database access.

`BaseRepository` holds the generic operations; `FoodRepository` adds the
conversions between `Food` rows and the `FoodRecord` values the planner
works with.
"""

from sqlalchemy import func
from sqlalchemy.orm import Session
from typing import TypeVar, Generic, Type, List, Dict
from database.models import Base, Food
from schemas.food_schema import FoodRecord

T = TypeVar('T', bound=Base)


class BaseRepository(Generic[T]):
    """Generic repository for common database operations.

    Attributes:
        model: SQLAlchemy model class to operate on.
        session: Database session for executing queries.
    """

    def __init__(self, model: Type[T], session: Session):
        self.model = model
        self.session = session

    def create_many(self, objects: List[T]) -> List[T]:
        """Add multiple objects and commit them in one transaction."""
        self.session.add_all(objects)
        self.session.commit()
        return objects

    def get_all(self) -> List[T]:
        """Return every row ordered by primary key."""
        return self.session.query(self.model).order_by(self.model.id).all()

    def count(self) -> int:
        return self.session.query(self.model).count()


class FoodRepository(BaseRepository[Food]):
    """Access to the stored food catalog."""

    def __init__(self, session: Session):
        super().__init__(Food, session)

    def add_records(self, records: List[FoodRecord]) -> List[Food]:
        """Insert catalog records in dataset order."""
        return self.create_many([Food(**r.model_dump()) for r in records])

    def list_records(self) -> List[FoodRecord]:
        """Return the catalog as immutable records, in insertion order."""
        fields = list(FoodRecord.model_fields)
        return [FoodRecord(**{f: getattr(row, f) for f in fields}) for row in self.get_all()]

    def count_by(self, column) -> Dict[str, int]:
        rows = self.session.query(column, func.count(Food.id)).group_by(column).all()
        return {key: n for key, n in rows}
