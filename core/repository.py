"""Repository classes for database operations.

`BaseRepository` holds the generic CRUD helpers; the per-entity subclasses
add the lookups the routers need (by username, by user and day, newest
first, and so on).
"""

from datetime import datetime, timedelta, date as date_type
from typing import TypeVar, Generic, Type, Optional, List, Any, Dict

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from core.exceptions import NotFoundError
from database import models
from database.models import Base

T = TypeVar('T', bound=Base)


class BaseRepository(Generic[T]):
    """Generic repository for common database operations.

    Attributes:
        model: SQLAlchemy model class to operate on.
        session: Database session for executing queries.
        resource: Name used in `NotFoundError` messages.
    """

    model: Type[T]
    resource: str = "Resource"

    def __init__(self, session: Session):
        self.session = session

    def create(self, obj: T) -> T:
        """Add, commit and refresh a new object."""
        self.session.add(obj)
        self.session.commit()
        self.session.refresh(obj)
        return obj

    def get_by_id(self, id: Any) -> Optional[T]:
        return self.session.get(self.model, id)

    def get_or_404(self, id: Any) -> T:
        """Return the object with this primary key or raise `NotFoundError`."""
        obj = self.get_by_id(id)
        if obj is None:
            raise NotFoundError(self.resource, id)
        return obj

    def get_all(self, skip: int = 0, limit: Optional[int] = None) -> List[T]:
        query = self.session.query(self.model).order_by(self.model.id).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def update(self, obj: T, changes: Dict[str, Any]) -> T:
        """Apply `changes` as attribute assignments, commit and refresh.

        Args:
            obj: Model instance to modify.
            changes: Mapping of column name to new value.

        Returns:
            The updated object with refreshed attributes.
        """
        for key, value in changes.items():
            setattr(obj, key, value)
        self.session.commit()
        self.session.refresh(obj)
        return obj

    def delete_by_id(self, id: Any) -> bool:
        """Delete an object by its primary key.

        Returns:
            True if object was deleted, False if not found.
        """
        obj = self.get_by_id(id)
        if obj is None:
            return False
        self.session.delete(obj)
        self.session.commit()
        return True


class UserRepository(BaseRepository[models.User]):
    model = models.User
    resource = "User"

    def get_by_username(self, username: str) -> Optional[models.User]:
        return self.session.query(models.User).filter(models.User.username == username).first()


class ExerciseRepository(BaseRepository[models.Exercise]):
    model = models.Exercise
    resource = "Exercise"

    def get_by_category(self, category: str) -> List[models.Exercise]:
        return (
            self.session.query(models.Exercise)
            .filter(models.Exercise.category == category)
            .order_by(models.Exercise.id)
            .all()
        )


class WorkoutRepository(BaseRepository[models.Workout]):
    model = models.Workout
    resource = "Workout"

    def get_by_user(self, user_id: int) -> List[models.Workout]:
        return (
            self.session.query(models.Workout)
            .filter(models.Workout.user_id == user_id)
            .order_by(models.Workout.id)
            .all()
        )


class WorkoutSessionRepository(BaseRepository[models.WorkoutSession]):
    model = models.WorkoutSession
    resource = "WorkoutSession"

    def get_by_user(self, user_id: int) -> List[models.WorkoutSession]:
        """Sessions of a user, most recently completed first."""
        return (
            self.session.query(models.WorkoutSession)
            .filter(models.WorkoutSession.user_id == user_id)
            .order_by(models.WorkoutSession.completed_at.desc())
            .all()
        )

    def count_since(self, user_id: int, since: datetime) -> int:
        return (
            self.session.query(models.WorkoutSession)
            .filter(
                models.WorkoutSession.user_id == user_id,
                models.WorkoutSession.completed_at >= since,
            )
            .count()
        )


class FoodItemRepository(BaseRepository[models.FoodItem]):
    model = models.FoodItem
    resource = "FoodItem"

    def get_by_category(self, category: str) -> List[models.FoodItem]:
        return (
            self.session.query(models.FoodItem)
            .filter(models.FoodItem.category == category)
            .order_by(models.FoodItem.id)
            .all()
        )

    def search(self, text: str) -> List[models.FoodItem]:
        """Case-insensitive substring match on name or category."""
        pattern = f"%{text.lower()}%"
        return (
            self.session.query(models.FoodItem)
            .filter(or_(
                func.lower(models.FoodItem.name).like(pattern),
                func.lower(models.FoodItem.category).like(pattern),
            ))
            .order_by(models.FoodItem.id)
            .all()
        )


class MealEntryRepository(BaseRepository[models.MealEntry]):
    model = models.MealEntry
    resource = "MealEntry"

    def get_by_user_and_range(self, user_id: int, start: datetime, end: datetime) -> List[models.MealEntry]:
        """Entries whose `date` falls inside the half-open range [start, end)."""
        return (
            self.session.query(models.MealEntry)
            .filter(
                models.MealEntry.user_id == user_id,
                models.MealEntry.date >= start,
                models.MealEntry.date < end,
            )
            .order_by(models.MealEntry.date, models.MealEntry.id)
            .all()
        )

    def get_by_user_and_date(self, user_id: int, day: date_type) -> List[models.MealEntry]:
        start = datetime.combine(day, datetime.min.time())
        return self.get_by_user_and_range(user_id, start, start + timedelta(days=1))


class ProgressEntryRepository(BaseRepository[models.ProgressEntry]):
    model = models.ProgressEntry
    resource = "ProgressEntry"

    def get_by_user(self, user_id: int) -> List[models.ProgressEntry]:
        """Entries of a user, newest first."""
        return (
            self.session.query(models.ProgressEntry)
            .filter(models.ProgressEntry.user_id == user_id)
            .order_by(models.ProgressEntry.date.desc(), models.ProgressEntry.id.desc())
            .all()
        )

    def get_latest(self, user_id: int) -> Optional[models.ProgressEntry]:
        return (
            self.session.query(models.ProgressEntry)
            .filter(models.ProgressEntry.user_id == user_id)
            .order_by(models.ProgressEntry.date.desc(), models.ProgressEntry.id.desc())
            .first()
        )
