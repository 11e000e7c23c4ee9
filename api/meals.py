"""Food catalogue and meal logging API routers.

Small routers used by the nutrition page: browse or search food items, log
and delete meal entries, list a day's entries grouped by meal type and ask
the AI coach for meal ideas.
"""

from datetime import date, datetime
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from database.deps import get_db_read, get_db_write, get_ai_coach
from database import models
from core.logger import get_logger
from core.repository import FoodItemRepository, MealEntryRepository, UserRepository
from core.exceptions import NotFoundError
from schemas import (
    FoodItemResponse,
    MealEntryCreateRequest,
    MealEntryResponse,
    MealSuggestionRequest,
    MealSuggestion,
)
from services.ai_coach import AICoach

logger = get_logger("api.meals")
food_router = APIRouter(prefix="/api/food-items", tags=["food"])
router = APIRouter(prefix="/api/meals", tags=["meals"])


@food_router.get("", response_model=List[FoodItemResponse])
def list_food_items(
    category: Optional[str] = None,
    search: Optional[str] = None,
    db: Session = Depends(get_db_read),
):
    """List food items, optionally filtered.

    Args:
        category: Exact category to filter on.
        search: Case-insensitive text matched against name and category.
            Takes precedence over `category`.
    """
    foods = FoodItemRepository(db)
    if search:
        return foods.search(search)
    if category:
        return foods.get_by_category(category)
    return foods.get_all()


@router.get("/user/{user_id}/date/{day}", response_model=Dict[str, List[MealEntryResponse]])
def list_meals_for_day(user_id: int, day: date, db: Session = Depends(get_db_read)):
    """Return the user's entries for one calendar day keyed by meal type."""
    grouped: Dict[str, List[models.MealEntry]] = {}
    for entry in MealEntryRepository(db).get_by_user_and_date(user_id, day):
        grouped.setdefault(entry.meal_type, []).append(entry)
    return grouped


@router.post("", response_model=MealEntryResponse, status_code=201)
def log_meal(payload: MealEntryCreateRequest, db: Session = Depends(get_db_write)):
    """Log a meal entry.

    Raises:
        NotFoundError: If the user or the food item does not exist.
    """
    UserRepository(db).get_or_404(payload.user_id)
    FoodItemRepository(db).get_or_404(payload.food_item_id)

    data = payload.model_dump()
    data["date"] = data["date"] or datetime.utcnow()
    entry = MealEntryRepository(db).create(models.MealEntry(**data))
    logger.info("Meal entry %s logged for user %s (%s kcal)", entry.id, entry.user_id, entry.calories)
    return entry


@router.delete("/{entry_id}")
def delete_meal(entry_id: int, db: Session = Depends(get_db_write)):
    """Delete a meal entry.

    Raises:
        NotFoundError: If the entry does not exist.
    """
    if not MealEntryRepository(db).delete_by_id(entry_id):
        raise NotFoundError("MealEntry", entry_id)
    logger.info("Meal entry %s deleted", entry_id)
    return {"success": True}


@router.post("/suggestions", response_model=List[MealSuggestion])
def suggest_meals(
    payload: MealSuggestionRequest,
    db: Session = Depends(get_db_read),
    coach: AICoach = Depends(get_ai_coach),
):
    """Ask the AI coach for dishes that fit a meal's calorie budget.

    Raises:
        NotFoundError: If the user does not exist.
        AIServiceError: If the completion fails or returns unusable suggestions.
    """
    user = UserRepository(db).get_or_404(payload.user_id)
    return coach.generate_meal_suggestions(user, payload.meal_type, payload.target_calories)
