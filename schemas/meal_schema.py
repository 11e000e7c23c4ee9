"""Schemas for the food catalogue and logged meal entries."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


MEAL_TYPES = (
    "morning_snacks",
    "breakfast",
    "midday_snack",
    "lunch",
    "evening_snacks",
    "dinner",
)


class FoodItemResponse(BaseModel):
    """Representation of a food catalogue item."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    category: str
    calories_per_serving: int
    protein_per_serving: float = 0
    carbs_per_serving: float = 0
    fat_per_serving: float = 0
    serving_size: Optional[str] = None
    is_indian: bool = True


class MealEntryCreateRequest(BaseModel):
    """A logged portion of a food item."""

    user_id: int = Field(..., examples=[1])
    food_item_id: int = Field(..., examples=[22])
    meal_type: str = Field(..., examples=["breakfast"], description="One of: " + ", ".join(MEAL_TYPES))
    quantity: float = Field(1, gt=0, examples=[2])
    calories: int = Field(..., ge=0, examples=[320])
    protein: float = Field(0, ge=0)
    carbs: float = Field(0, ge=0)
    fat: float = Field(0, ge=0)
    date: Optional[datetime] = Field(None, description="When the meal was eaten; defaults to now")


class MealEntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    food_item_id: int
    meal_type: str
    quantity: float
    calories: int
    protein: float
    carbs: float
    fat: float
    date: datetime


class MealSuggestionRequest(BaseModel):
    user_id: int = Field(..., examples=[1])
    meal_type: str = Field(..., examples=["lunch"])
    target_calories: int = Field(..., gt=0, examples=[600])
