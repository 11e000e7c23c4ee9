"""Schemas for the body-metrics calculator and its endpoints."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class UserProfile(BaseModel):
    """Calculator input. Ranges are deliberately not checked here."""

    model_config = ConfigDict(frozen=True)

    weight: float = Field(..., description="Body weight in kilograms")
    height: float = Field(..., description="Height in centimeters")
    age: int = Field(..., description="Age in years")
    gender: str = Field("male", examples=["male"], description="male, female or other")
    activity_level: str = Field(
        "moderate",
        examples=["moderate"],
        description="sedentary, light, moderate, active, very_active",
    )
    fitness_goal: str = Field(
        "body_recomposition",
        examples=["body_recomposition"],
        description="bulking, cutting, body_recomposition, strength, maintenance",
    )
    body_fat_percentage: Optional[float] = Field(None, description="Body fat percentage (0-100)")


class BodyMetrics(BaseModel):
    """Calculator output."""

    model_config = ConfigDict(frozen=True)

    bmi: float
    bmi_category: str
    bmr: int
    tdee: int
    calorie_target: int
    protein_target: int
    carb_target: int
    fat_target: int


class BodyMetricsRequest(BaseModel):
    """Inline profile for `POST /api/body-metrics/calculate`.

    Unlike `UserProfile`, this rejects non-positive measurements before they
    reach the calculator.
    """

    weight: float = Field(..., gt=0, examples=[70.0], description="Body weight in kilograms")
    height: float = Field(..., gt=0, examples=[175.0], description="Height in centimeters")
    age: int = Field(..., gt=0, examples=[30], description="Age in years")
    gender: str = Field("male", examples=["male"])
    activity_level: str = Field("moderate", examples=["moderate"])
    fitness_goal: str = Field("body_recomposition", examples=["body_recomposition"])
    body_fat_percentage: Optional[float] = Field(None, ge=0, le=100, examples=[20.0])

    def to_profile(self) -> UserProfile:
        return UserProfile(**self.model_dump())


class GoalRecommendation(BaseModel):
    title: str
    description: str
    calorie_balance: str
    protein_focus: str
    training_tips: str
    timeframe: str
