"""Schemas for user accounts and profile updates."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

from .body_metrics_schema import BodyMetrics


class UserCreateRequest(BaseModel):
    """Registration payload. Only username and password are required."""

    username: str = Field(..., min_length=1, examples=["arjun"], description="Unique login name")
    password: str = Field(..., min_length=1, description="Plain-text password; stored hashed")
    age: Optional[int] = Field(None, gt=0, examples=[30], description="Age in years")
    weight: Optional[float] = Field(None, gt=0, examples=[70.0], description="Weight in kilograms")
    height: Optional[float] = Field(None, gt=0, examples=[175.0], description="Height in centimeters")
    gender: Optional[str] = Field("male", examples=["male"], description="male, female or other")
    activity_level: Optional[str] = Field("moderate", examples=["moderate"])
    fitness_goal: Optional[str] = Field("body_recomposition", examples=["body_recomposition"])
    target_weight: Optional[float] = Field(None, gt=0, examples=[68.0])
    body_fat_percentage: Optional[float] = Field(None, ge=0, le=100, examples=[18.0])
    muscle_mass: Optional[float] = Field(None, ge=0)


class LoginRequest(BaseModel):
    username: str
    password: str


class UserUpdateRequest(BaseModel):
    """Partial user update; only fields that are sent are applied."""

    age: Optional[int] = Field(None, gt=0)
    weight: Optional[float] = Field(None, gt=0)
    height: Optional[float] = Field(None, gt=0)
    gender: Optional[str] = None
    activity_level: Optional[str] = None
    fitness_goal: Optional[str] = None
    target_weight: Optional[float] = Field(None, gt=0)
    body_fat_percentage: Optional[float] = Field(None, ge=0, le=100)
    muscle_mass: Optional[float] = Field(None, ge=0)
    daily_calorie_target: Optional[int] = Field(None, ge=0)
    daily_protein_target: Optional[int] = Field(None, ge=0)
    daily_carb_target: Optional[int] = Field(None, ge=0)
    daily_fat_target: Optional[int] = Field(None, ge=0)


class ProfileUpdateRequest(BaseModel):
    """Body-profile fields that drive the body-metrics calculation."""

    weight: Optional[float] = Field(None, gt=0, examples=[72.5])
    height: Optional[float] = Field(None, gt=0, examples=[175.0])
    age: Optional[int] = Field(None, gt=0, examples=[31])
    gender: Optional[str] = Field(None, examples=["male"])
    activity_level: Optional[str] = Field(None, examples=["active"])
    fitness_goal: Optional[str] = Field(None, examples=["cutting"])
    body_fat_percentage: Optional[float] = Field(None, ge=0, le=100, examples=[18.0])


class UserResponse(BaseModel):
    """User record as returned by the API. Never carries the password."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    age: Optional[int] = None
    weight: Optional[float] = None
    height: Optional[float] = None
    gender: Optional[str] = None
    activity_level: Optional[str] = None
    fitness_goal: Optional[str] = None
    target_weight: Optional[float] = None
    body_fat_percentage: Optional[float] = None
    muscle_mass: Optional[float] = None
    bmi: Optional[float] = None
    bmr: Optional[float] = None
    tdee: Optional[float] = None
    daily_calorie_target: Optional[int] = None
    daily_protein_target: Optional[int] = None
    daily_carb_target: Optional[int] = None
    daily_fat_target: Optional[int] = None
    created_at: Optional[datetime] = None


class AuthResponse(BaseModel):
    user: UserResponse


class ProfileUpdateResponse(BaseModel):
    """Updated user, plus freshly computed metrics when the profile allowed it."""

    user: UserResponse
    body_metrics: Optional[BodyMetrics] = None
