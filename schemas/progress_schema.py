"""Schemas for body-progress entries and the dashboard summary."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


class ProgressEntryCreateRequest(BaseModel):
    user_id: int = Field(..., examples=[1])
    weight: Optional[float] = Field(None, gt=0, examples=[71.2])
    body_fat_percentage: Optional[float] = Field(None, ge=0, le=100, examples=[17.5])
    muscle_mass: Optional[float] = Field(None, ge=0)
    notes: Optional[str] = None
    date: Optional[datetime] = Field(None, description="Measurement time; defaults to now")


class ProgressEntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    weight: Optional[float] = None
    body_fat_percentage: Optional[float] = None
    muscle_mass: Optional[float] = None
    notes: Optional[str] = None
    date: datetime


class ProgressAnalyzeRequest(BaseModel):
    user_id: int = Field(..., examples=[1])


class DashboardStats(BaseModel):
    """Summary tiles shown on the client dashboard."""

    today_calories: int
    week_workout_count: int
    current_weight: float
    water_intake: int
