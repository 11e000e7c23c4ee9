"""Schemas for exercises, workouts and completed workout sessions."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional
from datetime import datetime


class ExerciseResponse(BaseModel):
    """Exercise catalogue entry."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    category: str
    primary_muscles: List[str] = []
    secondary_muscles: List[str] = []
    equipment: Optional[str] = None
    instructions: Optional[str] = None
    difficulty: Optional[str] = None


class PlannedExercise(BaseModel):
    """One exercise slot inside a workout. Accepts camelCase keys from the AI coach."""

    exercise_id: Optional[int] = Field(None, validation_alias=AliasChoices("exercise_id", "exerciseId"))
    name: str
    sets: int
    reps: str = Field(..., examples=["8-10"], description="Rep range or a duration such as '30 seconds'")
    rest_time: str = Field(..., examples=["90 sec"], validation_alias=AliasChoices("rest_time", "restTime"))
    notes: Optional[str] = None


class WorkoutCreateRequest(BaseModel):
    """Payload for saving a hand-built workout."""

    user_id: int = Field(..., examples=[1])
    name: str = Field(..., min_length=1, examples=["Push Day"])
    goal: str = Field(..., examples=["strength"])
    workout_type: str = Field(..., examples=["gym"], description="gym, home or calisthenics")
    exercises: List[PlannedExercise]
    duration: Optional[int] = Field(None, ge=0, description="Planned duration in minutes")
    calories: Optional[int] = Field(None, ge=0)
    difficulty: Optional[str] = "intermediate"
    level: Optional[str] = "beginner"


class WorkoutGenerateRequest(BaseModel):
    """Payload asking the AI coach for a new workout."""

    user_id: int = Field(..., examples=[1])
    goal: str = Field(..., examples=["body_recomposition"])
    workout_type: str = Field("gym", examples=["home"])
    level: str = Field("beginner", examples=["intermediate"])


class WorkoutCompleteRequest(BaseModel):
    duration: Optional[int] = Field(None, ge=0, description="Actual duration in minutes")
    calories_burned: Optional[int] = Field(None, ge=0)
    completed_exercises: Optional[List[Dict[str, Any]]] = None


class WorkoutResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    name: str
    goal: str
    workout_type: str
    exercises: List[Dict[str, Any]]
    duration: Optional[int] = None
    calories: Optional[int] = None
    difficulty: Optional[str] = None
    level: Optional[str] = None
    completed: bool = False
    completed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None


class WorkoutSessionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    workout_id: int
    duration: Optional[int] = None
    calories_burned: Optional[int] = None
    completed_exercises: Optional[List[Dict[str, Any]]] = None
    notes: Optional[str] = None
    completed_at: Optional[datetime] = None
