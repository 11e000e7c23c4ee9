"""Shapes of the JSON documents the AI coach asks the model to return.

The prompts request camelCase keys; both spellings are accepted on input and
responses are always serialized in snake_case.
"""

from pydantic import AliasChoices, BaseModel, Field
from typing import List

from .workout_schema import PlannedExercise


def _camel(name: str, camel: str):
    return Field(..., validation_alias=AliasChoices(name, camel))


class WorkoutPlan(BaseModel):
    name: str
    goal: str
    workout_type: str = _camel("workout_type", "workoutType")
    level: str
    exercises: List[PlannedExercise]
    duration: int
    estimated_calories: int = _camel("estimated_calories", "estimatedCalories")
    difficulty: str


class MealSuggestion(BaseModel):
    name: str
    category: str
    calories_per_serving: float = _camel("calories_per_serving", "caloriesPerServing")
    protein_per_serving: float = _camel("protein_per_serving", "proteinPerServing")
    carbs_per_serving: float = _camel("carbs_per_serving", "carbsPerServing")
    fat_per_serving: float = _camel("fat_per_serving", "fatPerServing")
    serving_size: str = _camel("serving_size", "servingSize")
    description: str


class ProgressAnalysis(BaseModel):
    insights: List[str]
    recommendations: List[str]
    next_goals: List[str] = _camel("next_goals", "nextGoals")
