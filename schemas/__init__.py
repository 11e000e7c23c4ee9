"""Pydantic schema package for request and response models."""

from .body_metrics_schema import UserProfile, BodyMetrics, BodyMetricsRequest, GoalRecommendation
from .user_schema import (
    UserCreateRequest,
    LoginRequest,
    UserUpdateRequest,
    ProfileUpdateRequest,
    UserResponse,
    AuthResponse,
    ProfileUpdateResponse,
)
from .workout_schema import (
    ExerciseResponse,
    PlannedExercise,
    WorkoutCreateRequest,
    WorkoutGenerateRequest,
    WorkoutCompleteRequest,
    WorkoutResponse,
    WorkoutSessionResponse,
)
from .meal_schema import FoodItemResponse, MealEntryCreateRequest, MealEntryResponse, MealSuggestionRequest
from .progress_schema import (
    ProgressEntryCreateRequest,
    ProgressEntryResponse,
    ProgressAnalyzeRequest,
    DashboardStats,
)
from .ai_schema import WorkoutPlan, MealSuggestion, ProgressAnalysis

__all__ = [
    "UserProfile",
    "BodyMetrics",
    "BodyMetricsRequest",
    "GoalRecommendation",
    "UserCreateRequest",
    "LoginRequest",
    "UserUpdateRequest",
    "ProfileUpdateRequest",
    "UserResponse",
    "AuthResponse",
    "ProfileUpdateResponse",
    "ExerciseResponse",
    "PlannedExercise",
    "WorkoutCreateRequest",
    "WorkoutGenerateRequest",
    "WorkoutCompleteRequest",
    "WorkoutResponse",
    "WorkoutSessionResponse",
    "FoodItemResponse",
    "MealEntryCreateRequest",
    "MealEntryResponse",
    "MealSuggestionRequest",
    "ProgressEntryCreateRequest",
    "ProgressEntryResponse",
    "ProgressAnalyzeRequest",
    "DashboardStats",
    "WorkoutPlan",
    "MealSuggestion",
    "ProgressAnalysis",
]
