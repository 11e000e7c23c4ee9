"""Exercise catalogue and workout API routers.

Workouts are either posted by the client or generated by the AI coach from
the exercise catalogue. Completing a workout marks it done and records a
`WorkoutSession`.
"""

from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from database.deps import get_db_read, get_db_write, get_ai_coach
from database import models
from core.logger import get_logger
from core.repository import (
    ExerciseRepository,
    UserRepository,
    WorkoutRepository,
    WorkoutSessionRepository,
)
from schemas import (
    ExerciseResponse,
    WorkoutCreateRequest,
    WorkoutGenerateRequest,
    WorkoutCompleteRequest,
    WorkoutResponse,
)
from services.ai_coach import AICoach

logger = get_logger("api.workouts")
exercises_router = APIRouter(prefix="/api/exercises", tags=["exercises"])
router = APIRouter(prefix="/api/workouts", tags=["workouts"])


@exercises_router.get("", response_model=List[ExerciseResponse])
def list_exercises(db: Session = Depends(get_db_read)):
    return ExerciseRepository(db).get_all()


@exercises_router.get("/category/{category}", response_model=List[ExerciseResponse])
def list_exercises_by_category(category: str, db: Session = Depends(get_db_read)):
    return ExerciseRepository(db).get_by_category(category)


@router.get("/user/{user_id}", response_model=List[WorkoutResponse])
def list_user_workouts(user_id: int, db: Session = Depends(get_db_read)):
    return WorkoutRepository(db).get_by_user(user_id)


@router.post("", response_model=WorkoutResponse, status_code=201)
def create_workout(payload: WorkoutCreateRequest, db: Session = Depends(get_db_write)):
    """Save a client-built workout.

    Raises:
        NotFoundError: If the user does not exist.
    """
    UserRepository(db).get_or_404(payload.user_id)
    data = payload.model_dump()
    workout = WorkoutRepository(db).create(models.Workout(**data))
    logger.info("Workout %s created for user %s", workout.id, workout.user_id)
    return workout


@router.post("/generate", response_model=WorkoutResponse, status_code=201)
def generate_workout(
    payload: WorkoutGenerateRequest,
    db: Session = Depends(get_db_write),
    coach: AICoach = Depends(get_ai_coach),
):
    """Have the AI coach design a workout and store it for the user.

    Raises:
        NotFoundError: If the user does not exist.
        ConfigurationError: If no OpenAI API key is configured.
        AIServiceError: If the completion fails or returns an unusable plan.
    """
    user = UserRepository(db).get_or_404(payload.user_id)
    exercises = ExerciseRepository(db).get_all()
    plan = coach.generate_workout_plan(user, exercises, payload.goal, payload.workout_type, payload.level)

    workout = WorkoutRepository(db).create(models.Workout(
        user_id=user.id,
        name=plan.name,
        goal=plan.goal,
        workout_type=plan.workout_type,
        level=plan.level,
        exercises=[e.model_dump() for e in plan.exercises],
        duration=plan.duration,
        calories=plan.estimated_calories,
        difficulty=plan.difficulty,
    ))
    logger.info("Generated workout %s (%s exercises) for user %s", workout.id, len(plan.exercises), user.id)
    return workout


@router.put("/{workout_id}/complete", response_model=WorkoutResponse)
def complete_workout(workout_id: int, payload: WorkoutCompleteRequest, db: Session = Depends(get_db_write)):
    """Mark a workout completed and log the session that completed it.

    Raises:
        NotFoundError: If the workout does not exist.
    """
    workouts = WorkoutRepository(db)
    workout = workouts.get_or_404(workout_id)
    now = datetime.utcnow()
    workout = workouts.update(workout, {"completed": True, "completed_at": now})

    WorkoutSessionRepository(db).create(models.WorkoutSession(
        user_id=workout.user_id,
        workout_id=workout.id,
        duration=payload.duration,
        calories_burned=payload.calories_burned,
        completed_exercises=payload.completed_exercises,
        completed_at=now,
    ))
    logger.info("Workout %s completed by user %s", workout.id, workout.user_id)
    return workout
