"""Progress tracking and dashboard API routers."""

from datetime import datetime, timedelta
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from database.deps import get_db_read, get_db_write, get_ai_coach
from database import models
from core.logger import get_logger
from core.repository import (
    MealEntryRepository,
    ProgressEntryRepository,
    UserRepository,
    WorkoutSessionRepository,
)
from schemas import (
    ProgressEntryCreateRequest,
    ProgressEntryResponse,
    ProgressAnalyzeRequest,
    ProgressAnalysis,
    WorkoutSessionResponse,
    DashboardStats,
)
from services.ai_coach import AICoach

logger = get_logger("api.progress")
router = APIRouter(prefix="/api/progress", tags=["progress"])
dashboard_router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])

# Water intake is not tracked yet; the dashboard shows a fixed glass count.
WATER_INTAKE_PLACEHOLDER = 6


@router.get("/user/{user_id}", response_model=List[ProgressEntryResponse])
def list_progress(user_id: int, db: Session = Depends(get_db_read)):
    """Return a user's progress entries, newest first."""
    return ProgressEntryRepository(db).get_by_user(user_id)


@router.post("", response_model=ProgressEntryResponse, status_code=201)
def record_progress(payload: ProgressEntryCreateRequest, db: Session = Depends(get_db_write)):
    """Store a progress measurement.

    Raises:
        NotFoundError: If the user does not exist.
    """
    UserRepository(db).get_or_404(payload.user_id)
    data = payload.model_dump()
    data["date"] = data["date"] or datetime.utcnow()
    entry = ProgressEntryRepository(db).create(models.ProgressEntry(**data))
    logger.info("Progress entry %s recorded for user %s", entry.id, entry.user_id)
    return entry


@router.post("/analyze", response_model=ProgressAnalysis)
def analyze(
    payload: ProgressAnalyzeRequest,
    db: Session = Depends(get_db_read),
    coach: AICoach = Depends(get_ai_coach),
):
    """Have the AI coach review progress entries together with workout sessions.

    Raises:
        NotFoundError: If the user does not exist.
        AIServiceError: If the completion fails or returns an unusable analysis.
    """
    user = UserRepository(db).get_or_404(payload.user_id)
    entries = ProgressEntryRepository(db).get_by_user(user.id)
    sessions = WorkoutSessionRepository(db).get_by_user(user.id)

    progress_data = [ProgressEntryResponse.model_validate(e).model_dump(mode="json") for e in entries]
    progress_data += [WorkoutSessionResponse.model_validate(s).model_dump(mode="json") for s in sessions]
    return coach.analyze_progress(user, progress_data)


@dashboard_router.get("/stats/{user_id}", response_model=DashboardStats)
def dashboard_stats(user_id: int, db: Session = Depends(get_db_read)):
    """Today's calories, workouts completed in the past week and current weight."""
    now = datetime.utcnow()
    today_meals = MealEntryRepository(db).get_by_user_and_date(user_id, now.date())
    week_workouts = WorkoutSessionRepository(db).count_since(user_id, now - timedelta(days=7))
    latest = ProgressEntryRepository(db).get_latest(user_id)

    return DashboardStats(
        today_calories=sum(m.calories for m in today_meals),
        week_workout_count=week_workouts,
        current_weight=(latest.weight if latest and latest.weight else 0),
        water_intake=WATER_INTAKE_PLACEHOLDER,
    )
