"""Body-metrics API router.

Computes BMI, BMR, TDEE and macro targets either for a stored user (caching
the result on the user row) or for an ad-hoc profile in the request body.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from database.deps import get_db_write
from core.logger import get_logger
from core.repository import UserRepository
from schemas import BodyMetrics, BodyMetricsRequest, GoalRecommendation
from services.body_metrics import body_metrics_calculator
from services.profile_metrics import refresh_user_metrics

logger = get_logger("api.body_metrics")
router = APIRouter(prefix="/api/body-metrics", tags=["body-metrics"])


@router.post("/calculate", response_model=BodyMetrics)
def calculate(payload: BodyMetricsRequest):
    """Compute metrics for the profile in the body without touching storage."""
    return body_metrics_calculator.calculate_body_metrics(payload.to_profile())


@router.get("/recommendations/{fitness_goal}", response_model=GoalRecommendation)
def goal_recommendations(fitness_goal: str):
    """Describe the calorie, protein and training approach for a goal.

    Unknown goals get the maintenance description.
    """
    return body_metrics_calculator.get_goal_recommendations(fitness_goal)


@router.get("/{user_id}", response_model=BodyMetrics)
def get_body_metrics(user_id: int, db: Session = Depends(get_db_write)):
    """Compute metrics from a user's stored profile and cache them on the user.

    Raises:
        NotFoundError: If the user does not exist.
        IncompleteProfileError: If weight, height or age is missing.
    """
    users = UserRepository(db)
    user = users.get_or_404(user_id)
    return refresh_user_metrics(users, user)
