"""Glue between stored user records and the body-metrics calculator.

The calculator itself never touches the database. These helpers build a
`UserProfile` from a user row and write the result back onto the row as
cached fields.
"""

from typing import Dict, Any

from core.exceptions import IncompleteProfileError
from core.logger import get_logger
from core.repository import UserRepository
from database import models
from schemas.body_metrics_schema import UserProfile, BodyMetrics
from services.body_metrics import body_metrics_calculator

logger = get_logger("services.profile_metrics")

REQUIRED_FIELDS = ["weight", "height", "age"]

PROFILE_DEFAULTS = {
    "gender": "male",
    "activity_level": "moderate",
    "fitness_goal": "body_recomposition",
}


def has_complete_profile(user: models.User) -> bool:
    return all(getattr(user, field) for field in REQUIRED_FIELDS)


def profile_from_user(user: models.User) -> UserProfile:
    """Build a calculator profile from a user row.

    Raises:
        IncompleteProfileError: If weight, height or age is missing or zero.
    """
    if not has_complete_profile(user):
        raise IncompleteProfileError(REQUIRED_FIELDS)
    return UserProfile(
        weight=user.weight,
        height=user.height,
        age=user.age,
        gender=user.gender or PROFILE_DEFAULTS["gender"],
        activity_level=user.activity_level or PROFILE_DEFAULTS["activity_level"],
        fitness_goal=user.fitness_goal or PROFILE_DEFAULTS["fitness_goal"],
        body_fat_percentage=user.body_fat_percentage,
    )


def metrics_to_user_fields(metrics: BodyMetrics) -> Dict[str, Any]:
    """Map calculator output onto the cached columns of `users`."""
    return {
        "bmi": metrics.bmi,
        "bmr": metrics.bmr,
        "tdee": metrics.tdee,
        "daily_calorie_target": metrics.calorie_target,
        "daily_protein_target": metrics.protein_target,
        "daily_carb_target": metrics.carb_target,
        "daily_fat_target": metrics.fat_target,
    }


def refresh_user_metrics(users: UserRepository, user: models.User) -> BodyMetrics:
    """Recompute metrics from the user's current profile and cache them on the row."""
    metrics = body_metrics_calculator.calculate_body_metrics(profile_from_user(user))
    users.update(user, metrics_to_user_fields(metrics))
    logger.info(
        "Body metrics refreshed for user %s: bmi=%s calories=%s",
        user.id, metrics.bmi, metrics.calorie_target,
    )
    return metrics
