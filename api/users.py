"""User API router.

Reads and updates user records. `PUT /api/users/{user_id}/profile` also
recomputes the cached body metrics whenever the updated profile has a
weight, height and age.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from database.deps import get_db_read, get_db_write
from core.logger import get_logger
from core.repository import UserRepository
from schemas import UserResponse, UserUpdateRequest, ProfileUpdateRequest, ProfileUpdateResponse
from services.profile_metrics import has_complete_profile, refresh_user_metrics

logger = get_logger("api.users")
router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, db: Session = Depends(get_db_read)):
    """Return one user.

    Raises:
        NotFoundError: If the user does not exist.
    """
    return UserRepository(db).get_or_404(user_id)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(user_id: int, payload: UserUpdateRequest, db: Session = Depends(get_db_write)):
    """Apply a partial update. Fields left out of the body are unchanged."""
    users = UserRepository(db)
    user = users.get_or_404(user_id)
    changes = payload.model_dump(exclude_unset=True)
    user = users.update(user, changes)
    logger.info("Updated user %s fields: %s", user_id, sorted(changes))
    return user


@router.put("/{user_id}/profile", response_model=ProfileUpdateResponse)
def update_profile(user_id: int, payload: ProfileUpdateRequest, db: Session = Depends(get_db_write)):
    """Update body-profile fields and recompute body metrics when possible.

    Args:
        user_id: User to update.
        payload: Any subset of weight, height, age, gender, activity level,
            fitness goal and body fat percentage.
        db: SQLAlchemy session (write) injected by dependency.

    Returns:
        `ProfileUpdateResponse` with the user and, if the profile is complete
        after the update, the recomputed `body_metrics`.

    Raises:
        NotFoundError: If the user does not exist.
    """
    users = UserRepository(db)
    user = users.get_or_404(user_id)
    user = users.update(user, payload.model_dump(exclude_unset=True))

    if not has_complete_profile(user):
        logger.info("Profile of user %s incomplete; metrics not recomputed", user_id)
        return ProfileUpdateResponse(user=UserResponse.model_validate(user))

    metrics = refresh_user_metrics(users, user)
    return ProfileUpdateResponse(user=UserResponse.model_validate(user), body_metrics=metrics)
