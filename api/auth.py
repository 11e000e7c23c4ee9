"""Authentication API router.

Registration and login. Passwords are stored as salted hashes and never
leave the server; responses carry the `UserResponse` view only.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from werkzeug.security import generate_password_hash, check_password_hash
from database.deps import get_db_read, get_db_write
from database import models
from core.logger import get_logger
from core.repository import UserRepository
from core.exceptions import ConflictError, AuthenticationError
from schemas import UserCreateRequest, LoginRequest, AuthResponse, UserResponse

logger = get_logger("api.auth")
router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=201)
def register(payload: UserCreateRequest, db: Session = Depends(get_db_write)):
    """Create a user account.

    Raises:
        ConflictError: If the username is already taken.
    """
    users = UserRepository(db)
    if users.get_by_username(payload.username):
        raise ConflictError("Username already exists", field="username")

    fields = payload.model_dump(exclude={"password"}, exclude_none=True)
    user = users.create(models.User(password_hash=generate_password_hash(payload.password), **fields))
    logger.info("Registered user %s (id=%s)", user.username, user.id)
    return AuthResponse(user=UserResponse.model_validate(user))


@router.post("/login", response_model=AuthResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db_read)):
    """Check credentials and return the user.

    Raises:
        AuthenticationError: If the username is unknown or the password is wrong.
    """
    user = UserRepository(db).get_by_username(payload.username)
    if not user or not check_password_hash(user.password_hash, payload.password):
        logger.warning("Failed login for %s", payload.username)
        raise AuthenticationError()
    return AuthResponse(user=UserResponse.model_validate(user))
