"""
Account endpoints: registration, login (bearer token issuance), logout.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from progress_api.config import get_db
from progress_api.models.models import User
from progress_api.schemas.auth_schemas import (
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    RegisterRequest,
    RegisterResponse,
)
from progress_api.utils.auth import (
    authenticate_user,
    create_user,
    get_current_user,
    get_user_by_email,
    issue_token,
    revoke_tokens,
)
from progress_api.utils.logger import configure_logging
from progress_api.utils.validation import InvalidDataError

logger = configure_logging()

user_routes = APIRouter(prefix="/user", tags=["user"])

EMAIL_TAKEN = "The email has already been taken."


@user_routes.post("/register", status_code=status.HTTP_201_CREATED)
def register(request: RegisterRequest, db: Session = Depends(get_db)) -> RegisterResponse:
    """Register a new user. Does not log the user in."""
    if get_user_by_email(request.email, db):
        raise InvalidDataError.for_field("email", EMAIL_TAKEN)
    try:
        create_user(request.name, request.email, request.password, db)
    except IntegrityError:
        # A concurrent registration won the unique email constraint.
        db.rollback()
        logger.warning("registration lost unique email race")
        raise InvalidDataError.for_field("email", EMAIL_TAKEN)
    return RegisterResponse(message="Registration successful")


@user_routes.post("/login")
def login(request: LoginRequest, db: Session = Depends(get_db)) -> LoginResponse:
    """Check credentials and return a new bearer token."""
    user = authenticate_user(request.email, request.password, db)
    if user is None:
        logger.warning("login failed")
        raise InvalidDataError.for_field("email", "These credentials do not match our records.")
    return LoginResponse(token=issue_token(user, db))


@user_routes.post("/logout")
def logout(current_user: User = Depends(get_current_user), db: Session = Depends(get_db)) -> LogoutResponse:
    """Revoke every bearer token of the current user."""
    revoke_tokens(current_user, db)
    return LogoutResponse(message="Logout successful")
