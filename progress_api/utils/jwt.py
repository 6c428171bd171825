from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import uuid4

import bcrypt
from jose import JWTError
from jose.jwt import encode, decode

from progress_api.config import get_settings
from progress_api.schemas.auth_schemas import AuthTokenPayload


class InvalidTokenError(Exception):
    """Raised when a bearer token cannot be decoded or has expired."""


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its bcrypt hash."""
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash.
        return False


def get_password_hash(password: str) -> str:
    """Hash a password for storing."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def build_token_payload(user_id: int, expires_delta: Optional[timedelta] = None) -> AuthTokenPayload:
    settings = get_settings()
    expires_delta = expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    return AuthTokenPayload(
        sub=str(user_id),
        jti=str(uuid4()),
        exp=datetime.now(timezone.utc) + expires_delta,
    )


def create_access_token(data: AuthTokenPayload) -> str:
    """Create a signed JWT access token."""
    settings = get_settings()
    return encode(data.model_dump(), settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def verify_token(token: str) -> AuthTokenPayload:
    """Decode and check a token. Expiry is enforced by python-jose."""
    settings = get_settings()
    try:
        payload = decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        raise InvalidTokenError(str(e)) from e
    try:
        return AuthTokenPayload(**payload)
    except ValueError as e:
        raise InvalidTokenError("malformed token payload") from e
