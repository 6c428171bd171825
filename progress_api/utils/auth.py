"""
Account and bearer-token helpers plus the authentication dependency.

A token is accepted only while its AccessToken row exists, so deleting the
rows (logout) revokes every token a user holds.
"""

from datetime import datetime, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from progress_api.config import get_db
from progress_api.models.models import AccessToken, User
from progress_api.utils.jwt import (
    InvalidTokenError,
    build_token_payload,
    create_access_token,
    get_password_hash,
    verify_password,
    verify_token,
)
from progress_api.utils.logger import configure_logging

logger = configure_logging()

bearer_scheme = HTTPBearer(auto_error=False)

UNAUTHENTICATED = "Unauthenticated"


def _unauthenticated() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=UNAUTHENTICATED,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_user_by_email(email: str, db: Session) -> User | None:
    return db.query(User).filter(User.email == email).first()


def create_user(name: str, email: str, password: str, db: Session) -> User:
    user = User(name=name, email=email, hashed_password=get_password_hash(password))
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("user registered user_id=%s", user.id)
    return user


def authenticate_user(email: str, password: str, db: Session) -> User | None:
    user = get_user_by_email(email, db)
    if not user or not verify_password(password, user.hashed_password):
        return None
    return user


def issue_token(user: User, db: Session, name: str = "api_auth_token") -> str:
    """Persist a token record for the user and return the signed bearer token."""
    payload = build_token_payload(user.id)
    db.add(AccessToken(id=payload.jti, user_id=user.id, name=name, expires_at=payload.exp))
    db.commit()
    return create_access_token(payload)


def revoke_tokens(user: User, db: Session) -> int:
    count = db.query(AccessToken).filter(AccessToken.user_id == user.id).delete()
    db.commit()
    logger.info("tokens revoked user_id=%s count=%s", user.id, count)
    return count


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    if credentials is None or not credentials.credentials:
        raise _unauthenticated()

    try:
        payload = verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("rejected bearer token reason=%s", e)
        raise _unauthenticated()

    record = db.query(AccessToken).filter(AccessToken.id == payload.jti).first()
    if record is None or str(record.user_id) != payload.sub:
        logger.warning("rejected bearer token reason=revoked jti=%s", payload.jti)
        raise _unauthenticated()

    expires_at = record.expires_at
    if expires_at.tzinfo is None:
        # SQLite drops the offset; stored values are UTC.
        expires_at = expires_at.replace(tzinfo=timezone.utc)
    if expires_at <= datetime.now(timezone.utc):
        raise _unauthenticated()

    user = db.query(User).filter(User.id == record.user_id).first()
    if user is None:
        raise _unauthenticated()
    return user
