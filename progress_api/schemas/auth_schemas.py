from datetime import datetime

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError


def normalize_email(value: str) -> str:
    """Canonical stored form of an address. Raises EmailNotValidError."""
    return validate_email(value, check_deliverability=False).normalized.lower()


class RegisterRequest(BaseModel):
    name: str = Field(max_length=255)
    email: str = Field(max_length=255)
    password: str = Field(min_length=8, max_length=72)  # bcrypt input limit

    @field_validator("email")
    @classmethod
    def email_must_be_valid(cls, value: str) -> str:
        try:
            return normalize_email(value)
        except EmailNotValidError:
            raise PydanticCustomError("email_format", "The email must be a valid email address.")


class LoginRequest(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def email_lookup_key(cls, value: str) -> str:
        # Unparseable addresses cannot match a stored account; login reports bad credentials.
        try:
            return normalize_email(value)
        except EmailNotValidError:
            return value.strip().lower()


class LoginResponse(BaseModel):
    token: str


class RegisterResponse(BaseModel):
    message: str


class LogoutResponse(BaseModel):
    message: str


class AuthTokenPayload(BaseModel):
    sub: str  # user id
    jti: str  # AccessToken id
    exp: datetime
