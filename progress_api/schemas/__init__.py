"""
API schemas package. Import from submodules or from this package.

Example:
    from progress_api.schemas import ProgressStatusQuery
    from progress_api.schemas.auth_schemas import LoginRequest
"""

from progress_api.schemas.auth_schemas import (
    AuthTokenPayload,
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    RegisterRequest,
    RegisterResponse,
)
from progress_api.schemas.progress_schemas import (
    ProgressStatusQuery,
    ProgressStatusResponse,
)

__all__ = [
    # auth
    "AuthTokenPayload",
    "LoginRequest",
    "LoginResponse",
    "LogoutResponse",
    "RegisterRequest",
    "RegisterResponse",
    # progress
    "ProgressStatusQuery",
    "ProgressStatusResponse",
]
