"""
Persisted entities: registered users and the bearer tokens issued to them.
"""

from progress_api.models.models import AccessToken, User

__all__ = [
    "AccessToken",
    "User",
]
