"""Pydantic schemas."""

from roster.schemas.auth import CurrentUser
from roster.schemas.health import HealthResponse
from roster.schemas.users import NO_PROFILE_PLACEHOLDER, AdminPanel, UserProfile

__all__ = [
    "AdminPanel",
    "CurrentUser",
    "HealthResponse",
    "NO_PROFILE_PLACEHOLDER",
    "UserProfile",
]
