"""SQLAlchemy ORM models."""

from roster.models.base import Base
from roster.models.session import UserSession
from roster.models.user import PermissionLevel, User

__all__ = ["Base", "PermissionLevel", "User", "UserSession"]
