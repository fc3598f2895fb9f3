"""ORM model for user accounts and their permission level."""

from enum import IntEnum

from sqlalchemy import Column, Integer, String, Text

from roster.core.errors import CorruptDataError
from roster.models.base import Base


class PermissionLevel(IntEnum):
    """Binary role flag as stored in users.permission_level."""

    USER = 0
    ADMIN = 1

    @classmethod
    def decode(cls, raw: int) -> "PermissionLevel":
        """Map a stored integer to a level; any other value is corrupt data."""
        try:
            return cls(raw)
        except ValueError:
            raise CorruptDataError(f"invalid permission level {raw!r}") from None


class User(Base):
    """
    Account created at signup.

    username is immutable after creation; profile is free text edited by the
    owner; permission_level is changed only by admins.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(Text, nullable=False, unique=True)
    profile = Column(Text, nullable=True)
    permission_level = Column(
        Integer,
        nullable=False,
        default=int(PermissionLevel.USER),
        server_default=str(int(PermissionLevel.USER)),
    )
    password = Column(String(255), nullable=False)
