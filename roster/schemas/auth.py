"""Schemas for the authenticated user resolved from a session token."""

from pydantic import BaseModel, ConfigDict

from roster.models.user import PermissionLevel


class CurrentUser(BaseModel):
    """User behind the request's session token (username and permission level)."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    username: str
    permission_level: PermissionLevel

    @property
    def is_admin(self) -> bool:
        return self.permission_level == PermissionLevel.ADMIN
