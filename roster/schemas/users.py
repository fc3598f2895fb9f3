"""Schemas for user pages: public profile and admin panel listings."""

from pydantic import BaseModel, ConfigDict, Field

from roster.models.user import PermissionLevel

NO_PROFILE_PLACEHOLDER = "No profile set"


class UserProfile(BaseModel):
    """Public view of one account."""

    model_config = ConfigDict(from_attributes=True)

    username: str
    profile: str | None = None
    permission_level: PermissionLevel

    @property
    def display_profile(self) -> str:
        return self.profile if self.profile is not None else NO_PROFILE_PLACEHOLDER


class AdminPanel(BaseModel):
    """Usernames shown on the admin page; admins excludes the viewing admin."""

    users: list[str] = Field(default_factory=list)
    admins: list[str] = Field(default_factory=list)
