"""User directory, profiles and admin promotion/demotion."""

import logging

from sqlalchemy.orm import Session

from roster.models import PermissionLevel, User
from roster.schemas.users import AdminPanel, UserProfile

logger = logging.getLogger(__name__)

# Maximum usernames returned by the directory and admin listings.
DIRECTORY_LIMIT = 100


def get_user(db: Session, username: str) -> UserProfile | None:
    """Return the public profile for username, or None if there is no such user."""
    row = (
        db.query(User.username, User.profile, User.permission_level)
        .filter(User.username == username)
        .first()
    )
    if row is None:
        return None
    return UserProfile(
        username=row.username,
        profile=row.profile,
        permission_level=PermissionLevel.decode(row.permission_level),
    )


def list_usernames(db: Session, limit: int = DIRECTORY_LIMIT) -> list[str]:
    rows = db.query(User.username).order_by(User.id).limit(limit).all()
    return [r.username for r in rows]


def list_admins(db: Session, limit: int = DIRECTORY_LIMIT) -> list[str]:
    rows = (
        db.query(User.username)
        .filter(User.permission_level == int(PermissionLevel.ADMIN))
        .order_by(User.id)
        .limit(limit)
        .all()
    )
    return [r.username for r in rows]


def admin_panel(db: Session, viewer: str) -> AdminPanel:
    """Listings for the admin page; the viewing admin is left out of the admin list."""
    return AdminPanel(
        users=list_usernames(db),
        admins=[name for name in list_admins(db) if name != viewer],
    )


def update_profile(db: Session, username: str, profile: str) -> None:
    """Overwrite the profile text of username."""
    db.query(User).filter(User.username == username).update(
        {User.profile: profile}, synchronize_session=False
    )
    db.commit()


def _set_permission_level(
    db: Session,
    username: str,
    current: PermissionLevel,
    target: PermissionLevel,
) -> bool:
    """Move username from current to target level; no-op if it is not at current."""
    updated = (
        db.query(User)
        .filter(User.username == username, User.permission_level == int(current))
        .update({User.permission_level: int(target)}, synchronize_session=False)
    )
    db.commit()
    return updated > 0


def promote(db: Session, username: str) -> bool:
    """Make username an admin. Returns False when it was not a plain user."""
    changed = _set_permission_level(db, username, PermissionLevel.USER, PermissionLevel.ADMIN)
    if changed:
        logger.info("Promoted user to admin", extra={"target": username})
    return changed


def demote(db: Session, username: str) -> bool:
    """Take admin rights from username. Returns False when it was not an admin."""
    changed = _set_permission_level(db, username, PermissionLevel.ADMIN, PermissionLevel.USER)
    if changed:
        logger.info("Demoted admin to user", extra={"target": username})
    return changed
