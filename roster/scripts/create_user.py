"""
Create a user (e.g. the first admin, which the web UI cannot create). Run from project root:
  python -m roster.scripts.create_user USERNAME PASSWORD [role]
Example:
  python -m roster.scripts.create_user alice your-secure-password admin
"""
import argparse
import logging
import sys

from sqlalchemy.exc import IntegrityError

from roster.core.database import SessionLocal, init_db
from roster.core.security import (
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    hash_password,
    is_valid_password,
    is_valid_username,
)
from roster.models import PermissionLevel, User

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

ROLES = {"user": PermissionLevel.USER, "admin": PermissionLevel.ADMIN}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Roster user.")
    parser.add_argument("username", help=f"Username (1-{USERNAME_MAX_LEN} chars of a-z, 0-9, -)")
    parser.add_argument("password", help=f"Password (at least {PASSWORD_MIN_LEN} chars)")
    parser.add_argument("role", nargs="?", default="user", choices=sorted(ROLES))
    args = parser.parse_args(argv)

    if not is_valid_username(args.username):
        logger.error("Invalid username %r.", args.username)
        return 1
    if not is_valid_password(args.password):
        logger.error("Password must be at least %s characters.", PASSWORD_MIN_LEN)
        return 1

    try:
        hashed_password = hash_password(args.password)
    except ValueError:
        logger.error("Password could not be hashed.")
        return 1

    init_db()
    db = SessionLocal()
    try:
        db.add(
            User(
                username=args.username,
                password=hashed_password,
                permission_level=int(ROLES[args.role]),
            )
        )
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.error("User '%s' already exists.", args.username)
        return 1
    finally:
        db.close()

    logger.info("Created user '%s' with role '%s'.", args.username, args.role)
    return 0


if __name__ == "__main__":
    sys.exit(main())
