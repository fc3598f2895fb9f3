"""Password hashing and username/password rules for signup and login."""

import re

import bcrypt

from roster.core.config import settings

# Usernames: 1-19 chars of lowercase letters, digits and hyphens.
USERNAME_MIN_LEN = 1
USERNAME_MAX_LEN = 19
USERNAME_PATTERN = re.compile(r"[a-z0-9-]+")
PASSWORD_MIN_LEN = 8

# bcrypt only looks at the first 72 bytes of a password.
BCRYPT_MAX_BYTES = 72

USER_COOKIE_NAME = "user_token"


def is_valid_username(username: str) -> bool:
    """True if username has an allowed length and only [a-z0-9-] characters."""
    return USERNAME_MIN_LEN <= len(username) <= USERNAME_MAX_LEN and bool(
        USERNAME_PATTERN.fullmatch(username)
    )


def is_valid_password(password: str) -> bool:
    """True if password is at least PASSWORD_MIN_LEN bytes long in UTF-8."""
    return len(password.encode("utf-8")) >= PASSWORD_MIN_LEN


def hash_password(plain_password: str, rounds: int | None = None) -> str:
    """
    Hash a plain-text password with a random salt for storage.

    Raises ValueError when bcrypt rejects the input.
    """
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(pw_bytes, salt).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """
    Check a plain password against a stored hash.

    Raises ValueError when the stored hash is not a bcrypt hash.
    """
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
