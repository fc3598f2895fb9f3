"""Session authentication: signup, login, account deletion and per-request auth state."""

import logging
from enum import Enum

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from roster.core.errors import (
    InternalError,
    InvalidPassword,
    InvalidUsername,
    NotLoggedIn,
    UserDoesNotExist,
    UsernameExists,
    WrongPassword,
)
from roster.core.security import hash_password, is_valid_username, verify_password
from roster.core.tokens import SessionToken, TokenGenerator
from roster.models import PermissionLevel, User, UserSession
from roster.schemas.auth import CurrentUser

logger = logging.getLogger(__name__)


class AuthStatus(str, Enum):
    ANONYMOUS = "anonymous"
    UNRESOLVED = "unresolved"
    RESOLVED = "resolved"


class AuthState:
    """
    Identity of the requester, resolved lazily.

    Built once per request by the auth middleware from the user_token cookie:
    ANONYMOUS when no valid token was sent, UNRESOLVED while the token has not
    been looked up, RESOLVED after the first get_user() call. The lookup result
    (including "no such session") is cached, so a request runs at most one
    session query.
    """

    def __init__(self, token: SessionToken | None = None) -> None:
        self._token = token
        self._resolved = False
        self._user: CurrentUser | None = None

    @classmethod
    def from_cookie(cls, cookie_value: str | None) -> "AuthState":
        """Build the state from a raw cookie value; unparseable values are anonymous."""
        if cookie_value is None:
            return cls()
        try:
            return cls(SessionToken.parse(cookie_value))
        except ValueError:
            logger.debug("Ignoring malformed session cookie")
            return cls()

    @property
    def token(self) -> SessionToken | None:
        return self._token

    @property
    def status(self) -> AuthStatus:
        if self._token is None:
            return AuthStatus.ANONYMOUS
        return AuthStatus.RESOLVED if self._resolved else AuthStatus.UNRESOLVED

    @property
    def logged_in(self) -> bool:
        """True when the request carried a well-formed token (not necessarily a live session)."""
        return self._token is not None

    def get_user(self, db: Session) -> CurrentUser | None:
        """Return the user owning the session token, querying the store only once."""
        if self._token is None:
            return None
        if not self._resolved:
            row = (
                db.query(User.username, User.permission_level)
                .join(UserSession, UserSession.user_id == User.id)
                .filter(UserSession.session_token == self._token.to_database_value())
                .first()
            )
            if row is not None:
                self._user = CurrentUser(
                    username=row.username,
                    permission_level=PermissionLevel.decode(row.permission_level),
                )
            self._resolved = True
        return self._user

    def is_admin(self, db: Session) -> bool:
        user = self.get_user(db)
        return user is not None and user.is_admin

    def is_user(self, db: Session, username: str) -> bool:
        """True if the requester is logged in as username."""
        user = self.get_user(db)
        return user is not None and user.username == username


def _is_unique_violation(exc: IntegrityError) -> bool:
    """True for a unique-constraint conflict on PostgreSQL (23505) or SQLite."""
    orig = exc.orig
    if getattr(orig, "pgcode", None) == "23505":
        return True
    return "UNIQUE constraint failed" in str(orig)


def new_session(db: Session, generator: TokenGenerator, user_id: int) -> SessionToken:
    """Issue a token for user_id and persist it."""
    session_token = generator.generate()
    db.add(UserSession(session_token=session_token.to_database_value(), user_id=user_id))
    db.commit()
    return session_token


def signup(
    db: Session,
    generator: TokenGenerator,
    username: str,
    password: str,
) -> SessionToken:
    """
    Create an account and log it in.

    The caller has already checked the password confirmation and minimum
    length. Raises InvalidUsername, InvalidPassword, UsernameExists or
    InternalError.
    """
    if not is_valid_username(username):
        raise InvalidUsername()

    try:
        hashed_password = hash_password(password)
    except ValueError:
        raise InvalidPassword() from None

    user = User(username=username, password=hashed_password)
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if _is_unique_violation(e):
            logger.info("Signup error: username already exists", extra={"username": username})
            raise UsernameExists() from e
        logger.error("Internal error during signup: %s", e)
        raise InternalError() from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Internal error during signup: %s", e)
        raise InternalError() from e

    logger.info("User signed up", extra={"username": username, "user_id": user.id})
    return new_session(db, generator, user.id)


def login(
    db: Session,
    generator: TokenGenerator,
    username: str,
    password: str,
) -> SessionToken:
    """
    Check credentials and issue a new session token.

    Raises UserDoesNotExist or WrongPassword; an unreadable stored hash is an
    InternalError.
    """
    row = db.query(User.id, User.password).filter(User.username == username).first()
    if row is None:
        logger.info("User '%s' does not exist", username)
        raise UserDoesNotExist()

    try:
        password_ok = verify_password(password, row.password)
    except ValueError as e:
        logger.error("Stored password hash for user '%s' is unreadable: %s", username, e)
        raise InternalError() from e
    if not password_ok:
        logger.info("Password incorrect for user '%s'", username)
        raise WrongPassword()

    return new_session(db, generator, row.id)


def delete_user(db: Session, auth_state: AuthState) -> int:
    """
    Delete the account owning the request's session token.

    Sessions go with it through ON DELETE CASCADE. Returns the number of users
    deleted (0 when the token matches no session).
    """
    if auth_state.token is None:
        raise NotLoggedIn()

    owner_id = (
        select(UserSession.user_id)
        .where(UserSession.session_token == auth_state.token.to_database_value())
        .scalar_subquery()
    )
    deleted = db.query(User).filter(User.id == owner_id).delete(synchronize_session=False)
    db.commit()
    if deleted:
        logger.info("Account deleted", extra={"deleted_count": deleted})
    return deleted
