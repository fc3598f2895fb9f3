"""Shared route dependencies: auth state, token generator, access guards and templates."""

from pathlib import Path
from typing import Annotated

from fastapi import Depends, Request
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from roster.core.config import settings
from roster.core.database import get_db
from roster.core.errors import NotAdmin, NotLoggedIn
from roster.core.security import USER_COOKIE_NAME
from roster.core.tokens import SessionToken, TokenGenerator
from roster.schemas.auth import CurrentUser
from roster.services.auth import AuthState

PACKAGE_DIR = Path(__file__).resolve().parent.parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def get_auth_state(request: Request) -> AuthState:
    """The AuthState the auth middleware attached to this request (anonymous if none)."""
    return getattr(request.state, "auth", None) or AuthState()


def get_token_generator(request: Request) -> TokenGenerator:
    """The application-wide token generator created by create_app."""
    return request.app.state.token_generator


DbDep = Annotated[Session, Depends(get_db)]
AuthDep = Annotated[AuthState, Depends(get_auth_state)]
TokenGeneratorDep = Annotated[TokenGenerator, Depends(get_token_generator)]


def require_user(auth: AuthDep, db: DbDep) -> CurrentUser:
    """Dependency: resolve the session and return its user. Raises NotLoggedIn otherwise."""
    user = auth.get_user(db)
    if user is None:
        raise NotLoggedIn()
    return user


def require_admin(auth: AuthDep, db: DbDep) -> CurrentUser:
    """Dependency: require a resolved user with admin permission. Raises NotAdmin otherwise."""
    user = auth.get_user(db)
    if user is None or not user.is_admin:
        raise NotAdmin()
    return user


def login_response(session_token: SessionToken) -> RedirectResponse:
    """303 to the landing page, setting the session cookie."""
    response = RedirectResponse("/", status_code=303)
    response.set_cookie(
        USER_COOKIE_NAME,
        session_token.to_cookie_value(),
        max_age=settings.SESSION_COOKIE_MAX_AGE,
    )
    return response


def logout_response() -> RedirectResponse:
    """303 to the landing page, expiring the session cookie."""
    response = RedirectResponse("/", status_code=303)
    response.set_cookie(USER_COOKIE_NAME, "_", max_age=0)
    return response
