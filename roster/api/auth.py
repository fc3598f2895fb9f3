"""Signup, login, logout and account deletion routes."""

from typing import Annotated

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from roster.api.deps import (
    AuthDep,
    DbDep,
    TokenGeneratorDep,
    login_response,
    logout_response,
    templates,
)
from roster.core.errors import InvalidPassword, NotLoggedIn, PasswordsDoNotMatch
from roster.core.security import is_valid_password
from roster.services import auth as auth_service

router = APIRouter()


@router.get("/signup", response_class=HTMLResponse)
def get_signup(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(request, "signup.html", {})


@router.post("/signup")
def post_signup(
    db: DbDep,
    generator: TokenGeneratorDep,
    username: Annotated[str, Form()],
    password: Annotated[str, Form()],
    confirm_password: Annotated[str, Form()],
) -> RedirectResponse:
    """
    Create an account and log it in.

    Password confirmation and minimum length are checked here, before any
    hashing or storage happens.
    """
    if password != confirm_password:
        raise PasswordsDoNotMatch()
    if not is_valid_password(password):
        raise InvalidPassword()

    session_token = auth_service.signup(db, generator, username, password)
    return login_response(session_token)


@router.get("/login", response_class=HTMLResponse)
def get_login(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(request, "login.html", {})


@router.post("/login")
def post_login(
    db: DbDep,
    generator: TokenGeneratorDep,
    username: Annotated[str, Form()],
    password: Annotated[str, Form()],
) -> RedirectResponse:
    session_token = auth_service.login(db, generator, username, password)
    return login_response(session_token)


@router.post("/logout")
def post_logout() -> RedirectResponse:
    """Clear the cookie. The server-side session row is left in place."""
    return logout_response()


@router.post("/delete")
def post_delete(auth: AuthDep, db: DbDep) -> RedirectResponse:
    if not auth.logged_in:
        raise NotLoggedIn()

    auth_service.delete_user(db, auth)
    return logout_response()
