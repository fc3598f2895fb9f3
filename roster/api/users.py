"""User pages: own profile redirect, public profile, profile edit and directory."""

from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from roster.api.deps import AuthDep, DbDep, require_user, templates
from roster.core.errors import NoUser
from roster.schemas.auth import CurrentUser
from roster.services import users as users_service

router = APIRouter()


@router.get("/me")
def me(user: Annotated[CurrentUser, Depends(require_user)]) -> RedirectResponse:
    return RedirectResponse(f"/user/{user.username}", status_code=303)


@router.get("/user/{username}", response_class=HTMLResponse)
def user_page(request: Request, username: str, auth: AuthDep, db: DbDep) -> HTMLResponse:
    """Public profile of username; is_self tells the template to show the edit form."""
    profile = users_service.get_user(db, username)
    if profile is None:
        raise NoUser(username)

    return templates.TemplateResponse(
        request,
        "user.html",
        {
            "username": profile.username,
            "profile": profile.display_profile,
            "is_self": auth.is_user(db, profile.username),
        },
    )


@router.post("/profile")
def post_profile(
    db: DbDep,
    user: Annotated[CurrentUser, Depends(require_user)],
    profile: Annotated[str, Form()],
) -> RedirectResponse:
    users_service.update_profile(db, user.username, profile)
    return RedirectResponse("/me", status_code=303)


@router.get("/users", response_class=HTMLResponse)
def users_page(request: Request, db: DbDep) -> HTMLResponse:
    return templates.TemplateResponse(
        request, "users.html", {"users": users_service.list_usernames(db)}
    )
