"""Admin panel and promote/demote routes (admin only)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from roster.api.deps import DbDep, require_admin, templates
from roster.schemas.auth import CurrentUser
from roster.services import users as users_service

router = APIRouter()

AdminDep = Annotated[CurrentUser, Depends(require_admin)]


@router.get("", response_class=HTMLResponse)
def admin_page(request: Request, admin: AdminDep, db: DbDep) -> HTMLResponse:
    panel = users_service.admin_panel(db, viewer=admin.username)
    return templates.TemplateResponse(
        request, "admin.html", {"users": panel.users, "admins": panel.admins}
    )


@router.post("/add/{username}")
def add_admin(username: str, _admin: AdminDep, db: DbDep) -> RedirectResponse:
    """Promote username; already-admin or unknown targets are left unchanged."""
    users_service.promote(db, username)
    return RedirectResponse("/admin", status_code=303)


@router.post("/remove/{username}")
def remove_admin(username: str, _admin: AdminDep, db: DbDep) -> RedirectResponse:
    """Demote username; there is no guard against an admin demoting themselves."""
    users_service.demote(db, username)
    return RedirectResponse("/admin", status_code=303)
