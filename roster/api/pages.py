"""Landing page and stylesheet."""

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse, HTMLResponse

from roster.api.deps import STATIC_DIR, AuthDep, templates

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def index(request: Request, auth: AuthDep) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "index.html",
        {"logged_in": auth.logged_in, "home_screen": True},
    )


@router.get("/styles.css")
def styles() -> FileResponse:
    return FileResponse(STATIC_DIR / "styles.css", media_type="text/css")
