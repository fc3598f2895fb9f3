"""FastAPI application entrypoint. No business logic; only wiring, middleware and error pages."""

from dotenv import load_dotenv

load_dotenv()

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.exc import SQLAlchemyError

from roster.api import router
from roster.api.deps import templates
from roster.api.middleware import auth_middleware
from roster.core.config import settings
from roster.core.database import init_db
from roster.core.errors import CorruptDataError, InternalError, RosterError
from roster.core.tokens import TokenGenerator

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    if settings.CREATE_TABLES_ON_STARTUP:
        init_db()
        logger.info("Database schema ensured")
    yield


def error_page(request: Request, exc: RosterError) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "error.html",
        {"message": exc.message, "status_code": exc.status_code},
        status_code=exc.status_code,
    )


async def roster_error_handler(request: Request, exc: RosterError) -> HTMLResponse:
    if isinstance(exc, CorruptDataError):
        logger.error("Corrupt data: %s", exc.detail, extra={"path": request.url.path})
    return error_page(request, exc)


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> HTMLResponse:
    """Unexpected database failures become the generic 500 page; detail stays in the log."""
    logger.error(
        "Unhandled database error",
        exc_info=exc,
        extra={"path": request.url.path},
    )
    return error_page(request, InternalError())


def create_app(token_generator: TokenGenerator | None = None) -> FastAPI:
    """Build the application; token_generator defaults to one backed by the OS CSPRNG."""
    application = FastAPI(
        title="Roster",
        version="0.1.0",
        docs_url="/docs" if settings.APP_ENV == "dev" else None,
        redoc_url=None,
        lifespan=lifespan,
    )
    application.state.token_generator = token_generator or TokenGenerator()

    application.middleware("http")(auth_middleware)
    application.add_exception_handler(RosterError, roster_error_handler)
    application.add_exception_handler(SQLAlchemyError, database_error_handler)

    application.include_router(router)
    return application


app = create_app()
