"""HTTP middleware attaching the lazy auth state to every request."""

from collections.abc import Awaitable, Callable

from fastapi import Request, Response

from roster.core.security import USER_COOKIE_NAME
from roster.services.auth import AuthState


async def auth_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Parse the user_token cookie into an AuthState on request.state.auth; no DB access here."""
    request.state.auth = AuthState.from_cookie(request.cookies.get(USER_COOKIE_NAME))
    return await call_next(request)
