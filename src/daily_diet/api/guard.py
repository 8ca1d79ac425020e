"""Identity cookie handling and the access guard dependency."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import HTTPException, Request, Response, status

from daily_diet.services.identity import CallerIdentity

if TYPE_CHECKING:
    from daily_diet.config import Settings
    from daily_diet.containers import AppContainer


def _settings(request: Request) -> Settings:
    container: AppContainer = request.app.state.container
    return container.settings


def read_identity_token(request: Request) -> str | None:
    """Return the identity token presented by the client, if any."""
    return request.cookies.get(_settings(request).identity_cookie_name) or None


def set_identity_cookie(response: Response, settings: Settings, token: str) -> None:
    """Send the identity token back to the client."""
    response.set_cookie(
        settings.identity_cookie_name,
        token,
        max_age=settings.identity_max_age_seconds,
        path="/",
        secure=settings.identity_cookie_secure,
        samesite="lax",
    )


def require_identity(request: Request, response: Response) -> CallerIdentity:
    """Reject requests that carry no identity token."""
    token = read_identity_token(request)
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized"
        )
    settings = _settings(request)
    if settings.identity_sliding_expiry:
        set_identity_cookie(response, settings, token)
    return CallerIdentity(token=token)
