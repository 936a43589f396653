"""Admin login and session endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from artist_gallery.api.schemas import LoginRequest, serialize_session
from artist_gallery.domain.auth import AdminSession

if TYPE_CHECKING:
    from artist_gallery.containers import AppContainer

router = APIRouter(prefix="/auth", tags=["auth"])


async def require_admin(
    request: Request,
    x_session_token: str | None = Header(default=None),
) -> AdminSession:
    """Resolve the admin session presented in the X-Session-Token header."""
    container: AppContainer = request.app.state.container
    session = container.access_gate.session_for_token(x_session_token)
    if session is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    return session


@router.post("/login")
async def login(form: LoginRequest, request: Request) -> dict[str, object]:
    """Check credentials and open an admin session."""
    container: AppContainer = request.app.state.container
    result = container.access_gate.login(form.username, form.password)
    if not result.success or result.session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=result.message
        )
    return serialize_session(result.session, include_token=True)


@router.post("/logout", dependencies=[Depends(require_admin)])
async def logout(request: Request) -> dict[str, str]:
    """Close the admin session."""
    container: AppContainer = request.app.state.container
    container.access_gate.logout()
    return {"status": "ok"}


@router.get("/session")
async def current_session(
    session: AdminSession = Depends(require_admin),
) -> dict[str, object]:
    """Return the signed-in admin."""
    return serialize_session(session)
