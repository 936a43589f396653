"""Admin catalogue management endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from artist_gallery.api.auth import require_admin
from artist_gallery.api.schemas import (
    PaintingCreateRequest,
    PaintingUpdateRequest,
    serialize_message,
    serialize_painting,
    serialize_stats,
)

if TYPE_CHECKING:
    from artist_gallery.containers import AppContainer

router = APIRouter(
    prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)]
)


@router.get("/paintings")
async def list_paintings(request: Request) -> dict[str, object]:
    """Return every painting, including unpublished and hidden ones."""
    container: AppContainer = request.app.state.container
    paintings = container.catalogue_service.list_paintings()
    return {"paintings": [serialize_painting(painting) for painting in paintings]}


@router.post("/paintings", status_code=status.HTTP_201_CREATED)
async def create_painting(
    payload: PaintingCreateRequest, request: Request
) -> dict[str, object]:
    """Add a painting to the catalogue."""
    container: AppContainer = request.app.state.container
    painting = container.catalogue_service.create_painting(payload.to_draft())
    return serialize_painting(painting)


@router.patch("/paintings/{painting_id}")
async def update_painting(
    painting_id: UUID, payload: PaintingUpdateRequest, request: Request
) -> dict[str, object]:
    """Apply a partial update to a painting."""
    container: AppContainer = request.app.state.container
    service = container.catalogue_service
    if not service.update_painting(painting_id, payload.changes()):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Artwork not found"
        )
    painting = service.get_painting(painting_id)
    return serialize_painting(painting)  # type: ignore[arg-type]


@router.delete("/paintings/{painting_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_painting(painting_id: UUID, request: Request) -> Response:
    """Remove a painting; deleting an unknown id is not an error."""
    container: AppContainer = request.app.state.container
    container.catalogue_service.delete_painting(painting_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/stats")
async def dashboard_stats(request: Request) -> dict[str, object]:
    """Return headline numbers for the dashboard."""
    container: AppContainer = request.app.state.container
    return serialize_stats(container.catalogue_service.dashboard_stats())


@router.get("/messages")
async def list_messages(request: Request) -> dict[str, object]:
    """Return contact form submissions, newest first."""
    container: AppContainer = request.app.state.container
    messages = container.contact_service.list_messages()
    return {"messages": [serialize_message(message) for message in messages]}
