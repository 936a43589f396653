"""Public gallery, about and contact endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Request, status

from artist_gallery.api.schemas import (
    ContactRequest,
    serialize_artist,
    serialize_painting,
)
from artist_gallery.domain.gallery import ALL
from artist_gallery.services.gallery import inquiry_url

if TYPE_CHECKING:
    from artist_gallery.containers import AppContainer

router = APIRouter(tags=["public"])


@router.get("/artist")
async def artist(request: Request) -> dict[str, object]:
    """Return the artist profile for the about page."""
    container: AppContainer = request.app.state.container
    return serialize_artist(container.artist)


@router.get("/paintings")
async def list_paintings(
    request: Request, medium: str = ALL, year: str = ALL
) -> dict[str, object]:
    """Return the public catalogue, optionally filtered by medium and year."""
    container: AppContainer = request.app.state.container
    paintings = container.gallery_service.list_public(medium=medium, year=year)
    return {
        "paintings": [serialize_painting(painting) for painting in paintings],
        "count": len(paintings),
    }


@router.get("/paintings/filters")
async def painting_filters(request: Request) -> dict[str, object]:
    """Return the mediums and years present in the public catalogue."""
    container: AppContainer = request.app.state.container
    options = container.gallery_service.filter_options()
    return {"mediums": options.mediums, "years": options.years}


@router.get("/paintings/{painting_id}")
async def painting_detail(painting_id: UUID, request: Request) -> dict[str, object]:
    """Return a single public painting with an inquiry link."""
    container: AppContainer = request.app.state.container
    painting = container.gallery_service.get_public_painting(painting_id)
    if painting is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Artwork not found"
        )
    payload = serialize_painting(painting)
    payload["inquiry_url"] = inquiry_url(painting, container.artist.whatsapp_number)
    return payload


@router.post("/contact", status_code=status.HTTP_201_CREATED)
async def contact(form: ContactRequest, request: Request) -> dict[str, str]:
    """Accept a contact form submission."""
    container: AppContainer = request.app.state.container
    container.contact_service.submit(
        name=form.name,
        email=form.email,
        subject=form.subject,
        message=form.message,
    )
    return {"status": "received"}
