"""Pydantic request models and response serializers for the HTTP API."""

from datetime import UTC, datetime

from pydantic import BaseModel, Field

from artist_gallery.domain.artist import ArtistProfile
from artist_gallery.domain.auth import AdminSession
from artist_gallery.domain.contact import ContactMessage
from artist_gallery.domain.paintings import (
    STATUS_AVAILABLE,
    DashboardStats,
    Painting,
    PaintingDraft,
)


def _current_year() -> int:
    return datetime.now(tz=UTC).year


class PaintingCreateRequest(BaseModel):
    """Admin payload for a new painting."""

    title: str
    medium: str = ""
    year: int = Field(default_factory=_current_year)
    dimensions: str = ""
    price: float = 0.0
    description: str = ""
    images: list[str] = Field(default_factory=list)
    status: str = STATUS_AVAILABLE
    published: bool = True

    def to_draft(self) -> PaintingDraft:
        return PaintingDraft(
            title=self.title,
            medium=self.medium,
            year=self.year,
            dimensions=self.dimensions,
            price=self.price,
            description=self.description,
            images=tuple(self.images),
            status=self.status,
            published=self.published,
        )


class PaintingUpdateRequest(BaseModel):
    """Admin payload for a partial painting update."""

    title: str | None = None
    medium: str | None = None
    year: int | None = None
    dimensions: str | None = None
    price: float | None = None
    description: str | None = None
    images: list[str] | None = None
    status: str | None = None
    published: bool | None = None

    def changes(self) -> dict[str, object]:
        """Return only the fields the client supplied.

        Explicit nulls are passed through so the catalogue rejects them.
        """
        return self.model_dump(exclude_unset=True)


class LoginRequest(BaseModel):
    """Admin login form."""

    username: str
    password: str


class ContactRequest(BaseModel):
    """Public contact form."""

    name: str
    email: str
    subject: str = ""
    message: str


def serialize_painting(painting: Painting) -> dict[str, object]:
    return {
        "id": str(painting.id),
        "title": painting.title,
        "medium": painting.medium,
        "year": painting.year,
        "dimensions": painting.dimensions,
        "price": painting.price,
        "description": painting.description,
        "images": list(painting.images),
        "status": painting.status,
        "published": painting.published,
        "created_at": painting.created_at.isoformat(),
    }


def serialize_session(session: AdminSession, include_token: bool = False) -> dict:
    payload: dict[str, object] = {"username": session.username, "role": session.role}
    if include_token:
        payload["token"] = session.token
    return payload


def serialize_stats(stats: DashboardStats) -> dict[str, object]:
    return {
        "total": stats.total,
        "published": stats.published,
        "sold": stats.sold,
        "available_value": stats.available_value,
    }


def serialize_message(message: ContactMessage) -> dict[str, object]:
    return {
        "id": str(message.id),
        "name": message.name,
        "email": message.email,
        "subject": message.subject,
        "message": message.message,
        "received_at": message.received_at.isoformat(),
    }


def serialize_artist(artist: ArtistProfile) -> dict[str, object]:
    return {
        "name": artist.name,
        "philosophy_line": artist.philosophy_line,
        "bio": artist.bio,
        "portrait_image": artist.portrait_image,
        "studio_email": artist.studio_email,
        "studio_location": artist.studio_location,
        "whatsapp_number": artist.whatsapp_number,
    }
