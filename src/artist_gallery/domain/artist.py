"""Domain models describing the artist."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ArtistProfile:
    """Public information shown on the about and contact pages."""

    name: str
    philosophy_line: str
    bio: str
    studio_email: str
    whatsapp_number: str
    portrait_image: str | None = None
    studio_location: str | None = None
