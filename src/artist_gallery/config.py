"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from artist_gallery.domain.artist import ArtistProfile

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    admin_username: str = "admin"
    admin_password: str = "admin123"
    artist_name: str = "Artist Studio"
    artist_philosophy_line: str = "Where art meets quiet beauty."
    artist_bio: str = (
        "Each original work is approached with the same care, not as a "
        "transaction but as an opportunity to collaborate."
    )
    artist_portrait_image: str | None = None
    studio_email: str = "hello@artiststudio.com"
    studio_location: str | None = None
    whatsapp_number: str = "+1234567890"
    seed_demo_paintings: bool = True
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def artist_profile(settings: Settings) -> ArtistProfile:
    """Build the public artist profile from settings."""
    return ArtistProfile(
        name=settings.artist_name,
        philosophy_line=settings.artist_philosophy_line,
        bio=settings.artist_bio,
        studio_email=settings.studio_email,
        whatsapp_number=settings.whatsapp_number,
        portrait_image=settings.artist_portrait_image,
        studio_location=settings.studio_location,
    )
