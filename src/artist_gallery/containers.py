"""Dependency container wiring for the application."""

from dataclasses import dataclass

from artist_gallery.adapters.memory_catalogue_repository import (
    InMemoryCatalogueRepository,
)
from artist_gallery.adapters.memory_contact_repository import (
    InMemoryContactRepository,
)
from artist_gallery.config import Settings, artist_profile
from artist_gallery.domain.artist import ArtistProfile
from artist_gallery.services.auth import AccessGate
from artist_gallery.services.catalogue import CatalogueService
from artist_gallery.services.contact import ContactService
from artist_gallery.services.gallery import GalleryService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    artist: ArtistProfile
    access_gate: AccessGate
    catalogue_service: CatalogueService
    gallery_service: GalleryService
    contact_service: ContactService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    catalogue_repository = (
        InMemoryCatalogueRepository.with_demo_paintings()
        if resolved_settings.seed_demo_paintings
        else InMemoryCatalogueRepository()
    )
    access_gate = AccessGate(
        username=resolved_settings.admin_username,
        password=resolved_settings.admin_password,
    )
    catalogue_service = CatalogueService(catalogue_repository, gate=access_gate)
    gallery_service = GalleryService(catalogue_service)
    contact_service = ContactService(InMemoryContactRepository())

    return AppContainer(
        settings=resolved_settings,
        artist=artist_profile(resolved_settings),
        access_gate=access_gate,
        catalogue_service=catalogue_service,
        gallery_service=gallery_service,
        contact_service=contact_service,
    )
