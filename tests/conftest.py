"""Shared test fixtures."""

from datetime import UTC, datetime
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from artist_gallery.adapters.memory_catalogue_repository import (
    InMemoryCatalogueRepository,
)
from artist_gallery.api.app import create_app
from artist_gallery.config import Settings
from artist_gallery.containers import AppContainer, build_container
from artist_gallery.domain.paintings import (
    STATUS_AVAILABLE,
    Painting,
    PaintingDraft,
)
from artist_gallery.services.catalogue import CatalogueService


def make_painting(**overrides: object) -> Painting:
    """Build a painting with sensible defaults for tests."""
    values: dict[str, object] = {
        "id": uuid4(),
        "title": "Untitled",
        "medium": "Oil",
        "year": 2024,
        "dimensions": "50cm x 40cm",
        "price": 1000.0,
        "description": "",
        "images": ("https://example.com/a.jpg",),
        "status": STATUS_AVAILABLE,
        "published": True,
        "created_at": datetime(2024, 1, 1, tzinfo=UTC),
    }
    values.update(overrides)
    return Painting(**values)  # type: ignore[arg-type]


def make_draft(**overrides: object) -> PaintingDraft:
    """Build a painting draft with sensible defaults for tests."""
    values: dict[str, object] = {
        "title": "Morning Light",
        "medium": "Oil",
        "year": 2024,
        "dimensions": "70cm x 50cm",
        "price": 1500.0,
        "description": "Soft light over the harbour.",
        "images": ("https://example.com/morning.jpg",),
    }
    values.update(overrides)
    return PaintingDraft(**values)  # type: ignore[arg-type]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        admin_username="admin",
        admin_password="admin123",
        whatsapp_number="+1 (234) 567-890",
        seed_demo_paintings=False,
    )


@pytest.fixture
def catalogue() -> CatalogueService:
    return CatalogueService(InMemoryCatalogueRepository())


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


@pytest.fixture
def admin_headers(client: TestClient) -> dict[str, str]:
    response = client.post(
        "/auth/login", json={"username": "admin", "password": "admin123"}
    )
    assert response.status_code == 200
    return {"X-Session-Token": response.json()["token"]}
