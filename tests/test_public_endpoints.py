"""Tests for public endpoints."""

from fastapi.testclient import TestClient

from artist_gallery.api.app import create_app
from artist_gallery.config import Settings
from artist_gallery.containers import AppContainer, build_container
from tests.conftest import make_painting


def _seed(container: AppContainer, *paintings) -> None:
    for painting in paintings:
        container.catalogue_service.repository.add_painting(painting)


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_gallery_lists_public_paintings_with_filters(
    client: TestClient, container: AppContainer
) -> None:
    oil = make_painting(title="A", medium="Oil", year=2024)
    water = make_painting(title="B", medium="Watercolor", year=2023, status="sold")
    hidden = make_painting(title="C", status="hidden")
    _seed(container, oil, water, hidden)

    everything = client.get("/paintings").json()
    oils = client.get("/paintings", params={"medium": "Oil"}).json()
    older = client.get("/paintings", params={"year": "2023"}).json()

    assert [p["title"] for p in everything["paintings"]] == ["A", "B"]
    assert everything["count"] == 2
    assert [p["title"] for p in oils["paintings"]] == ["A"]
    assert [p["title"] for p in older["paintings"]] == ["B"]


def test_filter_options(client: TestClient, container: AppContainer) -> None:
    _seed(
        container,
        make_painting(medium="Oil", year=2023),
        make_painting(medium="Acrylic", year=2024),
    )

    response = client.get("/paintings/filters")

    assert response.json() == {"mediums": ["Oil", "Acrylic"], "years": [2024, 2023]}


def test_painting_detail(client: TestClient, container: AppContainer) -> None:
    shown = make_painting(title="Quiet Field")
    unpublished = make_painting(published=False)
    _seed(container, shown, unpublished)

    response = client.get(f"/paintings/{shown.id}")

    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Quiet Field"
    assert data["inquiry_url"].startswith("https://wa.me/1234567890?text=")
    assert client.get(f"/paintings/{unpublished.id}").status_code == 404


def test_artist_profile(client: TestClient) -> None:
    response = client.get("/artist")

    assert response.status_code == 200
    assert response.json()["studio_email"] == "hello@artiststudio.com"


def test_contact_form(client: TestClient, container: AppContainer) -> None:
    response = client.post(
        "/contact",
        json={"name": "Ana", "email": "ana@example.com", "message": "Hello"},
    )
    rejected = client.post(
        "/contact", json={"name": "Ana", "email": "not-an-email", "message": "Hi"}
    )

    assert response.status_code == 201
    assert response.json() == {"status": "received"}
    assert rejected.status_code == 422
    assert len(container.contact_service.list_messages()) == 1


def test_demo_catalogue_is_served() -> None:
    client = TestClient(create_app(build_container(Settings())))

    data = client.get("/paintings").json()
    filters = client.get("/paintings/filters").json()

    assert data["count"] == 3
    assert filters["years"] == [2024, 2023]
    assert filters["mediums"] == ["Oil on canvas", "Acrylic", "Watercolor"]
