"""Catalogue store for artwork listings."""

import logging
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID, uuid4

from artist_gallery.domain.paintings import (
    DRAFT_FIELDS,
    PAINTING_STATUSES,
    STATUS_AVAILABLE,
    STATUS_SOLD,
    DashboardStats,
    Painting,
    PaintingDraft,
)
from artist_gallery.services.auth import AccessGate

_logger = logging.getLogger(__name__)


class PaintingValidationError(ValueError):
    """Raised when a painting is missing required data."""


class CatalogueRepository(Protocol):
    """Storage interface for the artwork collection."""

    def list_paintings(self) -> list[Painting]:
        """Return all paintings in insertion order."""

    def get_painting(self, painting_id: UUID) -> Painting | None:
        """Return a painting by id, if present."""

    def add_painting(self, painting: Painting) -> None:
        """Append a painting to the collection."""

    def replace_painting(self, painting: Painting) -> bool:
        """Replace the stored painting with the same id; False if absent."""

    def remove_painting(self, painting_id: UUID) -> bool:
        """Remove a painting by id; False if absent."""


@dataclass
class CatalogueService:
    """Application service for catalogue CRUD.

    When ``gate`` is set, every mutation requires an open admin session.
    """

    repository: CatalogueRepository
    gate: AccessGate | None = None

    def list_paintings(self) -> list[Painting]:
        """Return the full collection in insertion order."""
        return self.repository.list_paintings()

    def get_painting(self, painting_id: UUID) -> Painting | None:
        """Return a painting by id, if present."""
        return self.repository.get_painting(painting_id)

    def create_painting(self, draft: PaintingDraft) -> Painting:
        """Assign an id and timestamp to a draft and store it."""
        self._require_admin()
        _validate(draft)
        painting = Painting(
            id=uuid4(),
            title=draft.title,
            medium=draft.medium,
            year=draft.year,
            dimensions=draft.dimensions,
            price=draft.price,
            description=draft.description,
            images=tuple(draft.images),
            status=draft.status,
            published=draft.published,
            created_at=datetime.now(tz=UTC),
        )
        self.repository.add_painting(painting)
        _logger.info("Painting created: id=%s title=%s", painting.id, painting.title)
        return painting

    def update_painting(self, painting_id: UUID, fields: dict[str, object]) -> bool:
        """Merge fields into a painting; returns False if no painting matches."""
        self._require_admin()
        current = self.repository.get_painting(painting_id)
        if current is None:
            _logger.info("Painting update skipped, not found: id=%s", painting_id)
            return False
        changes = {key: value for key, value in fields.items() if key in DRAFT_FIELDS}
        updated = replace(current, **changes)
        _validate(updated)
        updated = replace(updated, images=tuple(updated.images))
        self.repository.replace_painting(updated)
        _logger.info(
            "Painting updated: id=%s fields=%s", painting_id, sorted(changes)
        )
        return True

    def delete_painting(self, painting_id: UUID) -> bool:
        """Remove a painting; returns False if it was already gone."""
        self._require_admin()
        removed = self.repository.remove_painting(painting_id)
        if removed:
            _logger.info("Painting deleted: id=%s", painting_id)
        return removed

    def dashboard_stats(self) -> DashboardStats:
        """Summarize the collection for the admin dashboard."""
        paintings = self.repository.list_paintings()
        return DashboardStats(
            total=len(paintings),
            published=sum(1 for painting in paintings if painting.published),
            sold=sum(1 for painting in paintings if painting.status == STATUS_SOLD),
            available_value=sum(
                painting.price
                for painting in paintings
                if painting.status == STATUS_AVAILABLE
            ),
        )

    def _require_admin(self) -> None:
        if self.gate is not None:
            self.gate.require_session()


def _validate(painting: Painting | PaintingDraft) -> None:
    for name in ("title", "medium", "dimensions", "description", "status"):
        if not isinstance(getattr(painting, name), str):
            raise PaintingValidationError(f"{name.capitalize()} must be text")
    # bool is an int subclass
    if not isinstance(painting.year, int) or isinstance(painting.year, bool):
        raise PaintingValidationError("Year must be a whole number")
    if not isinstance(painting.price, int | float) or isinstance(painting.price, bool):
        raise PaintingValidationError("Price must be a number")
    if not isinstance(painting.published, bool):
        raise PaintingValidationError("Published must be true or false")
    images = painting.images
    if not isinstance(images, list | tuple) or not all(
        isinstance(image, str) for image in images
    ):
        raise PaintingValidationError("Images must be a list of URLs")
    if not painting.title.strip():
        raise PaintingValidationError("Title is required")
    if not images:
        raise PaintingValidationError("At least one image is required")
    if painting.status not in PAINTING_STATUSES:
        raise PaintingValidationError(f"Unknown status: {painting.status}")
