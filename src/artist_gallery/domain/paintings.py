"""Domain models for the artwork catalogue."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

STATUS_AVAILABLE = "available"
STATUS_SOLD = "sold"
STATUS_HIDDEN = "hidden"
PAINTING_STATUSES = frozenset({STATUS_AVAILABLE, STATUS_SOLD, STATUS_HIDDEN})

DRAFT_FIELDS = (
    "title",
    "medium",
    "year",
    "dimensions",
    "price",
    "description",
    "images",
    "status",
    "published",
)


@dataclass(frozen=True)
class PaintingDraft:
    """Painting attributes supplied by the admin before an id is assigned."""

    title: str
    medium: str
    year: int
    dimensions: str = ""
    price: float = 0.0
    description: str = ""
    images: tuple[str, ...] = field(default_factory=tuple)
    status: str = STATUS_AVAILABLE
    published: bool = True


@dataclass(frozen=True)
class Painting:
    """Represents an artwork listing in the catalogue."""

    id: UUID
    title: str
    medium: str
    year: int
    dimensions: str
    price: float
    description: str
    images: tuple[str, ...]
    status: str
    published: bool
    created_at: datetime

    @property
    def is_public(self) -> bool:
        """Whether the painting may be shown on public pages."""
        return self.published and self.status != STATUS_HIDDEN


@dataclass(frozen=True)
class DashboardStats:
    """Headline numbers for the admin dashboard."""

    total: int
    published: int
    sold: int
    available_value: float
