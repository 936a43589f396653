"""In-memory catalogue storage."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4

from artist_gallery.domain.paintings import (
    STATUS_AVAILABLE,
    STATUS_SOLD,
    Painting,
)

_UNSPLASH = "https://images.unsplash.com"


@dataclass
class InMemoryCatalogueRepository:
    """Catalogue repository backed by an insertion-ordered dict.

    Contents live for the lifetime of the process only.
    """

    paintings: dict[UUID, Painting] = field(default_factory=dict)

    @classmethod
    def with_demo_paintings(cls) -> "InMemoryCatalogueRepository":
        """Create a repository holding the demo collection."""
        return cls({painting.id: painting for painting in demo_paintings()})

    def list_paintings(self) -> list[Painting]:
        return list(self.paintings.values())

    def get_painting(self, painting_id: UUID) -> Painting | None:
        return self.paintings.get(painting_id)

    def add_painting(self, painting: Painting) -> None:
        if painting.id in self.paintings:
            raise RuntimeError(f"Painting id already in use: {painting.id}")
        self.paintings[painting.id] = painting

    def replace_painting(self, painting: Painting) -> bool:
        if painting.id not in self.paintings:
            return False
        self.paintings[painting.id] = painting
        return True

    def remove_painting(self, painting_id: UUID) -> bool:
        return self.paintings.pop(painting_id, None) is not None


def demo_paintings() -> list[Painting]:
    """Return the paintings shown on a fresh install."""
    return [
        Painting(
            id=uuid4(),
            title="Celestial Dreams",
            medium="Oil on canvas",
            year=2024,
            dimensions="100cm x 80cm",
            price=2500,
            description=(
                "A mesmerizing abstract piece that captures the essence of cosmic "
                "beauty with swirling purples and golds."
            ),
            images=(f"{_UNSPLASH}/photo-1549887534-1541e9326642?w=800",),
            status=STATUS_AVAILABLE,
            published=True,
            created_at=datetime(2024, 1, 15, tzinfo=UTC),
        ),
        Painting(
            id=uuid4(),
            title="Urban Symphony",
            medium="Acrylic",
            year=2024,
            dimensions="120cm x 90cm",
            price=3200,
            description=(
                "Contemporary artwork depicting the rhythm and energy of city life "
                "through bold brushstrokes."
            ),
            images=(f"{_UNSPLASH}/photo-1578301978693-85fa9c0320b9?w=800",),
            status=STATUS_AVAILABLE,
            published=True,
            created_at=datetime(2024, 2, 20, tzinfo=UTC),
        ),
        Painting(
            id=uuid4(),
            title="Ethereal Whispers",
            medium="Watercolor",
            year=2023,
            dimensions="60cm x 45cm",
            price=1800,
            description=(
                "Delicate watercolor piece that evokes emotions of tranquility and "
                "introspection."
            ),
            images=(f"{_UNSPLASH}/photo-1561214115-f2f134cc4912?w=800",),
            status=STATUS_SOLD,
            published=True,
            created_at=datetime(2024, 3, 10, tzinfo=UTC),
        ),
    ]
