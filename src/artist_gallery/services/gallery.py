"""Public gallery queries over the catalogue."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from urllib.parse import quote
from uuid import UUID

from artist_gallery.domain.gallery import ALL, GalleryFilters
from artist_gallery.domain.paintings import Painting
from artist_gallery.services.catalogue import CatalogueService

WHATSAPP_BASE_URL = "https://wa.me"


def public_catalogue(paintings: Iterable[Painting]) -> list[Painting]:
    """Return published, non-hidden paintings in their original order."""
    return [painting for painting in paintings if painting.is_public]


def apply_filters(
    paintings: Sequence[Painting],
    medium: str = ALL,
    year: str | int = ALL,
) -> list[Painting]:
    """Restrict paintings to a medium and a year; ``"all"`` disables a filter."""
    return [
        painting
        for painting in paintings
        if (medium == ALL or painting.medium == medium)
        and (year == ALL or str(painting.year) == str(year))
    ]


def available_mediums(paintings: Iterable[Painting]) -> list[str]:
    """Distinct mediums of the public catalogue, first seen first."""
    mediums = (painting.medium for painting in public_catalogue(paintings))
    return list(dict.fromkeys(mediums))


def available_years(paintings: Iterable[Painting]) -> list[int]:
    """Distinct years of the public catalogue, newest first."""
    years = {painting.year for painting in public_catalogue(paintings)}
    return sorted(years, reverse=True)


def inquiry_url(painting: Painting, phone_number: str) -> str:
    """Build a WhatsApp link asking about a painting."""
    digits = "".join(char for char in phone_number if char.isdigit())
    text = quote(f'Hello, I\'m interested in "{painting.title}"')
    return f"{WHATSAPP_BASE_URL}/{digits}?text={text}"


@dataclass
class GalleryService:
    """Read-only view of the catalogue for visitors."""

    catalogue: CatalogueService

    def list_public(self, medium: str = ALL, year: str | int = ALL) -> list[Painting]:
        """Return the public catalogue narrowed by the given filters."""
        visible = public_catalogue(self.catalogue.list_paintings())
        return apply_filters(visible, medium, year)

    def filter_options(self) -> GalleryFilters:
        """Return the mediums and years visitors can filter by."""
        paintings = self.catalogue.list_paintings()
        return GalleryFilters(
            mediums=available_mediums(paintings),
            years=available_years(paintings),
        )

    def get_public_painting(self, painting_id: UUID) -> Painting | None:
        """Return a painting only if it is publicly visible."""
        painting = self.catalogue.get_painting(painting_id)
        if painting is None or not painting.is_public:
            return None
        return painting
