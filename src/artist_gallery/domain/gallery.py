"""Domain models for the public gallery view."""

from dataclasses import dataclass

ALL = "all"


@dataclass(frozen=True)
class GalleryFilters:
    """Filter values available to gallery visitors."""

    mediums: list[str]
    years: list[int]
