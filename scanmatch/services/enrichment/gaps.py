"""Catalog gap analysis."""

from dataclasses import asdict, dataclass

from scanmatch.config import Settings, settings
from scanmatch.models import CatalogCandidate


@dataclass(frozen=True)
class MissingFields:
    """Which catalog fields are missing or incomplete."""

    missing_images: bool = False
    missing_description: bool = False
    missing_specs: bool = False
    missing_brand: bool = False

    @property
    def is_complete(self) -> bool:
        return not (
            self.missing_images or self.missing_description or self.missing_specs or self.missing_brand
        )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)


class GapAnalyzer:
    """Determines what fields are missing from a catalog item.

    Stored flags may be stale, so a field counts as missing when either its
    flag says so or its current value looks empty. Images are the exception:
    photo assets live outside the record, so the stored flag is trusted.
    """

    def __init__(self, config: Settings | None = None):
        self.config = config or settings

    def missing_fields(self, candidate: CatalogCandidate) -> MissingFields:
        description = candidate.description or ""
        return MissingFields(
            missing_images=bool(candidate.missing_images),
            missing_description=(
                bool(candidate.missing_description)
                or len(description) < self.config.min_description_length
            ),
            missing_specs=bool(candidate.missing_specs) or not candidate.metadata,
            missing_brand=bool(candidate.missing_brand) or not candidate.brand,
        )
