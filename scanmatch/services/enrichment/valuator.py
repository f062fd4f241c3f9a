"""Enrichment benefit valuation."""

from dataclasses import dataclass, field

from scanmatch.config import ENRICHMENT_VALUES, Settings, settings
from scanmatch.models import CatalogCandidate, ScannedRecord

from .selector import EnrichableField, EnrichmentSelector


@dataclass
class EnrichmentValue:
    """How much a catalog item would improve from a scan (0-100)."""

    score: int = 0
    improvements: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"score": self.score, "improvements": self.improvements}


class EnrichmentValuator:
    """Scores the benefit of applying scanned data to a catalog item.

    Independent of match confidence; used to decide which match to apply
    or present first. Fields are valued in a fixed priority order:
    images, description, specs, brand, name. Price and category carry no
    value since they are offered opportunistically.
    """

    def __init__(self, config: Settings | None = None, selector: EnrichmentSelector | None = None):
        self.selector = selector or EnrichmentSelector(config or settings)

    def value(
        self,
        candidate: CatalogCandidate,
        scanned: ScannedRecord,
        enrichable: frozenset[EnrichableField] | None = None,
    ) -> EnrichmentValue:
        """Calculate potential enrichment value."""
        if enrichable is None:
            enrichable = self.selector.enrichable(candidate, scanned)

        result = EnrichmentValue()

        if EnrichableField.IMAGES in enrichable:
            result.score += ENRICHMENT_VALUES["images"]
            result.improvements.append(f"Add {len(scanned.images)} product image(s)")

        if EnrichableField.DESCRIPTION in enrichable:
            result.score += ENRICHMENT_VALUES["description"]
            result.improvements.append("Add detailed description")

        if EnrichableField.SPECS in enrichable:
            result.score += ENRICHMENT_VALUES["specs"]
            result.improvements.append("Add product specifications")

        if EnrichableField.BRAND in enrichable:
            result.score += ENRICHMENT_VALUES["brand"]
            result.improvements.append("Add brand information")

        if EnrichableField.NAME in enrichable:
            result.score += ENRICHMENT_VALUES["name"]
            result.improvements.append("Improve product name")

        return result
