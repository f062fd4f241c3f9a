"""Selection of catalog fields a scan can fill."""

from enum import Enum

from scanmatch.config import Settings, settings
from scanmatch.models import CatalogCandidate, ScannedRecord

from .gaps import GapAnalyzer


class EnrichableField(str, Enum):
    """Catalog fields that scanned data can overwrite."""

    NAME = "name"
    DESCRIPTION = "description"
    IMAGES = "images"
    BRAND = "brand"
    SPECS = "specs"
    PRICE = "price"
    CATEGORY = "category"


class EnrichmentSelector:
    """Determines what fields can be enriched from scanned data.

    Gap fields (description, images, brand, specs) need both a gap on the
    candidate and data in the scan. A longer scanned name counts as more
    descriptive. Price and category are always offered when scanned.
    """

    def __init__(self, config: Settings | None = None, gap_analyzer: GapAnalyzer | None = None):
        self.gap_analyzer = gap_analyzer or GapAnalyzer(config or settings)

    def enrichable(self, candidate: CatalogCandidate, scanned: ScannedRecord) -> frozenset[EnrichableField]:
        missing = self.gap_analyzer.missing_fields(candidate)
        fields = set()

        if scanned.name and len(scanned.name) > len(candidate.name or ""):
            fields.add(EnrichableField.NAME)
        if missing.missing_description and scanned.description:
            fields.add(EnrichableField.DESCRIPTION)
        if missing.missing_images and scanned.images:
            fields.add(EnrichableField.IMAGES)
        if missing.missing_brand and scanned.brand:
            fields.add(EnrichableField.BRAND)
        if missing.missing_specs and scanned.specifications:
            fields.add(EnrichableField.SPECS)
        if scanned.price_cents is not None and scanned.price_cents > 0:
            fields.add(EnrichableField.PRICE)
        if scanned.category:
            fields.add(EnrichableField.CATEGORY)

        return frozenset(fields)
