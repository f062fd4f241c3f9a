"""Human-readable explanations for product matches."""

from scanmatch.config import Settings, settings
from scanmatch.models import CandidateSource, CatalogCandidate, EnrichmentStatus, ScannedRecord

from .scorer import barcode_matches, brands_equal, category_matches, mpn_matches, price_difference
from .similarity import string_similarity


class ReasonExplainer:
    """Explains why a candidate matched a scan.

    Conditions are evaluated independently of the score, in a fixed order:
    barcode, name, brand, category, price, MPN, then catalog provenance.
    """

    def __init__(self, config: Settings | None = None):
        self.config = config or settings

    def explain(self, candidate: CatalogCandidate, scanned: ScannedRecord) -> list[str]:
        """Get human-readable match reasons."""
        reasons = []

        if barcode_matches(candidate, scanned):
            reasons.append("Exact barcode match")

        name_reason = self._name_reason(candidate, scanned)
        if name_reason:
            reasons.append(name_reason)

        if brands_equal(candidate, scanned):
            reasons.append("Same brand")

        if category_matches(candidate, scanned):
            reasons.append("Same category")

        price_reason = self._price_reason(candidate, scanned)
        if price_reason:
            reasons.append(price_reason)

        if mpn_matches(candidate, scanned):
            reasons.append("Matching manufacturer part number")

        # Enrichment opportunity
        if candidate.source == CandidateSource.QUICK_START_WIZARD:
            reasons.append("Created by Quick Start Wizard")
        if candidate.enrichment_status == EnrichmentStatus.NEEDS_ENRICHMENT:
            reasons.append("Needs enrichment")

        return reasons

    def _name_reason(self, candidate: CatalogCandidate, scanned: ScannedRecord) -> str | None:
        if not candidate.name or not scanned.name:
            return None
        similarity = string_similarity(candidate.name, scanned.name)
        if similarity > self.config.very_similar_name:
            return "Very similar product name"
        if similarity > self.config.similar_name:
            return "Similar product name"
        return None

    def _price_reason(self, candidate: CatalogCandidate, scanned: ScannedRecord) -> str | None:
        diff = price_difference(candidate, scanned)
        if diff is None:
            return None
        if diff < self.config.close_price_tolerance:
            return "Very similar price"
        if diff < self.config.price_tolerance:
            return "Similar price range"
        return None
