"""Enrichment patches for applying scanned data to catalog items."""

import logging
from dataclasses import dataclass, field, fields, replace
from typing import Any

from scanmatch.config import Settings, settings
from scanmatch.models import CatalogCandidate, EnrichmentStatus, ScannedRecord

from .gaps import GapAnalyzer
from .selector import EnrichableField, EnrichmentSelector

logger = logging.getLogger(__name__)

_CANDIDATE_FIELDS = {f.name for f in fields(CatalogCandidate)}


@dataclass
class EnrichmentPatch:
    """Field updates to persist on a catalog item.

    The catalog item itself is never modified; the persistence layer applies
    `updates` and replaces the item's photos with `images` when set.
    """

    candidate_id: str
    updates: dict[str, Any] = field(default_factory=dict)
    images: list[str] | None = None
    applied_fields: list[EnrichableField] = field(default_factory=list)
    enrichment_status: EnrichmentStatus = EnrichmentStatus.PARTIALLY_ENRICHED
    enriched_from_barcode: str | None = None
    enriched_by: str | None = None

    @property
    def fully_enriched(self) -> bool:
        return self.enrichment_status == EnrichmentStatus.COMPLETE

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "candidate_id": self.candidate_id,
            "updates": self.updates,
            "images": self.images,
            "applied_fields": [f.value for f in self.applied_fields],
            "enrichment_status": self.enrichment_status.value,
            "enriched_from_barcode": self.enriched_from_barcode,
            "enriched_by": self.enriched_by,
        }


class EnrichmentPlanner:
    """Builds the update a scan would apply to a catalog item."""

    def __init__(self, config: Settings | None = None):
        config = config or settings
        self.gap_analyzer = GapAnalyzer(config)
        self.selector = EnrichmentSelector(gap_analyzer=self.gap_analyzer)

    def plan(
        self,
        candidate: CatalogCandidate,
        scanned: ScannedRecord,
        requested: set[EnrichableField] | frozenset[EnrichableField] | None = None,
        enriched_by: str | None = None,
    ) -> EnrichmentPatch:
        """Build an enrichment patch.

        Args:
            candidate: Catalog item to enrich
            scanned: Scanned product data
            requested: Fields the user chose to apply (defaults to every
                enrichable field); fields the scan has no data for are skipped
            enriched_by: User applying the enrichment

        Returns:
            EnrichmentPatch describing the changes
        """
        if requested is None:
            requested = self.selector.enrichable(candidate, scanned)

        patch = EnrichmentPatch(
            candidate_id=candidate.id,
            enriched_from_barcode=scanned.barcode or None,
            enriched_by=enriched_by,
        )
        updates = patch.updates

        if EnrichableField.NAME in requested and scanned.name:
            updates["name"] = scanned.name
            patch.applied_fields.append(EnrichableField.NAME)

        if EnrichableField.DESCRIPTION in requested and scanned.description:
            updates["description"] = scanned.description
            updates["missing_description"] = False
            patch.applied_fields.append(EnrichableField.DESCRIPTION)

        if EnrichableField.IMAGES in requested and scanned.images:
            patch.images = list(scanned.images)
            updates["missing_images"] = False
            patch.applied_fields.append(EnrichableField.IMAGES)

        if EnrichableField.BRAND in requested and scanned.brand:
            updates["brand"] = scanned.brand
            updates["missing_brand"] = False
            patch.applied_fields.append(EnrichableField.BRAND)

        if EnrichableField.SPECS in requested and scanned.specifications:
            updates["metadata"] = {
                **candidate.metadata,
                "specifications": dict(scanned.specifications),
            }
            updates["missing_specs"] = False
            patch.applied_fields.append(EnrichableField.SPECS)

        if EnrichableField.PRICE in requested and scanned.price_cents:
            updates["price_cents"] = scanned.price_cents
            patch.applied_fields.append(EnrichableField.PRICE)

        if EnrichableField.CATEGORY in requested and scanned.category:
            # Scanned category is passed through as given
            updates["category_path"] = [scanned.category]
            patch.applied_fields.append(EnrichableField.CATEGORY)

        # Identifiers are always carried over when the scan has them
        if scanned.manufacturer:
            updates["manufacturer"] = scanned.manufacturer
        if scanned.mpn:
            updates["mpn"] = scanned.mpn
        if not candidate.gtin and scanned.barcode:
            updates["gtin"] = scanned.barcode

        enriched = replace(candidate, **{k: v for k, v in updates.items() if k in _CANDIDATE_FIELDS})
        if self.gap_analyzer.missing_fields(enriched).is_complete:
            patch.enrichment_status = EnrichmentStatus.COMPLETE

        logger.info(
            f"Planned enrichment for {candidate.id}: "
            f"{[f.value for f in patch.applied_fields]} -> {patch.enrichment_status.value}"
        )
        return patch
