"""Input records for product matching."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class CandidateSource(str, Enum):
    """How a catalog item was created."""

    QUICK_START_WIZARD = "QUICK_START_WIZARD"
    MANUAL = "MANUAL"
    SCAN = "SCAN"
    IMPORT = "IMPORT"


class EnrichmentStatus(str, Enum):
    """Enrichment state tracked by the catalog."""

    NEEDS_ENRICHMENT = "NEEDS_ENRICHMENT"
    PARTIALLY_ENRICHED = "PARTIALLY_ENRICHED"
    COMPLETE = "COMPLETE"


def _get(data: dict[str, Any], *keys: str) -> Any:
    """Return the first non-None value among camelCase/snake_case aliases."""
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return None


def _as_str(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _as_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and not value.is_integer():
        logger.debug(f"Ignoring non-integral value: {value!r}")
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        logger.debug(f"Ignoring non-integer value: {value!r}")
        return None


def _as_str_list(value: Any) -> list[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, str)]


def _as_mapping(value: Any) -> dict[str, Any]:
    return dict(value) if isinstance(value, dict) else {}


def _as_enum(enum_cls: type[Enum], value: Any) -> Any:
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        logger.debug(f"Unknown {enum_cls.__name__}: {value!r}")
        return None


@dataclass
class ScannedRecord:
    """Product data obtained from a barcode scan or lookup."""

    barcode: str = ""
    name: str = ""
    upc: str | None = None
    ean: str | None = None
    brand: str | None = None
    category: str | None = None
    price_cents: int | None = None
    images: list[str] = field(default_factory=list)
    specifications: dict[str, Any] = field(default_factory=dict)
    manufacturer: str | None = None
    mpn: str | None = None
    description: str | None = None

    @property
    def barcodes(self) -> list[str]:
        """Non-empty codes the scan can be identified by."""
        return [code for code in (self.barcode, self.upc, self.ean) if code]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ScannedRecord":
        """Parse a scanned record from a lookup payload."""
        return cls(
            barcode=_as_str(data.get("barcode")) or "",
            name=_as_str(data.get("name")) or "",
            upc=_as_str(data.get("upc")),
            ean=_as_str(data.get("ean")),
            brand=_as_str(data.get("brand")),
            category=_as_str(data.get("category")),
            price_cents=_as_int(_get(data, "priceCents", "price_cents")),
            images=_as_str_list(data.get("images")),
            specifications=_as_mapping(data.get("specifications")),
            manufacturer=_as_str(data.get("manufacturer")),
            mpn=_as_str(data.get("mpn")),
            description=_as_str(data.get("description")),
        )


@dataclass
class CatalogCandidate:
    """Existing catalog item that may be the same product as a scan.

    The missing_* flags are the values stored by the catalog. They can be
    stale, so gap analysis combines them with the current field values.
    """

    id: str
    name: str
    brand: str | None = None
    gtin: str | None = None
    category_path: list[str] = field(default_factory=list)
    price_cents: int | None = None
    mpn: str | None = None
    description: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    missing_images: bool = False
    missing_description: bool = False
    missing_specs: bool = False
    missing_brand: bool = False
    source: CandidateSource | None = None
    enrichment_status: EnrichmentStatus | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CatalogCandidate":
        """Parse a candidate from a catalog row."""
        return cls(
            id=_as_str(data.get("id")) or "",
            name=_as_str(data.get("name")) or "",
            brand=_as_str(data.get("brand")),
            gtin=_as_str(data.get("gtin")),
            category_path=_as_str_list(_get(data, "categoryPath", "category_path")),
            price_cents=_as_int(_get(data, "priceCents", "price_cents")),
            mpn=_as_str(data.get("mpn")),
            description=_as_str(data.get("description")),
            metadata=_as_mapping(data.get("metadata")),
            missing_images=bool(_get(data, "missingImages", "missing_images")),
            missing_description=bool(_get(data, "missingDescription", "missing_description")),
            missing_specs=bool(_get(data, "missingSpecs", "missing_specs")),
            missing_brand=bool(_get(data, "missingBrand", "missing_brand")),
            source=_as_enum(CandidateSource, data.get("source")),
            enrichment_status=_as_enum(
                EnrichmentStatus, _get(data, "enrichmentStatus", "enrichment_status")
            ),
        )


def is_enrichment_candidate(candidate: CatalogCandidate) -> bool:
    """Check whether a catalog item is eligible for scan-to-enrich matching.

    Quick Start Wizard items and items not yet fully enriched qualify.
    """
    if candidate.source == CandidateSource.QUICK_START_WIZARD:
        return True
    return candidate.enrichment_status in (
        EnrichmentStatus.NEEDS_ENRICHMENT,
        EnrichmentStatus.PARTIALLY_ENRICHED,
    )
