"""Matching input records."""

from .records import (
    CandidateSource,
    CatalogCandidate,
    EnrichmentStatus,
    ScannedRecord,
    is_enrichment_candidate,
)

__all__ = [
    "ScannedRecord",
    "CatalogCandidate",
    "CandidateSource",
    "EnrichmentStatus",
    "is_enrichment_candidate",
]
