"""Product matching and enrichment scoring for scan-to-enrich."""

from .models import CatalogCandidate, ScannedRecord
from .services.matching import MatchEngine, MatchResult, find_matches

__all__ = ["ScannedRecord", "CatalogCandidate", "MatchEngine", "MatchResult", "find_matches"]
