"""Services for scan-to-enrich matching."""

from .enrichment import EnrichmentPlanner, EnrichmentSelector, EnrichmentValuator, GapAnalyzer
from .matching import MatchEngine, find_matches

__all__ = [
    "MatchEngine",
    "find_matches",
    "GapAnalyzer",
    "EnrichmentSelector",
    "EnrichmentValuator",
    "EnrichmentPlanner",
]
