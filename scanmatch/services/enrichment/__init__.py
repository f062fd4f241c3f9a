"""Catalog enrichment analysis."""

from .gaps import GapAnalyzer, MissingFields
from .planner import EnrichmentPatch, EnrichmentPlanner
from .selector import EnrichableField, EnrichmentSelector
from .valuator import EnrichmentValuator, EnrichmentValue

__all__ = [
    "GapAnalyzer",
    "MissingFields",
    "EnrichableField",
    "EnrichmentSelector",
    "EnrichmentValuator",
    "EnrichmentValue",
    "EnrichmentPlanner",
    "EnrichmentPatch",
]
