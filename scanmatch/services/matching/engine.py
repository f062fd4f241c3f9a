"""Product matching engine - scan-to-enrich workflow coordination."""

import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass, field

from scanmatch.config import Settings, settings
from scanmatch.models import CatalogCandidate, ScannedRecord
from scanmatch.services.enrichment import EnrichmentSelector, EnrichmentValuator

from .confidence import ConfidenceClassifier, MatchResult
from .reasons import ReasonExplainer
from .scorer import MatchScorer

logger = logging.getLogger(__name__)


@dataclass
class MatchRun:
    """Result of matching one scan against a candidate list."""

    matches: list[MatchResult] = field(default_factory=list)
    candidates_evaluated: int = 0
    candidates_below_threshold: int = 0
    errors: list[str] = field(default_factory=list)
    duration_seconds: float = 0.0

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "matches": [m.to_dict() for m in self.matches],
            "total_matches": len(self.matches),
            "candidates_evaluated": self.candidates_evaluated,
            "candidates_below_threshold": self.candidates_below_threshold,
            "errors": self.errors,
            "duration_seconds": self.duration_seconds,
        }


class MatchEngine:
    """Matches scanned product data against existing catalog items.

    Flow:
    1. Score every candidate
    2. Drop candidates below the surfacing threshold
    3. Explain, classify and value the enrichment of the rest
    4. Sort by match score, highest first

    Candidates are expected to be scoped to one tenant by the caller.
    """

    def __init__(self, config: Settings | None = None):
        """Initialize engine.

        Args:
            config: Scoring configuration (defaults to environment settings)
        """
        self.config = config or settings

        # Initialize sub-components
        self.scorer = MatchScorer(self.config)
        self.explainer = ReasonExplainer(self.config)
        self.classifier = ConfidenceClassifier(self.config)
        self.selector = EnrichmentSelector(self.config)
        self.valuator = EnrichmentValuator(selector=self.selector)

    def find_matches(
        self,
        scanned: ScannedRecord,
        candidates: Iterable[CatalogCandidate],
    ) -> list[MatchResult]:
        """Find catalog items that could be enriched with scanned data.

        Args:
            scanned: Scanned product data
            candidates: Catalog items to compare against

        Returns:
            Matches scoring at least the surfacing threshold, best first
        """
        return self.run(scanned, candidates).matches

    def run(
        self,
        scanned: ScannedRecord,
        candidates: Iterable[CatalogCandidate],
    ) -> MatchRun:
        """Match a scan against candidates and collect run statistics."""
        start_time = time.perf_counter()
        result = MatchRun()

        for candidate in candidates:
            result.candidates_evaluated += 1
            try:
                match = self.evaluate(candidate, scanned)
            except Exception as e:
                candidate_id = getattr(candidate, "id", "?")
                logger.warning(f"Skipping candidate {candidate_id}: {e}")
                result.errors.append(f"{candidate_id}: {e}")
                continue

            if match is None:
                result.candidates_below_threshold += 1
                continue
            result.matches.append(match)

        # Stable sort keeps input order among equal scores
        result.matches.sort(key=lambda m: m.match_score, reverse=True)

        result.duration_seconds = time.perf_counter() - start_time
        logger.info(
            f"Matched scan {scanned.barcode or scanned.name!r}: "
            f"{len(result.matches)}/{result.candidates_evaluated} candidates surfaced"
        )
        return result

    def evaluate(self, candidate: CatalogCandidate, scanned: ScannedRecord) -> MatchResult | None:
        """Evaluate a single candidate, or None if it scores below threshold."""
        score = self.scorer.score(candidate, scanned)
        if not self.classifier.is_match(score):
            logger.debug(f"Candidate {candidate.id} below threshold: {score}")
            return None

        enrichable = self.selector.enrichable(candidate, scanned)
        value = self.valuator.value(candidate, scanned, enrichable)

        return MatchResult(
            candidate_id=candidate.id,
            match_score=score,
            confidence=self.classifier.classify(score),
            reasons=self.explainer.explain(candidate, scanned),
            enrichable_fields=enrichable,
            enrichment_value=value.score,
            enrichment_improvements=value.improvements,
        )


def find_matches(
    scanned: ScannedRecord,
    candidates: Iterable[CatalogCandidate],
    config: Settings | None = None,
) -> list[MatchResult]:
    """Find matching catalog items for a scan with a one-off engine."""
    return MatchEngine(config).find_matches(scanned, candidates)
