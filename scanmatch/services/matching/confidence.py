"""Confidence classification for product matches."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from scanmatch.config import ENRICHMENT_FIELD_ORDER, Settings, settings
from scanmatch.services.enrichment.selector import EnrichableField


class Confidence(str, Enum):
    """Confidence tiers for surfaced matches."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass
class MatchResult:
    """A catalog candidate that likely is the scanned product."""

    candidate_id: str
    match_score: Decimal
    confidence: Confidence
    reasons: list[str] = field(default_factory=list)
    enrichable_fields: frozenset[EnrichableField] = field(default_factory=frozenset)
    enrichment_value: int = 0
    enrichment_improvements: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "candidate_id": self.candidate_id,
            "match_score": float(self.match_score),
            "confidence": self.confidence.value,
            "reasons": self.reasons,
            "enrichable_fields": [
                name for name in ENRICHMENT_FIELD_ORDER if EnrichableField(name) in self.enrichable_fields
            ],
            "enrichment_value": self.enrichment_value,
            "enrichment_improvements": self.enrichment_improvements,
        }


class ConfidenceClassifier:
    """Maps match scores to confidence tiers."""

    def __init__(self, config: Settings | None = None):
        config = config or settings
        self.min_score = config.min_match_score
        self.thresholds = {
            Confidence.HIGH: config.high_confidence_score,
            Confidence.MEDIUM: config.medium_confidence_score,
        }

    def is_match(self, score: Decimal) -> bool:
        """Whether a score is high enough to surface as a match at all."""
        return score >= self.min_score

    def classify(self, score: Decimal) -> Confidence:
        """Get confidence level based on match score."""
        if score >= self.thresholds[Confidence.HIGH]:
            return Confidence.HIGH
        elif score >= self.thresholds[Confidence.MEDIUM]:
            return Confidence.MEDIUM
        else:
            return Confidence.LOW
