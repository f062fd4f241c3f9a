"""Product matching engine."""

from .confidence import Confidence, ConfidenceClassifier, MatchResult
from .engine import MatchEngine, MatchRun, find_matches
from .reasons import ReasonExplainer
from .scorer import FieldScore, FieldScorer, MatchScorer, ScoreBreakdown
from .similarity import levenshtein_distance, normalize_string, string_similarity

__all__ = [
    "MatchEngine",
    "MatchRun",
    "find_matches",
    "MatchScorer",
    "FieldScorer",
    "FieldScore",
    "ScoreBreakdown",
    "ReasonExplainer",
    "ConfidenceClassifier",
    "Confidence",
    "MatchResult",
    "normalize_string",
    "levenshtein_distance",
    "string_similarity",
]
