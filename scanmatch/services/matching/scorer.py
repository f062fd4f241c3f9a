"""Weighted match scoring between a scanned record and a catalog candidate."""

import logging
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from scanmatch.config import Settings, settings
from scanmatch.models import CatalogCandidate, ScannedRecord

from .similarity import normalize_string, string_similarity

logger = logging.getLogger(__name__)

ONE_DECIMAL = Decimal("0.1")


def barcode_matches(candidate: CatalogCandidate, scanned: ScannedRecord) -> bool | None:
    """Compare the catalog GTIN with the scanned barcode, UPC and EAN.

    Returns None when either side has no code to compare.
    """
    codes = scanned.barcodes
    if not candidate.gtin or not codes:
        return None
    return candidate.gtin in codes


def category_matches(candidate: CatalogCandidate, scanned: ScannedRecord) -> bool | None:
    """Check the most specific catalog category against the scanned category.

    Either one containing the other counts as a match. Returns None when
    either side has no category.
    """
    if not candidate.category_path or not scanned.category:
        return None

    catalog_category = normalize_string(candidate.category_path[-1])
    scanned_category = normalize_string(scanned.category)
    if not catalog_category.strip() or not scanned_category.strip():
        return False
    return catalog_category in scanned_category or scanned_category in catalog_category


def price_difference(candidate: CatalogCandidate, scanned: ScannedRecord) -> float | None:
    """Relative price difference against the catalog price, or None."""
    if candidate.price_cents is None or scanned.price_cents is None:
        return None
    if candidate.price_cents <= 0:
        return None
    return abs(candidate.price_cents - scanned.price_cents) / candidate.price_cents


def brands_equal(candidate: CatalogCandidate, scanned: ScannedRecord) -> bool:
    """Case and punctuation insensitive brand equality."""
    if not candidate.brand or not scanned.brand:
        return False
    return normalize_string(candidate.brand) == normalize_string(scanned.brand)


def mpn_matches(candidate: CatalogCandidate, scanned: ScannedRecord) -> bool:
    """Exact manufacturer part number equality."""
    return bool(candidate.mpn and scanned.mpn and candidate.mpn == scanned.mpn)


@dataclass
class FieldScore:
    """Contribution of a single field to the match score."""

    field: str
    weight: float
    points: float


@dataclass
class ScoreBreakdown:
    """Match score with the per-field contributions it was built from."""

    score: Decimal
    fields: list[FieldScore] = field(default_factory=list)

    @property
    def applicable_weight(self) -> float:
        return sum(f.weight for f in self.fields)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "score": float(self.score),
            "fields": {f.field: {"weight": f.weight, "points": round(f.points, 4)} for f in self.fields},
        }


class FieldScorer:
    """Per-field weighted contributions.

    Each method returns None when the field is missing on either side, so
    the field's weight is left out of the total instead of scoring zero.
    """

    def __init__(self, config: Settings | None = None):
        self.config = config or settings

    def score_barcode(self, candidate: CatalogCandidate, scanned: ScannedRecord) -> FieldScore | None:
        matched = barcode_matches(candidate, scanned)
        if matched is None:
            return None
        weight = self.config.barcode_weight
        return FieldScore("barcode", weight, weight if matched else 0.0)

    def score_name(self, candidate: CatalogCandidate, scanned: ScannedRecord) -> FieldScore | None:
        if not candidate.name or not scanned.name:
            return None
        weight = self.config.name_weight
        return FieldScore("name", weight, weight * string_similarity(candidate.name, scanned.name))

    def score_brand(self, candidate: CatalogCandidate, scanned: ScannedRecord) -> FieldScore | None:
        if not candidate.brand or not scanned.brand:
            return None
        weight = self.config.brand_weight
        if brands_equal(candidate, scanned):
            return FieldScore("brand", weight, weight)
        # Partial brand match
        return FieldScore("brand", weight, weight * string_similarity(candidate.brand, scanned.brand))

    def score_category(self, candidate: CatalogCandidate, scanned: ScannedRecord) -> FieldScore | None:
        matched = category_matches(candidate, scanned)
        if matched is None:
            return None
        weight = self.config.category_weight
        return FieldScore("category", weight, weight if matched else 0.0)

    def score_price(self, candidate: CatalogCandidate, scanned: ScannedRecord) -> FieldScore | None:
        diff = price_difference(candidate, scanned)
        if diff is None:
            return None
        weight = self.config.price_weight
        tolerance = self.config.price_tolerance
        points = weight * (1 - diff / tolerance) if diff < tolerance else 0.0
        return FieldScore("price", weight, points)

    def score_mpn(self, candidate: CatalogCandidate, scanned: ScannedRecord) -> FieldScore | None:
        if not candidate.mpn or not scanned.mpn:
            return None
        weight = self.config.mpn_weight
        return FieldScore("mpn", weight, weight if mpn_matches(candidate, scanned) else 0.0)


class MatchScorer:
    """Combines field scores into a 0-100 match score.

    Only fields present on both records count; the sum is rescaled by the
    weight of those fields so a barcode-less scan is not penalized.
    """

    def __init__(self, config: Settings | None = None):
        self.config = config or settings
        self.field_scorer = FieldScorer(self.config)

    def breakdown(self, candidate: CatalogCandidate, scanned: ScannedRecord) -> ScoreBreakdown:
        """Score each applicable field and the combined result."""
        scorers = [
            self.field_scorer.score_barcode,
            self.field_scorer.score_name,
            self.field_scorer.score_brand,
            self.field_scorer.score_category,
            self.field_scorer.score_price,
            self.field_scorer.score_mpn,
        ]
        fields = [s for s in (scorer(candidate, scanned) for scorer in scorers) if s is not None]

        total_weight = sum(f.weight for f in fields)
        if total_weight <= 0:
            return ScoreBreakdown(score=Decimal("0"), fields=fields)

        points = sum(f.points for f in fields)
        raw = min(100.0, points / total_weight * 100)
        score = Decimal(str(raw)).quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)
        return ScoreBreakdown(score=score, fields=fields)

    def score(self, candidate: CatalogCandidate, scanned: ScannedRecord) -> Decimal:
        """Calculate match score between a catalog candidate and scanned data."""
        return self.breakdown(candidate, scanned).score
