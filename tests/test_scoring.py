"""Tests for field and match scoring."""

from decimal import Decimal

import pytest

from scanmatch.models import CatalogCandidate, ScannedRecord
from scanmatch.services.matching import FieldScorer, MatchScorer


@pytest.fixture
def field_scorer():
    return FieldScorer()


@pytest.fixture
def scorer():
    return MatchScorer()


class TestFieldScorer:
    """Tests for FieldScorer."""

    def test_barcode_exact(self, field_scorer, candidate_exact, scanned_exact):
        result = field_scorer.score_barcode(candidate_exact, scanned_exact)

        assert result.weight == 50
        assert result.points == 50

    def test_barcode_matches_upc_alias(self, field_scorer):
        candidate = CatalogCandidate(id="1", name="Widget", gtin="012345678905")
        scanned = ScannedRecord(barcode="9999", upc="012345678905", name="Widget")

        assert field_scorer.score_barcode(candidate, scanned).points == 50

    def test_barcode_mismatch_scores_zero(self, field_scorer):
        candidate = CatalogCandidate(id="1", name="Widget", gtin="012345678905")
        scanned = ScannedRecord(barcode="4006381333931", name="Widget")

        result = field_scorer.score_barcode(candidate, scanned)
        assert result.weight == 50
        assert result.points == 0

    def test_barcode_skipped_without_gtin(self, field_scorer, scanned_exact):
        candidate = CatalogCandidate(id="1", name="Widget")

        assert field_scorer.score_barcode(candidate, scanned_exact) is None

    def test_brand_exact_ignores_case_and_punctuation(self, field_scorer):
        candidate = CatalogCandidate(id="1", name="Widget", brand="ACME")
        scanned = ScannedRecord(name="Widget", brand="acme.")

        assert field_scorer.score_brand(candidate, scanned).points == 15

    def test_brand_partial_credit(self, field_scorer):
        candidate = CatalogCandidate(id="1", name="Widget", brand="Acme")
        scanned = ScannedRecord(name="Widget", brand="Acme Corp")

        # "acme" vs "acme corp": distance 5 over length 9
        assert field_scorer.score_brand(candidate, scanned).points == pytest.approx(15 * 4 / 9)

    def test_category_substring_either_direction(self, field_scorer):
        candidate = CatalogCandidate(id="1", name="Widget", category_path=["Home", "Kitchen"])

        assert field_scorer.score_category(candidate, ScannedRecord(category="Kitchen Tools")).points == 10
        candidate.category_path = ["Home", "Kitchen Tools"]
        assert field_scorer.score_category(candidate, ScannedRecord(category="kitchen")).points == 10

    def test_category_uses_most_specific_segment(self, field_scorer):
        candidate = CatalogCandidate(id="1", name="Widget", category_path=["Kitchen", "Knives"])

        result = field_scorer.score_category(candidate, ScannedRecord(category="Kitchen"))
        assert result.weight == 10
        assert result.points == 0

    def test_price_scaled_by_difference(self, field_scorer):
        candidate = CatalogCandidate(id="1", name="Widget", price_cents=1000)
        scanned = ScannedRecord(name="Widget", price_cents=1150)

        assert field_scorer.score_price(candidate, scanned).points == pytest.approx(5.0)

    def test_price_outside_tolerance(self, field_scorer):
        candidate = CatalogCandidate(id="1", name="Widget", price_cents=1000)
        scanned = ScannedRecord(name="Widget", price_cents=1300)

        result = field_scorer.score_price(candidate, scanned)
        assert result.weight == 10
        assert result.points == 0

    def test_price_skipped_when_catalog_price_zero(self, field_scorer):
        candidate = CatalogCandidate(id="1", name="Widget", price_cents=0)
        scanned = ScannedRecord(name="Widget", price_cents=999)

        assert field_scorer.score_price(candidate, scanned) is None

    def test_zero_scanned_price_still_weighted(self, field_scorer):
        candidate = CatalogCandidate(id="1", name="Widget", price_cents=1000)
        scanned = ScannedRecord(name="Widget", price_cents=0)

        result = field_scorer.score_price(candidate, scanned)
        assert result.weight == 10
        assert result.points == 0

    def test_mpn_exact_only(self, field_scorer):
        candidate = CatalogCandidate(id="1", name="Widget", mpn="WX-100")

        assert field_scorer.score_mpn(candidate, ScannedRecord(mpn="WX-100")).points == 10
        assert field_scorer.score_mpn(candidate, ScannedRecord(mpn="wx-100")).points == 0


class TestMatchScorer:
    """Tests for MatchScorer."""

    def test_exact_match_scores_100(self, scorer, candidate_exact, scanned_exact):
        assert scorer.score(candidate_exact, scanned_exact) == Decimal("100")

    def test_no_match_scores_low(self, scorer):
        candidate = CatalogCandidate(id="1", name="Red Stapler")
        scanned = ScannedRecord(name="Blue Pen")

        assert scorer.score(candidate, scanned) < 60

    def test_partial_data_rescales_by_applicable_weight(self, scorer):
        """Only name is present on both sides, so it carries the whole score."""
        candidate = CatalogCandidate(id="1", name="Acme Widget", brand="Acme")
        scanned = ScannedRecord(name="Acme Widget", price_cents=999)

        breakdown = scorer.breakdown(candidate, scanned)

        assert breakdown.score == Decimal("100")
        assert [f.field for f in breakdown.fields] == ["name"]
        assert breakdown.applicable_weight == 25

    def test_score_rounded_to_one_decimal(self, scorer):
        candidate = CatalogCandidate(id="1", name="Acme Widgets")
        scanned = ScannedRecord(name="Acme Widget")

        # 11/12 of the name weight
        assert scorer.score(candidate, scanned) == Decimal("91.7")

    def test_no_applicable_fields_scores_zero(self, scorer):
        candidate = CatalogCandidate(id="1", name="Widget")
        scanned = ScannedRecord()

        assert scorer.score(candidate, scanned) == Decimal("0")

    def test_adding_matching_field_never_decreases_score(self, scorer):
        candidate = CatalogCandidate(id="1", name="Acme Widgets")
        scanned = ScannedRecord(name="Acme Widget")
        before = scorer.score(candidate, scanned)

        candidate.mpn = "WX-100"
        scanned.mpn = "WX-100"
        after_mpn = scorer.score(candidate, scanned)

        candidate.brand = "Acme"
        scanned.brand = "Acme"
        after_brand = scorer.score(candidate, scanned)

        assert before <= after_mpn <= after_brand

    def test_missing_fields_do_not_penalize(self, scorer, candidate_exact):
        scanned = ScannedRecord(name="Acme Widget", brand="Acme")

        assert scorer.score(candidate_exact, scanned) == Decimal("100")

    def test_breakdown_to_dict(self, scorer, candidate_exact, scanned_exact):
        data = scorer.breakdown(candidate_exact, scanned_exact).to_dict()

        assert data["score"] == 100.0
        assert set(data["fields"]) == {"barcode", "name", "brand", "price"}
