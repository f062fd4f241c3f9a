"""Tests for match reasons."""

import pytest

from scanmatch.models import CandidateSource, CatalogCandidate, EnrichmentStatus, ScannedRecord
from scanmatch.services.matching import ReasonExplainer


@pytest.fixture
def explainer():
    return ReasonExplainer()


class TestReasonExplainer:
    """Tests for ReasonExplainer."""

    def test_exact_match_reasons(self, explainer, candidate_exact, scanned_exact):
        reasons = explainer.explain(candidate_exact, scanned_exact)

        assert reasons == [
            "Exact barcode match",
            "Very similar product name",
            "Same brand",
            "Very similar price",
        ]

    def test_similar_name(self, explainer):
        candidate = CatalogCandidate(id="1", name="Acme Widget")
        scanned = ScannedRecord(name="Acme Widget Pro")

        assert explainer.explain(candidate, scanned) == ["Similar product name"]

    def test_dissimilar_name_omitted(self, explainer):
        candidate = CatalogCandidate(id="1", name="Red Stapler")
        scanned = ScannedRecord(name="Blue Pen")

        assert explainer.explain(candidate, scanned) == []

    def test_similar_price_range(self, explainer):
        candidate = CatalogCandidate(id="1", name="", price_cents=1000)
        scanned = ScannedRecord(price_cents=1200)

        assert explainer.explain(candidate, scanned) == ["Similar price range"]

    def test_trailing_punctuation_is_not_same_brand(self, explainer):
        candidate = CatalogCandidate(id="1", name="", brand="Acme")
        scanned = ScannedRecord(brand="Acme -")

        assert explainer.explain(candidate, scanned) == []

    def test_partial_brand_is_not_same_brand(self, explainer):
        candidate = CatalogCandidate(id="1", name="", brand="Acme")
        scanned = ScannedRecord(brand="Acme Corp")

        assert "Same brand" not in explainer.explain(candidate, scanned)

    def test_category_and_mpn(self, explainer):
        candidate = CatalogCandidate(id="1", name="", category_path=["Office", "Pens"], mpn="P-1")
        scanned = ScannedRecord(category="Office Pens", mpn="P-1")

        assert explainer.explain(candidate, scanned) == [
            "Same category",
            "Matching manufacturer part number",
        ]

    def test_provenance_reasons_last(self, explainer, candidate_exact, scanned_exact):
        candidate_exact.source = CandidateSource.QUICK_START_WIZARD
        candidate_exact.enrichment_status = EnrichmentStatus.NEEDS_ENRICHMENT

        reasons = explainer.explain(candidate_exact, scanned_exact)

        assert reasons[-2:] == ["Created by Quick Start Wizard", "Needs enrichment"]

    def test_partially_enriched_has_no_status_reason(self, explainer, candidate_exact, scanned_exact):
        candidate_exact.enrichment_status = EnrichmentStatus.PARTIALLY_ENRICHED

        assert "Needs enrichment" not in explainer.explain(candidate_exact, scanned_exact)
