"""Pytest configuration and fixtures."""

import pytest

from scanmatch.models import CatalogCandidate, ScannedRecord


@pytest.fixture
def scanned_exact():
    """Scanned record that fully matches candidate_exact."""
    return ScannedRecord(
        barcode="012345678905",
        name="Acme Widget",
        brand="Acme",
        price_cents=999,
    )


@pytest.fixture
def candidate_exact():
    """Catalog candidate identical to scanned_exact."""
    return CatalogCandidate(
        id="item-1",
        name="Acme Widget",
        brand="Acme",
        gtin="012345678905",
        price_cents=999,
    )


@pytest.fixture
def sparse_candidate():
    """Quick Start item missing description and images."""
    return CatalogCandidate(
        id="item-2",
        name="Acme Widget",
        brand="Acme",
        metadata={"color": "red"},
        missing_images=True,
    )


@pytest.fixture
def rich_scan():
    """Scan carrying description and images."""
    return ScannedRecord(
        barcode="012345678905",
        name="Acme Widget",
        brand="Acme",
        description="A durable widget for everyday use.",
        images=["https://img.example.com/1.jpg", "https://img.example.com/2.jpg"],
    )
