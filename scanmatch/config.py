"""Configuration from environment variables."""

from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Field weights
    barcode_weight: float = 50.0
    name_weight: float = 25.0
    brand_weight: float = 15.0
    category_weight: float = 10.0
    price_weight: float = 10.0
    mpn_weight: float = 10.0

    # Price tolerances (fraction of the catalog price)
    price_tolerance: float = 0.3
    close_price_tolerance: float = 0.1

    # Name similarity thresholds used for match reasons
    very_similar_name: float = 0.8
    similar_name: float = 0.6

    # Score thresholds (0-100)
    min_match_score: Decimal = Decimal("60")
    high_confidence_score: Decimal = Decimal("85")
    medium_confidence_score: Decimal = Decimal("70")

    # Catalog gap detection
    min_description_length: int = 20

    @property
    def field_weights(self) -> dict[str, float]:
        """Weights keyed by field name, in scoring order."""
        return {
            "barcode": self.barcode_weight,
            "name": self.name_weight,
            "brand": self.brand_weight,
            "category": self.category_weight,
            "price": self.price_weight,
            "mpn": self.mpn_weight,
        }

    class Config:
        env_prefix = "SCANMATCH_"
        case_sensitive = False


settings = Settings()


# Enrichment benefit per field, in improvement priority order
ENRICHMENT_VALUES = {
    "images": 30,
    "description": 25,
    "specs": 20,
    "brand": 15,
    "name": 10,
}

# Canonical order for enrichable fields in serialized output
ENRICHMENT_FIELD_ORDER = ["name", "description", "images", "brand", "specs", "price", "category"]
