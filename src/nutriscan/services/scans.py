"""Scan orchestration: resolve the product, load the profile, classify."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from nutriscan.domain.classification import ClassificationResult
from nutriscan.domain.products import Product
from nutriscan.services.classification import classify_for_profile
from nutriscan.services.matching import MatchMode
from nutriscan.services.products import ProductService
from nutriscan.services.profiles import ProfileService
from nutriscan.services.scoring import nutrition_score

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanReport:
    """A classified product with its display score."""

    product: Product
    result: ClassificationResult
    nutrition_score: int


@dataclass
class ScanService:
    """Runs a scan end to end for a stored profile."""

    product_service: ProductService
    profile_service: ProfileService
    match_mode: MatchMode = "substring"

    async def scan_barcode(self, barcode: str, profile_id: str) -> ScanReport:
        """Classify the product behind a decoded barcode."""
        product = await self.product_service.lookup_barcode(barcode)
        report = self.classify_product(product, profile_id)
        _logger.info(
            "Barcode scan: barcode=%s classification=%s score=%s",
            barcode,
            report.result.classification,
            report.nutrition_score,
        )
        return report

    async def scan_ingredients(
        self, ingredients: Iterable[str], profile_id: str
    ) -> ScanReport:
        """Classify an ingredient-label capture."""
        product = self.product_service.from_ingredients(ingredients)
        report = self.classify_product(product, profile_id)
        _logger.info(
            "Ingredient scan: ingredients=%s classification=%s",
            len(product.ingredients),
            report.result.classification,
        )
        return report

    def classify_product(self, product: Product, profile_id: str) -> ScanReport:
        """Classify an already resolved product."""
        profile = self.profile_service.get_profile(profile_id)
        result = classify_for_profile(product, profile, match_mode=self.match_mode)
        return ScanReport(
            product=product,
            result=result,
            nutrition_score=nutrition_score(product.nutritional_info),
        )
