"""Product resolution from barcodes or captured ingredient lists."""

import asyncio
import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from nutriscan.domain.products import (
    UNKNOWN_BRAND_NAME,
    UNKNOWN_PRODUCT_NAME,
    NutritionFacts,
    Product,
)
from nutriscan.services.cache import Cache

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

_BARCODE_RE = re.compile(r"^\d{8,14}$")

_NUTRIMENT_KEYS = {
    "calories": "energy-kcal_100g",
    "protein": "proteins_100g",
    "carbs": "carbohydrates_100g",
    "fat": "fat_100g",
    "sugar": "sugars_100g",
    "sodium": "sodium_100g",
}

_logger = logging.getLogger(__name__)


class ScanError(Exception):
    """Base error for product scans."""


class InvalidBarcodeError(ScanError):
    """Barcode is not 8 to 14 digits."""


class ProductNotFoundError(ScanError):
    """No product data exists for a barcode."""


class EmptyIngredientsError(ScanError):
    """An ingredient capture produced no ingredients."""


class ProductClient(Protocol):
    """Interface for product database lookups."""

    async def get_product(self, barcode: str) -> dict[str, object] | None:
        """Return the raw product record, or None when unknown."""


@dataclass
class ProductService:
    """Resolves products with caching and a short retry."""

    client: ProductClient
    cache: Cache
    product_ttl_seconds: int = 86400
    debug: bool = False
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    async def lookup_barcode(self, barcode: str) -> Product:
        """Return the product for a decoded barcode."""
        code = barcode.strip()
        if not _BARCODE_RE.match(code):
            raise InvalidBarcodeError(f"Invalid barcode: {barcode!r}")

        cache_key = f"product:{code}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, Product):
            return cached

        payload = await self._call_with_retry(
            lambda: self.client.get_product(code), action=f"get_product:{code}"
        )
        if payload is None:
            raise ProductNotFoundError(f"No product data for barcode {code}")
        product = product_from_payload(payload)
        self.cache.set(cache_key, product, ttl_seconds=self.product_ttl_seconds)
        if self.debug:
            _logger.info(
                "Product lookup: barcode=%s ingredients=%s",
                code,
                len(product.ingredients),
            )
        return product

    def from_ingredients(self, ingredients: Iterable[str]) -> Product:
        """Build a placeholder product from an ingredient-label capture."""
        cleaned = [item.strip() for item in ingredients if item and item.strip()]
        if not cleaned:
            raise EmptyIngredientsError("No ingredients were captured")
        return Product.from_ingredients(cleaned)

    async def _call_with_retry(
        self,
        func: "Callable[[], Awaitable[dict[str, object] | None]]",
        *,
        action: str,
    ) -> dict[str, object] | None:
        """Retry transport failures and 5xx responses; client errors raise at once."""
        attempt = 0
        while True:
            try:
                return await func()
            except Exception as exc:
                attempt += 1
                status = _response_status(exc)
                retryable = status is None or status >= 500
                if self.debug:
                    _logger.warning(
                        "Product %s failed (attempt %s/%s, status=%s): %s",
                        action,
                        attempt,
                        self.retry_attempts + 1,
                        status if status is not None else "n/a",
                        exc,
                    )
                if not retryable or attempt > self.retry_attempts:
                    raise
                await asyncio.sleep(self.retry_delay_seconds)


def _response_status(exc: Exception) -> int | None:
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    return status_code if isinstance(status_code, int) else None


def product_from_payload(payload: dict[str, object]) -> Product:
    """Map an Open Food Facts product record to a Product."""
    name = (
        _clean_text(payload.get("product_name"))
        or _clean_text(payload.get("product_name_en"))
        or UNKNOWN_PRODUCT_NAME
    )
    brands = _clean_text(payload.get("brands"))
    brand = brands.split(",")[0].strip() if brands else ""
    nutriments = payload.get("nutriments")
    return Product(
        name=name,
        brand=brand or UNKNOWN_BRAND_NAME,
        ingredients=_extract_ingredients(payload),
        nutritional_info=_extract_facts(
            nutriments if isinstance(nutriments, dict) else {}
        ),
    )


def _clean_text(value: object) -> str:
    return value.strip() if isinstance(value, str) else ""


def _extract_ingredients(payload: dict[str, object]) -> tuple[str, ...]:
    """Prefer the structured ingredient list, falling back to the label text."""
    structured = payload.get("ingredients")
    if isinstance(structured, list):
        texts = [
            _clean_text(item.get("text"))
            for item in structured
            if isinstance(item, dict)
        ]
        texts = [text for text in texts if text]
        if texts:
            return tuple(texts)
    return tuple(split_ingredients_text(_clean_text(payload.get("ingredients_text"))))


def split_ingredients_text(text: str) -> list[str]:
    """Split a label's ingredient text on commas outside parentheses."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for char in text:
        if char in "([":
            depth += 1
        elif char in ")]" and depth:
            depth -= 1
        if char in ",;" and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return [part.strip().rstrip(".").strip() for part in parts if part.strip(" .")]


def _extract_facts(nutriments: dict[str, object]) -> NutritionFacts:
    """Extract per-100g facts; sodium is reported in grams and stored in mg."""
    values: dict[str, float] = {}
    for field_name, key in _NUTRIMENT_KEYS.items():
        amount = nutriments.get(key)
        try:
            values[field_name] = float(amount) if amount is not None else 0.0
        except (TypeError, ValueError):
            values[field_name] = 0.0
    values["sodium"] = round(values["sodium"] * 1000, 3)
    return NutritionFacts(**values)
