"""Product domain models."""

from collections.abc import Iterable
from dataclasses import dataclass

UNKNOWN_PRODUCT_NAME = "Unknown Product"
UNKNOWN_BRAND_NAME = "Unknown Brand"


@dataclass(frozen=True)
class NutritionFacts:
    """Nutrition facts for a product (kcal, g, g, g, g, mg)."""

    calories: float
    protein: float
    carbs: float
    fat: float
    sugar: float
    sodium: float

    @classmethod
    def zero(cls) -> "NutritionFacts":
        """Return facts with every value set to zero."""
        return cls(calories=0, protein=0, carbs=0, fat=0, sugar=0, sodium=0)


@dataclass(frozen=True)
class Product:
    """A scanned product with its ingredient list."""

    name: str
    brand: str
    ingredients: tuple[str, ...]
    nutritional_info: NutritionFacts

    @classmethod
    def from_ingredients(cls, ingredients: Iterable[str]) -> "Product":
        """Build a placeholder product for an ingredient-label capture."""
        return cls(
            name=UNKNOWN_PRODUCT_NAME,
            brand=UNKNOWN_BRAND_NAME,
            ingredients=tuple(ingredients),
            nutritional_info=NutritionFacts.zero(),
        )
