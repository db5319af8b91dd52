"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from nutriscan.config import Settings
from nutriscan.containers import AppContainer
from nutriscan.domain.products import NutritionFacts, Product
from nutriscan.domain.profiles import UserProfile
from nutriscan.services.cache import InMemoryCache
from nutriscan.services.products import ProductClient, ProductService
from nutriscan.services.profiles import ProfileRepository, ProfileService
from nutriscan.services.scans import ScanService

ENERGY_DRINK_INGREDIENTS = (
    "Water",
    "Sugar",
    "High Fructose Corn Syrup",
    "Natural Flavors",
    "Citric Acid",
    "Sodium Benzoate (Preservative)",
    "Caffeine",
    "Yellow 5",
    "Red 40",
)


def make_product(
    ingredients: tuple[str, ...] = ("Water",),
    **facts: float,
) -> Product:
    """Build a product with zeroed facts unless overridden."""
    values = {
        "calories": 0.0,
        "protein": 0.0,
        "carbs": 0.0,
        "fat": 0.0,
        "sugar": 0.0,
        "sodium": 0.0,
    }
    values.update(facts)
    return Product(
        name="Test Product",
        brand="Test Brand",
        ingredients=ingredients,
        nutritional_info=NutritionFacts(**values),
    )


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[str, UserProfile] = field(default_factory=dict)
    deleted: list[str] = field(default_factory=list)

    def get_profile(self, profile_id: str) -> UserProfile | None:
        return self.profiles.get(profile_id)

    def save_profile(self, profile_id: str, profile: UserProfile) -> None:
        self.profiles[profile_id] = profile

    def delete_profile(self, profile_id: str) -> None:
        self.deleted.append(profile_id)
        self.profiles.pop(profile_id, None)


@dataclass
class FakeProductClient(ProductClient):
    """Fake product client serving an Open Food Facts style record."""

    products: dict[str, dict[str, object]] = field(
        default_factory=lambda: {
            "5901234123457": {
                "code": "5901234123457",
                "product_name": "Energy Drink",
                "brands": "PowerBoost",
                "ingredients_text": ", ".join(ENERGY_DRINK_INGREDIENTS),
                "nutriments": {
                    "energy-kcal_100g": 240,
                    "proteins_100g": 0,
                    "carbohydrates_100g": 65,
                    "fat_100g": 0,
                    "sugars_100g": 60,
                    "sodium_100g": 0.1,
                },
            }
        }
    )
    calls: list[str] = field(default_factory=list)

    async def get_product(self, barcode: str) -> dict[str, object] | None:
        self.calls.append(barcode)
        return self.products.get(barcode)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=(
            "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
            "eyJyb2xlIjoic2VydmljZV9yb2xlIn0."
            "c2lnbmF0dXJl"
        ),
    )


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def product_client() -> FakeProductClient:
    return FakeProductClient()


@pytest.fixture
def container(
    settings: Settings,
    profile_repository: InMemoryProfileRepository,
    product_client: FakeProductClient,
) -> AppContainer:
    product_service = ProductService(client=product_client, cache=InMemoryCache())
    profile_service = ProfileService(profile_repository)
    scan_service = ScanService(
        product_service=product_service,
        profile_service=profile_service,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        product_service=product_service,
        profile_service=profile_service,
        scan_service=scan_service,
        close_resources=close_resources,
    )
