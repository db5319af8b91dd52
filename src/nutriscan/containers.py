"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from nutriscan.adapters.open_food_facts_client import HttpxOpenFoodFactsClient
from nutriscan.adapters.supabase_profile_repository import SupabaseProfileRepository
from nutriscan.config import Settings, parse_match_mode
from nutriscan.services.cache import InMemoryCache
from nutriscan.services.products import ProductService
from nutriscan.services.profiles import ProfileService
from nutriscan.services.scans import ScanService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    product_service: ProductService
    profile_service: ProfileService
    scan_service: ScanService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    product_client = HttpxOpenFoodFactsClient.create(
        base_url=resolved_settings.off_base_url,
        user_agent=resolved_settings.off_user_agent,
    )
    product_service = ProductService(
        client=product_client,
        cache=InMemoryCache(),
        product_ttl_seconds=resolved_settings.product_ttl_seconds,
        debug=resolved_settings.debug,
    )
    profile_service = ProfileService(SupabaseProfileRepository(supabase_client))
    scan_service = ScanService(
        product_service=product_service,
        profile_service=profile_service,
        match_mode=parse_match_mode(resolved_settings.match_mode),
    )

    async def close_resources() -> None:
        await product_client.close()

    return AppContainer(
        settings=resolved_settings,
        product_service=product_service,
        profile_service=profile_service,
        scan_service=scan_service,
        close_resources=close_resources,
    )
