"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path

from supabase import create_client

from appetizers.adapters.catalog_client import CatalogClient, HttpxCatalogClient
from appetizers.adapters.file_profile_storage import FileProfileStorage
from appetizers.adapters.supabase_profile_storage import SupabaseProfileStorage
from appetizers.config import Settings
from appetizers.services.catalog import CatalogStore
from appetizers.services.image_cache import ImageCache
from appetizers.services.order import Order
from appetizers.services.profile import ProfileStorage, ProfileStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog_client: CatalogClient
    image_cache: ImageCache
    catalog_store: CatalogStore
    order: Order
    profile_store: ProfileStore
    close_resources: Callable[[], Awaitable[None]]


def build_profile_storage(settings: Settings) -> ProfileStorage:
    """Pick Supabase storage when configured, else the local directory."""
    if settings.uses_supabase:
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseProfileStorage(client)
    return FileProfileStorage(Path(settings.profile_storage_dir))


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    catalog_client = HttpxCatalogClient.create(resolved_settings.catalog_base_url)
    image_cache = ImageCache(
        downloader=catalog_client,
        capacity=resolved_settings.image_cache_capacity,
    )
    profile_store = ProfileStore(
        storage=build_profile_storage(resolved_settings),
        storage_key=resolved_settings.profile_storage_key,
    )

    async def close_resources() -> None:
        image_cache.clear()
        await catalog_client.close()

    return AppContainer(
        settings=resolved_settings,
        catalog_client=catalog_client,
        image_cache=image_cache,
        catalog_store=CatalogStore(catalog_client),
        order=Order(),
        profile_store=profile_store,
        close_resources=close_resources,
    )
