"""Shared test fixtures."""

import asyncio
import io
import struct
import zlib
from dataclasses import dataclass, field
from decimal import Decimal

import pytest
from PIL import Image

from appetizers.adapters.catalog_client import CatalogClient
from appetizers.config import Settings
from appetizers.containers import AppContainer
from appetizers.domain.catalog import Item
from appetizers.domain.errors import CatalogError, ErrorKind
from appetizers.services.catalog import CatalogStore
from appetizers.services.image_cache import ImageCache
from appetizers.services.order import Order
from appetizers.services.profile import ProfileStorage, ProfileStore


def make_item(item_id: int = 1, price: str | None = None) -> Item:
    """Build a test appetizer with predictable fields."""
    return Item(
        id=item_id,
        name=f"Test Appetizer {item_id}",
        description=f"Test description for appetizer {item_id}",
        price=Decimal(price) if price is not None else Decimal("2.99") * item_id,
        image_url=f"https://test.example/image{item_id}.jpg",
        calories=100 + item_id * 50,
        protein_g=10 + item_id,
        carbs_g=15 + item_id,
    )


def make_items(count: int = 3) -> list[Item]:
    return [make_item(item_id) for item_id in range(1, count + 1)]


def png_bytes(color: tuple[int, int, int] = (200, 80, 40)) -> bytes:
    """Return a small valid PNG."""
    buffer = io.BytesIO()
    Image.new("RGB", (4, 4), color=color).save(buffer, format="PNG")
    return buffer.getvalue()


def oversized_png_header(width: int = 30000, height: int = 30000) -> bytes:
    """Return a PNG signature and IHDR chunk declaring a huge image."""
    ihdr = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
    chunk = b"IHDR" + ihdr
    crc = struct.pack(">I", zlib.crc32(chunk) & 0xFFFFFFFF)
    return b"\x89PNG\r\n\x1a\n" + struct.pack(">I", len(ihdr)) + chunk + crc


@dataclass
class FakeCatalogClient(CatalogClient):
    """Fake catalog client with scripted results and call tracking."""

    items: list[Item] = field(default_factory=make_items)
    error: ErrorKind | None = None
    unexpected: Exception | None = None
    images: dict[str, bytes] = field(default_factory=dict)
    delay_seconds: float = 0.0
    fetch_calls: int = 0
    download_calls: list[str] = field(default_factory=list)

    def fail_with(self, kind: ErrorKind) -> None:
        self.error = kind

    def succeed_with(self, items: list[Item]) -> None:
        self.error = None
        self.items = items

    async def fetch_catalog(self) -> list[Item]:
        self.fetch_calls += 1
        await asyncio.sleep(self.delay_seconds)
        if self.unexpected is not None:
            raise self.unexpected
        if self.error is not None:
            raise CatalogError(self.error)
        return list(self.items)

    async def download_image(self, url: str) -> bytes | None:
        self.download_calls.append(url)
        await asyncio.sleep(self.delay_seconds)
        return self.images.get(url)


@dataclass
class InMemoryProfileStorage(ProfileStorage):
    """In-memory key-value storage for tests."""

    blobs: dict[str, bytes] = field(default_factory=dict)
    writes: int = 0

    def read(self, key: str) -> bytes | None:
        return self.blobs.get(key)

    def write(self, key: str, blob: bytes) -> None:
        self.writes += 1
        self.blobs[key] = blob


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        catalog_base_url="https://api.test/swiftui-fundamentals/",
        mock_server_url="https://api.test",
        profile_storage_dir=str(tmp_path / "profile"),
    )


@pytest.fixture
def catalog_client() -> FakeCatalogClient:
    return FakeCatalogClient()


@pytest.fixture
def profile_storage() -> InMemoryProfileStorage:
    return InMemoryProfileStorage()


@pytest.fixture
def container(
    settings: Settings,
    catalog_client: FakeCatalogClient,
    profile_storage: InMemoryProfileStorage,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        catalog_client=catalog_client,
        image_cache=ImageCache(catalog_client),
        catalog_store=CatalogStore(catalog_client),
        order=Order(),
        profile_store=ProfileStore(profile_storage),
        close_resources=close_resources,
    )
