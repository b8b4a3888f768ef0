"""HTTP client for the appetizer catalog backend."""

import io
import logging
from dataclasses import dataclass
from typing import Protocol

import httpx
from PIL import Image
from pydantic import ValidationError

from appetizers.adapters.catalog_models import CatalogEnvelope
from appetizers.domain.catalog import Item
from appetizers.domain.errors import CatalogError, ErrorKind

CATALOG_PATH = "appetizers"

_logger = logging.getLogger(__name__)


class ImageDownloader(Protocol):
    """Interface for raw image downloads."""

    async def download_image(self, url: str) -> bytes | None:
        """Return image bytes, or None when no image is available."""


class CatalogClient(ImageDownloader, Protocol):
    """Interface for catalog backend interactions."""

    async def fetch_catalog(self) -> list[Item]:
        """Fetch and decode the catalog, raising CatalogError on failure."""


@dataclass
class HttpxCatalogClient(CatalogClient):
    """HTTPX-backed catalog client."""

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str) -> "HttpxCatalogClient":
        """Create a catalog client with a managed httpx session."""
        return cls(base_url=base_url, http_client=httpx.AsyncClient())

    @property
    def catalog_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{CATALOG_PATH}"

    async def fetch_catalog(self) -> list[Item]:
        """Fetch the catalog in server order."""
        url = parse_http_url(self.catalog_url)
        if url is None:
            raise CatalogError(ErrorKind.INVALID_URL, self.catalog_url)
        try:
            response = await self.http_client.get(url)
        except httpx.DecodingError as exc:
            raise CatalogError(ErrorKind.INVALID_DATA, str(exc)) from exc
        except httpx.RequestError as exc:
            raise CatalogError(ErrorKind.UNREACHABLE, str(exc)) from exc
        if response.status_code != httpx.codes.OK:
            raise CatalogError(
                ErrorKind.INVALID_RESPONSE, f"status={response.status_code}"
            )
        try:
            envelope = CatalogEnvelope.model_validate_json(response.content)
        except ValidationError as exc:
            raise CatalogError(
                ErrorKind.INVALID_DATA, f"{exc.error_count()} validation errors"
            ) from exc
        return [payload.to_item() for payload in envelope.request]

    async def download_image(self, url: str) -> bytes | None:
        """Download an image, returning None for any failure."""
        parsed = parse_http_url(url)
        if parsed is None:
            return None
        try:
            response = await self.http_client.get(parsed)
        except httpx.HTTPError as exc:
            _logger.debug("Image download failed for %s: %s", url, exc)
            return None
        if not response.is_success:
            return None
        if not is_decodable_image(response.content):
            _logger.debug("Image payload from %s is not decodable", url)
            return None
        return response.content

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def parse_http_url(raw: str) -> httpx.URL | None:
    """Parse an absolute http(s) URL, returning None when it is unusable."""
    try:
        url = httpx.URL(raw)
    except httpx.InvalidURL:
        return None
    if url.scheme not in {"http", "https"} or not url.host:
        return None
    return url


def is_decodable_image(data: bytes) -> bool:
    """Return True when Pillow can identify and verify the payload."""
    if not data:
        return False
    try:
        with Image.open(io.BytesIO(data)) as image:
            image.verify()
    except (OSError, SyntaxError, ValueError, Image.DecompressionBombError):
        return False
    return True
