"""Image cache keyed by URL with single-flight downloads."""

import asyncio
import logging
from collections import OrderedDict
from dataclasses import dataclass, field

from appetizers.adapters.catalog_client import ImageDownloader

_logger = logging.getLogger(__name__)


@dataclass
class ImageCache:
    """Caches downloaded images by their exact URL string.

    Concurrent misses for the same URL share one download. Failed downloads
    are not cached, so the next lookup retries. With ``capacity`` set the
    least recently used entry is evicted; without it the cache is unbounded
    and only ``clear`` releases memory.
    """

    downloader: ImageDownloader
    capacity: int | None = None
    _entries: "OrderedDict[str, bytes]" = field(
        default_factory=OrderedDict, init=False, repr=False
    )
    _in_flight: dict[str, "asyncio.Task[bytes | None]"] = field(
        default_factory=dict, init=False, repr=False
    )

    def __post_init__(self) -> None:
        if self.capacity is not None and self.capacity < 1:
            raise ValueError("capacity must be a positive integer or None")

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, url: str) -> bytes | None:
        """Return a cached image without downloading."""
        image = self._entries.get(url)
        if image is not None:
            self._entries.move_to_end(url)
        return image

    async def get_or_fetch(self, url: str) -> bytes | None:
        """Return the cached image or download it once for all waiters."""
        cached = self.get(url)
        if cached is not None:
            return cached

        task = self._in_flight.get(url)
        if task is None:
            task = asyncio.create_task(self._download(url))
            self._in_flight[url] = task
        else:
            _logger.debug("Joining in-flight image download: %s", url)
        # shield: one waiter being cancelled must not cancel the shared download
        return await asyncio.shield(task)

    def clear(self) -> None:
        """Drop every cached image."""
        self._entries.clear()

    async def _download(self, url: str) -> bytes | None:
        try:
            image = await self.downloader.download_image(url)
        finally:
            self._in_flight.pop(url, None)
        if image is None:
            _logger.debug("Image unavailable: %s", url)
            return None
        self._store(url, image)
        return image

    def _store(self, url: str, image: bytes) -> None:
        self._entries[url] = image
        self._entries.move_to_end(url)
        if self.capacity is None:
            return
        while len(self._entries) > self.capacity:
            evicted, _ = self._entries.popitem(last=False)
            _logger.debug("Evicted cached image: %s", evicted)
