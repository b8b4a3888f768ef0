"""Command line entry point printing the current catalog."""

import argparse
import asyncio
import sys

from appetizers.app_logging import configure_logging
from appetizers.containers import AppContainer, build_container
from appetizers.domain.catalog import FetchStatus


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="appetizers", description="Fetch and print the appetizer catalog."
    )
    parser.add_argument(
        "--images",
        action="store_true",
        help="also download every item image through the cache",
    )
    return parser.parse_args(argv)


async def _run(container: AppContainer, with_images: bool) -> int:
    try:
        state = await container.catalog_store.refresh()
        if state.status is not FetchStatus.LOADED:
            alert = container.catalog_store.alert
            if alert is not None:
                print(f"{alert.title}: {alert.message}", file=sys.stderr)
            return 1
        print(f"Appetizers ({len(state.items)} items)")
        images: list[bytes | None] = []
        if with_images:
            cache = container.image_cache
            images = await asyncio.gather(
                *(cache.get_or_fetch(item.image_url) for item in state.items)
            )
        for index, item in enumerate(state.items):
            line = f"{item.id:>3}  {item.name:<32} ${item.price:>6}  {item.calories}cal"
            if images:
                image = images[index]
                line += f"  image={len(image)}B" if image is not None else "  image=-"
            print(line)
        return 0
    finally:
        await container.close_resources()


def main(argv: list[str] | None = None, container: AppContainer | None = None) -> int:
    """Fetch the catalog once and print it; returns the process exit code."""
    args = _parse_args(argv)
    configure_logging()
    resolved = container or build_container()
    return asyncio.run(_run(resolved, with_images=args.images))


if __name__ == "__main__":
    sys.exit(main())
