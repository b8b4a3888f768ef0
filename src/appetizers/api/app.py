"""FastAPI mock backend serving the appetizer catalog."""

import hashlib
import io
import logging
from datetime import UTC, datetime

from fastapi import FastAPI, HTTPException, status
from fastapi.responses import Response
from PIL import Image

from appetizers.api.catalog_data import IMAGE_PATH_PREFIX, catalog_payload, image_files
from appetizers.app_logging import configure_logging

_IMAGE_SIZE = (300, 225)


def create_app(server_url: str = "http://localhost:3000") -> FastAPI:
    """Create the mock backend app; image URLs are rooted at ``server_url``."""
    configure_logging()
    logger = logging.getLogger(__name__)
    app = FastAPI(title="Appetizers mock backend")
    known_images = image_files()

    @app.get("/swiftui-fundamentals/appetizers")
    async def list_appetizers() -> dict[str, object]:
        """Return the catalog wrapped in the response envelope."""
        return {"request": catalog_payload(server_url)}

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {
            "status": "Server is running",
            "timestamp": datetime.now(tz=UTC).isoformat(),
        }

    @app.get(IMAGE_PATH_PREFIX + "/{file_name}")
    async def appetizer_image(file_name: str) -> Response:
        """Render a placeholder image for a catalog entry."""
        if file_name not in known_images:
            logger.info("Unknown image requested: %s", file_name)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return Response(content=render_placeholder(file_name), media_type="image/png")

    return app


def render_placeholder(seed: str) -> bytes:
    """Render a solid PNG whose colour is derived from ``seed``."""
    digest = hashlib.sha256(seed.encode("utf-8")).digest()
    image = Image.new("RGB", _IMAGE_SIZE, color=(digest[0], digest[1], digest[2]))
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()
