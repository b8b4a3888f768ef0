"""ASGI entrypoint for the mock backend."""

from appetizers.api.app import create_app
from appetizers.config import Settings

app = create_app(Settings().mock_server_url)
