"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    catalog_base_url: str = "http://localhost:3000/swiftui-fundamentals/"
    mock_server_url: str = "http://localhost:3000"
    profile_storage_dir: str = ".appetizers"
    profile_storage_key: str = "user"
    image_cache_capacity: int | None = None
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def uses_supabase(self) -> bool:
        """Return True when remote profile storage is configured."""
        return bool(self.supabase_url and self.supabase_service_key)
