"""Supabase table used as key-value storage for the profile blob."""

import json
from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from appetizers.services.profile import ProfileStorage


@dataclass
class SupabaseProfileStorage(ProfileStorage):
    """Supabase implementation for profile persistence."""

    client: Client
    table_name: str = "profile_storage"

    def read(self, key: str) -> bytes | None:
        """Return the stored blob for a key, if present."""
        response = (
            self.client.table(self.table_name)
            .select("value")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        value = response.data[0].get("value")
        if value is None:
            return None
        if not isinstance(value, str):
            value = json.dumps(value)
        return value.encode("utf-8")

    def write(self, key: str, blob: bytes) -> None:
        """Overwrite the blob for a key."""
        self.client.table(self.table_name).upsert(
            {
                "key": key,
                "value": blob.decode("utf-8"),
                "updated_at": datetime.now(tz=UTC).isoformat(),
            }
        ).execute()
