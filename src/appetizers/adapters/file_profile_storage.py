"""Local file-backed key-value storage for the profile blob."""

import re
from dataclasses import dataclass
from pathlib import Path

from appetizers.services.profile import ProfileStorage

_SAFE_KEY = re.compile(r"[^A-Za-z0-9_.-]")


@dataclass
class FileProfileStorage(ProfileStorage):
    """Stores each key as a JSON file inside a directory."""

    directory: Path

    def __post_init__(self) -> None:
        self.directory = Path(self.directory)

    def read(self, key: str) -> bytes | None:
        """Return the stored blob for a key, if present."""
        path = self._path_for(key)
        if not path.exists():
            return None
        return path.read_bytes()

    def write(self, key: str, blob: bytes) -> None:
        """Overwrite the blob for a key."""
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path_for(key)
        tmp_path = path.with_suffix(".tmp")
        tmp_path.write_bytes(blob)
        tmp_path.replace(path)

    def _path_for(self, key: str) -> Path:
        return self.directory / f"{_SAFE_KEY.sub('_', key)}.json"
