"""Error taxonomy shared by the client layers."""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Every failure the client can surface to a user."""

    INVALID_URL = "invalid_url"
    INVALID_RESPONSE = "invalid_response"
    INVALID_DATA = "invalid_data"
    UNREACHABLE = "unreachable"
    CORRUPT_DATA = "corrupt_data"
    INVALID_FORM = "invalid_form"
    INVALID_EMAIL = "invalid_email"
    ENCODE_FAILURE = "encode_failure"


class AppetizersError(Exception):
    """Base error carrying an ErrorKind."""

    def __init__(self, kind: ErrorKind, detail: str | None = None) -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(f"{kind.value}: {detail}" if detail else kind.value)


class CatalogError(AppetizersError):
    """Raised by catalog transport operations."""


class ProfileError(AppetizersError):
    """Raised while validating or encoding a user profile."""


class OrderPositionError(IndexError):
    """Raised when removing order lines at positions that do not exist."""

    def __init__(self, positions: list[int], size: int) -> None:
        self.positions = positions
        self.size = size
        super().__init__(f"positions {positions} out of range for order of {size}")
