"""Catalog domain models."""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum

from appetizers.domain.alerts import AlertItem
from appetizers.domain.errors import ErrorKind


@dataclass(frozen=True)
class Item:
    """A purchasable appetizer from the catalog."""

    id: int
    name: str
    description: str
    price: Decimal
    image_url: str
    calories: int
    protein_g: int
    carbs_g: int


class FetchStatus(StrEnum):
    """Lifecycle of one catalog retrieval."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class FetchState:
    """Current fetch status with its payload.

    ``items`` is only populated for ``LOADED`` and ``error`` only for ``FAILED``.
    """

    status: FetchStatus
    items: tuple[Item, ...] = ()
    error: ErrorKind | None = None

    @classmethod
    def idle(cls) -> "FetchState":
        return cls(FetchStatus.IDLE)

    @classmethod
    def loading(cls) -> "FetchState":
        return cls(FetchStatus.LOADING)

    @classmethod
    def loaded(cls, items: Iterable[Item]) -> "FetchState":
        return cls(FetchStatus.LOADED, items=tuple(items))

    @classmethod
    def failed(cls, error: ErrorKind) -> "FetchState":
        return cls(FetchStatus.FAILED, error=error)

    @property
    def is_loading(self) -> bool:
        return self.status is FetchStatus.LOADING


@dataclass(frozen=True)
class CatalogSnapshot:
    """Everything an observer of the catalog store can render."""

    state: FetchState
    selected_item: Item | None
    is_showing_detail: bool
    alert: AlertItem | None
