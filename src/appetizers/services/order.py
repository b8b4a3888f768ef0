"""In-memory order aggregate."""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from appetizers.domain.catalog import Item
from appetizers.domain.errors import OrderPositionError


@dataclass
class Order:
    """Ordered lines of selected items with derived totals.

    Each mutation replaces the line tuple as a whole, so readers never see a
    partially applied change.
    """

    _items: tuple[Item, ...] = ()

    @property
    def items(self) -> tuple[Item, ...]:
        return self._items

    @property
    def total_price(self) -> Decimal:
        """Sum of all line prices, zero when empty."""
        return sum((item.price for item in self._items), Decimal(0))

    @property
    def item_count(self) -> int:
        return len(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    def add(self, item: Item) -> None:
        """Append a line for the item; duplicates are separate lines."""
        self._items = (*self._items, item)

    def remove(self, positions: Iterable[int]) -> None:
        """Delete lines at zero-based positions of the current sequence.

        Raises OrderPositionError and leaves the order untouched when any
        position is out of range.
        """
        targets = set(positions)
        size = len(self._items)
        invalid = sorted(position for position in targets if not 0 <= position < size)
        if invalid:
            raise OrderPositionError(invalid, size)
        self._items = tuple(
            item for index, item in enumerate(self._items) if index not in targets
        )

    def clear(self) -> None:
        self._items = ()
