"""Tests for the order aggregate."""

from decimal import Decimal

import pytest

from appetizers.domain.errors import OrderPositionError
from appetizers.services.order import Order
from tests.conftest import make_item


def test_empty_order() -> None:
    order = Order()

    assert order.is_empty
    assert order.item_count == 0
    assert order.total_price == Decimal(0)


def test_total_price_sums_lines() -> None:
    order = Order()
    for index, price in enumerate(["8.99", "5.99", "6.99"], start=1):
        order.add(make_item(index, price=price))

    assert order.item_count == 3
    assert float(order.total_price) == pytest.approx(21.97, abs=0.01)
    assert order.total_price == Decimal("21.97")


def test_same_item_added_twice_is_two_lines() -> None:
    order = Order()
    item = make_item(1, price="4.99")

    order.add(item)
    order.add(item)

    assert order.items == (item, item)
    assert order.total_price == Decimal("9.98")


def test_add_then_remove_restores_empty_order() -> None:
    order = Order()
    order.add(make_item(42))

    order.remove({0})

    assert order.is_empty
    assert order.total_price == Decimal(0)


def test_remove_multiple_positions_uses_pre_removal_indices() -> None:
    order = Order()
    items = [make_item(index) for index in range(1, 6)]
    for item in items:
        order.add(item)

    order.remove([0, 2, 4])

    assert order.items == (items[1], items[3])
    assert order.item_count == 2
    assert order.total_price == items[1].price + items[3].price


@pytest.mark.parametrize("positions", [{3}, {-1}, {0, 5}])
def test_remove_out_of_range_rejected_without_change(positions) -> None:
    order = Order()
    for index in range(1, 4):
        order.add(make_item(index))
    before = order.items

    with pytest.raises(OrderPositionError):
        order.remove(positions)

    assert order.items == before


def test_remove_nothing_is_noop() -> None:
    order = Order()
    order.add(make_item(1))

    order.remove(set())

    assert order.item_count == 1


def test_clear() -> None:
    order = Order()
    order.add(make_item(1))
    order.add(make_item(2))

    order.clear()

    assert order.is_empty
