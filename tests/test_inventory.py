"""Tests for Inventory stock ownership and the returned stock log."""

from datetime import datetime
from decimal import Decimal

import pytest

from storefront.display import NO_PRODUCTS, NO_RETURNS, render_returns, render_stock
from storefront.errors import (
    DuplicateProductError,
    InsufficientStockError,
    InvalidQuantityError,
    UnknownProductError,
)
from storefront.inventory import Inventory
from storefront.models import Category, Electronic


def test_initial_stock(inventory):
    assert all(inventory.stock_of(p) == 20 for p in inventory.products)


def test_custom_initial_stock(tv):
    inv = Inventory([tv], initial_stock=3)
    assert inv.stock_of(tv) == 3


def test_update_stock_decrements(inventory, tv):
    assert inventory.update_stock(tv, 5) == 15
    assert inventory.stock_of(tv) == 15


def test_update_stock_to_exactly_zero(inventory, tv):
    inventory.update_stock(tv, 20)
    assert inventory.stock_of(tv) == 0
    assert not inventory.has_stock(tv, 1)


def test_update_stock_over_request_leaves_stock(inventory, tv):
    with pytest.raises(InsufficientStockError) as exc:
        inventory.update_stock(tv, 21)
    assert exc.value.requested == 21
    assert exc.value.available == 20
    assert inventory.stock_of(tv) == 20


@pytest.mark.parametrize("qty", [0, -3])
def test_update_stock_rejects_non_positive(inventory, tv, qty):
    with pytest.raises(InvalidQuantityError):
        inventory.update_stock(tv, qty)
    assert inventory.stock_of(tv) == 20


def test_duplicate_products_rejected(tv):
    twin = Electronic("EL-100", "TV", Decimal("100"), warranty_months=12)
    with pytest.raises(DuplicateProductError):
        Inventory([tv, twin])


def test_distinct_products_with_same_name_allowed(tv):
    other = Electronic("EL-200", "TV", Decimal("100"), warranty_months=12)
    inv = Inventory([tv, other])
    inv.update_stock(tv, 5)
    assert inv.stock_of(other) == 20


def test_unknown_product(inventory):
    stranger = Electronic("EL-999", "Stranger", Decimal("1"), warranty_months=1)
    with pytest.raises(UnknownProductError):
        inventory.stock_of(stranger)
    with pytest.raises(UnknownProductError):
        inventory.update_stock(stranger, 1)


def test_restock(inventory, tv):
    inventory.update_stock(tv, 8)
    assert inventory.restock(tv, 3) == 15


def test_products_in_category(inventory, tv):
    assert inventory.products_in(Category.ELECTRONICS) == [tv]


def test_products_is_read_only_view(inventory):
    assert isinstance(inventory.products, tuple)


# --- Returned stock log ---

def test_add_to_returned_stock_appends(inventory, shirt):
    when = datetime(2026, 3, 8, 9, 30)
    item = inventory.add_to_returned_stock(shirt, 2, returned_at=when)
    assert inventory.returned_items == (item,)
    assert item.product == shirt
    assert item.quantity == 2
    assert item.returned_at == when


def test_returned_log_keeps_order_and_ignores_stock(inventory, tv, shirt):
    inventory.add_to_returned_stock(tv, 1)
    inventory.add_to_returned_stock(shirt, 4)
    assert [r.product for r in inventory.returned_items] == [tv, shirt]
    # logging a return doesn't move stock by itself
    assert inventory.stock_of(shirt) == 20


def test_returned_stamp_defaults_to_now(inventory, tv):
    before = datetime.now()
    item = inventory.add_to_returned_stock(tv, 1)
    assert before <= item.returned_at <= datetime.now()


# --- Display ---

def test_render_stock_empty(console):
    render_stock(Inventory([]), console)
    assert NO_PRODUCTS in console.file.getvalue()


def test_render_returns_empty(console, inventory):
    render_returns(inventory, console)
    assert NO_RETURNS in console.file.getvalue()


def test_render_stock_lists_products(console, inventory, tv):
    inventory.update_stock(tv, 4)
    render_stock(inventory, console)
    text = console.file.getvalue()
    assert "EL-100" in text
    assert "16" in text
    assert "Milk" in text


def test_render_returns_lists_entries(console, inventory, milk):
    inventory.add_to_returned_stock(milk, 3, returned_at=datetime(2026, 3, 9, 14, 5))
    render_returns(inventory, console)
    text = console.file.getvalue()
    assert "Milk" in text
    assert "2026-03-09 14:05" in text
