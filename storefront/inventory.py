"""Inventory: the only owner of stock counts, plus the returned stock log.

Stock lives in a map keyed by product. Products themselves carry no stock,
so every increment or decrement goes through update_stock() or restock().
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Optional

from storefront.catalog import products_in
from storefront.errors import (
    DuplicateProductError,
    InsufficientStockError,
    InvalidQuantityError,
    UnknownProductError,
)
from storefront.models import Category, Product, ReturnedItem

log = logging.getLogger(__name__)

INITIAL_STOCK = 20


class Inventory:
    """Stock per product and an append-only log of returns."""

    def __init__(self, products: Iterable[Product], initial_stock: int = INITIAL_STOCK):
        self._products: list[Product] = list(products)
        seen: set[Product] = set()
        for p in self._products:
            if p in seen:
                raise DuplicateProductError(p.name)
            seen.add(p)
        self._stock: dict[Product, int] = {p: initial_stock for p in self._products}
        self._returned: list[ReturnedItem] = []

    @property
    def products(self) -> tuple[Product, ...]:
        return tuple(self._products)

    @property
    def returned_items(self) -> tuple[ReturnedItem, ...]:
        return tuple(self._returned)

    def products_in(self, category: Category) -> list[Product]:
        return products_in(self._products, category)

    def stock_of(self, product: Product) -> int:
        if product not in self._stock:
            raise UnknownProductError(product.name)
        return self._stock[product]

    def has_stock(self, product: Product, quantity: int) -> bool:
        """True if ``quantity`` units can be taken right now."""
        return 0 < quantity <= self.stock_of(product)

    def update_stock(self, product: Product, quantity: int) -> int:
        """Take ``quantity`` units out of stock.

        Returns the remaining stock. Nothing changes when an error is raised.

        Raises:
            InvalidQuantityError: quantity is zero or negative.
            UnknownProductError: the product isn't stocked here.
            InsufficientStockError: quantity exceeds what's on hand.
        """
        if quantity <= 0:
            raise InvalidQuantityError(quantity)
        available = self.stock_of(product)
        if quantity > available:
            raise InsufficientStockError(product.name, quantity, available)
        self._stock[product] = available - quantity
        log.debug("stock %s: %d -> %d", product.sku, available, self._stock[product])
        return self._stock[product]

    def restock(self, product: Product, quantity: int) -> int:
        """Put ``quantity`` units back into stock and return the new count."""
        if quantity <= 0:
            raise InvalidQuantityError(quantity)
        available = self.stock_of(product)
        self._stock[product] = available + quantity
        log.debug("restock %s: %d -> %d", product.sku, available, self._stock[product])
        return self._stock[product]

    def add_to_returned_stock(
        self,
        product: Product,
        quantity: int,
        returned_at: Optional[datetime] = None,
    ) -> ReturnedItem:
        """Append one entry to the returned stock log.

        The log is independent of stock counts: callers restock separately.
        """
        if quantity <= 0:
            raise InvalidQuantityError(quantity)
        item = ReturnedItem(product=product, quantity=quantity, returned_at=returned_at or datetime.now())
        self._returned.append(item)
        log.info("logged return of %d x %s", quantity, product.sku)
        return item
