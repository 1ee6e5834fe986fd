"""Orders and the shopping cart that produces them.

Data flow per shopping session:
1. Cart.add() checks stock and takes the units out of inventory
2. Cart.cancel() puts every carted unit back
3. Cart.checkout() freezes the lines into an Order with order/delivery dates
4. Order.process_return() restocks inventory and logs the return
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Callable, Iterable, Optional

from storefront.errors import EmptyCartError, InsufficientStockError, InvalidQuantityError, ReturnError
from storefront.inventory import Inventory
from storefront.models import LineItem, OrderStatus, Product, ReturnedItem
from storefront.pricing import DEFAULT_DISCOUNT, BulkDiscount

log = logging.getLogger(__name__)

DELIVERY_WINDOW_DAYS = (3, 6)


@dataclass
class Order:
    """A placed order. Line items are fixed once the order exists."""

    items: tuple[LineItem, ...]
    customer_name: str
    customer_address: str
    order_date: datetime
    delivery_date: datetime
    status: OrderStatus = OrderStatus.PROCESSING
    discount: BulkDiscount = DEFAULT_DISCOUNT
    # product -> units already returned
    returned: dict[Product, int] = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        items: Iterable[LineItem],
        customer_name: str,
        customer_address: str,
        *,
        discount: BulkDiscount = DEFAULT_DISCOUNT,
        delivery_window: tuple[int, int] = DELIVERY_WINDOW_DAYS,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> Order:
        """Stamp a new order with its order date and a random delivery date.

        Args:
            items: Line items to place.
            customer_name: Free text, not validated.
            customer_address: Free text, not validated.
            discount: Bulk discount policy used by calculate_total().
            delivery_window: Inclusive (min, max) days between order and delivery.
            rng: Random source for the delivery offset (seed it for repeatable runs).
            clock: Returns the order date.
        """
        rng = rng or random.Random()
        order_date = clock()
        offset = rng.randint(*delivery_window)
        order = cls(
            items=tuple(items),
            customer_name=customer_name,
            customer_address=customer_address,
            order_date=order_date,
            delivery_date=order_date + timedelta(days=offset),
            discount=discount,
        )
        log.info(
            "order for %s: %d line(s), total %s, delivery in %d days",
            customer_name, len(order.items), order.calculate_total(), offset,
        )
        return order

    def line_total(self, item: LineItem) -> Decimal:
        return self.discount.line_total(item.product.price, item.quantity)

    def calculate_total(self) -> Decimal:
        """Sum of line totals, bulk discount applied per line."""
        return sum((self.line_total(item) for item in self.items), Decimal("0.00"))

    def ordered_quantity(self, product: Product) -> int:
        return sum(item.quantity for item in self.items if item.product == product)

    def returnable_quantity(self, product: Product) -> int:
        return self.ordered_quantity(product) - self.returned.get(product, 0)

    def process_return(self, product: Product, quantity: int, inventory: Inventory) -> ReturnedItem:
        """Return units of an ordered product.

        The units go back into ``inventory`` stock and one ReturnedItem is
        appended to its returned stock log.

        Raises:
            InvalidQuantityError: quantity is zero or negative.
            ReturnError: the product isn't on this order, or more units are
                being returned than were ordered and not yet returned.
        """
        if quantity <= 0:
            raise InvalidQuantityError(quantity)
        if self.ordered_quantity(product) == 0:
            raise ReturnError(product.name, "it is not part of this order")
        remaining = self.returnable_quantity(product)
        if quantity > remaining:
            raise ReturnError(product.name, f"only {remaining} unit(s) left to return")

        inventory.restock(product, quantity)
        returned = inventory.add_to_returned_stock(product, quantity)
        self.returned[product] = self.returned.get(product, 0) + quantity
        self.status = self._status_after_returns()
        return returned

    def _status_after_returns(self) -> OrderStatus:
        if not self.returned:
            return OrderStatus.PROCESSING
        products = {item.product for item in self.items}
        if all(self.returnable_quantity(p) == 0 for p in products):
            return OrderStatus.RETURNED
        return OrderStatus.PARTIALLY_RETURNED


class Cart:
    """Line items being collected for one shopping session.

    Stock is taken from inventory as soon as a line is added, so the
    availability check always reflects what other lines already hold.
    """

    def __init__(self, inventory: Inventory, discount: BulkDiscount = DEFAULT_DISCOUNT):
        self.inventory = inventory
        self.discount = discount
        self._items: list[LineItem] = []

    @property
    def items(self) -> tuple[LineItem, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def add(self, product: Product, quantity: int) -> LineItem:
        """Reserve stock and append a line. Rejects over-requests whole."""
        if quantity <= 0:
            raise InvalidQuantityError(quantity)
        available = self.inventory.stock_of(product)
        if quantity > available:
            raise InsufficientStockError(product.name, quantity, available)
        self.inventory.update_stock(product, quantity)
        item = LineItem(product=product, quantity=quantity)
        self._items.append(item)
        return item

    def total(self) -> Decimal:
        return sum(
            (self.discount.line_total(i.product.price, i.quantity) for i in self._items),
            Decimal("0.00"),
        )

    def cancel(self) -> None:
        """Drop every line and give its units back to inventory."""
        for item in self._items:
            self.inventory.restock(item.product, item.quantity)
        self._items.clear()

    def checkout(
        self,
        customer_name: str,
        customer_address: str,
        *,
        delivery_window: tuple[int, int] = DELIVERY_WINDOW_DAYS,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> Order:
        """Turn the cart into an Order and empty it. Stock stays taken."""
        if not self._items:
            raise EmptyCartError()
        order = Order.create(
            self._items,
            customer_name,
            customer_address,
            discount=self.discount,
            delivery_window=delivery_window,
            rng=rng,
            clock=clock,
        )
        self._items.clear()
        return order
