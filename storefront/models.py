"""Data models for storefront.

Category and OrderStatus enums, the Product variants, LineItem and
ReturnedItem. These are the typed structures that flow through
catalog → inventory → orders → display.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import ClassVar

from storefront.errors import InvalidProductError, InvalidQuantityError
from storefront.pricing import format_currency, format_short_date


class Category(str, Enum):
    """Catalog categories, in shopping-menu order."""

    ELECTRONICS = "Electronics"
    CLOTHING = "Clothing"
    GROCERIES = "Groceries"


class OrderStatus(str, Enum):
    """Order lifecycle. Orders start out PROCESSING; returns move them on."""

    PROCESSING = "Processing"
    PARTIALLY_RETURNED = "Partially Returned"
    RETURNED = "Returned"


@dataclass(frozen=True)
class Product:
    """Fields shared by every product variant.

    Products are values: stock is tracked by Inventory, not here.
    """

    sku: str
    name: str
    price: Decimal

    category: ClassVar[Category]

    def __post_init__(self) -> None:
        if not isinstance(self.price, Decimal):
            object.__setattr__(self, "price", Decimal(str(self.price)))
        if self.price < 0:
            raise InvalidProductError(self.name, f"price {self.price} is negative")

    def describe(self) -> str:
        return f"{self.name} - {format_currency(self.price)}"


@dataclass(frozen=True)
class Electronic(Product):
    warranty_months: int

    category: ClassVar[Category] = Category.ELECTRONICS

    def describe(self) -> str:
        return f"{super().describe()} - Warranty: {self.warranty_months} months"


@dataclass(frozen=True)
class Clothing(Product):
    size: str
    material: str

    category: ClassVar[Category] = Category.CLOTHING

    def describe(self) -> str:
        return f"{super().describe()} - Size: {self.size}, Material: {self.material}"


@dataclass(frozen=True)
class Grocery(Product):
    expiration_date: date

    category: ClassVar[Category] = Category.GROCERIES

    def describe(self) -> str:
        return f"{super().describe()} - Expires: {format_short_date(self.expiration_date)}"


@dataclass(frozen=True)
class LineItem:
    """A (product, quantity) pair on a cart or order."""

    product: Product
    quantity: int

    def __post_init__(self) -> None:
        if self.quantity <= 0:
            raise InvalidQuantityError(self.quantity)


@dataclass(frozen=True)
class ReturnedItem:
    """One entry in the inventory's returned stock log."""

    product: Product
    quantity: int
    returned_at: datetime = field(default_factory=datetime.now)
