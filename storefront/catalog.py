"""The fixed product catalog a storefront session starts with."""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable, Optional

from storefront.models import Category, Clothing, Electronic, Grocery, Product


def build_catalog(today: Optional[date] = None) -> list[Product]:
    """Create the startup catalog, three products per category.

    Grocery expiration dates are relative to ``today`` (defaults to the
    current date) so the shop never opens with expired food.
    """
    today = today or date.today()
    return [
        Electronic("EL-001", "Laptop", Decimal("999.99"), warranty_months=24),
        Electronic("EL-002", "Smartphone", Decimal("699.99"), warranty_months=12),
        Electronic("EL-003", "Headphones", Decimal("149.99"), warranty_months=6),
        Clothing("CL-001", "T-Shirt", Decimal("19.99"), size="M", material="Cotton"),
        Clothing("CL-002", "Jeans", Decimal("49.99"), size="L", material="Denim"),
        Clothing("CL-003", "Jacket", Decimal("89.99"), size="XL", material="Leather"),
        Grocery("GR-001", "Milk", Decimal("2.99"), expiration_date=today + timedelta(days=7)),
        Grocery("GR-002", "Bread", Decimal("1.99"), expiration_date=today + timedelta(days=3)),
        Grocery("GR-003", "Apples", Decimal("3.49"), expiration_date=today + timedelta(days=14)),
    ]


def products_in(products: Iterable[Product], category: Category) -> list[Product]:
    """Products of one category, in catalog order."""
    return [p for p in products if p.category == category]


def parse_category(name: str) -> Optional[Category]:
    """Match a category by value or member name, case-insensitively.

    'groceries', 'GROCERIES' and 'Groceries' all resolve; unknown names
    return None.
    """
    key = name.strip().lower()
    for c in Category:
        if key in (c.value.lower(), c.name.lower()):
            return c
    return None
