"""Money handling for storefront: bulk discount and display formatting.

All amounts are Decimal. Line totals are rounded to whole cents once, after
the discount is applied.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")

# Quantity at which a line qualifies (inclusive) and the share taken off.
BULK_THRESHOLD = 10
BULK_DISCOUNT_RATE = Decimal("0.10")


@dataclass(frozen=True)
class BulkDiscount:
    """Flat per-line bulk discount: one threshold, one rate, no tiers."""

    threshold: int = BULK_THRESHOLD
    rate: Decimal = BULK_DISCOUNT_RATE

    def applies(self, quantity: int) -> bool:
        return quantity >= self.threshold

    def line_total(self, price: Decimal, quantity: int) -> Decimal:
        """Price a single line item.

        Args:
            price: Unit price.
            quantity: Units on the line.

        Returns:
            price * quantity, less ``rate`` of that subtotal when the line
            reaches ``threshold`` units, rounded to cents.
        """
        subtotal = price * quantity
        if self.applies(quantity):
            subtotal -= subtotal * self.rate
        return subtotal.quantize(CENT, rounding=ROUND_HALF_UP)


DEFAULT_DISCOUNT = BulkDiscount()


def format_currency(amount: Decimal) -> str:
    """Format an amount as dollars, e.g. Decimal('1234.5') -> '$1,234.50'."""
    amount = Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)
    if amount < 0:
        return f"-${-amount:,.2f}"
    return f"${amount:,.2f}"


def format_short_date(value: date) -> str:
    """Short date without zero padding, e.g. 3/7/2026."""
    return f"{value.month}/{value.day}/{value.year}"
