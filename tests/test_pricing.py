"""Tests for the bulk discount and money/date formatting."""

from datetime import date
from decimal import Decimal

import pytest

from storefront.pricing import DEFAULT_DISCOUNT, BulkDiscount, format_currency, format_short_date


@pytest.mark.parametrize("qty,expected", [
    (1, Decimal("100.00")),
    (9, Decimal("900.00")),     # just below threshold: no discount
    (10, Decimal("900.00")),    # threshold is inclusive: 1000 - 100
    (11, Decimal("990.00")),    # 1100 - 110
])
def test_line_total_threshold(qty, expected):
    assert DEFAULT_DISCOUNT.line_total(Decimal("100"), qty) == expected


def test_line_total_rounds_to_cents():
    # 0.99 * 13 = 12.87, less 10% = 11.583
    assert DEFAULT_DISCOUNT.line_total(Decimal("0.99"), 13) == Decimal("11.58")


def test_custom_policy():
    policy = BulkDiscount(threshold=3, rate=Decimal("0.25"))
    assert policy.line_total(Decimal("10"), 2) == Decimal("20.00")
    assert policy.line_total(Decimal("10"), 4) == Decimal("30.00")


def test_zero_rate_never_discounts():
    policy = BulkDiscount(rate=Decimal("0"))
    assert policy.line_total(Decimal("5"), 50) == Decimal("250.00")


@pytest.mark.parametrize("amount,text", [
    (Decimal("0"), "$0.00"),
    (Decimal("2.5"), "$2.50"),
    (Decimal("1234567.891"), "$1,234,567.89"),
    (Decimal("-3.2"), "-$3.20"),
])
def test_format_currency(amount, text):
    assert format_currency(amount) == text


def test_format_short_date_unpadded():
    assert format_short_date(date(2026, 1, 5)) == "1/5/2026"
    assert format_short_date(date(2026, 12, 25)) == "12/25/2026"
