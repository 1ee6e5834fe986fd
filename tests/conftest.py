import io
from datetime import date
from decimal import Decimal

import pytest
from rich.console import Console

from storefront.inventory import Inventory
from storefront.models import Clothing, Electronic, Grocery


@pytest.fixture
def tv():
    return Electronic("EL-100", "TV", Decimal("100"), warranty_months=12)


@pytest.fixture
def shirt():
    return Clothing("CL-100", "Shirt", Decimal("25.50"), size="M", material="Cotton")


@pytest.fixture
def milk():
    return Grocery("GR-100", "Milk", Decimal("2.99"), expiration_date=date(2026, 3, 14))


@pytest.fixture
def inventory(tv, shirt, milk):
    return Inventory([tv, shirt, milk])


@pytest.fixture
def console():
    """Console that records into a string buffer."""
    return Console(file=io.StringIO(), width=120, color_system=None)
