"""Shop settings for storefront sessions.

Defaults match the built-in shop. Every value can be overridden through a
STOREFRONT_* environment variable so a session can be tuned without code
changes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Mapping, Optional

from storefront.errors import ConfigError
from storefront.pricing import BulkDiscount

_ENV_PREFIX = "STOREFRONT_"


@dataclass(frozen=True)
class ShopConfig:
    """Tunable numbers for one shop session."""

    initial_stock: int = 20
    bulk_threshold: int = 10
    bulk_discount: Decimal = Decimal("0.10")
    delivery_min_days: int = 3
    delivery_max_days: int = 6

    @property
    def discount(self) -> BulkDiscount:
        return BulkDiscount(threshold=self.bulk_threshold, rate=self.bulk_discount)

    @property
    def delivery_window(self) -> tuple[int, int]:
        return self.delivery_min_days, self.delivery_max_days

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> ShopConfig:
        """Build a config from STOREFRONT_* variables, falling back to defaults.

        Args:
            env: Mapping to read instead of os.environ (used by tests).

        Raises:
            ConfigError: A variable is set but isn't a usable value.
        """
        env = os.environ if env is None else env
        defaults = cls()

        initial_stock = _read_int(env, "INITIAL_STOCK", defaults.initial_stock)
        bulk_threshold = _read_int(env, "BULK_THRESHOLD", defaults.bulk_threshold)
        min_days = _read_int(env, "DELIVERY_MIN_DAYS", defaults.delivery_min_days)
        max_days = _read_int(env, "DELIVERY_MAX_DAYS", defaults.delivery_max_days)

        key = _ENV_PREFIX + "BULK_DISCOUNT"
        raw = env.get(key)
        bulk_discount = defaults.bulk_discount
        if raw is not None:
            try:
                bulk_discount = Decimal(raw.strip())
            except InvalidOperation:
                raise ConfigError(key, raw, "not a decimal number")
            if not bulk_discount.is_finite():
                raise ConfigError(key, raw, "not a decimal number")
            if not Decimal("0") <= bulk_discount <= Decimal("1"):
                raise ConfigError(key, raw, "must be between 0 and 1")

        if bulk_threshold < 1:
            raise ConfigError(_ENV_PREFIX + "BULK_THRESHOLD", str(bulk_threshold), "must be at least 1")
        if min_days < 1:
            raise ConfigError(_ENV_PREFIX + "DELIVERY_MIN_DAYS", str(min_days), "delivery must be at least 1 day out")
        if min_days > max_days:
            raise ConfigError(
                _ENV_PREFIX + "DELIVERY_MIN_DAYS", str(min_days),
                f"greater than DELIVERY_MAX_DAYS ({max_days})",
            )

        return cls(
            initial_stock=initial_stock,
            bulk_threshold=bulk_threshold,
            bulk_discount=bulk_discount,
            delivery_min_days=min_days,
            delivery_max_days=max_days,
        )


def _read_int(env: Mapping[str, str], name: str, default: int) -> int:
    """Read a non-negative integer setting."""
    key = _ENV_PREFIX + name
    raw = env.get(key)
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ConfigError(key, raw, "not a whole number")
    if value < 0:
        raise ConfigError(key, raw, "must not be negative")
    return value
