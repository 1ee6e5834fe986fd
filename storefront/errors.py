"""Exceptions for storefront."""

from __future__ import annotations


class StorefrontError(Exception):
    """Base exception for all storefront errors."""

    pass


class ConfigError(StorefrontError):
    """Raised when an environment setting can't be used."""

    def __init__(self, key: str, value: str, reason: str):
        self.key = key
        self.value = value
        super().__init__(f"Invalid {key}={value!r}: {reason}")


class InvalidProductError(StorefrontError):
    """Raised when a product is constructed with unusable fields."""

    def __init__(self, name: str, reason: str):
        self.name = name
        super().__init__(f"Invalid product {name!r}: {reason}")


class InvalidQuantityError(StorefrontError):
    """Raised when a quantity is zero or negative."""

    def __init__(self, quantity: int):
        self.quantity = quantity
        super().__init__(f"Quantity must be a positive whole number (got {quantity}).")


class UnknownProductError(StorefrontError):
    """Raised when a product isn't stocked by the inventory."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name} is not stocked in this inventory.")


class InsufficientStockError(StorefrontError):
    """Raised when more units are requested than are in stock."""

    def __init__(self, name: str, requested: int, available: int):
        self.name = name
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient stock for {name}: requested {requested}, only {available} available."
        )


class ReturnError(StorefrontError):
    """Raised when a return doesn't match what was ordered."""

    def __init__(self, name: str, reason: str):
        self.name = name
        super().__init__(f"Cannot return {name}: {reason}")


class EmptyCartError(StorefrontError):
    """Raised on checkout with nothing in the cart."""

    def __init__(self):
        super().__init__("Your cart is empty. Add a product before checking out.")


class DuplicateProductError(StorefrontError):
    """Raised when the same product is stocked twice."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name} is listed more than once; products must be unique.")
