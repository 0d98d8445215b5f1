"""
Cart-related exceptions.
"""

from .base import PosEngineException


class CartException(PosEngineException):
    """Base exception for cart-related errors."""
    pass


class EmptyCartException(CartException):
    """Raised when trying to submit an empty cart."""

    def __init__(self):
        super().__init__("Cart is empty")


class CartItemNotFoundException(CartException):
    """Raised when cart line is not found."""

    def __init__(self, line_id: str):
        super().__init__(
            f"Cart line {line_id} not found",
            details={'line_id': line_id}
        )
        self.line_id = line_id


class InvalidQuantityException(CartException):
    """Raised when a line item is constructed with quantity below 1."""

    def __init__(self, quantity: int):
        super().__init__(
            f"Invalid quantity {quantity}: must be at least 1",
            details={'quantity': quantity}
        )
        self.quantity = quantity
