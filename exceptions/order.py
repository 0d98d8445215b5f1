"""
Order-related exceptions.
"""

from .base import PosEngineException


class OrderException(PosEngineException):
    """Base exception for order-related errors."""
    pass


class MissingTableNumberException(OrderException):
    """Raised when a table order is submitted without a table number."""

    def __init__(self):
        super().__init__("Table orders require a table number")
