"""
Selection-related exceptions (sizes, addons, flavors).
"""

from .base import PosEngineException


class SelectionException(PosEngineException):
    """Base exception for selection errors."""
    pass


class SelectionLimitReachedException(SelectionException):
    """
    Raised when a flavor is added to a selection that is already full.

    Non-fatal: the selection is left unchanged and the UI shows a warning.
    """

    def __init__(self, flavor_id: str, max_flavors: int):
        super().__init__(
            f"Flavor limit reached: at most {max_flavors} flavors, cannot add {flavor_id}",
            details={'flavor_id': flavor_id, 'max_flavors': max_flavors}
        )
        self.flavor_id = flavor_id
        self.max_flavors = max_flavors


class InvalidSelectionException(SelectionException):
    """Raised when a selected size/addon/flavor does not belong to the product."""

    def __init__(self, product_id: str, kind: str, option_id: str):
        super().__init__(
            f"Invalid {kind} {option_id} for product {product_id}",
            details={'product_id': product_id, 'kind': kind, 'option_id': option_id}
        )
        self.product_id = product_id
        self.kind = kind
        self.option_id = option_id
