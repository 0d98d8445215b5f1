"""
Pricing-related exceptions.
"""

from .base import PosEngineException


class PricingException(PosEngineException):
    """Base exception for pricing errors."""
    pass


class UnresolvablePriceException(PricingException):
    """Raised when flavors are selected but none of them yields a price."""

    def __init__(self, product_id: str, flavor_ids: list[str], reason: str):
        super().__init__(
            f"Cannot resolve price for product {product_id} (flavors: {', '.join(flavor_ids) or '-'}): {reason}",
            details={'product_id': product_id, 'flavor_ids': flavor_ids, 'reason': reason}
        )
        self.product_id = product_id
        self.flavor_ids = flavor_ids
        self.reason = reason
