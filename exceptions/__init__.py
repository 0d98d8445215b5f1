"""
Custom exceptions for the POS pricing engine.

This module provides a hierarchy of custom exceptions for consistent error handling
throughout the engine.

Exception Hierarchy:
--------------------
PosEngineException (base)
├── SelectionException
│   ├── SelectionLimitReachedException
│   └── InvalidSelectionException
├── PricingException
│   └── UnresolvablePriceException
├── CartException
│   ├── EmptyCartException
│   ├── CartItemNotFoundException
│   └── InvalidQuantityException
├── ProductException
│   └── ProductNotFoundException
└── OrderException
    └── MissingTableNumberException

Usage:
------
Services raise specific exceptions:
    raise InvalidQuantityException(quantity=0)

The UI layer catches and displays user-friendly messages:
    try:
        state = SelectionService.toggle_flavor(product, state, flavor_id)
    except SelectionLimitReachedException as e:
        show_warning(str(e))
"""

from .base import PosEngineException
from .cart import CartException, EmptyCartException, CartItemNotFoundException, InvalidQuantityException
from .order import OrderException, MissingTableNumberException
from .pricing import PricingException, UnresolvablePriceException
from .product import ProductException, ProductNotFoundException
from .selection import SelectionException, SelectionLimitReachedException, InvalidSelectionException

__all__ = [
    # Base
    'PosEngineException',

    # Cart
    'CartException',
    'EmptyCartException',
    'CartItemNotFoundException',
    'InvalidQuantityException',

    # Order
    'OrderException',
    'MissingTableNumberException',

    # Pricing
    'PricingException',
    'UnresolvablePriceException',

    # Product
    'ProductException',
    'ProductNotFoundException',

    # Selection
    'SelectionException',
    'SelectionLimitReachedException',
    'InvalidSelectionException',
]
