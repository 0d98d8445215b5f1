"""
Models Package

Pydantic DTOs for catalog records, the add-to-cart selection, cart lines
and the order-creation payload.
"""

from models.product import SizeDTO, AddonDTO, AddonGroupDTO, PizzaSizeConfigDTO, PizzaConfigDTO, ProductDTO
from models.selection import SelectionStateDTO
from models.cart import SnapshotDTO, CartLineItemDTO, CartDTO
from models.order import OrderItemPayloadDTO, OrderCreatePayloadDTO

__all__ = [
    'SizeDTO',
    'AddonDTO',
    'AddonGroupDTO',
    'PizzaSizeConfigDTO',
    'PizzaConfigDTO',
    'ProductDTO',
    'SelectionStateDTO',
    'SnapshotDTO',
    'CartLineItemDTO',
    'CartDTO',
    'OrderItemPayloadDTO',
    'OrderCreatePayloadDTO',
]
