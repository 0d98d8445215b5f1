from enum import Enum


class OrderType(str, Enum):
    TABLE = "TABLE"        # Dine-in, bound to a table number
    DELIVERY = "DELIVERY"  # Delivery or counter pickup
