# Cart lines live only in memory on the POS/waiter device until checkout.
# Prices are frozen at "confirm" time: snapshots carry id/name/price of the chosen
# size, addons and flavors so the submitted order reflects the agreed price even
# if the catalog changes afterwards.
from pydantic import BaseModel, ConfigDict, Field, field_validator

import config
from exceptions.cart import InvalidQuantityException


class SnapshotDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    price: float


class CartLineItemDTO(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    line_id: str
    product_id: str
    name: str
    unit_price: float
    quantity: int = 1
    observation: str = ""
    size_id: str | None = None
    addon_ids: list[str] = Field(default_factory=list)
    flavor_ids: list[str] = Field(default_factory=list)
    size_snapshot: SnapshotDTO | None = None
    addon_snapshots: list[SnapshotDTO] = Field(default_factory=list)
    flavor_snapshots: list[SnapshotDTO] = Field(default_factory=list)

    @field_validator('quantity')
    @classmethod
    def validate_quantity(cls, v):
        # Reaching 0 is a deletion handled by CartService, never a stored state
        if v < 1:
            raise InvalidQuantityException(quantity=v)
        return v

    @property
    def line_key(self) -> tuple:
        """Identity used to merge identical configurations (observation excluded)."""
        return (
            self.product_id,
            self.size_id,
            tuple(sorted(self.addon_ids)),
            tuple(sorted(self.flavor_ids)),
        )

    @property
    def total_price(self) -> float:
        return round(self.unit_price * self.quantity, config.PRICE_DECIMALS)


class CartDTO(BaseModel):
    lines: list[CartLineItemDTO] = Field(default_factory=list)
