from pydantic import BaseModel, ConfigDict, Field

from enums.order_type import OrderType
from enums.payment_method import PaymentMethod


class OrderItemPayloadDTO(BaseModel):
    """One line of the POST /orders body."""
    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(alias="productId")
    quantity: int = Field(ge=1)
    observations: str = ""
    size_id: str | None = Field(default=None, alias="sizeId")
    addons_ids: list[str] = Field(default_factory=list, alias="addonsIds")
    flavor_ids: list[str] = Field(default_factory=list, alias="flavorIds")
    # JSON-encoded snapshots captured at selection time
    size_json: str | None = Field(default=None, alias="sizeJson")
    addons_json: str | None = Field(default=None, alias="addonsJson")
    flavors_json: str | None = Field(default=None, alias="flavorsJson")


class OrderCreatePayloadDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    items: list[OrderItemPayloadDTO]
    order_type: OrderType = Field(alias="orderType")
    table_number: int | None = Field(default=None, alias="tableNumber")
    payment_method: PaymentMethod | None = Field(default=None, alias="paymentMethod")
    customer_name: str | None = Field(default=None, alias="customerName")
