import json
import logging

from enums.order_type import OrderType
from enums.payment_method import PaymentMethod
from exceptions.cart import EmptyCartException
from exceptions.order import MissingTableNumberException
from models.cart import CartDTO, CartLineItemDTO
from models.order import OrderCreatePayloadDTO, OrderItemPayloadDTO


class OrderPayloadService:
    """
    Serializes a cart into the body of the external order-creation endpoint.

    The HTTP call itself belongs to the surrounding application; the order
    service recomputes prices server-side and uses the JSON snapshots to keep
    the names and prices agreed at selection time.
    """

    @staticmethod
    def _snapshot_json(snapshots) -> str | None:
        if not snapshots:
            return None
        return json.dumps([s.model_dump() for s in snapshots])

    @staticmethod
    def build_item(line: CartLineItemDTO) -> OrderItemPayloadDTO:
        size_json = None
        if line.size_snapshot is not None:
            size_json = json.dumps(line.size_snapshot.model_dump())

        return OrderItemPayloadDTO(
            product_id=line.product_id,
            quantity=line.quantity,
            observations=line.observation,
            size_id=line.size_id,
            addons_ids=list(line.addon_ids),
            flavor_ids=list(line.flavor_ids),
            size_json=size_json,
            addons_json=OrderPayloadService._snapshot_json(line.addon_snapshots),
            flavors_json=OrderPayloadService._snapshot_json(line.flavor_snapshots),
        )

    @staticmethod
    def build_payload(
            cart: CartDTO,
            order_type: OrderType,
            payment_method: PaymentMethod | None = None,
            table_number: int | None = None,
            customer_name: str | None = None
    ) -> OrderCreatePayloadDTO:
        """
        Build the order-creation payload from the cart.

        Table orders carry their table number; delivery orders never do.

        Raises:
            EmptyCartException: If the cart has no lines
            MissingTableNumberException: If a TABLE order has no table number
        """
        if not cart.lines:
            raise EmptyCartException()

        order_type = OrderType(order_type)
        if order_type == OrderType.TABLE and table_number is None:
            raise MissingTableNumberException()

        payload = OrderCreatePayloadDTO(
            items=[OrderPayloadService.build_item(line) for line in cart.lines],
            order_type=order_type,
            table_number=table_number if order_type == OrderType.TABLE else None,
            payment_method=payment_method,
            customer_name=customer_name.strip() if customer_name else None,
        )
        logging.info(f"Built {order_type.value} order payload with {len(payload.items)} lines")
        return payload

    @staticmethod
    def to_request_body(payload: OrderCreatePayloadDTO) -> dict:
        """JSON-ready dict with the order service's camelCase field names."""
        return payload.model_dump(mode="json", by_alias=True)
