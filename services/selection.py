import logging

import config
from enums.addon_selection_mode import AddonSelectionMode
from exceptions.cart import InvalidQuantityException
from exceptions.selection import SelectionLimitReachedException
from models.product import ProductDTO
from models.selection import SelectionStateDTO
from services.catalog import CatalogService
from services.pricing import PricingService


class SelectionService:
    """
    State transitions of the add-to-cart dialog.

    Every method takes the current SelectionStateDTO and returns a new one;
    events must be applied in the order the user performed them, since flavor
    order ends up in the line item name.
    """

    @staticmethod
    def start(product: ProductDTO) -> SelectionStateDTO:
        return SelectionStateDTO(
            product_id=product.id,
            size_id=CatalogService.default_size_id(product)
        )

    @staticmethod
    def select_size(product: ProductDTO, state: SelectionStateDTO, size_id: str) -> SelectionStateDTO:
        """
        Select a size and drop any chosen flavors.

        Flavor prices are keyed by size name, so flavors picked for the previous
        size are not valid for the new one.

        Raises:
            InvalidSelectionException: If size_id is not one of the product's sizes
        """
        CatalogService.find_size(product, size_id)
        return state.model_copy(update={"size_id": size_id, "flavor_ids": ()})

    @staticmethod
    def toggle_addon(product: ProductDTO, state: SelectionStateDTO, addon_id: str) -> SelectionStateDTO:
        """
        Toggle an addon honoring its group's selection mode.

        SINGLE groups behave like radio buttons: picking an addon replaces any
        other addon of the same group, tapping the selected one keeps it.
        MULTI groups toggle independently. Other groups are never affected.

        Raises:
            InvalidSelectionException: If the addon does not belong to the product
        """
        group = CatalogService.find_addon_group(product, addon_id)

        if group.type == AddonSelectionMode.SINGLE:
            group_ids = {addon.id for addon in group.addons}
            others = tuple(a for a in state.addon_ids if a not in group_ids)
            return state.model_copy(update={"addon_ids": (*others, addon_id)})

        if addon_id in state.addon_ids:
            addon_ids = tuple(a for a in state.addon_ids if a != addon_id)
        else:
            addon_ids = (*state.addon_ids, addon_id)
        return state.model_copy(update={"addon_ids": addon_ids})

    @staticmethod
    def toggle_flavor(product: ProductDTO, state: SelectionStateDTO, flavor_id: str) -> SelectionStateDTO:
        """
        Toggle a flavor using the effective max for the selected size.

        Products without pizza config have no flavors; the state is returned as is.

        Raises:
            SelectionLimitReachedException: Selection is full and max > 1
        """
        if product.pizza_config is None:
            logging.debug(f"Ignoring flavor {flavor_id} for non-pizza product {product.id}")
            return state

        size = CatalogService.find_size(product, state.size_id)
        max_flavors = PricingService.resolve_effective_max_flavors(
            product, size.name if size is not None else None
        )
        try:
            flavor_ids = PricingService.toggle_flavor(state.flavor_ids, flavor_id, max_flavors)
        except SelectionLimitReachedException:
            logging.info(f"Flavor limit {max_flavors} reached for product {product.id}")
            raise
        return state.model_copy(update={"flavor_ids": flavor_ids})

    @staticmethod
    def set_quantity(state: SelectionStateDTO, quantity: int) -> SelectionStateDTO:
        if quantity < 1:
            raise InvalidQuantityException(quantity=quantity)
        return state.model_copy(update={"quantity": quantity})

    @staticmethod
    def set_observation(state: SelectionStateDTO, observation: str) -> SelectionStateDTO:
        return state.model_copy(update={"observation": (observation or "").strip()})

    @staticmethod
    def preview_total(product: ProductDTO, state: SelectionStateDTO, flavors: list[ProductDTO]) -> float:
        """
        Total shown on the dialog's confirm button (unit price × quantity).

        Raises:
            UnresolvablePriceException: If flavors are selected but none has a price
        """
        selected_size = CatalogService.find_size(product, state.size_id)
        selected_flavors = CatalogService.find_flavors(product, flavors, state.flavor_ids)
        price_rule = product.pizza_config.price_rule if product.pizza_config is not None else None
        unit_price = PricingService.compute_unit_price(
            product, selected_size, state.addon_ids, selected_flavors, price_rule
        )
        return round(unit_price * state.quantity, config.PRICE_DECIMALS)
