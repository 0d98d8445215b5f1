import logging
import math
import uuid

import config
from enums.price_rule import PriceRule
from exceptions.cart import InvalidQuantityException
from exceptions.pricing import UnresolvablePriceException
from exceptions.selection import SelectionLimitReachedException
from models.cart import CartLineItemDTO, SnapshotDTO
from models.product import AddonGroupDTO, ProductDTO, SizeDTO
from models.selection import SelectionStateDTO
from services.catalog import CatalogService
from utils.price_format import format_price


class PricingService:
    """Pure price composition for POS and waiter line items."""

    @staticmethod
    def resolve_effective_max_flavors(product: ProductDTO, selected_size_name: str | None) -> int:
        """
        Maximum number of flavors allowed for the current size.

        Precedence:
        1. pizza_config.sizes[selected_size_name].max_flavors
        2. pizza_config.max_flavors
        3. 1

        Missing, zero and negative values fall through to the next level,
        so the result is always >= 1.
        """
        pizza_config = product.pizza_config
        if pizza_config is None:
            return 1

        if selected_size_name is not None:
            size_override = pizza_config.sizes.get(selected_size_name)
            if size_override is not None and size_override.max_flavors and size_override.max_flavors >= 1:
                return size_override.max_flavors

        if pizza_config.max_flavors and pizza_config.max_flavors >= 1:
            return pizza_config.max_flavors

        return 1

    @staticmethod
    def toggle_flavor(
            current_ids: tuple[str, ...],
            candidate_id: str,
            max_flavors: int
    ) -> tuple[str, ...]:
        """
        Toggle a flavor in an ordered selection.

        Rules:
        1. Already selected -> removed (always allowed)
        2. Below max -> appended, keeping selection order
        3. Full and max == 1 -> replaced (single-flavor products act as a radio group)
        4. Full and max > 1 -> rejected

        Args:
            current_ids: Currently selected flavor ids, in selection order
            candidate_id: Flavor the user tapped
            max_flavors: Result of resolve_effective_max_flavors()

        Returns:
            New selection tuple

        Raises:
            SelectionLimitReachedException: Rule 4; the caller keeps its current selection
        """
        if candidate_id in current_ids:
            return tuple(flavor_id for flavor_id in current_ids if flavor_id != candidate_id)

        if len(current_ids) < max_flavors:
            return (*current_ids, candidate_id)

        if max_flavors == 1:
            return (candidate_id,)

        raise SelectionLimitReachedException(flavor_id=candidate_id, max_flavors=max_flavors)

    @staticmethod
    def resolve_flavor_price(flavor: ProductDTO, selected_size: SizeDTO | None) -> float:
        """
        Price of one flavor for the parent product's selected size.

        Flavor sizes and parent sizes are separate catalog records, so they are
        matched by name, not by id. No match (or no size selected) falls back
        to the flavor's base price.
        """
        if selected_size is not None:
            for size in flavor.sizes:
                if size.name == selected_size.name:
                    return size.price
        return flavor.price

    @staticmethod
    def compute_base_price(
            product: ProductDTO,
            selected_size: SizeDTO | None,
            selected_flavors: list[ProductDTO],
            price_rule: PriceRule | str | None
    ) -> float:
        """
        Base price before addons.

        Without flavors the selected size price wins over the product price.
        With flavors the size's own price is ignored and the flavor prices are
        combined by the price rule (HIGHER = max, AVERAGE = mean). Missing or
        unknown rules are treated as HIGHER.

        Example (rule HIGHER, size "Large"):
            Mussarela 35 (no sizes), Calabresa {Large: 42} -> 42

        Raises:
            UnresolvablePriceException: If flavors are selected but none yields a finite price
        """
        if not selected_flavors:
            if selected_size is not None:
                return selected_size.price
            return product.price

        flavor_prices = [
            price for price in (
                PricingService.resolve_flavor_price(flavor, selected_size) for flavor in selected_flavors
            )
            if price is not None and math.isfinite(price)
        ]
        if not flavor_prices:
            flavor_ids = [flavor.id for flavor in selected_flavors]
            logging.warning(f"No resolvable flavor price for product {product.id}, flavors {flavor_ids}")
            raise UnresolvablePriceException(
                product_id=product.id,
                flavor_ids=flavor_ids,
                reason="no selected flavor has a valid price"
            )

        rule = PriceRule.from_string(price_rule)
        if rule == PriceRule.AVERAGE:
            return sum(flavor_prices) / len(flavor_prices)
        return max(flavor_prices)

    @staticmethod
    def compute_addons_surcharge(addon_groups: list[AddonGroupDTO], selected_addon_ids) -> float:
        """Sum of the prices of every selected addon, across all groups."""
        selected = set(selected_addon_ids)
        return sum(
            addon.price
            for group in addon_groups
            for addon in group.addons
            if addon.id in selected
        )

    @staticmethod
    def compute_unit_price(
            product: ProductDTO,
            selected_size: SizeDTO | None,
            selected_addon_ids,
            selected_flavors: list[ProductDTO],
            price_rule: PriceRule | str | None
    ) -> float:
        base_price = PricingService.compute_base_price(product, selected_size, selected_flavors, price_rule)
        surcharge = PricingService.compute_addons_surcharge(product.addon_groups, selected_addon_ids)
        unit_price = round(base_price + surcharge, config.PRICE_DECIMALS)
        logging.debug(
            f"Unit price for product {product.id}: base={base_price} + addons={surcharge} = {unit_price}"
        )
        return unit_price

    @staticmethod
    def compose_display_name(
            product: ProductDTO,
            selected_size: SizeDTO | None,
            selected_flavors: list[ProductDTO]
    ) -> str:
        """
        Examples:
            "Pizza"
            "Pizza (Large)"
            "Pizza (Large) [Mussarela/Calabresa]"
        """
        name = product.name
        if selected_size is not None:
            name += f" ({selected_size.name})"
        if selected_flavors:
            name += f" [{'/'.join(flavor.name for flavor in selected_flavors)}]"
        return name

    @staticmethod
    def build_line_item(
            product: ProductDTO,
            selected_size: SizeDTO | None,
            selected_addon_ids,
            selected_flavors: list[ProductDTO],
            quantity: int,
            observation: str = "",
            line_id: str | None = None
    ) -> CartLineItemDTO:
        """
        Build a cart-ready line item with the price frozen at this moment.

        Does not touch any cart; appending is the caller's job (CartService.add_line).

        Args:
            product: Catalog product
            selected_size: Chosen size of the product, or None
            selected_addon_ids: Chosen addon ids (duplicates ignored)
            selected_flavors: Chosen flavor products, in selection order
            quantity: Number of units, at least 1
            observation: Free-text note for the kitchen
            line_id: Optional caller-supplied id (defaults to a fresh uuid4 hex)

        Returns:
            CartLineItemDTO with size/addon/flavor snapshots

        Raises:
            InvalidQuantityException: If quantity < 1
            InvalidSelectionException: If an addon id does not belong to the product
            UnresolvablePriceException: If flavors are selected but none has a price
        """
        if quantity < 1:
            raise InvalidQuantityException(quantity=quantity)

        addons = CatalogService.find_addons(product, selected_addon_ids)
        addon_ids = [addon.id for addon in addons]
        price_rule = product.pizza_config.price_rule if product.pizza_config is not None else None

        unit_price = PricingService.compute_unit_price(
            product, selected_size, addon_ids, selected_flavors, price_rule
        )
        name = PricingService.compose_display_name(product, selected_size, selected_flavors)

        size_snapshot = None
        if selected_size is not None:
            size_snapshot = SnapshotDTO(id=selected_size.id, name=selected_size.name, price=selected_size.price)

        return CartLineItemDTO(
            line_id=line_id or uuid.uuid4().hex,
            product_id=product.id,
            name=name,
            unit_price=unit_price,
            quantity=quantity,
            observation=observation.strip(),
            size_id=selected_size.id if selected_size is not None else None,
            addon_ids=addon_ids,
            flavor_ids=[flavor.id for flavor in selected_flavors],
            size_snapshot=size_snapshot,
            addon_snapshots=[SnapshotDTO(id=a.id, name=a.name, price=a.price) for a in addons],
            flavor_snapshots=[
                SnapshotDTO(
                    id=flavor.id,
                    name=flavor.name,
                    price=PricingService.resolve_flavor_price(flavor, selected_size)
                )
                for flavor in selected_flavors
            ],
        )

    @staticmethod
    def build_line_item_from_selection(
            product: ProductDTO,
            state: SelectionStateDTO,
            flavors: list[ProductDTO],
            line_id: str | None = None
    ) -> CartLineItemDTO:
        """
        Resolve a SelectionStateDTO against the catalog and build its line item.

        Args:
            product: Product the selection belongs to
            state: Current selection
            flavors: Flavors offered for the product (CatalogService.available_flavors)
            line_id: Optional caller-supplied line id
        """
        selected_size = CatalogService.find_size(product, state.size_id)
        selected_flavors = CatalogService.find_flavors(product, flavors, state.flavor_ids)
        return PricingService.build_line_item(
            product,
            selected_size,
            state.addon_ids,
            selected_flavors,
            state.quantity,
            state.observation,
            line_id=line_id
        )

    @staticmethod
    def format_line_breakdown(line: CartLineItemDTO) -> str:
        """
        Format a cart line for display in the cart panel.

        Example output:
            ```
            2 × R$ 35.50 = R$ 71.00
            ```
        """
        return f"{line.quantity} × {format_price(line.unit_price)} = {format_price(line.total_price)}"
