import logging

from exceptions.product import ProductNotFoundException
from exceptions.selection import InvalidSelectionException
from models.product import AddonDTO, AddonGroupDTO, ProductDTO, SizeDTO


class CatalogService:
    """Lookups over an in-memory catalog snapshot. Never fetches anything."""

    @staticmethod
    def get_product(product_id: str, catalog: list[ProductDTO]) -> ProductDTO:
        """
        Find product by id in the catalog snapshot.

        Raises:
            ProductNotFoundException: If no product has this id
        """
        for product in catalog:
            if product.id == product_id:
                return product
        raise ProductNotFoundException(product_id=product_id)

    @staticmethod
    def available_flavors(product: ProductDTO, catalog: list[ProductDTO]) -> list[ProductDTO]:
        """
        Flavors offered for a pizza product.

        Flavors are the available products of the category referenced by
        pizza_config.flavor_category_id, in catalog order.

        Returns:
            List of flavor products (empty for non-pizza products)
        """
        if product.pizza_config is None or not product.pizza_config.flavor_category_id:
            return []

        category_id = product.pizza_config.flavor_category_id
        flavors = [p for p in catalog if p.category_id == category_id and p.is_available]
        if not flavors:
            logging.warning(f"Pizza product {product.id} has no available flavors in category {category_id}")
        return flavors

    @staticmethod
    def default_size_id(product: ProductDTO) -> str | None:
        """The POS preselects the lowest-order size when the dialog opens (first listed on ties)."""
        if not product.sizes:
            return None
        return min(product.sizes, key=lambda size: size.order).id

    @staticmethod
    def find_size(product: ProductDTO, size_id: str | None) -> SizeDTO | None:
        """
        Resolve a size id against the product's own sizes.

        Returns:
            SizeDTO, or None when size_id is None

        Raises:
            InvalidSelectionException: If the id is not one of the product's sizes
        """
        if size_id is None:
            return None
        for size in product.sizes:
            if size.id == size_id:
                return size
        raise InvalidSelectionException(product_id=product.id, kind="size", option_id=size_id)

    @staticmethod
    def find_addon_group(product: ProductDTO, addon_id: str) -> AddonGroupDTO:
        """
        Group that contains the given addon.

        Raises:
            InvalidSelectionException: If no group of the product contains the addon
        """
        for group in product.addon_groups:
            for addon in group.addons:
                if addon.id == addon_id:
                    return group
        raise InvalidSelectionException(product_id=product.id, kind="addon", option_id=addon_id)

    @staticmethod
    def find_addons(product: ProductDTO, addon_ids: list[str] | tuple[str, ...]) -> list[AddonDTO]:
        """
        Resolve addon ids in selection order. Duplicate ids are resolved once.

        Raises:
            InvalidSelectionException: If an id does not belong to any addon group
        """
        addons_by_id = {
            addon.id: addon
            for group in product.addon_groups
            for addon in group.addons
        }
        resolved = []
        seen = set()
        for addon_id in addon_ids:
            if addon_id in seen:
                continue
            addon = addons_by_id.get(addon_id)
            if addon is None:
                raise InvalidSelectionException(product_id=product.id, kind="addon", option_id=addon_id)
            seen.add(addon_id)
            resolved.append(addon)
        return resolved

    @staticmethod
    def find_flavors(
            product: ProductDTO,
            flavors: list[ProductDTO],
            flavor_ids: list[str] | tuple[str, ...]
    ) -> list[ProductDTO]:
        """
        Resolve flavor ids in selection order against the offered flavors.

        Raises:
            InvalidSelectionException: If an id is not among the offered flavors
        """
        flavors_by_id = {flavor.id: flavor for flavor in flavors}
        resolved = []
        for flavor_id in flavor_ids:
            flavor = flavors_by_id.get(flavor_id)
            if flavor is None:
                raise InvalidSelectionException(product_id=product.id, kind="flavor", option_id=flavor_id)
            resolved.append(flavor)
        return resolved
