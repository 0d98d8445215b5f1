import logging

import config
from exceptions.cart import CartItemNotFoundException
from models.cart import CartDTO, CartLineItemDTO


class CartService:
    """
    In-memory cart mutations for the POS and waiter screens.

    The cart is owned by the calling UI layer and mutated one event at a time.
    """

    @staticmethod
    def add_line(cart: CartDTO, line: CartLineItemDTO) -> CartLineItemDTO:
        """
        Add a confirmed line item to the cart.

        Lines with an identical configuration (product, size, addons, flavors)
        are merged by adding the new line's quantity to the existing one. The
        observation is not part of the identity, so the new line's note is
        dropped on merge.

        Returns:
            The merged line, or the appended one
        """
        for existing in cart.lines:
            if existing.line_key == line.line_key:
                existing.quantity += line.quantity
                logging.info(f"Merged cart line {existing.line_id} ({existing.name}), quantity={existing.quantity}")
                return existing

        cart.lines.append(line)
        logging.debug(f"Added cart line {line.line_id} ({line.name})")
        return line

    @staticmethod
    def get_line(cart: CartDTO, line_id: str) -> CartLineItemDTO:
        for line in cart.lines:
            if line.line_id == line_id:
                return line
        raise CartItemNotFoundException(line_id=line_id)

    @staticmethod
    def adjust_quantity(cart: CartDTO, line_id: str, delta: int) -> CartLineItemDTO | None:
        """
        Change a line's quantity by delta (the +/- buttons).

        The new quantity is floored at 0; reaching 0 removes the line.

        Returns:
            The updated line, or None if it was removed

        Raises:
            CartItemNotFoundException: If no line has this id
        """
        line = CartService.get_line(cart, line_id)
        new_quantity = max(0, line.quantity + delta)
        if new_quantity == 0:
            CartService.remove_line(cart, line_id)
            return None

        line.quantity = new_quantity
        return line

    @staticmethod
    def remove_line(cart: CartDTO, line_id: str) -> None:
        line = CartService.get_line(cart, line_id)
        cart.lines.remove(line)
        logging.debug(f"Removed cart line {line_id}")

    @staticmethod
    def clear(cart: CartDTO) -> None:
        """Empty the cart, e.g. after a successful order submission."""
        cart.lines.clear()

    @staticmethod
    def total(cart: CartDTO) -> float:
        return round(sum(line.total_price for line in cart.lines), config.PRICE_DECIMALS)

    @staticmethod
    def item_count(cart: CartDTO) -> int:
        return sum(line.quantity for line in cart.lines)
