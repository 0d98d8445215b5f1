"""
Unit Tests: CartService CRUD Operations

Tests for services/cart.py covering:
- add_line() - Append or merge identical configurations
- adjust_quantity() - +/- buttons, deletion at zero
- remove_line() / clear()
- total() / item_count()
"""

import pytest

from exceptions.cart import CartItemNotFoundException
from models.cart import CartLineItemDTO
from services.cart import CartService
from services.pricing import PricingService


@pytest.fixture
def burger_line(burger):
    """Burger with bacon + cheddar on the regular size."""
    def _build(observation: str = "", addon_ids=("a1", "a2")):
        return PricingService.build_line_item(
            burger, burger.sizes[0], list(addon_ids), [], quantity=1, observation=observation
        )
    return _build


@pytest.fixture
def soda_line(soda):
    return PricingService.build_line_item(soda, None, [], [], quantity=1)


class TestAddLine:
    """Test add_line() merge policy."""

    def test_append_new_line(self, cart, soda_line):
        result = CartService.add_line(cart, soda_line)

        assert result is soda_line
        assert len(cart.lines) == 1

    def test_identical_configuration_merges(self, cart, burger_line):
        """Same product+size+addons+flavors twice -> one line with quantity 2."""
        first = CartService.add_line(cart, burger_line(observation="no onions"))
        merged = CartService.add_line(cart, burger_line(observation="extra sauce"))

        assert len(cart.lines) == 1
        assert merged is first
        assert merged.quantity == 2
        # Observation is not part of the identity; the second note is dropped
        assert merged.observation == "no onions"

    def test_addon_order_does_not_matter(self, cart, burger_line):
        CartService.add_line(cart, burger_line(addon_ids=("a1", "a2")))
        CartService.add_line(cart, burger_line(addon_ids=("a2", "a1")))

        assert len(cart.lines) == 1
        assert cart.lines[0].quantity == 2

    def test_different_configuration_appends(self, cart, burger_line):
        CartService.add_line(cart, burger_line(addon_ids=("a1",)))
        CartService.add_line(cart, burger_line(addon_ids=("a2",)))

        assert len(cart.lines) == 2

    def test_different_flavors_append(self, cart, pizza_multi, size_large, mussarela, calabresa):
        first = PricingService.build_line_item(pizza_multi, size_large, [], [mussarela], quantity=1)
        second = PricingService.build_line_item(pizza_multi, size_large, [], [calabresa], quantity=1)

        CartService.add_line(cart, first)
        CartService.add_line(cart, second)

        assert len(cart.lines) == 2

    def test_merge_adds_incoming_quantity(self, cart, burger):
        """Confirming 3 units of a configuration already held twice -> 5 units."""
        existing = PricingService.build_line_item(burger, burger.sizes[0], ["a1"], [], quantity=2)
        incoming = PricingService.build_line_item(burger, burger.sizes[0], ["a1"], [], quantity=3)

        CartService.add_line(cart, existing)
        merged = CartService.add_line(cart, incoming)

        assert len(cart.lines) == 1
        assert merged.quantity == 5
        assert CartService.item_count(cart) == 5

    def test_separator_characters_in_ids_do_not_collide(self, cart):
        """Product "p" with size "x-y" is not product "p-x" with size "y"."""
        first = CartLineItemDTO(line_id="l1", product_id="p", name="P", unit_price=1.0, size_id="x-y")
        second = CartLineItemDTO(line_id="l2", product_id="p-x", name="PX", unit_price=1.0, size_id="y")

        CartService.add_line(cart, first)
        CartService.add_line(cart, second)

        assert len(cart.lines) == 2

    def test_merge_keeps_frozen_price(self, cart, burger_line):
        CartService.add_line(cart, burger_line())
        CartService.add_line(cart, burger_line())

        assert cart.lines[0].unit_price == 35.5
        assert cart.lines[0].total_price == 71.0


class TestAdjustQuantity:
    """Test adjust_quantity() floor and deletion."""

    def test_increment(self, cart, soda_line):
        CartService.add_line(cart, soda_line)

        line = CartService.adjust_quantity(cart, soda_line.line_id, 1)

        assert line.quantity == 2

    def test_decrement_to_zero_removes_line(self, cart, soda_line, burger_line):
        CartService.add_line(cart, soda_line)
        CartService.add_line(cart, burger_line())
        assert len(cart.lines) == 2

        result = CartService.adjust_quantity(cart, soda_line.line_id, -1)

        assert result is None
        assert len(cart.lines) == 1
        assert all(line.line_id != soda_line.line_id for line in cart.lines)

    def test_large_negative_delta_floors_at_zero(self, cart, soda_line):
        CartService.add_line(cart, soda_line)
        CartService.adjust_quantity(cart, soda_line.line_id, 2)

        assert CartService.adjust_quantity(cart, soda_line.line_id, -10) is None
        assert cart.lines == []

    def test_unknown_line(self, cart):
        with pytest.raises(CartItemNotFoundException) as exc_info:
            CartService.adjust_quantity(cart, "missing", 1)
        assert exc_info.value.line_id == "missing"


class TestRemoveAndClear:

    def test_remove_line(self, cart, soda_line):
        CartService.add_line(cart, soda_line)
        CartService.remove_line(cart, soda_line.line_id)
        assert cart.lines == []

    def test_remove_unknown_line(self, cart):
        with pytest.raises(CartItemNotFoundException):
            CartService.remove_line(cart, "missing")

    def test_clear(self, cart, soda_line, burger_line):
        CartService.add_line(cart, soda_line)
        CartService.add_line(cart, burger_line())

        CartService.clear(cart)

        assert cart.lines == []


class TestTotals:

    def test_empty_cart(self, cart):
        assert CartService.total(cart) == 0
        assert CartService.item_count(cart) == 0

    def test_total_and_count(self, cart, soda_line, burger_line):
        CartService.add_line(cart, soda_line)           # 6.00
        CartService.add_line(cart, burger_line())       # 35.50
        CartService.add_line(cart, burger_line())       # merged -> 2 × 35.50

        assert CartService.total(cart) == 77.0
        assert CartService.item_count(cart) == 3
