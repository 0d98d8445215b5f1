"""
Pytest configuration and fixtures for tests.

This file is automatically loaded by pytest and provides a small in-memory
catalog shared by all test modules: pizza products with their flavors and a
burger with single- and multi-select addon groups.
"""

import sys
import os

import pytest

# Add parent directory to Python path so tests can import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from models.cart import CartDTO
from models.product import (
    AddonDTO,
    AddonGroupDTO,
    PizzaConfigDTO,
    PizzaSizeConfigDTO,
    ProductDTO,
    SizeDTO,
)


# ============================================================================
# Pizza Fixtures
# ============================================================================

@pytest.fixture
def size_large():
    return SizeDTO(id="s1", name="Large", price=40.0)


@pytest.fixture
def size_medium():
    return SizeDTO(id="s2", name="Medium", price=32.0)


@pytest.fixture
def mussarela():
    """Flavor without own sizes (always base price)."""
    return ProductDTO(id="f1", name="Mussarela", price=35.0, category_id="cat1")


@pytest.fixture
def calabresa():
    """Flavor with its own "Large" size."""
    return ProductDTO(
        id="f2",
        name="Calabresa",
        price=38.0,
        category_id="cat1",
        sizes=[SizeDTO(id="f2-large", name="Large", price=42.0)]
    )


@pytest.fixture
def portuguesa():
    return ProductDTO(id="f3", name="Portuguesa", price=39.0, category_id="cat1")


@pytest.fixture
def flavors(mussarela, calabresa, portuguesa):
    return [mussarela, calabresa, portuguesa]


@pytest.fixture
def pizza_grande(size_large):
    """Single-flavor pizza: max 1 flavor, HIGHER rule, no per-size override."""
    return ProductDTO(
        id="p1",
        name="Pizza Grande",
        price=0.0,
        category_id="pizzas",
        sizes=[size_large],
        pizza_config=PizzaConfigDTO(max_flavors=1, price_rule="higher", flavor_category_id="cat1")
    )


@pytest.fixture
def pizza_multi(size_large, size_medium):
    """Multi-flavor pizza: 2 flavors by default, 4 on "Large"."""
    return ProductDTO(
        id="p2",
        name="Pizza",
        price=0.0,
        category_id="pizzas",
        sizes=[size_medium, size_large],
        pizza_config=PizzaConfigDTO(
            max_flavors=2,
            price_rule="average",
            flavor_category_id="cat1",
            sizes={"Large": PizzaSizeConfigDTO(max_flavors=4)}
        )
    )


# ============================================================================
# Burger / Plain Product Fixtures
# ============================================================================

@pytest.fixture
def burger():
    """Sized product with a multi-select and a single-select addon group."""
    return ProductDTO(
        id="b1",
        name="Burger",
        price=25.0,
        category_id="burgers",
        sizes=[SizeDTO(id="b1-regular", name="Regular", price=30.0)],
        addon_groups=[
            AddonGroupDTO(
                id="g1",
                name="Extras",
                type="multi",
                addons=[
                    AddonDTO(id="a1", name="Bacon", price=3.5),
                    AddonDTO(id="a2", name="Cheddar", price=2.0),
                ]
            ),
            AddonGroupDTO(
                id="g2",
                name="Bread",
                type="single",
                addons=[
                    AddonDTO(id="a3", name="White", price=0.0),
                    AddonDTO(id="a4", name="Brioche", price=1.5),
                ]
            ),
        ]
    )


@pytest.fixture
def soda():
    """Plain product: no sizes, addons or flavors."""
    return ProductDTO(id="d1", name="Soda", price=6.0, category_id="drinks")


@pytest.fixture
def catalog(pizza_grande, pizza_multi, burger, soda, flavors):
    unavailable = ProductDTO(
        id="f9", name="Atum", price=41.0, category_id="cat1", is_available=False
    )
    return [pizza_grande, pizza_multi, burger, soda, *flavors, unavailable]


@pytest.fixture
def cart():
    return CartDTO()
