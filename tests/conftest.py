"""Shared fixtures."""

from datetime import date

import pytest

from shopstats.core.domain import (
    ShopData,
    create_order,
    create_real_product,
    create_user,
    create_virtual_product,
)
from shopstats.adapters.sample_data import create_demo_data


@pytest.fixture
def alice():
    return create_user("Alice", 32)


@pytest.fixture
def bob():
    return create_user("Bob", 19)


@pytest.fixture
def product_a():
    return create_real_product("A", 20.50, 10, 25)


@pytest.fixture
def product_c():
    return create_virtual_product("C", 100, "xxx", date(2023, 5, 12))


@pytest.fixture
def scenario(alice, bob, product_a, product_c):
    """Alice orders A and C, Bob orders only A."""
    alice_order = create_order(alice, [product_a, product_c])
    bob_order = create_order(bob, [product_a])
    return ShopData(
        users=[alice, bob],
        products=[product_a, product_c],
        orders=[alice_order, bob_order],
    )


@pytest.fixture
def demo():
    return create_demo_data()
