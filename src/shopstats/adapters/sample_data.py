"""
Sample Data - The hardcoded demo shop.

Four users, two physical and two virtual products, one order per user.
"""

from datetime import date

from ..core.domain.entities import ShopData
from ..core.domain.factories import (
    ProductFactory,
    create_order,
    create_user,
)


def create_demo_data() -> ShopData:
    """Build the demo users, products and orders."""
    alice = create_user("Alice", 32)
    bob = create_user("Bob", 19)
    charlie = create_user("Charlie", 20)
    john = create_user("John", 27)

    product_a = ProductFactory.create_real_product("Product A", 20.50, 10, 25)
    product_b = ProductFactory.create_real_product("Product B", 50, 6, 17)
    product_c = ProductFactory.create_virtual_product("Product C", 100, "xxx", date(2023, 5, 12))
    product_d = ProductFactory.create_virtual_product("Product D", 81.25, "yyy", date(2024, 6, 20))

    orders = [
        create_order(alice, [product_a, product_c, product_d]),
        create_order(bob, [product_a, product_b]),
        create_order(charlie, [product_a, product_d]),
        create_order(john, [product_c, product_d, product_a, product_b]),
    ]

    return ShopData(
        users=[alice, bob, charlie, john],
        products=[product_a, product_b, product_c, product_d],
        orders=orders,
    )
