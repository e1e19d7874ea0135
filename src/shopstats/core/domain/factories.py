"""
Entity Factories - Controlled construction of domain entities.

Product factories return the common Product capability; callers only
need the concrete variant when they inspect variant-specific fields.
"""

from datetime import date
from typing import Iterable

from .entities import Order, Product, RealProduct, User, VirtualProduct


def create_user(name: str, age: int) -> User:
    """Create a new user."""
    return User(name=name, age=age)


def create_real_product(name: str, price: float, size: int, weight: int) -> Product:
    """Create a physical product."""
    return RealProduct(name=name, price=price, size=size, weight=weight)


def create_virtual_product(
    name: str,
    price: float,
    code: str,
    expiration_date: date,
) -> Product:
    """Create a digital product identified by a redemption code."""
    return VirtualProduct(
        name=name,
        price=price,
        code=code,
        expiration_date=expiration_date,
    )


def create_order(user: User, products: Iterable[Product]) -> Order:
    """
    Create a new order.

    Products are stored in the given order, repeats included.
    """
    return Order(user=user, products=tuple(products))


class ProductFactory:
    """Groups the product constructors behind one name."""

    create_real_product = staticmethod(create_real_product)
    create_virtual_product = staticmethod(create_virtual_product)
