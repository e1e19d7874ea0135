"""
Queries - Read-only analytical reports over a list of orders.

No function mutates its input. Queries without a meaningful result
raise NoDataError instead of returning a default value.
"""

from typing import Iterable, Iterator, Sequence

from ..core.domain.entities import Order, Product, RealProduct, User
from ..core.exceptions import NoDataError


def _iter_products(orders: Iterable[Order]) -> Iterator[Product]:
    """Yield every product occurrence, order by order."""
    for order in orders:
        yield from order.products


def most_expensive_product(orders: Sequence[Order]) -> Product:
    """
    Get the product with the highest price across all orders.

    On a price tie the first product seen wins.

    Raises:
        NoDataError: If no order contains any product
    """
    best = None
    for product in _iter_products(orders):
        if best is None or product.price > best.price:
            best = product

    if best is None:
        raise NoDataError("No products in any order")
    return best


def most_popular_product(orders: Sequence[Order]) -> Product:
    """
    Get the product that occurs most often across all orders.

    Every occurrence counts, including repeats inside one order. On a
    tie the product that reached the top count first wins.

    Raises:
        NoDataError: If no order contains any product
    """
    counts: dict[Product, int] = {}
    best = None
    best_count = 0

    for product in _iter_products(orders):
        count = counts.get(product, 0) + 1
        counts[product] = count
        if count > best_count:
            best, best_count = product, count

    if best is None:
        raise NoDataError("No products in any order")
    return best


def average_age(product: Product, orders: Sequence[Order]) -> float:
    """
    Get the mean age of the users whose orders contain a product.

    An order counts once even if it lists the product several times.

    Raises:
        NoDataError: If no order contains the product
    """
    ages = [order.user.age for order in orders if order.contains(product)]
    if not ages:
        raise NoDataError(f"No order contains product '{product.name}'")
    return sum(ages) / len(ages)


def product_user_map(orders: Sequence[Order]) -> dict[Product, list[User]]:
    """
    Map each ordered product to the users who ordered it.

    Keys appear in order of first occurrence. A user is listed once per
    order containing the product, so a user with two such orders appears
    twice.
    """
    result: dict[Product, list[User]] = {}
    for order in orders:
        seen_in_order: set[Product] = set()
        for product in order.products:
            if product in seen_in_order:
                continue
            seen_in_order.add(product)
            result.setdefault(product, []).append(order.user)
    return result


def sort_products_by_price(products: Iterable[Product]) -> list[Product]:
    """Sort products by ascending price, keeping equal prices in input order."""
    return sorted(products, key=lambda product: product.price)


def sort_orders_by_user_age_desc(orders: Iterable[Order]) -> list[Order]:
    """Sort orders by descending user age, keeping equal ages in input order."""
    return sorted(orders, key=lambda order: order.user.age, reverse=True)


def weight_per_order(orders: Sequence[Order]) -> dict[Order, int]:
    """
    Map each order to the total weight of its physical products.

    Virtual products weigh nothing; an order without physical products
    maps to 0.
    """
    return {
        order: sum(
            product.weight
            for product in order.products
            if isinstance(product, RealProduct)
        )
        for order in orders
    }
