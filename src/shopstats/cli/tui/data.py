"""
TUI Data - Tabular views of report results for the report browser.
"""

from ...application.reports import ReportResult
from ...core.domain.entities import Order, Product, User
from ..output import format_value


def _product_row(product: Product) -> list[str]:
    return [product.name, f"{product.price:.2f}", product.kind.value]


def _order_label(order: Order) -> str:
    return f"{order.user.name} ({len(order.products)} item(s))"


def _user_names(users: list[User]) -> str:
    return ", ".join(user.name for user in users)


def report_table(result: ReportResult) -> tuple[list[str], list[list[str]]]:
    """
    Convert a report result into table headers and rows.

    Args:
        result: The report to display

    Returns:
        Tuple of (headers, rows), every cell already rendered as text
    """
    value = result.value
    name = result.name

    if name == "codes":
        return ["Code", "Used"], [[code, "yes" if used else "no"] for code, used in value.items()]

    if name in ("most-expensive", "most-popular"):
        return ["Name", "Price", "Kind"], [_product_row(value)]

    if name == "average-age":
        return ["Product", "Average age"], [[str(result.params.get("product")), str(value)]]

    if name == "product-users":
        return ["Product", "Users"], [
            [product.name, _user_names(users)] for product, users in value.items()
        ]

    if name == "sorted-products":
        return ["Name", "Price", "Kind"], [_product_row(product) for product in value]

    if name == "sorted-orders":
        return ["User", "Age", "Items"], [
            [order.user.name, str(order.user.age), str(len(order.products))] for order in value
        ]

    if name == "order-weights":
        return ["Order", "Total weight"], [
            [_order_label(order), str(weight)] for order, weight in value.items()
        ]

    return ["Value"], [[format_value(value)]]
