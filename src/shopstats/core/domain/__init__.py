"""
Domain - Entities, factories and events.
"""

from .entities import ProductKind, User, Product, RealProduct, VirtualProduct, Order, ShopData
from .factories import (
    ProductFactory,
    create_user,
    create_real_product,
    create_virtual_product,
    create_order,
)
from .events import (
    DomainEvent,
    CodeMarkedUsed,
    ReportsStarted,
    ReportGenerated,
    ReportFailed,
    ReportsCompleted,
    EventBus,
)

__all__ = [
    "ProductKind",
    "User",
    "Product",
    "RealProduct",
    "VirtualProduct",
    "Order",
    "ShopData",
    "ProductFactory",
    "create_user",
    "create_real_product",
    "create_virtual_product",
    "create_order",
    "DomainEvent",
    "CodeMarkedUsed",
    "ReportsStarted",
    "ReportGenerated",
    "ReportFailed",
    "ReportsCompleted",
    "EventBus",
]
