"""
Application Layer - Queries, the code registry and report orchestration.

This layer contains:
- queries: Read-only analytical reports over orders
- codes: Virtual product code registry
- reports: Report runner executing the queries in sequence
"""

from .codes import CodeRegistry
from .queries import (
    most_expensive_product,
    most_popular_product,
    average_age,
    product_user_map,
    sort_products_by_price,
    sort_orders_by_user_age_desc,
    weight_per_order,
)
from .reports import ReportRunner, ReportRun, ReportResult, REPORT_TITLES

__all__ = [
    "CodeRegistry",
    "most_expensive_product",
    "most_popular_product",
    "average_age",
    "product_user_map",
    "sort_products_by_price",
    "sort_orders_by_user_age_desc",
    "weight_per_order",
    "ReportRunner",
    "ReportRun",
    "ReportResult",
    "REPORT_TITLES",
]
