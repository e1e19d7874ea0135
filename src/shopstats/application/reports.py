"""
Report Runner - Runs the analytical reports in a fixed sequence.

Each report is announced on the event bus as it completes or fails.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from ..core.domain.entities import ShopData
from ..core.domain.events import (
    EventBus,
    ReportFailed,
    ReportGenerated,
    ReportsCompleted,
    ReportsStarted,
)
from ..core.exceptions import ConfigError, ShopStatsError
from ..core.ports.config_provider import REPORT_NAMES, ReportConfig
from . import queries
from .codes import CodeRegistry


REPORT_TITLES = {
    "codes": "Virtual product code registry",
    "most-expensive": "Most expensive product",
    "most-popular": "Most popular product",
    "average-age": "Average age of buyers",
    "product-users": "Users per product",
    "sorted-products": "Products sorted by price",
    "sorted-orders": "Orders sorted by user age (descending)",
    "order-weights": "Total weight of each order",
}


@dataclass
class ReportResult:
    """Outcome of a single report."""

    name: str
    title: str
    value: Any = None
    params: dict = field(default_factory=dict)


@dataclass
class ReportRun:
    """Result of a report run."""

    results: list[ReportResult] = field(default_factory=list)

    def get(self, name: str) -> Optional[ReportResult]:
        """Get the result of a report by name."""
        for result in self.results:
            if result.name == name:
                return result
        return None

    @property
    def names(self) -> list[str]:
        return [result.name for result in self.results]


class ReportRunner:
    """
    Runs the selected reports over a dataset.

    Reports always run in the order of REPORT_NAMES, whatever order the
    configuration lists them in. A failing report stops the run: the
    error is logged, published as ReportFailed and re-raised.
    """

    def __init__(
        self,
        data: ShopData,
        config: Optional[ReportConfig] = None,
        registry: Optional[CodeRegistry] = None,
        event_bus: Optional[EventBus] = None,
    ):
        """
        Initialize the runner.

        Args:
            data: Users, products and orders to report on
            config: Report selection and parameters
            registry: Code registry used by the "codes" report
            event_bus: Optional event bus

        Raises:
            ConfigError: If the configuration names an unknown report
        """
        self.data = data
        self.config = config if config is not None else ReportConfig()
        self.event_bus = event_bus if event_bus is not None else EventBus()
        self.registry = registry if registry is not None else CodeRegistry(event_bus=self.event_bus)
        self.logger = logging.getLogger("ReportRunner")

        unknown = [name for name in self.config.reports if name not in REPORT_NAMES]
        if unknown:
            raise ConfigError(f"Unknown report(s): {', '.join(unknown)}", unknown)

        self._builders: dict[str, Callable[[], Any]] = {
            "codes": self._codes,
            "most-expensive": lambda: queries.most_expensive_product(self.data.orders),
            "most-popular": lambda: queries.most_popular_product(self.data.orders),
            "average-age": self._average_age,
            "product-users": lambda: queries.product_user_map(self.data.orders),
            "sorted-products": lambda: queries.sort_products_by_price(self.data.products),
            "sorted-orders": lambda: queries.sort_orders_by_user_age_desc(self.data.orders),
            "order-weights": lambda: queries.weight_per_order(self.data.orders),
        }

    @property
    def selected_reports(self) -> list[str]:
        """Reports that will run, in execution order."""
        return [name for name in REPORT_NAMES if name in self.config.reports]

    def run(self) -> ReportRun:
        """
        Run every selected report.

        Returns:
            ReportRun with one result per generated report

        Raises:
            ShopStatsError: If a report fails
        """
        run = ReportRun()
        names = self.selected_reports

        self.event_bus.publish(ReportsStarted(
            report_names=tuple(names),
            order_count=len(self.data.orders),
        ))
        self.logger.info(f"Running {len(names)} report(s) over {len(self.data.orders)} order(s)")

        for name in names:
            run.results.append(self._run_report(name))

        self.event_bus.publish(ReportsCompleted(reports_generated=len(run.results)))
        return run

    def _run_report(self, name: str) -> ReportResult:
        try:
            value = self._builders[name]()
        except ShopStatsError as e:
            self.logger.error(f"Report {name} failed: {e}")
            self.event_bus.publish(ReportFailed(report_name=name, error=str(e)))
            raise

        self.event_bus.publish(ReportGenerated(report_name=name, value=value))
        self.logger.debug(f"Generated report {name}")
        return ReportResult(
            name=name,
            title=REPORT_TITLES[name],
            value=value,
            params=self._params(name),
        )

    def _params(self, name: str) -> dict:
        if name == "average-age":
            return {"product": self.config.average_age_product}
        if name == "codes":
            return {"marked": list(self.config.codes_to_mark)}
        return {}

    def _codes(self) -> dict[str, bool]:
        for code in self.config.codes_to_mark:
            self.registry.mark_used(code)
        return {code: self.registry.is_used(code) for code in self.config.codes_to_check}

    def _average_age(self) -> float:
        product_name = self.config.average_age_product
        product = self.data.find_product(product_name)
        if product is None:
            raise ConfigError(f"Unknown product for average age: {product_name}")
        return queries.average_age(product, self.data.orders)
