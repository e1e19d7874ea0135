"""
Output - Console rendering of report runs.

Every report has a renderer that turns its value into numbered sections,
bullet items or small tables. ANSI colors are used only on a terminal.
"""

import sys
from typing import Any, Callable, Optional, TextIO

from ..application.reports import ReportResult, ReportRun


RESET = "\033[0m"
BOLD = "\033[1m"
RED = "\033[31m"
GREEN = "\033[32m"
BLUE = "\033[34m"
CYAN = "\033[36m"


class Console:
    """Writes report runs and status messages to a text stream."""

    def __init__(self, color: bool = True, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout
        self.color = color and self.stream.isatty()

        self._renderers: dict[str, Callable[[ReportResult], None]] = {
            "codes": self._render_codes,
            "average-age": self._render_average_age,
            "product-users": self._render_product_users,
            "order-weights": self._render_order_weights,
        }

    def _c(self, text: str, *codes: str) -> str:
        if not self.color:
            return text
        return "".join(codes) + text + RESET

    def print(self, text: str = "") -> None:
        print(text, file=self.stream)

    def banner(self, text: str) -> None:
        """Print a title between two rules."""
        rule = self._c("=" * max(len(text) + 4, 50), CYAN)
        self.print(rule)
        self.print(self._c(f"  {text}", BOLD, CYAN))
        self.print(rule)

    def section(self, text: str) -> None:
        self.print()
        self.print(self._c(f"> {text}", BOLD, BLUE))

    def success(self, text: str) -> None:
        self.print(self._c(f"  OK {text}", GREEN))

    def error(self, text: str) -> None:
        self.print(self._c(f"  ERROR {text}", RED))

    def item(self, text: str) -> None:
        self.print(f"    - {text}")

    def table(self, headers: list[str], rows: list[list[str]]) -> None:
        """Print rows left-aligned under their headers."""
        widths = [
            max([len(header)] + [len(row[i]) for row in rows])
            for i, header in enumerate(headers)
        ]

        self.print("  " + "  ".join(self._c(h.ljust(w), BOLD) for h, w in zip(headers, widths)))
        self.print("  " + "  ".join("-" * w for w in widths))
        for row in rows:
            self.print("  " + "  ".join(cell.ljust(w) for cell, w in zip(row, widths)))

    # -------------------------------------------------------------------------
    # Reports
    # -------------------------------------------------------------------------

    def report_run(self, run: ReportRun) -> None:
        """Print every report of a run, numbered in execution order."""
        self.banner("Shop Statistics")

        for number, result in enumerate(run.results, start=1):
            self.report(result, number)

        self.print()
        self.success(f"{len(run.results)} report(s) generated")

    def report(self, result: ReportResult, number: Optional[int] = None) -> None:
        """Print a single report."""
        title = result.title
        if result.name == "average-age":
            title = f"{title} of '{result.params.get('product')}'"
        self.section(f"{number}. {title}" if number is not None else title)

        renderer = self._renderers.get(result.name, self._render_default)
        renderer(result)

    def _render_codes(self, result: ReportResult) -> None:
        for code, used in result.value.items():
            self.item(f"Is code '{code}' used: {str(used).lower()}")

    def _render_average_age(self, result: ReportResult) -> None:
        self.item(f"Average age is: {result.value}")

    def _render_product_users(self, result: ReportResult) -> None:
        self.table(
            ["Product", "Users"],
            [[str(product), ", ".join(user.name for user in users)]
             for product, users in result.value.items()],
        )

    def _render_order_weights(self, result: ReportResult) -> None:
        self.table(
            ["Order", "Total weight"],
            [[str(order), str(weight)] for order, weight in result.value.items()],
        )

    def _render_default(self, result: ReportResult) -> None:
        if isinstance(result.value, list):
            for entry in result.value:
                self.item(str(entry))
        else:
            self.item(format_value(result.value))


def format_value(value: Any) -> str:
    """Render a report value as a single line of text."""
    if isinstance(value, dict):
        return ", ".join(f"{key}: {format_value(item)}" for key, item in value.items())
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(format_value(item) for item in value) + "]"
    return str(value)
