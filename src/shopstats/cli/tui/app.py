"""
TUI App - Textual report browser for shopstats.

Shows every generated report in its own tab as a table.
"""

from __future__ import annotations

from typing import Any

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import DataTable, Footer, Header, Static, TabbedContent, TabPane

from ...application.reports import ReportResult, ReportRun
from .data import report_table


REPORT_BROWSER_CSS = """
Screen {
    background: $surface;
}

Header {
    background: $primary-darken-3;
}

TabPane {
    padding: 1;
}

DataTable {
    height: auto;
}

#status-bar {
    height: 1;
    dock: bottom;
    background: $surface-darken-2;
    padding: 0 1;
}
"""


class ReportTable(DataTable):
    """A table showing a single report result."""

    def __init__(self, result: ReportResult, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.report_result = result

    def on_mount(self) -> None:
        """Fill the table once mounted."""
        headers, rows = report_table(self.report_result)
        self.add_columns(*headers)
        self.add_rows(rows)


class ReportBrowser(App):
    """
    Interactive terminal browser for a report run.

    One tab per report, in execution order.
    """

    TITLE = "shopstats"
    SUB_TITLE = "Report Browser"
    CSS = REPORT_BROWSER_CSS

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("ctrl+c", "quit", "Quit", show=False),
    ]

    def __init__(self, run: ReportRun, *args: Any, **kwargs: Any) -> None:
        """
        Initialize the browser.

        Args:
            run: The report run to display
        """
        super().__init__(*args, **kwargs)
        self.report_run = run

    def compose(self) -> ComposeResult:
        """Compose the layout."""
        yield Header()

        with TabbedContent(id="report-tabs"):
            for number, result in enumerate(self.report_run.results, start=1):
                with TabPane(f"{number}. {result.title}", id=f"tab-{result.name}"):
                    yield ReportTable(result, id=f"table-{result.name}")

        yield Static(
            f"Reports: {len(self.report_run.results)} | q to quit",
            id="status-bar",
        )
        yield Footer()


def run_tui(run: ReportRun) -> None:
    """Run the report browser until the user quits."""
    ReportBrowser(run).run()
