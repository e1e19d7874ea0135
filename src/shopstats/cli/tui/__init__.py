"""
TUI - Interactive terminal report browser.
"""

from .app import ReportBrowser, ReportTable, run_tui
from .data import report_table

__all__ = ["ReportBrowser", "ReportTable", "run_tui", "report_table"]
