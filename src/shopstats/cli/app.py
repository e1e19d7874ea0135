"""
CLI App - Command line entry point for shopstats.

Builds the demo shop, runs the reports and prints the results.

Usage:
    # All reports, in their fixed order
    shopstats

    # Only selected reports
    shopstats --report most-expensive --report order-weights

    # Average buyer age of another product
    shopstats --report average-age --average-age-product "Product A"

    # Browse the results interactively
    shopstats --tui
"""

import argparse
import logging
import sys
from dataclasses import fields
from pathlib import Path
from typing import Optional

from ..adapters.config import EnvironmentConfigProvider
from ..adapters.sample_data import create_demo_data
from ..application.codes import CodeRegistry
from ..application.reports import ReportRun, ReportRunner
from ..core.domain.events import DomainEvent, EventBus, ReportFailed
from ..core.exceptions import ConfigError, NoDataError, ShopStatsError
from ..core.ports.config_provider import AppConfig, REPORT_NAMES
from .exit_codes import ExitCode
from .output import Console


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )


def log_event(event: DomainEvent) -> None:
    """Write a published event to the "events" logger."""
    logger = logging.getLogger("events")
    details = ", ".join(
        f"{f.name}={getattr(event, f.name)}"
        for f in fields(event)
        if f.name not in ("event_id", "timestamp", "value")
    )
    if isinstance(event, ReportFailed):
        logger.warning(f"{event.event_type}: {details}")
    else:
        logger.debug(f"{event.event_type}: {details}")


def attach_event_logging(event_bus: EventBus) -> None:
    """Log every event published on the bus."""
    event_bus.subscribe(DomainEvent, log_event)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="shopstats",
        description="Run analytical reports over a small in-memory shop",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"Reports: {', '.join(REPORT_NAMES)}",
    )
    parser.add_argument(
        "--report", "-r",
        action="append",
        metavar="NAME",
        help="Run only this report (repeatable)",
    )
    parser.add_argument(
        "--average-age-product",
        metavar="NAME",
        help="Product whose buyers' average age is reported (default: Product B)",
    )
    parser.add_argument(
        "--mark-code",
        action="append",
        metavar="CODE",
        help="Code to mark as used before the registry check (repeatable)",
    )
    parser.add_argument(
        "--check-code",
        action="append",
        metavar="CODE",
        help="Code to check in the registry (repeatable)",
    )
    parser.add_argument("--env-file", type=Path, help="Path to a .env file")
    parser.add_argument("--no-color", action="store_true", default=None, help="Disable colored output")
    parser.add_argument("--verbose", "-v", action="store_true", default=None, help="Verbose logging")
    parser.add_argument("--tui", action="store_true", default=None, help="Browse results in a terminal UI")
    return parser


def load_config(args: argparse.Namespace) -> AppConfig:
    """
    Load configuration from .env, environment and CLI arguments.

    Raises:
        ConfigError: If the configuration is invalid
    """
    provider = EnvironmentConfigProvider(
        env_file=args.env_file,
        cli_overrides=vars(args),
    )
    provider.require_valid()
    return provider.load()


def run(config: AppConfig, console: Console, registry: Optional[CodeRegistry] = None) -> ReportRun:
    """
    Run the configured reports over the demo shop and show them.

    Args:
        config: Application configuration
        console: Console used for plain text output
        registry: Code registry for the "codes" report (a fresh one if not given)
    """
    logger = logging.getLogger("main")

    event_bus = EventBus()
    attach_event_logging(event_bus)
    if registry is None:
        registry = CodeRegistry(event_bus=event_bus)

    runner = ReportRunner(
        data=create_demo_data(),
        config=config.report,
        registry=registry,
        event_bus=event_bus,
    )

    logger.debug(f"Selected reports: {', '.join(runner.selected_reports)}")
    report_run = runner.run()

    if config.output.tui:
        from .tui import run_tui

        run_tui(report_run)
    else:
        console.report_run(report_run)

    return report_run


def main(argv: Optional[list[str]] = None) -> int:
    """
    Entry point of the shopstats command.

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    console = Console(color=not args.no_color)

    try:
        config = load_config(args)
    except ConfigError as e:
        console.error(f"Configuration error: {e}")
        return ExitCode.CONFIG_ERROR

    setup_logging(config.output.verbose)
    console = Console(color=config.output.color)

    try:
        run(config, console)
    except ConfigError as e:
        console.error(f"Configuration error: {e}")
        return ExitCode.CONFIG_ERROR
    except NoDataError as e:
        console.error(f"No data: {e}")
        return ExitCode.NO_DATA
    except ShopStatsError as e:
        console.error(str(e))
        return ExitCode.ERROR

    return ExitCode.SUCCESS


if __name__ == "__main__":
    sys.exit(main())
