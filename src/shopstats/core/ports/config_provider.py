"""
Config Provider Port - Abstract interface for configuration sources.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from ..exceptions import ConfigError


# Fixed order in which the driver runs the reports.
REPORT_NAMES = (
    "codes",
    "most-expensive",
    "most-popular",
    "average-age",
    "product-users",
    "sorted-products",
    "sorted-orders",
    "order-weights",
)


@dataclass
class ReportConfig:
    """Which reports to run and their parameters."""

    reports: list[str] = field(default_factory=lambda: list(REPORT_NAMES))
    average_age_product: str = "Product B"
    codes_to_mark: list[str] = field(default_factory=lambda: ["xxx"])
    codes_to_check: list[str] = field(default_factory=lambda: ["xxx", "yyy"])


@dataclass
class OutputConfig:
    """How results are presented."""

    color: bool = True
    verbose: bool = False
    tui: bool = False


@dataclass
class AppConfig:
    """Complete application configuration."""

    report: ReportConfig = field(default_factory=ReportConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


class ConfigProviderPort(ABC):
    """
    Abstract interface for configuration providers.

    Implementations load configuration from a concrete source
    (environment, files, command line).
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human readable provider name."""
        ...

    @abstractmethod
    def load(self) -> AppConfig:
        """Load complete configuration."""
        ...

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Get a single configuration value."""
        ...

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Set a single configuration value."""
        ...

    @abstractmethod
    def validate(self) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        ...

    def require_valid(self, errors: Optional[list[str]] = None) -> None:
        """Raise ConfigError if validation reports any problem."""
        errors = self.validate() if errors is None else errors
        if errors:
            raise ConfigError("; ".join(errors), errors)
