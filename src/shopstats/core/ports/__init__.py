"""
Ports - Abstract interfaces for external dependencies.

Ports define the contracts that adapters must implement.
This enables dependency inversion and easy testing.
"""

from .config_provider import (
    ConfigProviderPort,
    AppConfig,
    ReportConfig,
    OutputConfig,
    REPORT_NAMES,
)

__all__ = [
    "ConfigProviderPort",
    "AppConfig",
    "ReportConfig",
    "OutputConfig",
    "REPORT_NAMES",
]
