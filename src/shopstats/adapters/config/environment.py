"""
Environment Config Provider - Load configuration from environment variables.

Sources, lowest precedence first:
- a .env file (explicit path, or ./.env)
- SHOPSTATS_* environment variables
- command line argument overrides
"""

import os
from pathlib import Path
from typing import Any, Mapping, Optional

from ...core.ports.config_provider import (
    ConfigProviderPort,
    AppConfig,
    ReportConfig,
    OutputConfig,
    REPORT_NAMES,
)


TRUE_VALUES = ("true", "1", "yes")
FALSE_VALUES = ("false", "0", "no")


def _split_list(value: Any) -> Optional[list[str]]:
    """Accept either a list or a comma separated string."""
    if value is None:
        return None
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return list(value)


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.lower() in TRUE_VALUES
    return bool(value)


def read_env_file(path: Path) -> dict[str, str]:
    """Parse KEY=value lines, ignoring blanks, comments and malformed lines."""
    values = {}
    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        values[key.strip()] = value.strip().strip('"').strip("'")
    return values


class EnvironmentConfigProvider(ConfigProviderPort):
    """
    Configuration provider that loads from environment variables and .env files.

    Both the .env file and the environment use the SHOPSTATS_* names;
    other keys are ignored.
    """

    ENV_KEYS = {
        "SHOPSTATS_REPORTS": "reports",
        "SHOPSTATS_AVERAGE_AGE_PRODUCT": "average_age_product",
        "SHOPSTATS_MARK_CODES": "mark_codes",
        "SHOPSTATS_CHECK_CODES": "check_codes",
        "SHOPSTATS_COLOR": "color",
        "SHOPSTATS_VERBOSE": "verbose",
    }
    CLI_KEYS = {
        "report": "reports",
        "average_age_product": "average_age_product",
        "mark_code": "mark_codes",
        "check_code": "check_codes",
        "verbose": "verbose",
        "tui": "tui",
    }
    BOOL_KEYS = ("color", "verbose", "tui")

    def __init__(
        self,
        env_file: Optional[Path] = None,
        cli_overrides: Optional[dict[str, Any]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize the config provider.

        Args:
            env_file: Path to .env file (./.env if not specified)
            cli_overrides: Parsed command line arguments
            environ: Environment mapping (defaults to os.environ)
        """
        self._values: dict[str, Any] = {}
        environ = os.environ if environ is None else environ

        env_path = env_file if env_file is not None else Path.cwd() / ".env"
        if env_path.exists():
            self._merge_env(read_env_file(env_path))
        self._merge_env(environ)
        if "NO_COLOR" in environ:
            self._values["color"] = False
        self._merge_cli(cli_overrides or {})

    @property
    def name(self) -> str:
        return "Environment"

    def load(self) -> AppConfig:
        """Build the application configuration from the merged values."""
        defaults = ReportConfig()

        report = ReportConfig(
            reports=_split_list(self.get("reports")) or list(REPORT_NAMES),
            average_age_product=self.get("average_age_product", defaults.average_age_product),
            codes_to_mark=_split_list(self.get("mark_codes")) or defaults.codes_to_mark,
            codes_to_check=_split_list(self.get("check_codes")) or defaults.codes_to_check,
        )
        output = OutputConfig(
            color=_as_bool(self.get("color", True)),
            verbose=_as_bool(self.get("verbose", False)),
            tui=_as_bool(self.get("tui", False)),
        )
        return AppConfig(report=report, output=output)

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(self._normalize(key), default)

    def set(self, key: str, value: Any) -> None:
        self._values[self._normalize(key)] = value

    def validate(self) -> list[str]:
        """Report unknown report names and an empty product name."""
        errors = [
            f"Unknown report '{report}' - choose from: {', '.join(REPORT_NAMES)}"
            for report in _split_list(self.get("reports")) or []
            if report not in REPORT_NAMES
        ]
        if not str(self.get("average_age_product", "x")).strip():
            errors.append("Average age product name must not be empty")
        return errors

    @staticmethod
    def _normalize(key: str) -> str:
        return key.lower().replace("-", "_")

    def _merge_env(self, source: Mapping[str, str]) -> None:
        for env_key, key in self.ENV_KEYS.items():
            raw = source.get(env_key)
            if raw is None:
                continue
            if key in self.BOOL_KEYS and raw.lower() in TRUE_VALUES + FALSE_VALUES:
                self._values[key] = raw.lower() in TRUE_VALUES
            else:
                self._values[key] = raw

    def _merge_cli(self, overrides: Mapping[str, Any]) -> None:
        # argparse leaves unset flags as None
        for cli_key, key in self.CLI_KEYS.items():
            if overrides.get(cli_key) is not None:
                self._values[key] = overrides[cli_key]
        if overrides.get("no_color"):
            self._values["color"] = False
