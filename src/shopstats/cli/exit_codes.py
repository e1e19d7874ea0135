"""
Exit Codes - Process exit statuses of the shopstats CLI.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit statuses returned by main()."""

    SUCCESS = 0
    ERROR = 1
    CONFIG_ERROR = 2
    NO_DATA = 3
