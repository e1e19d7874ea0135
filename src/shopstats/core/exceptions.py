"""
Exceptions - Centralized exception hierarchy.

Every error raised by shopstats derives from ShopStatsError so callers
can catch the whole family with a single clause.
"""


class ShopStatsError(Exception):
    """Base class for all shopstats errors."""


class NoDataError(ShopStatsError, LookupError):
    """A query has no valid result over an empty or non-matching input."""


class InvalidArgumentError(ShopStatsError, ValueError):
    """An entity or operation received a value outside its domain."""


class ConfigError(ShopStatsError):
    """Configuration is invalid or refers to unknown names."""

    def __init__(self, message: str, errors: list[str] = None):
        super().__init__(message)
        self.errors = errors or []
