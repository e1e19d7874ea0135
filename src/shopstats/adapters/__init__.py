"""
Adapters - Concrete implementations of ports and data sources.

This module contains:
- Config: Environment variables and .env files
- Sample data: The hardcoded demo shop
"""

from .config import EnvironmentConfigProvider
from .sample_data import create_demo_data

__all__ = [
    "EnvironmentConfigProvider",
    "create_demo_data",
]
