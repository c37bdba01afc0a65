"""
Core utilities.

This module provides:
- Physical constants (ionization potentials)
- Configuration and logging
"""

from rimsdb.core import constants
from rimsdb.core import config
from rimsdb.core import logging_config

__all__ = [
    "constants",
    "config",
    "logging_config",
]
