# pandoc_filter/infrastructure/logging/__init__.py

"""Logging infrastructure.

This module provides centralized logging configuration and setup.
"""

# Local imports
from pandoc_filter.infrastructure.logging._setup import set_up_logging as setup_logging

__all__ = ["setup_logging"]
