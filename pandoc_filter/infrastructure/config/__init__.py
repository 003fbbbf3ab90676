# pandoc_filter/infrastructure/config/__init__.py

"""Configuration infrastructure.

This module manages configuration loading, validation, and models.
"""

# Local imports
from pandoc_filter.infrastructure.config._loader import ConfigLoader
from pandoc_filter.infrastructure.config._loader import get_config
from pandoc_filter.infrastructure.config._models import DEFAULT_CONFIG_FILENAME
from pandoc_filter.infrastructure.config._models import AppConfig
from pandoc_filter.infrastructure.config._models import LoggingConfig
from pandoc_filter.infrastructure.config._models import OutputConfig

__all__ = [
    "AppConfig",
    "ConfigLoader",
    "DEFAULT_CONFIG_FILENAME",
    "LoggingConfig",
    "OutputConfig",
    "get_config",
]
