# pandoc_filter/infrastructure/config/_models.py

"""Pydantic models for configuration with validation"""

# Standard library imports
from json import JSONDecodeError
from json import load as json_load
from logging import getLogger
from pathlib import Path

# Third party imports
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator

# Local imports
from pandoc_filter.core.types.json import JSONDict

DEFAULT_CONFIG_FILENAME = "pandoc_filter.json"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(BaseModel):
    """Logging configuration"""

    debug: bool = Field(False, description="Enable debug logging")
    log_level: str = Field("WARNING", description="Console log level")
    log_file: str | None = Field(None, description="Log file path")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept any case, store upper case"""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {v!r}")
        return level

    @property
    def effective_level(self) -> str:
        """DEBUG when debug is set, the configured level otherwise"""
        return "DEBUG" if self.debug else self.log_level


class OutputConfig(BaseModel):
    """Serialization options for the filtered document"""

    ensure_ascii: bool = Field(False, description="Escape non-ASCII characters")
    indent: int | None = Field(None, ge=0, description="Pretty-print indent, None for compact")
    sort_keys: bool = Field(False, description="Sort object keys in the output")


class AppConfig(BaseModel):
    """Root application configuration model"""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> "AppConfig":
        """Load configuration from JSON file with defaults

        Args:
            config_path: Path to configuration JSON file; when None,
                ``pandoc_filter.json`` in the current directory is used if present

        Returns:
            Validated AppConfig instance
        """
        if isinstance(config_path, str):
            config_path = Path(config_path)

        if config_path is None:
            config_path = Path(DEFAULT_CONFIG_FILENAME)
            if not config_path.exists():
                return cls()

        if not config_path.exists():
            getLogger(__name__).warning(f"Config file {config_path} not found. Using defaults.")
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json_load(f)
            return cls.model_validate(data)
        except (OSError, JSONDecodeError, ValidationError) as e:
            getLogger(__name__).warning(
                f"Failed to load config from {config_path}: {e}. Using defaults."
            )
            return cls()

    def to_dict(self) -> JSONDict:
        """Convert to dictionary"""
        return self.model_dump()
