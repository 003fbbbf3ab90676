# pandoc_filter/infrastructure/logging/_setup.py

"""Logging configuration and setup

Filters talk to pandoc over stdout, so console logging always goes to stderr.
"""

# Standard library imports
from logging import DEBUG
from logging import FileHandler
from logging import Formatter
from logging import INFO
from logging import StreamHandler
from logging import getLevelNamesMapping
from logging import getLogger
from os import makedirs
from os.path import dirname


def set_up_logging(
    log_file: str | None = None,
    log_level: str = "INFO",
    silent: bool = False,
) -> str | None:
    """Configure logging for the application

    Args:
        log_file: Path to log file, None to disable file logging
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        silent: If True, suppress console output

    Returns:
        Path to log file if file logging is enabled, None otherwise
    """
    # Convert log level string to logging constant
    level = getLevelNamesMapping().get(log_level.upper(), INFO)

    root_logger = getLogger()
    root_logger.setLevel(DEBUG if log_file else level)

    # Clear any existing handlers
    root_logger.handlers = []

    console_formatter = Formatter("%(asctime)s - %(levelname)s - %(message)s")
    file_formatter = Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if not silent:
        console_handler = StreamHandler()  # stderr
        console_handler.setLevel(level)
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

    if log_file is None:
        return None

    log_dir = dirname(log_file)
    if log_dir:
        makedirs(log_dir, exist_ok=True)

    file_handler = FileHandler(log_file)
    file_handler.setLevel(DEBUG)  # Always log debug to file
    file_handler.setFormatter(file_formatter)
    root_logger.addHandler(file_handler)

    logger = getLogger(__name__)
    logger.info(f"Logging to file: {log_file}")

    return log_file
