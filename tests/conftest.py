# tests/conftest.py

"""Pytest configuration and fixtures for test suite"""

# Standard library imports
from logging import Logger
from logging import getLogger

# Third party imports
from hypothesis import HealthCheck
from hypothesis import settings
import pytest

# Local imports
from pandoc_filter import Pandoc
from pandoc_filter import decode_document
from pandoc_filter.infrastructure.config import _loader as config_loader
from tests.fixtures.documents import SAMPLE_DOCUMENT
from tests.fixtures.documents import load

# Documents are recursive pydantic trees; building them is slower than hypothesis assumes
settings.register_profile(
    "pandoc_filter", deadline=None, suppress_health_check=[HealthCheck.too_slow], max_examples=60
)
settings.load_profile("pandoc_filter")


# Custom markers
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture(autouse=True, scope="function")
def basic_isolation():
    """Minimal isolation for most tests - reset logging and cached config"""
    # Reset logging to avoid handler conflicts
    root_logger = getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    # Reset logging level
    root_logger.setLevel(30)  # WARNING level

    # Clear all logger instances
    Logger.manager.loggerDict.clear()

    # get_config caches a process-wide default
    config_loader._default_config = None

    yield

    config_loader._default_config = None


@pytest.fixture
def sample_json():
    """Fresh parsed copy of the sample document"""
    return load(SAMPLE_DOCUMENT)


@pytest.fixture
def sample_document() -> Pandoc:
    """The sample document, decoded"""
    return decode_document(load(SAMPLE_DOCUMENT))
