"""
Pytest fixtures for Spanish ID validator tests.
"""

import pytest

from services.spanish_id.log_config import configure_logging


@pytest.fixture(autouse=True)
def structured_logging():
    """Route structlog through stdlib logging so CLI output stays clean."""
    configure_logging(log_level="DEBUG", log_format="json")
    yield
