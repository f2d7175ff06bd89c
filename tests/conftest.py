"""
Pytest configuration and fixtures for fluentcheck tests

This module provides shared fixtures for unit tests.
"""
import os

import pytest

from fluentcheck.core.options import validator_options


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for a single component"
    )
    config.addinivalue_line(
        "markers", "integration: Tests exercising validators end to end"
    )


# =======================
# FIXTURES
# =======================

@pytest.fixture(autouse=True)
def reset_validator_options():
    """Restore global options after every test"""
    yield
    validator_options.reset()


@pytest.fixture(scope="session")
def test_data_dir() -> str:
    """
    Get path to test data fixtures directory

    Returns:
        Path to tests/fixtures directory
    """
    return os.path.join(os.path.dirname(__file__), "fixtures")
