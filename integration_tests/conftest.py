"""Pytest configuration for integration tests."""

import pytest

from gymbuddy.config import Settings


# Mark all tests in this directory as integration tests
def pytest_collection_modifyitems(items):
    """Add integration marker to all tests in this directory."""
    for item in items:
        if "integration_tests" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def data_dir(tmp_path):
    """A fresh data directory; the database file is created on first start."""
    return tmp_path / "gymbuddy-data"


@pytest.fixture
def settings(data_dir):
    return Settings(data_dir=data_dir, _env_file=None)
