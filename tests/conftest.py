"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from gymbuddy.config import Settings, get_settings
from gymbuddy.data.exercise_loader import seed_exercises_if_empty
from gymbuddy.db.engine import Store
from gymbuddy.web import create_app


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest_asyncio.fixture
async def store(temp_db_path):
    """An open store on an empty database."""
    store = Store(temp_db_path)
    await store.open()
    yield store
    await store.close()


@pytest_asyncio.fixture
async def seeded_store(store):
    """An open store with the bundled exercise library loaded."""
    await seed_exercises_if_empty(store)
    return store


@pytest.fixture
def settings(temp_db_path):
    return Settings(database_file=temp_db_path, _env_file=None)


@pytest.fixture
def client(settings):
    """API client; entering the context runs the app lifespan (open + seed)."""
    with TestClient(create_app(settings)) as client:
        yield client


@pytest.fixture
def cli_env(temp_db_path, monkeypatch):
    """Point the CLI at the temporary database."""
    monkeypatch.setenv("GYMBUDDY_DATABASE_FILE", str(temp_db_path))
    get_settings.cache_clear()
    yield temp_db_path
    get_settings.cache_clear()
