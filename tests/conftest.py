"""
Shared pytest fixtures.

Each test gets its own store and client, so pastes created in one test never
show up in another.
"""
import pytest
from fastapi.testclient import TestClient

from app.database import PasteStore
from app.main import create_app
from app.seed_data import PASTES


@pytest.fixture
def store():
    """A store seeded with the startup pastes."""
    return PasteStore(PASTES)


@pytest.fixture
def app(store):
    """An application serving the test store."""
    return create_app(store=store)


@pytest.fixture
def client(app):
    """
    Test client for the application.

    Server exceptions are turned into responses instead of being re-raised,
    so the 500 path can be asserted on.
    """
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def seed_max_id():
    """Largest id among the seeded pastes."""
    return max(paste["id"] for paste in PASTES)
