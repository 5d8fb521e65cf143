# tests/api/conftest.py
"""
Shared fixtures for agent API tests.
Uses FastAPI's TestClient with a fake runtime executor injected into the app.
"""

import pytest
from fastapi.testclient import TestClient

from realloc.api.app import create_app


@pytest.fixture
def client(config, fake_executor):
    """Creates a TestClient for an agent that runs commands on the fake executor."""
    app = create_app(config, executor=fake_executor)
    with TestClient(app) as c:
        yield c
