import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Ensure the project root is on sys.path for direct pytest runs
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from library_api.config import Settings  # noqa: E402
from library_api.main import create_app  # noqa: E402


@pytest.fixture
def app():
    """A fresh application with its own seeded catalog."""
    return create_app(Settings())


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def empty_client():
    """A client for an application whose catalog starts empty."""
    return TestClient(create_app(Settings(seed_catalog=False)))
