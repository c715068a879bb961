"""Fixtures for API tests against the in-memory container."""

import pytest
from fastapi.testclient import TestClient

from quill.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Test client backed by a fresh in-memory container.

    Used as a context manager so HTTP calls and WebSocket sessions share one
    event loop, and the container is closed afterwards.
    """
    app = create_app(build_test_container())
    with TestClient(app) as test_client:
        yield test_client
