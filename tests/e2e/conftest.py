"""Fixtures for end-to-end API tests.

The app runs against the in-memory test container, so every test starts
with an empty forum and nothing needs to be running.
"""

import pytest
from fastapi.testclient import TestClient

from harvest.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client."""
    with TestClient(create_app(build_test_container())) as test_client:
        yield test_client
