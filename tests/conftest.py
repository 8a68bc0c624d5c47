"""
Pytest configuration and shared fixtures for apiwire tests.
"""

import json
import tempfile
from pathlib import Path
from unittest.mock import Mock

import pytest

from apiwire.api import APIClient
from apiwire.infrastructure.http import HttpTransport, MockResponse
from apiwire.models import Authorization, Endpoint
from apiwire.storage import AuthorizationStore, MemoryAuthorizationStore


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def endpoint():
    return Endpoint(host="api.example.com", base_path="/v1", name="Example")


@pytest.fixture
def authorization():
    return Authorization(authorization_token="secret-token")


@pytest.fixture
def store():
    """A store spy that starts empty."""
    mock_store = Mock(spec=AuthorizationStore)
    mock_store.load.return_value = None
    return mock_store


@pytest.fixture
def client(endpoint, store):
    api = APIClient(endpoint, store, transport=HttpTransport(session=Mock()))
    yield api
    api.close()


@pytest.fixture
def logged_in_client(endpoint, authorization):
    api = APIClient(
        endpoint,
        MemoryAuthorizationStore(authorization.to_record()),
        transport=HttpTransport(session=Mock()),
    )
    yield api
    api.close()


@pytest.fixture
def json_mock():
    """Factory for a MockResponse carrying a JSON body."""
    def build(payload, status_code=200):
        return MockResponse(status_code=status_code, data=json.dumps(payload).encode("utf-8"))
    return build
