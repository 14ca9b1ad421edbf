"""
Shared fixtures for Record Service tests
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from config import Settings
from main import create_app
from sink import RecordSink

TEST_API_KEY = "test-secret"


@pytest.fixture
def settings():
    return Settings(api_key=TEST_API_KEY, collection="NLPTextTest")


@pytest.fixture
def mock_sink():
    """Record sink that captures writes instead of calling Firestore."""
    return MagicMock(spec=RecordSink)


@pytest.fixture
def client(settings, mock_sink):
    app = create_app(settings, sink=mock_sink)
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def auth_headers():
    return {"X-API-Key": TEST_API_KEY}
