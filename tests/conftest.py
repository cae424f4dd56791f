"""Shared test fixtures."""
import pytest
from fastapi.testclient import TestClient
from terbilang_api.api.app import create_app
from terbilang_api.config import Settings


@pytest.fixture
def test_settings():
    """Create test settings independent of the environment."""
    return Settings(
        default_case="lower",
        enable_xml=True,
        log_level="WARNING",
        cors_origins=["*"],
    )


@pytest.fixture
def client(test_settings):
    app = create_app(test_settings)
    return TestClient(app, raise_server_exceptions=False)
