"""Pytest fixtures for API integration tests."""

import json

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from tests.shared.fixtures import FakeUpstream
from vodgate.presentation.api.app import API_PREFIX, create_app
from vodgate.presentation.api.dependencies import get_upstream_client
from vodgate_config.settings import Settings

TEST_SITES = {
    "sites": [
        {"key": "a", "name": "Alpha", "api": "https://a.example/vod/", "active": True},
        {"key": "b", "name": "Beta", "api": "https://b.example/vod/", "active": True},
        {"key": "c", "name": "Gamma", "api": "https://c.example/vod/", "active": False},
    ]
}
TEST_TMDB_KEY = "tmdb-test-key"
TEST_PASSWORD = "open-sesame"


@pytest.fixture
def api_prefix() -> str:
    """Get the API prefix for building URLs."""
    return API_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with inline sources and every secret set."""
    return Settings(
        _env_file=None,
        api_host="127.0.0.1",
        api_port=8000,
        api_debug=True,
        sites_json=json.dumps(TEST_SITES),
        tmdb_api_key=SecretStr(TEST_TMDB_KEY),
        access_password=SecretStr(TEST_PASSWORD),
        search_timeout_seconds=0.5,
    )


@pytest.fixture
def upstream() -> FakeUpstream:
    """Fake upstream hosts shared by the app under test."""
    return FakeUpstream()


def _build_client(settings: Settings, upstream: FakeUpstream, **kwargs) -> TestClient:
    app = create_app(settings=settings)
    client = upstream.client()
    app.dependency_overrides[get_upstream_client] = lambda: client
    return TestClient(app, **kwargs)


@pytest.fixture
def test_client(api_settings, upstream) -> TestClient:
    """Create a test client whose outbound calls hit the fake upstream."""
    return _build_client(api_settings, upstream)


@pytest.fixture
def open_settings() -> Settings:
    """Settings with no secrets and the built-in source catalogue."""
    return Settings(_env_file=None)


@pytest.fixture
def open_client(open_settings, upstream) -> TestClient:
    """Test client for a gateway without TMDB key or password."""
    return _build_client(open_settings, upstream)
