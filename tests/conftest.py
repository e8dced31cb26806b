"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/                  # Fast, isolated tests
    │   ├── domain/
    │   ├── application/
    │   ├── infrastructure/
    │   ├── presentation/
    │   └── config/
    ├── integration/
    │   └── api/               # Endpoint tests through the ASGI app
    └── shared/                # Shared fixtures and utilities

Upstream sources are never contacted: every outbound request goes through
an ``httpx.MockTransport``.
"""

import pytest

from vodgate_config import clear_settings_cache

GATEWAY_ENV_VARS = (
    "SITES_JSON",
    "REMOTE_DB_URL",
    "TMDB_API_KEY",
    "TMDB_PROXY_URL",
    "ACCESS_PASSWORD",
    "SEARCH_TIMEOUT_SECONDS",
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that exercise the HTTP API through the ASGI app",
    )


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep deployment variables of the host out of the tests."""
    for name in GATEWAY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def clear_settings_cache_fixture():
    """Clear the settings cache before and after each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()
