"""Shared fixtures for integration tests."""

import pytest


def pytest_collection_modifyitems(config, items):
    """Mark every test below this directory as an integration test."""
    for item in items:
        if "integration" in item.path.parts:
            item.add_marker(pytest.mark.integration)
