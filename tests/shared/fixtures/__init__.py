"""Shared pytest fixtures for all test domains."""

from tests.shared.fixtures.upstream import FakeUpstream, make_source, vod_items

__all__ = [
    "FakeUpstream",
    "make_source",
    "vod_items",
]
