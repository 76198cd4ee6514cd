"""Shared fixtures."""

import pytest

from tests.fakes import FakeSession


@pytest.fixture
def fake_session() -> FakeSession:
    """Provide a fresh fake aiohttp session."""
    return FakeSession()
