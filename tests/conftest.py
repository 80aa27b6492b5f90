"""
Shared fixtures for the link bundle tests.
"""

from unittest.mock import AsyncMock

import pytest

from app.domain.links.ports import IdentityResolver, LinkBundleRepository


@pytest.fixture
def repo() -> AsyncMock:
    """Bundle store mock with an empty store's default answers."""
    mock = AsyncMock(spec=LinkBundleRepository)
    mock.find_by_vanity_url.return_value = None
    mock.find_by_user.return_value = []
    mock.list_all.return_value = []
    mock.exists_by_id.return_value = False
    return mock


@pytest.fixture
def identity() -> AsyncMock:
    """Identity resolver mock for an authenticated caller ``userhash``."""
    mock = AsyncMock(spec=IdentityResolver)
    mock.resolve.return_value = "userhash"
    return mock
