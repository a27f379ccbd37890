import pytest

from channelbus import ChannelRouter, Registry


@pytest.fixture
def registry():
    """A fresh, empty registry for each test."""
    return Registry()


@pytest.fixture
def router():
    """A fresh router with its own channel table for each test."""
    return ChannelRouter()


@pytest.fixture
def calls():
    """Shared call log for listeners."""
    return []
