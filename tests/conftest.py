"""Pytest fixtures for chilipy tests."""
import asyncio

import pytest

from chilipy.core.path import PathMapper


class FakeClock:
    """Manually advanced monotonic clock."""
    
    def __init__(self, start: float = 1000.0):
        self.now = start
    
    def __call__(self) -> float:
        return self.now
    
    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeLister:
    """Link-listing service backed by a directory -> records mapping."""
    
    def __init__(self, links=None, error=None):
        self.links = links or {}
        self.error = error
        self.calls = []
    
    async def list_links(self, directory):
        self.calls.append(directory)
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        return list(self.links.get(directory, []))


@pytest.fixture
def clock():
    """Fake clock starting at t=1000s."""
    return FakeClock()


@pytest.fixture
def lister():
    """Listing service with no links anywhere."""
    return FakeLister()


@pytest.fixture
def mapper(lister, clock):
    """PathMapper over the fake lister and clock with a 30s TTL."""
    return PathMapper(lister, ttl=30.0, clock=clock)


@pytest.fixture
def shared_links():
    """Tree where /home/user/public links to /SHARED."""
    return FakeLister({
        '/home/user': [{'name': '/home/user/public.chrislink', 'target': '/SHARED'}],
    })


@pytest.fixture
def make_lister():
    """Factory for listing services: make_lister(links=None, error=None)."""
    return FakeLister
