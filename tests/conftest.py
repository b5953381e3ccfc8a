"""Pytest configuration and fixtures."""

import pytest
from httpx import AsyncClient, ASGITransport

from config import Config
from shorturl.exceptions import HostResolutionError
from shorturl.service import ShortURLService
from shorturl.store import LinkStore
from shorturl.common.logging_config import setup_logging
from web_app import create_app


class FakeResolver:
    """Resolver that answers from a fixed table instead of the network."""

    def __init__(self, known_hosts):
        self.known_hosts = dict(known_hosts)
        self.lookups = []

    async def resolve(self, hostname):
        self.lookups.append(hostname)
        if hostname not in self.known_hosts:
            raise HostResolutionError(f"Lookup of {hostname!r} failed: not known")
        return [self.known_hosts[hostname]]


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def resolver():
    """Create resolver knowing a handful of hosts."""
    return FakeResolver({
        "www.example.com": "93.184.215.14",
        "example.com": "93.184.215.14",
        "github.com": "140.82.112.3",
        "stackoverflow.com": "198.252.206.1",
        "comp.lang": "192.0.2.10",
        "127.0.0.1": "127.0.0.1",
    })


@pytest.fixture
def store(logger):
    """Create empty link store."""
    return LinkStore(logger=logger)


@pytest.fixture
def service(store, resolver, logger) -> ShortURLService:
    """Create service instance."""
    return ShortURLService(store=store, resolver=resolver, logger=logger)


@pytest.fixture
def app(store, service, logger):
    """Create test FastAPI app."""
    config = Config(port=3000)

    return create_app(
        store_instance=store,
        service_instance=service,
        config=config,
        logger=logger,
    )


@pytest.fixture
async def client(app):
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://www.example.com",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
