from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from clientip.main import app
from clientip.rate_limit import limiter

# Socket address the ASGI transport reports for test requests
TEST_CLIENT = ("203.0.113.50", 50000)


@pytest.fixture(autouse=True)
def _disable_rate_limiter():
    """Rate limiting is off unless a test module turns it on."""
    limiter.enabled = False
    yield
    limiter.reset()


def _make_client(client: tuple[str, int]) -> AsyncClient:
    transport = ASGITransport(app=app, client=client)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    async with _make_client(TEST_CLIENT) as ac:
        yield ac


@pytest_asyncio.fixture
async def proxied_client() -> AsyncGenerator[AsyncClient, None]:
    """Client whose connections arrive from a private reverse proxy."""
    async with _make_client(("10.0.0.1", 443)) as ac:
        yield ac


@pytest_asyncio.fixture
async def loopback_client() -> AsyncGenerator[AsyncClient, None]:
    async with _make_client(("127.0.0.1", 42123)) as ac:
        yield ac
