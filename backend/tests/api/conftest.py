"""API fixtures — FastAPI app with an in-memory ServiceContext.

Invariants:
    - get_context overridden: the lifespan (and its database) never runs
    - Fresh app per test via create_app(), so overrides never leak between tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from deliberate.api.dependencies import get_context
from deliberate.config import Settings
from deliberate.infrastructure.cache import TTLCache
from deliberate.infrastructure.cached_session_repository import CachedSessionRepository
from deliberate.infrastructure.memory_session_repository import InMemorySessionRepository
from deliberate.infrastructure.service_context import ServiceContext
from deliberate.main import create_app


@pytest.fixture
def api_context():
    cache = TTLCache(max_size=100, ttl_seconds=60)
    return ServiceContext(
        repository=CachedSessionRepository(InMemorySessionRepository(), cache),
        cache=cache,
    )


@pytest.fixture
async def client(api_context):
    """FastAPI test client with the service context overridden."""
    app = create_app(Settings(session_store="memory"))
    app.dependency_overrides[get_context] = lambda: api_context

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
