"""Infrastructure fixtures — in-memory SQLite behind DatabaseSessionManager.

Invariants:
    - Every test gets a fresh in-memory database with tables created
    - StaticPool: every session shares the single in-memory connection
"""

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from deliberate.infrastructure.database import DatabaseSessionManager

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def db_manager():
    engine = create_async_engine(TEST_DB_URL, poolclass=StaticPool)
    manager = DatabaseSessionManager(TEST_DB_URL, engine=engine)
    await manager.create_all()
    yield manager
    await manager.dispose()


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()
