"""Session Cache — TTL expiry, size cap, sweep, and the cached repository wrapper."""

import pytest

from deliberate.core.domain_types import SessionStatus
from deliberate.infrastructure.cache import TTLCache
from deliberate.infrastructure.cached_session_repository import CachedSessionRepository
from deliberate.infrastructure.housekeeping import Housekeeper
from deliberate.infrastructure.memory_session_repository import InMemorySessionRepository


# ─── TTLCache ───────────────────────────────────────────────────

def test_get_within_ttl(clock):
    cache = TTLCache(max_size=10, ttl_seconds=60, clock=clock)
    cache.set("a", 1)
    clock.advance(59)
    assert cache.get("a") == 1
    assert "a" in cache


def test_expired_entries_not_returned(clock):
    cache = TTLCache(max_size=10, ttl_seconds=60, clock=clock)
    cache.set("a", 1)
    clock.advance(60)
    assert cache.get("a") is None
    assert "a" not in cache
    assert cache.stats.misses == 1


def test_size_cap_evicts_oldest(clock):
    cache = TTLCache(max_size=2, ttl_seconds=60, clock=clock)
    cache.set("a", 1)
    clock.advance(1)
    cache.set("b", 2)
    clock.advance(1)
    cache.set("c", 3)
    assert len(cache) == 2
    assert cache.get("a") is None
    assert cache.get("c") == 3
    assert cache.stats.evictions == 1


def test_overwrite_does_not_evict(clock):
    cache = TTLCache(max_size=2, ttl_seconds=60, clock=clock)
    cache.set("a", 1)
    cache.set("b", 2)
    cache.set("a", 10)
    assert len(cache) == 2
    assert cache.get("b") == 2


def test_sweep_removes_only_expired(clock):
    cache = TTLCache(max_size=10, ttl_seconds=60, clock=clock)
    cache.set("old", 1)
    clock.advance(30)
    cache.set("new", 2)
    clock.advance(40)
    assert cache.sweep() == 1
    assert len(cache) == 1
    assert cache.get("new") == 2


def test_invalid_size():
    with pytest.raises(ValueError):
        TTLCache(max_size=0)


def test_housekeeper_sweep_once(clock):
    cache = TTLCache(max_size=10, ttl_seconds=1, clock=clock)
    cache.set("a", 1)
    clock.advance(2)
    assert Housekeeper(cache).sweep_once() == 1
    assert Housekeeper(None).sweep_once() == 0


async def test_housekeeper_start_stop():
    keeper = Housekeeper(TTLCache(), interval_seconds=3600)
    keeper.start()
    assert keeper.running
    keeper.start()
    await keeper.stop()
    assert not keeper.running


# ─── CachedSessionRepository ────────────────────────────────────

async def test_read_through_returns_fresh_copies(crm_session):
    inner = InMemorySessionRepository()
    repo = CachedSessionRepository(inner, TTLCache())
    await repo.save(crm_session)

    first = await repo.get(crm_session.id)
    first.complete("A")
    second = await repo.get(crm_session.id)
    assert second.status == SessionStatus.EVALUATING
    assert repo.cache.stats.hits == 2


async def test_miss_falls_through_to_inner(crm_session):
    inner = InMemorySessionRepository()
    await inner.save(crm_session)
    repo = CachedSessionRepository(inner, TTLCache())

    assert (await repo.get(crm_session.id)).id == crm_session.id
    assert crm_session.id in repo.cache


async def test_delete_invalidates(crm_session):
    repo = CachedSessionRepository(InMemorySessionRepository(), TTLCache())
    await repo.save(crm_session)
    assert await repo.delete(crm_session.id) is True
    assert await repo.get(crm_session.id) is None
