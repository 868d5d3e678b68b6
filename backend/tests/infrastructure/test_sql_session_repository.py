"""SQL Session Repository — upsert, filtering, ordering and deletion on SQLite.

Invariants:
    - save() twice for the same id leaves one row with the latest snapshot
    - list() filters by type/status and orders by updated_at descending
    - delete() reports whether a row existed
"""

from datetime import timedelta

from sqlalchemy import func, select

from deliberate.core.domain_types import SessionStatus, SessionType
from deliberate.core.thinking_session import ThinkingSession
from deliberate.infrastructure.sql_session_repository import SqlSessionRepository
from deliberate.models.session_record import SessionRecord


async def _row_count(db_manager) -> int:
    async with db_manager.session() as db:
        return await db.scalar(select(func.count()).select_from(SessionRecord))


async def test_save_and_get_roundtrip(db_manager, crm_session):
    repo = SqlSessionRepository(db_manager)
    await repo.save(crm_session)

    loaded = await repo.get(crm_session.id)
    assert loaded is not crm_session
    assert loaded.context == "Choose CRM vendor"
    assert [e.option_id for e in loaded.evaluations] == ["o1", "o2"]


async def test_get_missing_returns_none(db_manager):
    assert await SqlSessionRepository(db_manager).get("missing") is None


async def test_save_upserts(db_manager, crm_session):
    repo = SqlSessionRepository(db_manager)
    await repo.save(crm_session)
    crm_session.complete("A")
    await repo.save(crm_session)

    assert await _row_count(db_manager) == 1
    loaded = await repo.get(crm_session.id)
    assert loaded.status == SessionStatus.COMPLETED
    assert loaded.recommendation == "A"


async def test_list_filters_and_orders(db_manager, make_decision):
    repo = SqlSessionRepository(db_manager)
    older = make_decision(context="Older decision")
    newer = make_decision(context="Newer decision")
    newer.updated_at = older.updated_at + timedelta(minutes=5)
    thinking = ThinkingSession(id="t1", problem="Why is latency spiky?")
    for session in (older, newer, thinking):
        await repo.save(session)

    decisions = await repo.list(SessionType.DECISION)
    assert [s.context for s in decisions] == ["Newer decision", "Older decision"]

    thinking_only = await repo.list(SessionType.THINKING)
    assert [s.id for s in thinking_only] == ["t1"]

    older.complete("A")
    await repo.save(older)
    completed = await repo.list(status=SessionStatus.COMPLETED)
    assert [s.id for s in completed] == [older.id]


async def test_delete(db_manager, crm_session):
    repo = SqlSessionRepository(db_manager)
    await repo.save(crm_session)
    assert await repo.delete(crm_session.id) is True
    assert await repo.delete(crm_session.id) is False
    assert await repo.get(crm_session.id) is None


async def test_health_check(db_manager):
    assert await db_manager.health_check() is True
