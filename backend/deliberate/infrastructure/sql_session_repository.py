"""SQL Session Repository — SessionRepository over the `session_records` table.

Invariants:
    - One row per session id; save() upserts (last write wins)
    - Row type/status/updated_at always mirror the snapshot in `data`
    - Every DB call goes through DatabaseSessionManager (rollback + DatabaseError mapping)

Design Decisions:
    - Get-then-merge upsert over dialect-specific ON CONFLICT: identical on sqlite and postgres
"""

import logging

from sqlalchemy import delete, select

from deliberate.core.domain_types import SessionId, SessionStatus, SessionType
from deliberate.core.session_snapshot import (
    AnySession, session_from_snapshot, session_to_snapshot, session_type_of,
)
from deliberate.infrastructure.database import DatabaseSessionManager
from deliberate.models.session_record import SessionRecord

logger = logging.getLogger(__name__)


def _to_session(record: SessionRecord) -> AnySession:
    return session_from_snapshot(record.type, record.data)


class SqlSessionRepository:
    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def get(self, session_id: SessionId) -> AnySession | None:
        async with self._db.session() as db:
            record = await db.get(SessionRecord, session_id)
            return _to_session(record) if record else None

    async def save(self, session: AnySession) -> None:
        snapshot = session_to_snapshot(session)
        async with self._db.session() as db:
            record = await db.get(SessionRecord, session.id)
            if record is None:
                record = SessionRecord(
                    id=session.id,
                    type=session_type_of(session).value,
                    created_at=session.created_at,
                )
                db.add(record)
            record.data = snapshot
            record.status = session.status.value
            record.updated_at = session.updated_at
            await db.commit()
        logger.debug(
            "Session saved",
            extra={"session_id": session.id, "session_type": snapshot["type"]},
        )

    async def delete(self, session_id: SessionId) -> bool:
        async with self._db.session() as db:
            result = await db.execute(
                delete(SessionRecord).where(SessionRecord.id == session_id),
            )
            await db.commit()
            return result.rowcount > 0

    async def list(
        self,
        session_type: SessionType | None = None,
        status: SessionStatus | None = None,
    ) -> list[AnySession]:
        query = select(SessionRecord).order_by(SessionRecord.updated_at.desc())
        if session_type is not None:
            query = query.where(SessionRecord.type == session_type.value)
        if status is not None:
            query = query.where(SessionRecord.status == status.value)
        async with self._db.session() as db:
            result = await db.execute(query)
            return [_to_session(r) for r in result.scalars().all()]
