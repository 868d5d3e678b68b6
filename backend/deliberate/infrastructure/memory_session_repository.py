"""In-Memory Session Repository — dict of snapshots behind the SessionRepository port.

Invariants:
    - Stores snapshots, never live aggregates: get() always returns a fresh object
    - list() ordered by updated_at descending, filtered by type/status when given
"""

from deliberate.core.domain_types import SessionId, SessionStatus, SessionType
from deliberate.core.session_snapshot import (
    AnySession, session_from_snapshot, session_to_snapshot, session_type_of,
)


class InMemorySessionRepository:
    """Process-local store (tests, single-process dev runs)."""

    def __init__(self):
        self._records: dict[str, tuple[SessionType, dict]] = {}

    async def get(self, session_id: SessionId) -> AnySession | None:
        record = self._records.get(session_id)
        if record is None:
            return None
        session_type, snapshot = record
        return session_from_snapshot(session_type, snapshot)

    async def save(self, session: AnySession) -> None:
        self._records[session.id] = (
            session_type_of(session), session_to_snapshot(session),
        )

    async def delete(self, session_id: SessionId) -> bool:
        return self._records.pop(session_id, None) is not None

    async def list(
        self,
        session_type: SessionType | None = None,
        status: SessionStatus | None = None,
    ) -> list[AnySession]:
        sessions = [
            session_from_snapshot(kind, snapshot)
            for kind, snapshot in self._records.values()
            if session_type is None or kind == session_type
        ]
        if status is not None:
            sessions = [s for s in sessions if s.status == status]
        return sorted(sessions, key=lambda s: s.updated_at, reverse=True)
