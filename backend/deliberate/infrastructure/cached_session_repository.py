"""Cached Session Repository — read-through TTL cache in front of another repository.

Invariants:
    - Cache holds snapshots keyed by session id; a hit rebuilds a fresh aggregate
    - save() writes through to the inner store, then refreshes the cache
    - delete() always invalidates the cache entry
    - list() bypasses the cache
"""

from deliberate.core.domain_types import SessionId, SessionStatus, SessionType
from deliberate.core.repository_protocols import SessionRepository
from deliberate.core.session_snapshot import (
    AnySession, session_from_snapshot, session_to_snapshot, session_type_of,
)
from deliberate.infrastructure.cache import TTLCache


class CachedSessionRepository:
    def __init__(self, inner: SessionRepository, cache: TTLCache):
        self._inner = inner
        self.cache = cache

    def _remember(self, session: AnySession) -> None:
        self.cache.set(
            session.id, (session_type_of(session), session_to_snapshot(session)),
        )

    async def get(self, session_id: SessionId) -> AnySession | None:
        cached = self.cache.get(session_id)
        if cached is not None:
            session_type, snapshot = cached
            return session_from_snapshot(session_type, snapshot)
        session = await self._inner.get(session_id)
        if session is not None:
            self._remember(session)
        return session

    async def save(self, session: AnySession) -> None:
        await self._inner.save(session)
        self._remember(session)

    async def delete(self, session_id: SessionId) -> bool:
        self.cache.delete(session_id)
        return await self._inner.delete(session_id)

    async def list(
        self,
        session_type: SessionType | None = None,
        status: SessionStatus | None = None,
    ) -> list[AnySession]:
        return await self._inner.list(session_type, status)
