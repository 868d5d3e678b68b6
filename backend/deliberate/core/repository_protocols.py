"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Session persistence accessed only through SessionRepository
    - Implementations provided by shell via dependency injection (ServiceContext)

Design Decisions:
    - Protocol over ABC: structural subtyping, SQL / in-memory / cached adapters
      share no base class
    - Repository speaks in aggregates (DecisionSession | ThinkingSession), not rows:
      snapshot conversion happens inside the adapter
"""

from typing import Protocol

from deliberate.core.domain_types import SessionId, SessionStatus, SessionType
from deliberate.core.session_snapshot import AnySession


class SessionRepository(Protocol):
    """Contract for session persistence — implemented by shell."""
    async def get(self, session_id: SessionId) -> AnySession | None: ...
    async def save(self, session: AnySession) -> None: ...
    async def list(
        self,
        session_type: SessionType | None = None,
        status: SessionStatus | None = None,
    ) -> list[AnySession]: ...
    async def delete(self, session_id: SessionId) -> bool: ...
