"""Session Handlers — read-only session lookup tools (2 methods).

Invariants:
    - get_session returns the full snapshot plus its type
    - list_sessions returns summaries ordered by updated_at descending
"""

from deliberate.core.decision_session import DecisionSession
from deliberate.core.session_snapshot import (
    AnySession, session_to_snapshot, session_type_of,
)
from deliberate.infrastructure.service_context import ServiceContext
from deliberate.schemas.session import GetSessionInput, ListSessionsInput
from deliberate.schemas.tool_input import parse_input
from deliberate.services.session_access import load_session
from deliberate.services.tool_envelope import tool_ok


def summarize_session(session: AnySession) -> dict:
    """List-item view: id, type, status, title, timestamps."""
    title = session.context if isinstance(session, DecisionSession) else session.problem
    return {
        "id": session.id,
        "type": session_type_of(session).value,
        "status": session.status.value,
        "title": title,
        "created_at": session.created_at.isoformat(),
        "updated_at": session.updated_at.isoformat(),
    }


class SessionHandlers:
    """Cross-cutting: fetch one session or list many."""

    def __init__(self, context: ServiceContext):
        self.repo = context.repository

    async def get_session(self, input_data: dict) -> dict:
        args = parse_input(GetSessionInput, input_data)
        session = await load_session(self.repo, args.session_id)
        return tool_ok(
            session_to_snapshot(session),
            session_type=session_type_of(session).value,
        )

    async def list_sessions(self, input_data: dict) -> dict:
        args = parse_input(ListSessionsInput, input_data)
        sessions = await self.repo.list(args.type, args.status)
        return tool_ok(
            [summarize_session(s) for s in sessions],
            total_sessions=len(sessions),
        )
