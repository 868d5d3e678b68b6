"""Session Access — shared load helpers for handlers (load or raise, typed by kind).

Invariants:
    - Missing sessions raise ResourceNotFoundError("Session", id); never return None
    - load_decision / load_thinking raise WRONG_SESSION_TYPE for the other kind
"""

from deliberate.core.decision_session import DecisionSession
from deliberate.core.domain_types import SessionId, SessionType
from deliberate.core.enforce_session import require_decision, require_thinking
from deliberate.core.errors import ResourceNotFoundError
from deliberate.core.repository_protocols import SessionRepository
from deliberate.core.session_snapshot import AnySession
from deliberate.core.thinking_session import ThinkingSession, Thought


async def load_session(repo: SessionRepository, session_id: str) -> AnySession:
    session = await repo.get(SessionId(session_id))
    if session is None:
        raise ResourceNotFoundError("Session", session_id)
    return session


async def load_decision(repo: SessionRepository, session_id: str) -> DecisionSession:
    return require_decision(await load_session(repo, session_id))


async def load_thinking(repo: SessionRepository, session_id: str) -> ThinkingSession:
    return require_thinking(await load_session(repo, session_id))


async def locate_thought(
    repo: SessionRepository, thought_id: str, session_id: str | None = None,
) -> tuple[ThinkingSession, Thought]:
    """Find a thought by id, in the given session or by scanning thinking sessions."""
    if session_id:
        candidates = [await load_thinking(repo, session_id)]
    else:
        candidates = await repo.list(SessionType.THINKING)
    for session in candidates:
        thought = session.find_thought(thought_id)
        if thought is not None:
            return session, thought
    raise ResourceNotFoundError("Thought", thought_id)
