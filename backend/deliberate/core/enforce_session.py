"""Session Enforcement — state, kind and capacity rules checked before every mutation.

Invariants:
    - Mutations require an active session (completed is terminal)
    - Decision tools require a DecisionSession, thinking tools a ThinkingSession
    - MAX_CRITERIA / MAX_OPTIONS / MAX_THOUGHTS_LIMIT are the single source of truth
    - Expiry (SESSION_LIFETIME) is reported, never enforced automatically

Design Decisions:
    - Raise typed errors instead of returning error dicts: ToolDispatch converts them
      to the envelope in one place
"""

from datetime import datetime, timedelta

from deliberate.core.decision_session import DecisionSession, utc_now
from deliberate.core.errors import (
    InvalidStateError, ThoughtLimitReachedError, ToolValidationError,
)
from deliberate.core.session_snapshot import AnySession
from deliberate.core.thinking_session import ThinkingSession

MAX_CRITERIA: int = 50
MAX_OPTIONS: int = 100
MAX_THOUGHTS_LIMIT: int = 1000
SESSION_LIFETIME: timedelta = timedelta(hours=24)


def require_active(session: AnySession) -> None:
    if not session.is_active:
        raise InvalidStateError(
            f"Session '{session.id}' is {session.status.value}; "
            "no further changes are allowed.",
        )


def require_decision(session: AnySession) -> DecisionSession:
    if not isinstance(session, DecisionSession):
        raise InvalidStateError(
            f"Session '{session.id}' is not a decision session.",
            code="WRONG_SESSION_TYPE",
        )
    return session


def require_thinking(session: AnySession) -> ThinkingSession:
    if not isinstance(session, ThinkingSession):
        raise InvalidStateError(
            f"Session '{session.id}' is not a thinking session.",
            code="WRONG_SESSION_TYPE",
        )
    return session


def check_criteria_capacity(session: DecisionSession) -> None:
    if len(session.criteria) >= MAX_CRITERIA:
        raise ToolValidationError(
            [f"Maximum {MAX_CRITERIA} criteria per session reached"],
            field="criteria",
        )


def check_option_capacity(session: DecisionSession) -> None:
    if len(session.options) >= MAX_OPTIONS:
        raise ToolValidationError(
            [f"Maximum {MAX_OPTIONS} options per session reached"],
            field="options",
        )


def check_thought_capacity(session: ThinkingSession) -> None:
    if len(session.thoughts) >= session.max_thoughts:
        raise ThoughtLimitReachedError(session.max_thoughts)


def is_expired(session: AnySession, now: datetime | None = None) -> bool:
    return (now or utc_now()) - session.created_at > SESSION_LIFETIME
