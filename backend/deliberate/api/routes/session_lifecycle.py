"""Session Lifecycle — REST read/delete access to stored sessions and their audit trail.

Invariants:
    - Unknown session ids raise ResourceNotFoundError (global handler -> 404)
    - DELETE removes the session from the store and the cache, and is audited
    - Creation and mutation only happen through tool calls

Design Decisions:
    - Thin routes: repository + snapshot functions, no business logic here
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from deliberate.api.dependencies import get_context
from deliberate.core.domain_types import SessionId, SessionStatus, SessionType
from deliberate.core.errors import ResourceNotFoundError
from deliberate.core.session_snapshot import session_to_snapshot
from deliberate.infrastructure.service_context import ServiceContext
from deliberate.schemas.session import AuditEntryResponse, SessionSummary
from deliberate.services.handle_sessions import summarize_session

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/sessions", tags=["sessions"])


@router.get("", response_model=list[SessionSummary])
async def list_sessions(
    session_type: SessionType | None = Query(None, alias="type"),
    status_filter: SessionStatus | None = Query(None, alias="status"),
    limit: int = Query(50, ge=1, le=500),
    offset: int = Query(0, ge=0),
    context: ServiceContext = Depends(get_context),
):
    """List sessions, newest activity first."""
    sessions = await context.repository.list(session_type, status_filter)
    return [summarize_session(s) for s in sessions[offset:offset + limit]]


@router.get("/{session_id}")
async def get_session(
    session_id: str, context: ServiceContext = Depends(get_context),
):
    """Full session snapshot."""
    session = await context.repository.get(SessionId(session_id))
    if session is None:
        raise ResourceNotFoundError("Session", session_id)
    return session_to_snapshot(session)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(
    session_id: str, context: ServiceContext = Depends(get_context),
):
    """Delete a session permanently."""
    deleted = await context.repository.delete(SessionId(session_id))
    if not deleted:
        raise ResourceNotFoundError("Session", session_id)
    context.audit_log.record("delete_session", session_id)
    logger.info("Session deleted", extra={"session_id": session_id})


@router.get("/{session_id}/audit", response_model=list[AuditEntryResponse])
async def get_session_audit(
    session_id: str,
    limit: int = Query(100, ge=1, le=1000),
    context: ServiceContext = Depends(get_context),
):
    """Audit entries recorded for one session, oldest first."""
    entries = context.audit_log.entries(session_id=session_id, limit=limit)
    return [e.to_dict() for e in entries]
