"""Session Schemas — session lookup arguments and REST response shapes."""

from datetime import datetime

from pydantic import BaseModel, Field

from deliberate.core.domain_types import SessionStatus, SessionType
from deliberate.schemas.tool_input import ToolInput


class GetSessionInput(ToolInput):
    session_id: str = Field(min_length=1)


class ListSessionsInput(ToolInput):
    type: SessionType | None = None
    status: SessionStatus | None = None


class SessionSummary(BaseModel):
    """Session list item — public-facing summary, not the full snapshot."""
    id: str
    type: SessionType
    status: SessionStatus
    title: str
    created_at: datetime
    updated_at: datetime


class AuditEntryResponse(BaseModel):
    timestamp: datetime
    action: str
    session_id: str | None
    details: dict
