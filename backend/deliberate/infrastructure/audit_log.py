"""Audit Log — bounded in-memory trail of tool actions, mirrored to the `deliberate.audit` logger.

Invariants:
    - At most max_entries entries; oldest dropped first
    - Every record() also emits one INFO log line with action/session_id extras
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone

audit_logger = logging.getLogger("deliberate.audit")

DEFAULT_MAX_ENTRIES: int = 1000


@dataclass
class AuditEntry:
    action: str
    session_id: str | None
    details: dict = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict:
        return {
            "timestamp": self.timestamp.isoformat(),
            "action": self.action,
            "session_id": self.session_id,
            "details": self.details,
        }


class AuditLog:
    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES):
        self._entries: deque[AuditEntry] = deque(maxlen=max_entries)

    def __len__(self) -> int:
        return len(self._entries)

    def record(
        self, action: str, session_id: str | None = None,
        details: dict | None = None,
    ) -> AuditEntry:
        entry = AuditEntry(action=action, session_id=session_id, details=details or {})
        self._entries.append(entry)
        audit_logger.info(
            f"audit: {action}",
            extra={"action": action, "session_id": session_id},
        )
        return entry

    def entries(
        self, session_id: str | None = None, limit: int | None = None,
    ) -> list[AuditEntry]:
        """Newest last. Filter by session when given."""
        selected = [
            e for e in self._entries
            if session_id is None or e.session_id == session_id
        ]
        if limit is not None:
            selected = selected[-limit:] if limit > 0 else []
        return selected
