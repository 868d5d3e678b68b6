"""SessionRecord ORM — one row per session, full aggregate serialized in `data`.

Invariants:
    - id is the session UUID as a 36-char string (portable across sqlite / postgres)
    - type in {decision, thinking}; status mirrors data["status"]
    - data holds the complete snapshot (core/session_snapshot.py)

Design Decisions:
    - JSON column over normalized tables: sessions are always loaded and saved whole
    - type/status/updated_at denormalized out of `data` so list() filters and sorts in SQL
"""

from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from deliberate.db.base import Base


class SessionRecord(Base):
    """Persisted session — decision or thinking."""
    __tablename__ = "session_records"
    __table_args__ = (
        Index("ix_session_records_type_status", "type", "status"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    data: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="active",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
