"""Session Snapshot — serialization / deserialization for session aggregates.

Invariants:
    - *_to_snapshot produces a JSON-safe dict (no Enums, no datetimes, no dataclasses)
    - *_from_snapshot reconstructs an equivalent aggregate from that dict
    - Missing keys fall back to dataclass defaults (forward-compatible)

Design Decisions:
    - Explicit per-type functions over dataclasses.asdict: enums and datetimes need
      conversion both ways and asdict would recurse into them blindly
"""

from datetime import datetime

from deliberate.core.decision_session import (
    Criterion, CriterionScore, DecisionSession, Evaluation, Option, utc_now,
)
from deliberate.core.domain_types import (
    CriterionType, SessionStatus, SessionType,
)
from deliberate.core.thinking_session import (
    DEFAULT_MAX_THOUGHTS, Branch, ThinkingSession, Thought,
)

AnySession = DecisionSession | ThinkingSession


def _iso(value: datetime) -> str:
    return value.isoformat()


def _parse_dt(value: str | None) -> datetime:
    return datetime.fromisoformat(value) if value else utc_now()


def session_type_of(session: AnySession) -> SessionType:
    if isinstance(session, DecisionSession):
        return SessionType.DECISION
    return SessionType.THINKING


# ─── Decision ────────────────────────────────────────────────────

def _criterion_to_dict(c: Criterion) -> dict:
    return {
        "id": c.id, "name": c.name, "description": c.description,
        "weight": c.weight, "type": c.type.value,
    }


def _option_to_dict(o: Option) -> dict:
    return {
        "id": o.id, "name": o.name, "description": o.description,
        "pros": list(o.pros), "cons": list(o.cons), "risks": list(o.risks),
        "estimated_cost": o.estimated_cost,
        "estimated_time": o.estimated_time,
    }


def evaluation_to_dict(e: Evaluation) -> dict:
    return {
        "option_id": e.option_id,
        "scores": [
            {"criteria_id": s.criteria_id, "score": s.score, "reasoning": s.reasoning}
            for s in e.scores
        ],
        "overall_score": e.overall_score,
        "weighted_score": e.weighted_score,
        "timestamp": _iso(e.timestamp),
    }


def decision_to_snapshot(session: DecisionSession) -> dict:
    """Serialize DecisionSession to JSON-safe dict. Pure, no IO."""
    return {
        "id": session.id,
        "type": SessionType.DECISION.value,
        "context": session.context,
        "description": session.description,
        "deadline": session.deadline,
        "criteria": [_criterion_to_dict(c) for c in session.criteria],
        "options": [_option_to_dict(o) for o in session.options],
        "evaluations": [evaluation_to_dict(e) for e in session.evaluations],
        "status": session.status.value,
        "created_at": _iso(session.created_at),
        "updated_at": _iso(session.updated_at),
        "recommendation": session.recommendation,
    }


def decision_from_snapshot(data: dict) -> DecisionSession:
    """Reconstruct DecisionSession from snapshot dict. Pure, no IO."""
    return DecisionSession(
        id=data["id"],
        context=data.get("context", ""),
        description=data.get("description"),
        deadline=data.get("deadline"),
        criteria=[
            Criterion(
                id=c["id"], name=c["name"], description=c.get("description", ""),
                weight=float(c.get("weight", 0.0)),
                type=CriterionType(c.get("type", CriterionType.BENEFIT.value)),
            )
            for c in data.get("criteria", [])
        ],
        options=[
            Option(
                id=o["id"], name=o["name"], description=o.get("description", ""),
                pros=list(o.get("pros", [])), cons=list(o.get("cons", [])),
                risks=list(o.get("risks", [])),
                estimated_cost=o.get("estimated_cost"),
                estimated_time=o.get("estimated_time"),
            )
            for o in data.get("options", [])
        ],
        evaluations=[
            Evaluation(
                option_id=e["option_id"],
                scores=[
                    CriterionScore(
                        criteria_id=s["criteria_id"], score=float(s["score"]),
                        reasoning=s.get("reasoning", ""),
                    )
                    for s in e.get("scores", [])
                ],
                overall_score=float(e.get("overall_score", 0.0)),
                weighted_score=float(e.get("weighted_score", 0.0)),
                timestamp=_parse_dt(e.get("timestamp")),
            )
            for e in data.get("evaluations", [])
        ],
        status=SessionStatus(data.get("status", SessionStatus.ACTIVE.value)),
        created_at=_parse_dt(data.get("created_at")),
        updated_at=_parse_dt(data.get("updated_at")),
        recommendation=data.get("recommendation"),
    )


# ─── Thinking ────────────────────────────────────────────────────

def thought_to_dict(t: Thought) -> dict:
    return {
        "id": t.id, "content": t.content, "timestamp": _iso(t.timestamp),
        "parent_id": t.parent_id, "branch_id": t.branch_id,
        "metadata": dict(t.metadata),
    }


def branch_to_dict(b: Branch) -> dict:
    return {
        "id": b.id, "from_thought_id": b.from_thought_id,
        "description": b.description, "thoughts": list(b.thoughts),
        "created_at": _iso(b.created_at),
    }


def thinking_to_snapshot(session: ThinkingSession) -> dict:
    """Serialize ThinkingSession to JSON-safe dict. Pure, no IO."""
    return {
        "id": session.id,
        "type": SessionType.THINKING.value,
        "problem": session.problem,
        "context": session.context,
        "max_thoughts": session.max_thoughts,
        "thoughts": [thought_to_dict(t) for t in session.thoughts],
        "branches": [branch_to_dict(b) for b in session.branches],
        "status": session.status.value,
        "created_at": _iso(session.created_at),
        "updated_at": _iso(session.updated_at),
        "conclusion": session.conclusion,
        "conclusion_confidence": session.conclusion_confidence,
    }


def thinking_from_snapshot(data: dict) -> ThinkingSession:
    """Reconstruct ThinkingSession from snapshot dict. Pure, no IO."""
    return ThinkingSession(
        id=data["id"],
        problem=data.get("problem", ""),
        context=data.get("context"),
        max_thoughts=int(data.get("max_thoughts", DEFAULT_MAX_THOUGHTS)),
        thoughts=[
            Thought(
                id=t["id"], content=t.get("content", ""),
                timestamp=_parse_dt(t.get("timestamp")),
                parent_id=t.get("parent_id"), branch_id=t.get("branch_id"),
                metadata=dict(t.get("metadata", {})),
            )
            for t in data.get("thoughts", [])
        ],
        branches=[
            Branch(
                id=b["id"], from_thought_id=b["from_thought_id"],
                description=b.get("description", ""),
                thoughts=list(b.get("thoughts", [])),
                created_at=_parse_dt(b.get("created_at")),
            )
            for b in data.get("branches", [])
        ],
        status=SessionStatus(data.get("status", SessionStatus.ACTIVE.value)),
        created_at=_parse_dt(data.get("created_at")),
        updated_at=_parse_dt(data.get("updated_at")),
        conclusion=data.get("conclusion"),
        conclusion_confidence=data.get("conclusion_confidence"),
    )


# ─── Dispatch by type ────────────────────────────────────────────

def session_to_snapshot(session: AnySession) -> dict:
    if isinstance(session, DecisionSession):
        return decision_to_snapshot(session)
    return thinking_to_snapshot(session)


def session_from_snapshot(session_type: SessionType | str, data: dict) -> AnySession:
    if SessionType(session_type) == SessionType.DECISION:
        return decision_from_snapshot(data)
    return thinking_from_snapshot(data)
