"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - SessionId, CriterionId, OptionId, ThoughtId, BranchId wrap str UUIDs
    - Score is bounded 0.0–10.0, Weight and Confidence are bounded 0.0–1.0
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (tool results are JSON)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

SessionId = NewType("SessionId", str)
CriterionId = NewType("CriterionId", str)
OptionId = NewType("OptionId", str)
ThoughtId = NewType("ThoughtId", str)
BranchId = NewType("BranchId", str)


# ─── Value Types ─────────────────────────────────────────────────

Score = NewType("Score", float)             # 0.0–10.0
Weight = NewType("Weight", float)           # 0.0–1.0
Confidence = NewType("Confidence", float)   # 0.0–1.0

MIN_SCORE: float = 0.0
MAX_SCORE: float = 10.0


# ─── Enums ───────────────────────────────────────────────────────

class SessionType(str, Enum):
    """Session kinds — maps to the store's `type` column."""
    DECISION = "decision"
    THINKING = "thinking"


class SessionStatus(str, Enum):
    """Session lifecycle states — maps to the store's `status` column.

    Decisions: ACTIVE -> EVALUATING on the first evaluation -> COMPLETED on recommendation.
    Thinking sessions skip EVALUATING.
    """
    ACTIVE = "active"
    EVALUATING = "evaluating"
    COMPLETED = "completed"


class CriterionType(str, Enum):
    """Axis kind for a decision criterion."""
    BENEFIT = "benefit"
    COST = "cost"
    RISK = "risk"
    FEASIBILITY = "feasibility"


class BiasType(str, Enum):
    """Heuristic bias flags produced by the bias rule table."""
    CONFIRMATION = "confirmation"
    ANCHORING = "anchoring"
    AVAILABILITY = "availability"
    OVERCONFIDENCE = "overconfidence"


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ToolCategory(str, Enum):
    """Tool groupings for registry and rate limiting."""
    SESSION = "session"
    DECISION = "decision"
    ANALYSIS = "analysis"
    QUALITY = "quality"
    THINKING = "thinking"
