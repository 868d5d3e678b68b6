"""Decision Session — aggregate for criteria, options, and evaluations.

Invariants:
    - At most one Evaluation per option (upsert_evaluation replaces, never duplicates)
    - Criterion weight in [0, 1]; Score in [0, 10] (enforced at the input boundary)
    - status transitions: active -> completed (irreversible, no reopen)

Design Decisions:
    - Pure dataclasses, no IO: handlers load a snapshot, mutate, and save it back
    - Lookups by id, never by list position
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from deliberate.core.domain_types import CriterionType, SessionStatus


def new_id() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Criterion:
    """A weighted axis of comparison."""
    id: str
    name: str
    description: str
    weight: float
    type: CriterionType


@dataclass
class Option:
    """A candidate choice under evaluation."""
    id: str
    name: str
    description: str
    pros: list[str] = field(default_factory=list)
    cons: list[str] = field(default_factory=list)
    risks: list[str] = field(default_factory=list)
    estimated_cost: float | None = None
    estimated_time: str | None = None


@dataclass
class CriterionScore:
    criteria_id: str
    score: float
    reasoning: str


@dataclass
class Evaluation:
    """Per-criterion scores for one option plus the derived aggregates."""
    option_id: str
    scores: list[CriterionScore]
    overall_score: float
    weighted_score: float
    timestamp: datetime = field(default_factory=utc_now)

    def score_for(self, criteria_id: str) -> CriterionScore | None:
        for score in self.scores:
            if score.criteria_id == criteria_id:
                return score
        return None


@dataclass
class DecisionSession:
    """Decision aggregate root — owns criteria, options, and evaluations."""
    id: str
    context: str
    description: str | None = None
    deadline: str | None = None
    criteria: list[Criterion] = field(default_factory=list)
    options: list[Option] = field(default_factory=list)
    evaluations: list[Evaluation] = field(default_factory=list)
    status: SessionStatus = SessionStatus.ACTIVE
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)
    recommendation: str | None = None

    # --- Computed properties ---------------------------------------------------

    @property
    def is_active(self) -> bool:
        """ACTIVE and EVALUATING both accept edits; only COMPLETED is closed."""
        return self.status != SessionStatus.COMPLETED

    @property
    def total_weight(self) -> float:
        return sum(c.weight for c in self.criteria)

    @property
    def unevaluated_options(self) -> list[Option]:
        evaluated = {e.option_id for e in self.evaluations}
        return [o for o in self.options if o.id not in evaluated]

    # --- Lookups -----------------------------------------------------------------

    def find_criterion(self, criteria_id: str) -> Criterion | None:
        return next((c for c in self.criteria if c.id == criteria_id), None)

    def find_option(self, option_id: str) -> Option | None:
        return next((o for o in self.options if o.id == option_id), None)

    def find_evaluation(self, option_id: str) -> Evaluation | None:
        return next(
            (e for e in self.evaluations if e.option_id == option_id), None,
        )

    # --- Mutations ---------------------------------------------------------------

    def touch(self) -> None:
        self.updated_at = utc_now()

    def upsert_evaluation(self, evaluation: Evaluation) -> None:
        """Replace any prior evaluation of the same option; new one goes last."""
        self.evaluations = [
            e for e in self.evaluations if e.option_id != evaluation.option_id
        ]
        self.evaluations.append(evaluation)
        if self.status == SessionStatus.ACTIVE:
            self.status = SessionStatus.EVALUATING
        self.touch()

    def complete(self, recommended_option_name: str) -> None:
        self.status = SessionStatus.COMPLETED
        self.recommendation = recommended_option_name
        self.touch()
