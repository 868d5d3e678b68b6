"""Evaluation & Scoring — pure functions that turn raw scores into an Evaluation.

Invariants:
    - Scores bind to criteria by criteria_id, never by array position
    - validate_scores accumulates ALL violations (caller raises one error)
    - weighted_score = Σ(score·weight) / Σ(weight) over matched criteria; 0 when Σweight == 0
    - Stored scores follow the session's criteria order

Design Decisions:
    - Warnings (blank reasoning) are returned, not raised: the evaluation still lands
    - Unmatched criteria are skipped in the weighted sum instead of counting as zero,
      so a stale criterion cannot silently drag an option down
"""

from dataclasses import dataclass, field

from deliberate.core.decision_session import (
    Criterion, CriterionScore, DecisionSession, Evaluation,
)
from deliberate.core.domain_types import MAX_SCORE, MIN_SCORE


@dataclass
class ScoreCheck:
    """Outcome of validate_scores."""
    violations: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations


def validate_scores(
    criteria: list[Criterion], scores: list[CriterionScore],
) -> ScoreCheck:
    """Check a score submission against the session's current criteria. Pure."""
    check = ScoreCheck()
    known = {c.id: c for c in criteria}

    if len(scores) != len(criteria):
        check.violations.append(
            f"Expected {len(criteria)} scores (one per criterion), got {len(scores)}"
        )

    seen: set[str] = set()
    for index, score in enumerate(scores):
        if score.criteria_id not in known:
            check.violations.append(
                f"scores[{index}]: unknown criteria_id '{score.criteria_id}'"
            )
        elif score.criteria_id in seen:
            check.violations.append(
                f"scores[{index}]: criterion '{known[score.criteria_id].name}' "
                "scored more than once"
            )
        seen.add(score.criteria_id)

        if not MIN_SCORE <= score.score <= MAX_SCORE:
            check.violations.append(
                f"scores[{index}]: score {score.score} outside "
                f"[{MIN_SCORE:g}, {MAX_SCORE:g}]"
            )
        if not score.reasoning or not score.reasoning.strip():
            name = known[score.criteria_id].name if score.criteria_id in known else score.criteria_id
            check.warnings.append(f"No reasoning given for criterion '{name}'")

    return check


def compute_overall_score(scores: list[CriterionScore]) -> float:
    """Arithmetic mean of raw scores; 0 for an empty list."""
    if not scores:
        return 0.0
    return sum(s.score for s in scores) / len(scores)


def compute_weighted_score(
    criteria: list[Criterion], scores: list[CriterionScore],
) -> float:
    """Weighted mean over criteria that have a matching score."""
    by_id = {s.criteria_id: s.score for s in scores}
    weighted_sum = 0.0
    total_weight = 0.0
    for criterion in criteria:
        if criterion.id not in by_id:
            continue
        weighted_sum += by_id[criterion.id] * criterion.weight
        total_weight += criterion.weight
    if total_weight == 0:
        return 0.0
    return weighted_sum / total_weight


def build_evaluation(
    session: DecisionSession, option_id: str, scores: list[CriterionScore],
) -> Evaluation:
    """Build an Evaluation with scores reordered to match session criteria."""
    order = {c.id: i for i, c in enumerate(session.criteria)}
    ordered = sorted(scores, key=lambda s: order.get(s.criteria_id, len(order)))
    return Evaluation(
        option_id=option_id,
        scores=ordered,
        overall_score=compute_overall_score(ordered),
        weighted_score=compute_weighted_score(session.criteria, ordered),
    )
