"""Logic Validation — structural and consistency checks over a decision session.

Invariants:
    - PURE: reads the session, returns a LogicReport, never mutates
    - Accumulates every finding (errors, warnings, suggestions); never fails fast
    - consistency = max(0, 1 - 0.2·errors - 0.05·warnings)
    - strict_mode: warnings also invalidate the report

Rules:
    (a) |Σweights - 1| > 0.1           -> warning
    (b) < 2 criteria or < 2 options   -> error
    (c) duplicate criterion names      -> error (case-insensitive)
    (d) option without a matching evaluation (count + ids) -> error per option
    (e) score outside [0, 10]          -> error; reasoning < 10 chars -> warning
    (f) mean score < 3 or > 8          -> suggestion
    plus: option with no pros and no cons -> suggestion; expired session -> warning
"""

import statistics
from dataclasses import dataclass, field
from datetime import datetime

from deliberate.core.decision_session import DecisionSession
from deliberate.core.domain_types import MAX_SCORE, MIN_SCORE
from deliberate.core.enforce_session import is_expired

WEIGHT_SUM_TOLERANCE: float = 0.1
MIN_REASONING_LENGTH: int = 10
LOW_MEAN_SCORE: float = 3.0
HIGH_MEAN_SCORE: float = 8.0
ERROR_PENALTY: float = 0.2
WARNING_PENALTY: float = 0.05


@dataclass
class LogicReport:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)
    strict_mode: bool = False

    @property
    def is_valid(self) -> bool:
        if self.errors:
            return False
        return not (self.strict_mode and self.warnings)

    @property
    def consistency(self) -> float:
        penalty = ERROR_PENALTY * len(self.errors) + WARNING_PENALTY * len(self.warnings)
        return max(0.0, 1.0 - penalty)

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "errors": self.errors,
            "warnings": self.warnings,
            "suggestions": self.suggestions,
            "consistency": round(self.consistency, 4),
            "strict_mode": self.strict_mode,
        }


def _check_weights(session: DecisionSession, report: LogicReport) -> None:
    if not session.criteria:
        return
    total = session.total_weight
    if abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
        report.warnings.append(f"Criteria weights sum to {total:.2f}, not 1.0")


def _check_minimums(session: DecisionSession, report: LogicReport) -> None:
    if len(session.criteria) < 2:
        report.errors.append(
            f"At least 2 criteria are required (found {len(session.criteria)})"
        )
    if len(session.options) < 2:
        report.errors.append(
            f"At least 2 options are required (found {len(session.options)})"
        )


def _check_duplicate_names(session: DecisionSession, report: LogicReport) -> None:
    seen: set[str] = set()
    reported: set[str] = set()
    for criterion in session.criteria:
        key = criterion.name.strip().lower()
        if key in seen and key not in reported:
            report.errors.append(f"Duplicate criterion name: '{criterion.name}'")
            reported.add(key)
        seen.add(key)


def _check_coverage(session: DecisionSession, report: LogicReport) -> None:
    criteria_ids = {c.id for c in session.criteria}
    for option in session.options:
        evaluation = session.find_evaluation(option.id)
        if evaluation is None:
            report.errors.append(f"Option '{option.name}' has not been evaluated")
            continue
        scored = {s.criteria_id for s in evaluation.scores}
        if len(evaluation.scores) != len(session.criteria) or scored != criteria_ids:
            report.errors.append(
                f"Option '{option.name}' evaluation does not match the current "
                f"criteria ({len(evaluation.scores)} scores for "
                f"{len(session.criteria)} criteria)"
            )


def _check_scores(session: DecisionSession, report: LogicReport) -> None:
    for evaluation in session.evaluations:
        option = session.find_option(evaluation.option_id)
        option_name = option.name if option else evaluation.option_id
        for score in evaluation.scores:
            criterion = session.find_criterion(score.criteria_id)
            criterion_name = criterion.name if criterion else score.criteria_id
            if not MIN_SCORE <= score.score <= MAX_SCORE:
                report.errors.append(
                    f"Score {score.score:g} for '{option_name}' on "
                    f"'{criterion_name}' is outside [0, 10]"
                )
            if len(score.reasoning.strip()) < MIN_REASONING_LENGTH:
                report.warnings.append(
                    f"Reasoning for '{option_name}' on '{criterion_name}' is too brief"
                )


def _check_score_distribution(session: DecisionSession, report: LogicReport) -> None:
    all_scores = [s.score for e in session.evaluations for s in e.scores]
    if not all_scores:
        return
    mean = statistics.fmean(all_scores)
    if mean < LOW_MEAN_SCORE:
        report.suggestions.append(
            f"Average score is low ({mean:.1f}); consider whether better options exist"
        )
    elif mean > HIGH_MEAN_SCORE:
        report.suggestions.append(
            f"Average score is high ({mean:.1f}); check the scoring for optimism"
        )


def _check_evidence(session: DecisionSession, report: LogicReport) -> None:
    for option in session.options:
        if not option.pros and not option.cons:
            report.suggestions.append(
                f"Option '{option.name}' lists no pros or cons; add supporting evidence"
            )


def validate_logic(
    session: DecisionSession, strict_mode: bool = False,
    now: datetime | None = None,
) -> LogicReport:
    """Run every logic rule against the session. Pure."""
    report = LogicReport(strict_mode=strict_mode)
    _check_weights(session, report)
    _check_minimums(session, report)
    _check_duplicate_names(session, report)
    _check_coverage(session, report)
    _check_scores(session, report)
    _check_score_distribution(session, report)
    _check_evidence(session, report)
    if is_expired(session, now):
        report.warnings.append(
            "Session is older than 24 hours; its context may be outdated"
        )
    return report
