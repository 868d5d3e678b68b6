"""Scoring — tests for score validation and weighted/overall aggregation.

Tests cover:
    - weighted_score = Σ(score·weight)/Σ(weight) (0.5/0.3/0.2 x 8/6/4 -> 6.6)
    - validate_scores accumulates every violation in one pass
    - Blank reasoning is a warning, not a violation
    - build_evaluation orders scores like the session criteria
"""

import pytest

from deliberate.core.decision_session import Criterion, CriterionScore
from deliberate.core.domain_types import CriterionType
from deliberate.core.scoring import (
    build_evaluation, compute_overall_score, compute_weighted_score, validate_scores,
)


def _criteria(*weights):
    return [
        Criterion(
            id=f"c{i + 1}", name=f"C{i + 1}", description="",
            weight=w, type=CriterionType.BENEFIT,
        )
        for i, w in enumerate(weights)
    ]


def _scores(*values, reasoning="because it fits"):
    return [
        CriterionScore(criteria_id=f"c{i + 1}", score=v, reasoning=reasoning)
        for i, v in enumerate(values)
    ]


# ─── Aggregates ──────────────────────────────────────────────────

def test_weighted_score_matches_reference_example():
    result = compute_weighted_score(_criteria(0.5, 0.3, 0.2), _scores(8, 6, 4))
    assert result == pytest.approx(6.6)


def test_weighted_score_normalizes_by_weight_sum():
    """Weights summing to 0.8 still yield a score on the 0-10 scale."""
    result = compute_weighted_score(_criteria(0.4, 0.4), _scores(10, 5))
    assert result == pytest.approx(7.5)


def test_weighted_score_zero_when_all_weights_zero():
    assert compute_weighted_score(_criteria(0.0, 0.0), _scores(9, 9)) == 0.0


def test_weighted_score_skips_unmatched_criteria():
    criteria = _criteria(0.5, 0.5)
    scores = [CriterionScore(criteria_id="c1", score=8, reasoning="ok")]
    assert compute_weighted_score(criteria, scores) == pytest.approx(8.0)


def test_overall_score_is_plain_mean():
    assert compute_overall_score(_scores(8, 6, 4)) == pytest.approx(6.0)
    assert compute_overall_score([]) == 0.0


# ─── validate_scores ────────────────────────────────────────────

def test_validate_scores_accepts_complete_submission():
    check = validate_scores(_criteria(0.5, 0.5), _scores(7, 3))
    assert check.ok
    assert check.violations == []
    assert check.warnings == []


def test_validate_scores_reports_every_violation():
    criteria = _criteria(0.5, 0.5)
    scores = [
        CriterionScore(criteria_id="missing", score=5, reasoning="x"),
        CriterionScore(criteria_id="c2", score=11, reasoning="x"),
    ]
    check = validate_scores(criteria, scores)
    assert not check.ok
    assert len(check.violations) == 2
    assert any("unknown criteria_id 'missing'" in v for v in check.violations)
    assert any("outside" in v for v in check.violations)


def test_validate_scores_rejects_wrong_count():
    check = validate_scores(_criteria(0.5, 0.3, 0.2), _scores(7, 3))
    assert any("Expected 3 scores" in v for v in check.violations)


def test_validate_scores_rejects_duplicate_criterion():
    criteria = _criteria(0.5, 0.5)
    scores = [
        CriterionScore(criteria_id="c1", score=5, reasoning="x"),
        CriterionScore(criteria_id="c1", score=6, reasoning="y"),
    ]
    check = validate_scores(criteria, scores)
    assert any("more than once" in v for v in check.violations)


def test_validate_scores_accepts_bounds():
    assert validate_scores(_criteria(0.5, 0.5), _scores(0, 10)).ok


def test_validate_scores_blank_reasoning_is_warning():
    check = validate_scores(_criteria(0.5, 0.5), _scores(7, 3, reasoning="  "))
    assert check.ok
    assert len(check.warnings) == 2


# ─── build_evaluation ───────────────────────────────────────────

def test_build_evaluation_orders_scores_by_criteria(make_decision):
    session = make_decision(weights=(0.5, 0.3, 0.2))
    shuffled = [
        CriterionScore(criteria_id="c3", score=4, reasoning="r"),
        CriterionScore(criteria_id="c1", score=8, reasoning="r"),
        CriterionScore(criteria_id="c2", score=6, reasoning="r"),
    ]
    evaluation = build_evaluation(session, "o1", shuffled)
    assert [s.criteria_id for s in evaluation.scores] == ["c1", "c2", "c3"]
    assert evaluation.weighted_score == pytest.approx(6.6)
    assert evaluation.overall_score == pytest.approx(6.0)
