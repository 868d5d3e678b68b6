"""Logic Validation — rule-by-rule checks of validate_logic.

Tests cover:
    - Weight sum 0.8 -> exactly one "not 1.0" warning; 1.0 -> none
    - Minimum counts, duplicate names, evaluation coverage
    - Brief reasoning warnings and strict_mode
    - Mean-score suggestions, expiry warning, consistency formula
"""

from datetime import timedelta

import pytest

from deliberate.core.decision_session import Criterion, CriterionScore
from deliberate.core.domain_types import CriterionType
from deliberate.core.logic_validation import validate_logic
from deliberate.core.scoring import build_evaluation


def _weight_warnings(report):
    return [w for w in report.warnings if "not 1.0" in w]


def test_weight_sum_below_one_warns_once(make_decision):
    session = make_decision(weights=(0.5, 0.3), scores={0: [6, 6], 1: [5, 5]})
    report = validate_logic(session)
    assert len(_weight_warnings(report)) == 1
    assert "0.80" in _weight_warnings(report)[0]


def test_weight_sum_exactly_one_no_warning(make_decision):
    session = make_decision(weights=(0.5, 0.5), scores={0: [6, 6], 1: [5, 5]})
    assert _weight_warnings(validate_logic(session)) == []


def test_weight_sum_within_tolerance_no_warning(make_decision):
    session = make_decision(weights=(0.5, 0.45), scores={0: [6, 6], 1: [5, 5]})
    assert _weight_warnings(validate_logic(session)) == []


def test_complete_session_is_valid(crm_session):
    report = validate_logic(crm_session)
    assert report.errors == []
    assert report.is_valid


def test_minimum_counts(make_decision):
    session = make_decision(weights=(1.0,), options=("A",), scores={0: [7]})
    report = validate_logic(session)
    assert any("At least 2 criteria" in e for e in report.errors)
    assert any("At least 2 options" in e for e in report.errors)
    assert not report.is_valid


def test_duplicate_criterion_names_case_insensitive(make_decision):
    session = make_decision(
        weights=(0.4, 0.3, 0.3), names=("Cost", "cost ", "Features"),
    )
    report = validate_logic(session)
    duplicates = [e for e in report.errors if "Duplicate criterion name" in e]
    assert len(duplicates) == 1


def test_unevaluated_option_is_error(make_decision):
    session = make_decision(options=("A", "B"), scores={0: [6, 6]})
    report = validate_logic(session)
    assert any("'B' has not been evaluated" in e for e in report.errors)


def test_stale_evaluation_after_new_criterion(crm_session):
    crm_session.criteria.append(Criterion(
        id="c3", name="Support", description="", weight=0.0,
        type=CriterionType.BENEFIT,
    ))
    report = validate_logic(crm_session)
    assert sum("does not match the current criteria" in e for e in report.errors) == 2


def test_brief_reasoning_warns_and_strict_mode_invalidates(make_decision):
    session = make_decision()
    for option_id in ("o1", "o2"):
        session.upsert_evaluation(build_evaluation(session, option_id, [
            CriterionScore(criteria_id="c1", score=6, reasoning="ok"),
            CriterionScore(criteria_id="c2", score=6, reasoning="Long enough reasoning"),
        ]))

    lenient = validate_logic(session)
    assert sum("too brief" in w for w in lenient.warnings) == 2
    assert lenient.is_valid

    strict = validate_logic(session, strict_mode=True)
    assert not strict.is_valid
    assert strict.to_dict()["strict_mode"] is True


def test_score_out_of_range_is_error(crm_session):
    crm_session.evaluations[0].scores[0].score = 12
    report = validate_logic(crm_session)
    assert any("outside [0, 10]" in e for e in report.errors)


@pytest.mark.parametrize("value, fragment", [(2, "low"), (9, "high")])
def test_mean_score_suggestions(make_decision, value, fragment):
    session = make_decision(scores={0: [value, value], 1: [value, value]})
    report = validate_logic(session)
    assert any(f"Average score is {fragment}" in s for s in report.suggestions)


def test_missing_pros_and_cons_suggestion(crm_session):
    crm_session.options[0].pros = ["Cheap"]
    report = validate_logic(crm_session)
    evidence = [s for s in report.suggestions if "no pros or cons" in s]
    assert len(evidence) == 1
    assert "'B'" in evidence[0]


def test_expired_session_warns(crm_session):
    later = crm_session.created_at + timedelta(hours=25)
    report = validate_logic(crm_session, now=later)
    assert any("older than 24 hours" in w for w in report.warnings)


def test_consistency_formula(make_decision):
    session = make_decision(weights=(0.5, 0.3), options=("A", "B"), scores={0: [6, 6]})
    report = validate_logic(session)
    expected = max(0.0, 1 - 0.2 * len(report.errors) - 0.05 * len(report.warnings))
    assert report.consistency == pytest.approx(expected)


def test_validate_logic_is_pure(crm_session):
    before = len(crm_session.evaluations)
    validate_logic(crm_session, strict_mode=True)
    assert len(crm_session.evaluations) == before
