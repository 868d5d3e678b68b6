"""Recommendation — confidence gating, reasoning tiers and mitigation rules."""

import pytest

from deliberate.core.domain_types import SessionStatus
from deliberate.core.errors import ConfidenceTooLowError, InvalidStateError
from deliberate.core.recommendation import (
    GENERIC_MITIGATION, build_recommendation, confidence_phrase, mitigation_for,
)


def test_gating_rejects_below_threshold_and_leaves_session_open(crm_session):
    with pytest.raises(ConfidenceTooLowError) as exc:
        build_recommendation(crm_session, min_confidence=0.9)
    assert exc.value.code == "CONFIDENCE_TOO_LOW"
    assert exc.value.confidence == pytest.approx(0.5)
    assert crm_session.status == SessionStatus.EVALUATING
    assert crm_session.recommendation is None


def test_recommendation_is_pure(crm_session):
    recommendation = build_recommendation(crm_session)
    assert recommendation.analysis.top.option.name == "A"
    assert crm_session.status == SessionStatus.EVALUATING


def test_completed_session_cannot_be_recommended_again(crm_session):
    crm_session.complete("A")
    with pytest.raises(InvalidStateError):
        build_recommendation(crm_session)


def test_reasoning_mentions_winner_and_confidence_tier(crm_session):
    reasoning = build_recommendation(crm_session).reasoning
    assert reasoning.startswith("A achieved the highest weighted score (6.00/10).")
    assert "low confidence" in reasoning


def test_mitigation_one_per_risk(crm_session):
    crm_session.options[0].risks = ["Licensing cost may grow", "Tight schedule"]
    recommendation = build_recommendation(crm_session)
    assert len(recommendation.mitigation) == len(recommendation.analysis.risks)


def test_alternatives_are_runner_up_names(crm_session):
    assert build_recommendation(crm_session).alternatives == ["B"]


@pytest.mark.parametrize("confidence, tier", [
    (0.81, "high"),
    (0.8, "moderate"),
    (0.61, "moderate"),
    (0.6, "low"),
])
def test_confidence_phrase_thresholds(confidence, tier):
    assert f"{tier} confidence" in confidence_phrase(confidence)


@pytest.mark.parametrize("risk, fragment", [
    ("Licensing cost may grow", "budget ceiling"),
    ("Over BUDGET by Q3", "budget ceiling"),
    ("Tight schedule", "milestones"),
    ("Deadline pressure", "milestones"),
])
def test_mitigation_keyword_rules(risk, fragment):
    assert fragment in mitigation_for(risk)


def test_mitigation_generic_fallback():
    assert mitigation_for("Vendor lock-in") == GENERIC_MITIGATION.format(risk="Vendor lock-in")


def test_cost_rule_wins_over_time_rule():
    assert "budget ceiling" in mitigation_for("cost overrun due to time slip")
