"""Decision Analysis — ranking, confidence and derived findings.

Tests cover:
    - Ties resolved by evaluation order (CRM Cost/Features scenario)
    - Confidence is 0.5 with fewer than 2 evaluations or a tie; a 2-option landslide scores higher
    - Confidence does not decrease as the top/runner-up gap grows
    - key factors, risks, alternatives, next steps and insights
    - analyze() raises without evaluations and never mutates the session
"""

import pytest

from deliberate.core.decision_analysis import (
    MONITOR_STEP, NEUTRAL_CONFIDENCE, REVIEW_STEP, analyze, compute_confidence,
    find_alternatives, rank_options,
)
from deliberate.core.domain_types import SessionStatus
from deliberate.core.errors import InsufficientDataError


# ─── Ranking ─────────────────────────────────────────────────────

def test_crm_tie_goes_to_first_evaluated(crm_session):
    analysis = analyze(crm_session)
    assert analysis.top.option.name == "A"
    assert analysis.top.weighted_score == pytest.approx(6.0)
    assert analysis.ranking[1].weighted_score == pytest.approx(6.0)


def test_tie_follows_evaluation_order_not_option_order(make_decision):
    session = make_decision(scores={1: [3, 9], 0: [9, 3]})
    assert analyze(session).top.option.name == "B"


def test_crm_tie_confidence_is_low_to_moderate(crm_session):
    assert analyze(crm_session).confidence == pytest.approx(0.5)


def test_ranking_descends_by_weighted_score(make_decision):
    session = make_decision(
        options=("A", "B", "C"), scores={0: [4, 4], 1: [9, 9], 2: [6, 6]},
    )
    assert [r.option.name for r in rank_options(session)] == ["B", "C", "A"]


def test_unevaluated_options_are_not_ranked(make_decision):
    session = make_decision(options=("A", "B", "C"), scores={0: [5, 5]})
    assert [r.option.name for r in rank_options(session)] == ["A"]


# ─── Confidence ─────────────────────────────────────────────────

def test_single_evaluation_is_neutral(make_decision):
    session = make_decision(scores={0: [8, 8]})
    assert analyze(session).confidence == NEUTRAL_CONFIDENCE


def test_two_option_landslide_beats_tie(make_decision):
    tie = analyze(make_decision(scores={0: [6, 6], 1: [6, 6]})).confidence
    landslide = analyze(make_decision(scores={0: [10, 10], 1: [0, 0]})).confidence
    assert tie == pytest.approx(0.5)
    assert landslide == pytest.approx(0.75)
    assert landslide > tie


def test_two_option_confidence_grows_with_gap(make_decision):
    confidences = [
        analyze(make_decision(scores={0: [top, top], 1: [5, 5]})).confidence
        for top in (5, 6, 7, 8, 9, 10)
    ]
    assert confidences == sorted(set(confidences))


def test_confidence_monotone_in_top_gap(make_decision):
    confidences = []
    for top in (6, 7, 8, 9, 10):
        session = make_decision(
            options=("A", "B", "C"),
            scores={0: [top, top], 1: [5, 5], 2: [4, 4]},
        )
        confidences.append(compute_confidence(rank_options(session)))
    assert confidences == sorted(confidences)


def test_confidence_monotone_when_runner_up_drops(make_decision):
    confidences = []
    for runner_up in (7, 6, 5, 4):
        session = make_decision(
            options=("A", "B", "C"),
            scores={0: [8, 8], 1: [runner_up, runner_up], 2: [3, 3]},
        )
        confidences.append(compute_confidence(rank_options(session)))
    assert confidences == sorted(confidences)


def test_confidence_bounded(make_decision):
    session = make_decision(
        options=("A", "B", "C"), scores={0: [10, 10], 1: [0, 0], 2: [0, 0]},
    )
    confidence = analyze(session).confidence
    assert 0.0 <= confidence <= 1.0


# ─── Findings ───────────────────────────────────────────────────

def test_key_factors_and_risks_from_winner_scores(crm_session):
    analysis = analyze(crm_session)
    assert len(analysis.key_factors) == 1
    assert analysis.key_factors[0].startswith("Cost:")
    assert any("Low score on Features (3/10)" in r for r in analysis.risks)


def test_option_risks_listed_first(crm_session):
    crm_session.options[0].risks = ["Vendor lock-in"]
    analysis = analyze(crm_session)
    assert analysis.risks[0] == "Vendor lock-in"


def test_alternatives_only_when_requested(make_decision):
    session = make_decision(
        options=("A", "B", "C"), scores={0: [9, 9], 1: [7, 7], 2: [5, 5]},
    )
    assert analyze(session).alternatives == []
    alternatives = analyze(session, include_alternatives=True).alternatives
    assert alternatives == ["B (Score: 7.00)"]


def test_find_alternatives_capped_at_two(make_decision):
    session = make_decision(
        options=("A", "B", "C", "D"),
        scores={0: [9, 9], 1: [8, 8], 2: [7, 7], 3: [6.5, 6.5]},
    )
    assert len(find_alternatives(rank_options(session))) == 2


def test_next_steps_include_estimates(crm_session):
    crm_session.options[0].estimated_time = "3 months"
    crm_session.options[0].estimated_cost = 12000
    steps = analyze(crm_session).next_steps
    assert steps[0] == "Proceed with implementation of A"
    assert any("3 months" in s for s in steps)
    assert any("12000" in s for s in steps)
    assert steps[-2:] == [MONITOR_STEP, REVIEW_STEP]


def test_summary_and_insights(make_decision):
    session = make_decision(weights=(0.6, 0.4), scores={0: [8, 6], 1: [4, 4]})
    analysis = analyze(session)
    assert analysis.summary.startswith("Analysis of 2 options against 2 criteria")
    assert any("Average weighted score" in i for i in analysis.insights)
    assert any("High-weight criteria" in i for i in analysis.insights)


def test_to_dict_shape(crm_session):
    data = analyze(crm_session).to_dict()
    assert data["top_option"]["name"] == "A"
    assert data["top_option"]["weighted_score"] == pytest.approx(6.0)
    assert len(data["ranking"]) == 2
    assert {"key_factors", "risks", "next_steps", "confidence"} <= data.keys()


# ─── Purity and preconditions ───────────────────────────────────

def test_analyze_requires_evaluations(make_decision):
    with pytest.raises(InsufficientDataError) as exc:
        analyze(make_decision())
    assert exc.value.code == "NO_EVALUATIONS"


def test_analyze_does_not_mutate(crm_session):
    before = [(e.option_id, e.weighted_score) for e in crm_session.evaluations]
    analyze(crm_session, include_alternatives=True)
    assert [(e.option_id, e.weighted_score) for e in crm_session.evaluations] == before
    assert crm_session.status == SessionStatus.EVALUATING
