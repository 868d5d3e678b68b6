"""Recommendation — gates analysis on confidence and composes reasoning + mitigation.

Invariants:
    - build_recommendation is PURE: the shell applies session.complete() afterwards
    - confidence < min_confidence raises ConfidenceTooLowError (never degrades silently)
    - Completed sessions cannot be re-recommended (InvalidStateError)
    - One mitigation entry per risk, first matching keyword rule wins

Design Decisions:
    - Mitigation rules are data (MitigationRule table), not branching string concatenation
"""

from dataclasses import dataclass

from deliberate.core.decision_analysis import DecisionAnalysis, analyze
from deliberate.core.decision_session import DecisionSession
from deliberate.core.errors import ConfidenceTooLowError, InvalidStateError

DEFAULT_MIN_CONFIDENCE: float = 0.3
HIGH_CONFIDENCE: float = 0.8
MODERATE_CONFIDENCE: float = 0.6
MAX_RECOMMENDED_ALTERNATIVES: int = 2


@dataclass(frozen=True)
class MitigationRule:
    keywords: tuple[str, ...]
    template: str

    def matches(self, risk: str) -> bool:
        lowered = risk.lower()
        return any(k in lowered for k in self.keywords)


MITIGATION_RULES: tuple[MitigationRule, ...] = (
    MitigationRule(
        keywords=("cost", "budget"),
        template="Set a budget ceiling with a contingency reserve and review spend regularly ({risk})",
    ),
    MitigationRule(
        keywords=("time", "schedule", "deadline"),
        template="Break the work into milestones and track the timeline weekly ({risk})",
    ),
)
GENERIC_MITIGATION = "Prepare a contingency plan and assign an owner to monitor: {risk}"


def confidence_phrase(confidence: float) -> str:
    if confidence > HIGH_CONFIDENCE:
        return "This recommendation is made with high confidence."
    if confidence > MODERATE_CONFIDENCE:
        return "This recommendation is made with moderate confidence."
    return "This recommendation is made with low confidence; consider gathering more information."


def mitigation_for(risk: str) -> str:
    for rule in MITIGATION_RULES:
        if rule.matches(risk):
            return rule.template.format(risk=risk)
    return GENERIC_MITIGATION.format(risk=risk)


def build_reasoning(analysis: DecisionAnalysis) -> str:
    top = analysis.top
    parts = [
        f"{top.option.name} achieved the highest weighted score "
        f"({top.weighted_score:.2f}/10).",
    ]
    if analysis.key_factors:
        parts.append(f"Key strengths: {'; '.join(analysis.key_factors)}.")
    parts.append(confidence_phrase(analysis.confidence))
    return " ".join(parts)


@dataclass
class Recommendation:
    session_id: str
    analysis: DecisionAnalysis
    reasoning: str
    mitigation: list[str]
    alternatives: list[str]

    def to_dict(self) -> dict:
        top = self.analysis.top
        return {
            "session_id": self.session_id,
            "recommended_option": {
                "id": top.option.id,
                "name": top.option.name,
                "description": top.option.description,
                "weighted_score": round(top.weighted_score, 4),
            },
            "confidence": round(self.analysis.confidence, 4),
            "reasoning": self.reasoning,
            "risks": self.analysis.risks,
            "mitigation": self.mitigation,
            "alternatives": self.alternatives,
            "next_steps": self.analysis.next_steps,
        }


def build_recommendation(
    session: DecisionSession, min_confidence: float = DEFAULT_MIN_CONFIDENCE,
) -> Recommendation:
    """Analyze and gate. Pure — caller marks the session completed on success."""
    if not session.is_active:
        raise InvalidStateError(
            f"Decision session '{session.id}' is already completed "
            f"(recommended: {session.recommendation}).",
        )
    analysis = analyze(session, include_alternatives=False)
    if analysis.confidence < min_confidence:
        raise ConfidenceTooLowError(analysis.confidence, min_confidence)

    return Recommendation(
        session_id=session.id,
        analysis=analysis,
        reasoning=build_reasoning(analysis),
        mitigation=[mitigation_for(r) for r in analysis.risks],
        alternatives=[
            r.option.name
            for r in analysis.ranking[1:1 + MAX_RECOMMENDED_ALTERNATIVES]
        ],
    )
