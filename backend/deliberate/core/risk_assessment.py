"""Risk Assessment — rule-derived risk entries for a decision session.

Invariants:
    - PURE: no session mutation
    - high: one entry per evaluation with weighted_score < LOW_WEIGHTED_SCORE
    - medium: one entry when some options are unevaluated
    - low: one entry when |Σweights - 1| > WEIGHT_DRIFT_TOLERANCE
    - mitigation only when requested; monitoring always present
"""

from dataclasses import dataclass, field

from deliberate.core.decision_session import DecisionSession
from deliberate.core.domain_types import RiskLevel

LOW_WEIGHTED_SCORE: float = 4.0
WEIGHT_DRIFT_TOLERANCE: float = 0.2


@dataclass
class RiskEntry:
    level: RiskLevel
    probability: float
    impact: float
    description: str
    mitigation: list[str] = field(default_factory=list)
    monitoring: list[str] = field(default_factory=list)

    @property
    def exposure(self) -> float:
        return self.probability * self.impact

    def to_dict(self, include_mitigation: bool) -> dict:
        data = {
            "level": self.level.value,
            "probability": self.probability,
            "impact": self.impact,
            "description": self.description,
            "monitoring": self.monitoring,
        }
        if include_mitigation:
            data["mitigation"] = self.mitigation
        return data


@dataclass
class RiskReport:
    session_id: str
    risks: list[RiskEntry]

    @property
    def max_exposure(self) -> float:
        return max((r.exposure for r in self.risks), default=0.0)

    @property
    def overall_level(self) -> RiskLevel:
        levels = {r.level for r in self.risks}
        for level in (RiskLevel.CRITICAL, RiskLevel.HIGH, RiskLevel.MEDIUM):
            if level in levels:
                return level
        return RiskLevel.LOW

    def to_dict(self, include_mitigation: bool = False) -> dict:
        return {
            "session_id": self.session_id,
            "overall_risk_level": self.overall_level.value,
            "risks": [r.to_dict(include_mitigation) for r in self.risks],
        }


def assess_risks(session: DecisionSession) -> RiskReport:
    risks = []
    for evaluation in session.evaluations:
        if evaluation.weighted_score >= LOW_WEIGHTED_SCORE:
            continue
        option = session.find_option(evaluation.option_id)
        name = option.name if option else evaluation.option_id
        risks.append(RiskEntry(
            level=RiskLevel.HIGH, probability=0.7, impact=0.8,
            description=(
                f"Option '{name}' scores poorly overall "
                f"(weighted {evaluation.weighted_score:.2f}/10)"
            ),
            mitigation=[
                f"Reconsider whether '{name}' should remain a candidate",
                "Identify which criteria drive the low score and whether they can be improved",
            ],
            monitoring=[f"Track performance of '{name}' against the low-scoring criteria"],
        ))

    unevaluated = session.unevaluated_options
    if unevaluated:
        names = ", ".join(o.name for o in unevaluated)
        risks.append(RiskEntry(
            level=RiskLevel.MEDIUM, probability=0.5, impact=0.6,
            description=f"{len(unevaluated)} option(s) not yet evaluated: {names}",
            mitigation=["Evaluate every option before making a recommendation"],
            monitoring=["Check evaluation coverage before finalizing the decision"],
        ))

    if session.criteria and abs(session.total_weight - 1.0) > WEIGHT_DRIFT_TOLERANCE:
        risks.append(RiskEntry(
            level=RiskLevel.LOW, probability=0.3, impact=0.4,
            description=(
                f"Criteria weights sum to {session.total_weight:.2f}, "
                "which may distort relative importance"
            ),
            mitigation=["Normalize criteria weights so they sum to 1.0"],
            monitoring=["Re-check the weight distribution when criteria change"],
        ))

    return RiskReport(session_id=session.id, risks=risks)
