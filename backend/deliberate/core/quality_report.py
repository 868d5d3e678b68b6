"""Quality Report — combines bias, logic, risk (and optionally alternatives).

Invariants:
    - overall_quality = mean(1 - bias score, consistency, 1 - max risk exposure), in [0, 1]
    - Alternatives only with include_all
    - Recommendations aggregated in order: logic errors, bias, risk, then generic follow-up
"""

import statistics

from deliberate.core.alternative_archetypes import generate_alternatives
from deliberate.core.bias_rules import analyze_bias
from deliberate.core.decision_session import DecisionSession
from deliberate.core.logic_validation import validate_logic
from deliberate.core.risk_assessment import assess_risks

MAX_RECOMMENDATIONS: int = 8


def comprehensive_analysis(session: DecisionSession, include_all: bool = False) -> dict:
    bias = analyze_bias(session)
    logic = validate_logic(session)
    risks = assess_risks(session)

    overall_quality = statistics.fmean([
        1.0 - bias.overall_bias_score,
        logic.consistency,
        1.0 - risks.max_exposure,
    ])

    recommendations = [f"Resolve: {e}" for e in logic.errors]
    if bias.flags:
        recommendations.extend(bias.recommendations(include_mitigation=True))
    recommendations.extend(
        f"Mitigate {r.level.value} risk: {r.description}" for r in risks.risks
    )
    recommendations.append("Validate findings with stakeholders before committing")

    result = {
        "session_id": session.id,
        "session_type": "decision",
        "bias_analysis": bias.to_dict(include_mitigation=True),
        "logic_validation": logic.to_dict(),
        "risk_assessment": risks.to_dict(include_mitigation=True),
        "overall_quality": round(max(0.0, min(1.0, overall_quality)), 4),
        "recommendations": recommendations[:MAX_RECOMMENDATIONS],
    }
    if include_all:
        result["alternatives"] = generate_alternatives(session)
    return result
