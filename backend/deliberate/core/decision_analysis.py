"""Decision Analysis — ranks evaluated options and derives confidence, factors, risks.

Invariants:
    - analyze() is PURE: never mutates the session
    - Ranking is by weighted_score descending; ties keep evaluation-list order
    - Confidence is monotone in the top/runner-up gap (raising the winner or lowering
      the runner-up never lowers it); fewer than 2 evaluations -> NEUTRAL_CONFIDENCE
    - key_factors <= MAX_KEY_FACTORS, risks <= MAX_RISKS, alternatives <= MAX_ALTERNATIVES

Design Decisions:
    - Confidence = mean(dispersion, separation): dispersion = 1 - σ/10, separation = gap/10.
      σ is scaled by the full 0-10 range so a wider top gap always raises confidence,
      including the two-option case where σ = gap/2
    - Ranking built from evaluations, not options: unevaluated options are not ranked
"""

import statistics
from dataclasses import dataclass, field

from deliberate.core.decision_session import DecisionSession, Evaluation, Option
from deliberate.core.errors import InsufficientDataError

NEUTRAL_CONFIDENCE: float = 0.5
SCORE_RANGE: float = 10.0
KEY_FACTOR_MIN_SCORE: float = 8.0
LOW_SCORE_MAX: float = 3.0
ALTERNATIVE_MIN_SCORE: float = 6.0
HIGH_WEIGHT_THRESHOLD: float = 0.3

MAX_KEY_FACTORS: int = 3
MAX_RISKS: int = 5
MAX_ALTERNATIVES: int = 2

MONITOR_STEP = "Monitor progress and adjust the plan as needed"
REVIEW_STEP = "Review the decision outcome after implementation"


@dataclass
class RankedOption:
    option: Option
    evaluation: Evaluation

    @property
    def weighted_score(self) -> float:
        return self.evaluation.weighted_score

    def to_dict(self) -> dict:
        return {
            "option_id": self.option.id,
            "name": self.option.name,
            "weighted_score": round(self.evaluation.weighted_score, 4),
            "overall_score": round(self.evaluation.overall_score, 4),
        }


@dataclass
class DecisionAnalysis:
    session_id: str
    ranking: list[RankedOption]
    confidence: float
    key_factors: list[str]
    risks: list[str]
    alternatives: list[str]
    next_steps: list[str]
    summary: str
    insights: list[str] = field(default_factory=list)

    @property
    def top(self) -> RankedOption:
        return self.ranking[0]

    def to_dict(self) -> dict:
        top = self.top
        return {
            "session_id": self.session_id,
            "summary": self.summary,
            "top_option": {
                "id": top.option.id,
                "name": top.option.name,
                "description": top.option.description,
                "weighted_score": round(top.weighted_score, 4),
            },
            "confidence": round(self.confidence, 4),
            "key_factors": self.key_factors,
            "risks": self.risks,
            "alternatives": self.alternatives,
            "next_steps": self.next_steps,
            "insights": self.insights,
            "ranking": [r.to_dict() for r in self.ranking],
        }


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def rank_options(session: DecisionSession) -> list[RankedOption]:
    """Evaluated options by weighted score, descending; stable on ties."""
    ranked = []
    for evaluation in session.evaluations:
        option = session.find_option(evaluation.option_id)
        if option is not None:
            ranked.append(RankedOption(option=option, evaluation=evaluation))
    # sorted() is stable, so equal scores keep evaluation order
    return sorted(ranked, key=lambda r: r.weighted_score, reverse=True)


def compute_confidence(ranking: list[RankedOption]) -> float:
    if len(ranking) < 2:
        return NEUTRAL_CONFIDENCE
    scores = [r.weighted_score for r in ranking]
    dispersion = _clamp(1 - statistics.pstdev(scores) / SCORE_RANGE)
    separation = _clamp((scores[0] - scores[1]) / SCORE_RANGE)
    return (dispersion + separation) / 2


def extract_key_factors(session: DecisionSession, winner: RankedOption) -> list[str]:
    strong = []
    for score in winner.evaluation.scores:
        criterion = session.find_criterion(score.criteria_id)
        if criterion is not None and score.score >= KEY_FACTOR_MIN_SCORE:
            strong.append((score.score, f"{criterion.name}: {score.reasoning}"))
    strong.sort(key=lambda pair: pair[0], reverse=True)
    return [text for _, text in strong[:MAX_KEY_FACTORS]]


def identify_risks(session: DecisionSession, winner: RankedOption) -> list[str]:
    risks = list(winner.option.risks)
    for score in winner.evaluation.scores:
        criterion = session.find_criterion(score.criteria_id)
        if criterion is not None and score.score <= LOW_SCORE_MAX:
            risks.append(
                f"Low score on {criterion.name} ({score.score:g}/10): {score.reasoning}"
            )
    return risks[:MAX_RISKS]


def find_alternatives(ranking: list[RankedOption]) -> list[str]:
    return [
        f"{r.option.name} (Score: {r.weighted_score:.2f})"
        for r in ranking[1:1 + MAX_ALTERNATIVES]
        if r.weighted_score > ALTERNATIVE_MIN_SCORE
    ]


def build_next_steps(winner: RankedOption) -> list[str]:
    option = winner.option
    steps = [f"Proceed with implementation of {option.name}"]
    if option.estimated_time:
        steps.append(f"Plan for the estimated timeline: {option.estimated_time}")
    if option.estimated_cost is not None:
        steps.append(f"Allocate the estimated budget: {option.estimated_cost:g}")
    steps.append(MONITOR_STEP)
    steps.append(REVIEW_STEP)
    return steps


def build_summary(session: DecisionSession) -> str:
    return (
        f"Analysis of {len(session.options)} options against "
        f"{len(session.criteria)} criteria with {len(session.evaluations)} "
        "evaluations completed."
    )


def build_insights(session: DecisionSession) -> list[str]:
    insights = []
    if session.evaluations:
        average = statistics.fmean(e.weighted_score for e in session.evaluations)
        insights.append(f"Average weighted score across all options: {average:.2f}")
    heavy = [c.name for c in session.criteria if c.weight > HIGH_WEIGHT_THRESHOLD]
    if heavy:
        insights.append(f"High-weight criteria: {', '.join(heavy)}")
    return insights


def analyze(
    session: DecisionSession, include_alternatives: bool = False,
) -> DecisionAnalysis:
    """Full analysis of a decision session. Pure — raises if nothing is evaluated."""
    ranking = rank_options(session)
    if not ranking:
        raise InsufficientDataError(
            "No evaluations available for analysis. Evaluate options first.",
        )
    winner = ranking[0]
    return DecisionAnalysis(
        session_id=session.id,
        ranking=ranking,
        confidence=compute_confidence(ranking),
        key_factors=extract_key_factors(session, winner),
        risks=identify_risks(session, winner),
        alternatives=find_alternatives(ranking) if include_alternatives else [],
        next_steps=build_next_steps(winner),
        summary=build_summary(session),
        insights=build_insights(session),
    )
