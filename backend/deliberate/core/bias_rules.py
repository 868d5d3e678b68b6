"""Bias Rules — heuristic bias flags as a rule table keyed by BiasType.

Invariants:
    - Rules are data: each BiasRule pairs a detector with fixed severity/description/mitigation
    - Detectors are PURE: return evidence text when the rule fires, None otherwise
    - overall_bias_score = mean of flagged severities, 0.0 when nothing fires
    - Decision rules only see DecisionSession, thinking rules only ThinkingSession

Design Decisions:
    - Deterministic heuristics only: no statistical inference over the content
"""

import statistics
from collections import Counter
from collections.abc import Callable
from dataclasses import dataclass

from deliberate.core.decision_session import DecisionSession
from deliberate.core.domain_types import BiasType, SessionType
from deliberate.core.session_snapshot import AnySession, session_type_of
from deliberate.core.thinking_session import ThinkingSession

DOMINANT_TYPE_SHARE: float = 0.7
ANCHOR_WEIGHT_RATIO: float = 1.5
MIN_OPTIONS_FOR_AVAILABILITY: int = 3
UNIFORM_DESCRIPTION_RATIO: float = 0.3
MIN_THOUGHTS_FOR_CONCLUSION: int = 5


# ─── Detectors ──────────────────────────────────────────────────

def detect_confirmation(session: DecisionSession) -> str | None:
    if not session.criteria:
        return None
    counts = Counter(c.type for c in session.criteria)
    criterion_type, count = counts.most_common(1)[0]
    share = count / len(session.criteria)
    if share > DOMINANT_TYPE_SHARE:
        return (
            f"{count} of {len(session.criteria)} criteria ({share:.0%}) are of "
            f"type '{criterion_type.value}'"
        )
    return None


def detect_anchoring(session: DecisionSession) -> str | None:
    if not session.criteria:
        return None
    mean_weight = statistics.fmean(c.weight for c in session.criteria)
    first = session.criteria[0]
    if mean_weight > 0 and first.weight > ANCHOR_WEIGHT_RATIO * mean_weight:
        return (
            f"First criterion '{first.name}' has weight {first.weight:.2f}, "
            f"above {ANCHOR_WEIGHT_RATIO}x the mean weight {mean_weight:.2f}"
        )
    return None


def detect_availability(session: DecisionSession) -> str | None:
    if len(session.options) < MIN_OPTIONS_FOR_AVAILABILITY:
        return f"Only {len(session.options)} option(s) under consideration"
    lengths = [len(o.description) for o in session.options]
    mean_length = statistics.fmean(lengths)
    if mean_length > 0 and statistics.pstdev(lengths) < UNIFORM_DESCRIPTION_RATIO * mean_length:
        return "Option descriptions are unusually uniform in depth"
    return None


def detect_overconfidence(session: ThinkingSession) -> str | None:
    if session.conclusion and len(session.thoughts) < MIN_THOUGHTS_FOR_CONCLUSION:
        return (
            f"Concluded after only {len(session.thoughts)} thought(s)"
        )
    return None


# ─── Rule table ─────────────────────────────────────────────────

@dataclass(frozen=True)
class BiasRule:
    bias_type: BiasType
    session_type: SessionType
    severity: float
    description: str
    mitigation: str
    detect: Callable[[AnySession], str | None]


BIAS_RULES: tuple[BiasRule, ...] = (
    BiasRule(
        bias_type=BiasType.CONFIRMATION,
        session_type=SessionType.DECISION,
        severity=0.7,
        description="Criteria concentrate on a single perspective",
        mitigation="Add criteria of other types (cost, risk, feasibility) to balance the evaluation",
        detect=detect_confirmation,
    ),
    BiasRule(
        bias_type=BiasType.ANCHORING,
        session_type=SessionType.DECISION,
        severity=0.6,
        description="The first criterion dominates the weighting",
        mitigation="Re-derive the weights independently of the order criteria were added",
        detect=detect_anchoring,
    ),
    BiasRule(
        bias_type=BiasType.AVAILABILITY,
        session_type=SessionType.DECISION,
        severity=0.5,
        description="The option set may reflect only the most readily available choices",
        mitigation="Research additional options and describe each one on its own merits",
        detect=detect_availability,
    ),
    BiasRule(
        bias_type=BiasType.OVERCONFIDENCE,
        session_type=SessionType.THINKING,
        severity=0.6,
        description="A conclusion was reached with little supporting reasoning",
        mitigation="Explore counter-arguments and alternative branches before concluding",
        detect=detect_overconfidence,
    ),
)


@dataclass
class BiasFlag:
    rule: BiasRule
    evidence: str

    def to_dict(self, include_mitigation: bool) -> dict:
        data = {
            "type": self.rule.bias_type.value,
            "severity": self.rule.severity,
            "description": self.rule.description,
            "evidence": self.evidence,
        }
        if include_mitigation:
            data["mitigation"] = self.rule.mitigation
        return data


@dataclass
class BiasReport:
    session_id: str
    flags: list[BiasFlag]

    @property
    def overall_bias_score(self) -> float:
        if not self.flags:
            return 0.0
        return statistics.fmean(f.rule.severity for f in self.flags)

    def recommendations(self, include_mitigation: bool = False) -> list[str]:
        """Mitigation text only when requested; otherwise the rule descriptions."""
        if not self.flags:
            return ["No significant bias patterns detected"]
        if include_mitigation:
            return [
                f"Address {f.rule.bias_type.value} bias: {f.rule.mitigation}"
                for f in self.flags
            ]
        return [
            f"Review {f.rule.bias_type.value} bias: {f.rule.description}"
            for f in self.flags
        ]

    def to_dict(self, include_mitigation: bool = False) -> dict:
        return {
            "session_id": self.session_id,
            "biases": [f.to_dict(include_mitigation) for f in self.flags],
            "overall_bias_score": round(self.overall_bias_score, 4),
            "recommendations": self.recommendations(include_mitigation),
        }


def analyze_bias(session: AnySession) -> BiasReport:
    """Apply every rule for the session's type. Pure."""
    kind = session_type_of(session)
    flags = []
    for rule in BIAS_RULES:
        if rule.session_type != kind:
            continue
        evidence = rule.detect(session)
        if evidence is not None:
            flags.append(BiasFlag(rule=rule, evidence=evidence))
    return BiasReport(session_id=session.id, flags=flags)
