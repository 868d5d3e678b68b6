"""Alternative Archetypes — fixed alternative templates offered for a decision.

Invariants:
    - Exactly three archetypes, returned in table order
    - max_alternatives clamped to [1, len(ARCHETYPES)]
    - Output does not depend on session content beyond the echoed context/focus areas
"""

from dataclasses import dataclass

from deliberate.core.decision_session import DecisionSession


@dataclass(frozen=True)
class Archetype:
    name: str
    description: str
    pros: tuple[str, ...]
    cons: tuple[str, ...]
    feasibility: float
    innovation: float


ARCHETYPES: tuple[Archetype, ...] = (
    Archetype(
        name="Hybrid Approach",
        description="Combine the strongest elements of the top-ranked options",
        pros=("Balances strengths of several options", "Reduces single-point risk"),
        cons=("Higher coordination complexity", "May dilute focus"),
        feasibility=0.7,
        innovation=0.6,
    ),
    Archetype(
        name="Phased Implementation",
        description="Roll out the preferred option incrementally with checkpoints",
        pros=("Limits upfront commitment", "Allows course correction between phases"),
        cons=("Slower time to full value", "Requires ongoing governance"),
        feasibility=0.8,
        innovation=0.4,
    ),
    Archetype(
        name="Innovative Solution",
        description="Explore an unconventional option outside the current candidate set",
        pros=("Potential for outsized benefit", "Differentiates from standard choices"),
        cons=("Higher uncertainty", "Needs additional research"),
        feasibility=0.5,
        innovation=0.9,
    ),
)


def clamp_max_alternatives(value: int | None) -> int:
    if value is None:
        return len(ARCHETYPES)
    return max(1, min(len(ARCHETYPES), value))


def generate_alternatives(
    session: DecisionSession, max_alternatives: int | None = None,
    focus_areas: list[str] | None = None,
) -> list[dict]:
    count = clamp_max_alternatives(max_alternatives)
    focus = f" Focus areas: {', '.join(focus_areas)}." if focus_areas else ""
    return [
        {
            "name": a.name,
            "description": f"{a.description} for: {session.context}.{focus}",
            "pros": list(a.pros),
            "cons": list(a.cons),
            "feasibility": a.feasibility,
            "innovation": a.innovation,
        }
        for a in ARCHETYPES[:count]
    ]
