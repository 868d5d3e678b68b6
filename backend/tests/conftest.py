"""Root conftest — shared test configuration and decision-session builders."""

import os

import pytest

# Tests never touch a file database or emit JSON logs
os.environ.setdefault("SESSION_STORE", "memory")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

from deliberate.core.decision_session import (  # noqa: E402
    Criterion, CriterionScore, DecisionSession, Option, new_id,
)
from deliberate.core.domain_types import CriterionType  # noqa: E402
from deliberate.core.scoring import build_evaluation  # noqa: E402

REASONING = "Scored against the vendor comparison sheet"


@pytest.fixture
def make_decision():
    """Build a DecisionSession in memory.

    criteria ids are c1..cN, option ids o1..oN. `scores` maps option index to
    one raw score per criterion; evaluations are applied in dict order.
    """
    def _make(
        weights=(0.5, 0.5),
        options=("A", "B"),
        scores=None,
        types=None,
        names=None,
        descriptions=None,
        context="Choose CRM vendor",
    ) -> DecisionSession:
        session = DecisionSession(id=new_id(), context=context)
        for i, weight in enumerate(weights):
            session.criteria.append(Criterion(
                id=f"c{i + 1}",
                name=names[i] if names else f"Criterion {i + 1}",
                description="",
                weight=weight,
                type=types[i] if types else CriterionType.BENEFIT,
            ))
        for i, name in enumerate(options):
            session.options.append(Option(
                id=f"o{i + 1}",
                name=name,
                description=descriptions[i] if descriptions else f"Option {name}",
            ))
        for index, values in (scores or {}).items():
            raw = [
                CriterionScore(criteria_id=f"c{j + 1}", score=v, reasoning=REASONING)
                for j, v in enumerate(values)
            ]
            session.upsert_evaluation(
                build_evaluation(session, f"o{index + 1}", raw),
            )
        return session

    return _make


@pytest.fixture
def crm_session(make_decision):
    """Cost vs Features tie: A=[9,3], B=[3,9], both weighted 6.0, A evaluated first."""
    return make_decision(
        weights=(0.5, 0.5),
        types=(CriterionType.COST, CriterionType.BENEFIT),
        names=("Cost", "Features"),
        scores={0: [9, 3], 1: [3, 9]},
    )
