"""Alternative Archetypes — fixed templates, clamping, context echo."""

import pytest

from deliberate.core.alternative_archetypes import (
    ARCHETYPES, clamp_max_alternatives, generate_alternatives,
)


@pytest.mark.parametrize("requested, expected", [
    (None, 3), (0, 1), (-4, 1), (1, 1), (2, 2), (3, 3), (10, 3),
])
def test_clamp_max_alternatives(requested, expected):
    assert clamp_max_alternatives(requested) == expected


def test_archetypes_in_table_order(crm_session):
    names = [a["name"] for a in generate_alternatives(crm_session)]
    assert names == ["Hybrid Approach", "Phased Implementation", "Innovative Solution"]
    assert len(ARCHETYPES) == 3


def test_descriptions_echo_context_and_focus(crm_session):
    alternatives = generate_alternatives(
        crm_session, max_alternatives=1, focus_areas=["cost", "integration"],
    )
    assert len(alternatives) == 1
    description = alternatives[0]["description"]
    assert "Choose CRM vendor" in description
    assert "Focus areas: cost, integration." in description


def test_alternative_fields(crm_session):
    alternative = generate_alternatives(crm_session, 2)[1]
    assert alternative["feasibility"] == 0.8
    assert alternative["innovation"] == 0.4
    assert alternative["pros"] and alternative["cons"]
