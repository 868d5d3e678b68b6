"""Decision Schemas — argument models for decision-building and analysis tools.

Invariants:
    - context: 1-5000 chars after strip; criterion name <= 100, description <= 500
    - option name <= 100, description <= 1000
    - weight in [0, 1]; type restricted to CriterionType
    - Score range is NOT checked here: scoring.validate_scores accumulates it with
      the criteria-matching violations so callers get one complete list
"""

from pydantic import Field

from deliberate.core.domain_types import CriterionType
from deliberate.schemas.tool_input import ToolInput


class StartDecisionInput(ToolInput):
    context: str = Field(min_length=1, max_length=5000)
    description: str | None = Field(None, max_length=5000)
    deadline: str | None = Field(None, max_length=100)


class AddCriteriaInput(ToolInput):
    session_id: str = Field(min_length=1)
    name: str = Field(min_length=1, max_length=100)
    description: str = Field("", max_length=500)
    weight: float = Field(ge=0.0, le=1.0)
    type: CriterionType = CriterionType.BENEFIT


class AddOptionInput(ToolInput):
    session_id: str = Field(min_length=1)
    name: str = Field(min_length=1, max_length=100)
    description: str = Field("", max_length=1000)
    pros: list[str] = Field(default_factory=list)
    cons: list[str] = Field(default_factory=list)
    risks: list[str] = Field(default_factory=list)
    estimated_cost: float | None = Field(None, ge=0)
    estimated_time: str | None = Field(None, max_length=100)


class ScoreInput(ToolInput):
    criteria_id: str = Field(min_length=1)
    score: float
    reasoning: str = ""


class EvaluateOptionInput(ToolInput):
    session_id: str = Field(min_length=1)
    option_id: str = Field(min_length=1)
    scores: list[ScoreInput]


class AnalyzeDecisionInput(ToolInput):
    session_id: str = Field(min_length=1)
    include_alternatives: bool = False


class MakeRecommendationInput(ToolInput):
    session_id: str = Field(min_length=1)
    min_confidence: float = Field(0.3, ge=0.0, le=1.0)
