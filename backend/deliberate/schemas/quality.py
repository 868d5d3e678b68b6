"""Quality Schemas — argument models for bias/logic/risk/alternative tools."""

from pydantic import Field

from deliberate.schemas.tool_input import ToolInput


class AnalyzeBiasInput(ToolInput):
    session_id: str = Field(min_length=1)
    include_mitigation: bool = False


class ValidateLogicInput(ToolInput):
    session_id: str = Field(min_length=1)
    strict_mode: bool = False


class AssessRisksInput(ToolInput):
    session_id: str = Field(min_length=1)
    include_mitigation: bool = False


class GenerateAlternativesInput(ToolInput):
    session_id: str = Field(min_length=1)
    max_alternatives: int = 3  # clamped to [1, 3] by alternative_archetypes
    focus_areas: list[str] | None = None


class ComprehensiveAnalysisInput(ToolInput):
    session_id: str = Field(min_length=1)
    include_all: bool = False
