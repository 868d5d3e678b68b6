"""Quality Handlers — bias, logic, risk, alternatives and the combined report (5 methods).

Invariants:
    - All methods are read-only over the session
    - analyze_bias accepts decision AND thinking sessions
    - validate_logic / assess_risks / generate_alternatives / comprehensive_analysis
      require a decision session (WRONG_SESSION_TYPE otherwise)
"""

from deliberate.core.alternative_archetypes import generate_alternatives
from deliberate.core.bias_rules import analyze_bias
from deliberate.core.logic_validation import validate_logic
from deliberate.core.quality_report import comprehensive_analysis
from deliberate.core.risk_assessment import assess_risks
from deliberate.core.session_snapshot import session_type_of
from deliberate.infrastructure.service_context import ServiceContext
from deliberate.schemas.quality import (
    AnalyzeBiasInput, AssessRisksInput, ComprehensiveAnalysisInput,
    GenerateAlternativesInput, ValidateLogicInput,
)
from deliberate.schemas.tool_input import parse_input
from deliberate.services.session_access import load_decision, load_session
from deliberate.services.tool_envelope import tool_ok


class QualityHandlers:
    """Decision-quality checks. Pure reads, no saves."""

    def __init__(self, context: ServiceContext):
        self.repo = context.repository

    async def analyze_bias(self, input_data: dict) -> dict:
        args = parse_input(AnalyzeBiasInput, input_data)
        session = await load_session(self.repo, args.session_id)
        report = analyze_bias(session)
        return tool_ok(
            report.to_dict(include_mitigation=args.include_mitigation),
            session_type=session_type_of(session).value,
            biases_detected=len(report.flags),
        )

    async def validate_logic(self, input_data: dict) -> dict:
        args = parse_input(ValidateLogicInput, input_data)
        session = await load_decision(self.repo, args.session_id)
        report = validate_logic(session, strict_mode=args.strict_mode)
        return tool_ok(
            {"session_id": session.id, **report.to_dict()},
            message="Logic is valid" if report.is_valid else "Logic issues found",
        )

    async def assess_risks(self, input_data: dict) -> dict:
        args = parse_input(AssessRisksInput, input_data)
        session = await load_decision(self.repo, args.session_id)
        report = assess_risks(session)
        return tool_ok(
            report.to_dict(include_mitigation=args.include_mitigation),
            risks_identified=len(report.risks),
        )

    async def generate_alternatives(self, input_data: dict) -> dict:
        args = parse_input(GenerateAlternativesInput, input_data)
        session = await load_decision(self.repo, args.session_id)
        alternatives = generate_alternatives(
            session, args.max_alternatives, args.focus_areas,
        )
        return tool_ok(
            {"session_id": session.id, "alternatives": alternatives},
            requested=args.max_alternatives,
            generated=len(alternatives),
        )

    async def comprehensive_analysis(self, input_data: dict) -> dict:
        args = parse_input(ComprehensiveAnalysisInput, input_data)
        session = await load_decision(self.repo, args.session_id)
        return tool_ok(
            comprehensive_analysis(session, include_all=args.include_all),
            message="Comprehensive analysis completed",
        )
