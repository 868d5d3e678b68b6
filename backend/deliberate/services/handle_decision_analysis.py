"""Decision Analysis Handlers — analysis and the terminal recommendation (2 methods).

Invariants:
    - analyze_decision never mutates or saves the session
    - make_recommendation saves ONLY on success (ConfidenceTooLow leaves the session active)
    - After a successful recommendation the session is COMPLETED with recommendation=<winner name>
"""

import logging

from deliberate.core.decision_analysis import analyze
from deliberate.core.recommendation import build_recommendation
from deliberate.infrastructure.service_context import ServiceContext
from deliberate.schemas.decision import (
    AnalyzeDecisionInput, MakeRecommendationInput,
)
from deliberate.schemas.tool_input import parse_input
from deliberate.services.session_access import load_decision
from deliberate.services.tool_envelope import tool_ok

logger = logging.getLogger(__name__)


class DecisionAnalysisHandlers:
    """Ranking, confidence and recommendation over a decision session."""

    def __init__(self, context: ServiceContext):
        self.repo = context.repository

    async def analyze_decision(self, input_data: dict) -> dict:
        args = parse_input(AnalyzeDecisionInput, input_data)
        session = await load_decision(self.repo, args.session_id)
        analysis = analyze(session, include_alternatives=args.include_alternatives)
        logger.info(
            f"Decision analyzed (top={analysis.top.option.name}, "
            f"confidence={analysis.confidence:.2f})",
            extra={"session_id": session.id},
        )
        return tool_ok(
            analysis.to_dict(),
            message="Decision analysis completed",
            total_options=len(session.options),
            total_evaluations=len(session.evaluations),
        )

    async def make_recommendation(self, input_data: dict) -> dict:
        args = parse_input(MakeRecommendationInput, input_data)
        session = await load_decision(self.repo, args.session_id)
        recommendation = build_recommendation(session, args.min_confidence)

        session.complete(recommendation.analysis.top.option.name)
        await self.repo.save(session)
        logger.info(
            f"Recommendation made: {session.recommendation}",
            extra={"session_id": session.id, "action": "session_completed"},
        )
        return tool_ok(
            recommendation.to_dict(),
            message="Recommendation generated; session completed",
            confidence=round(recommendation.analysis.confidence, 4),
            status=session.status.value,
        )
