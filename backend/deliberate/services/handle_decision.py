"""Decision Handlers — session creation and decision building (4 methods).

Invariants:
    - start_decision creates an ACTIVE session and persists it before returning
    - add_criteria / add_option / evaluate_option require an active decision session
    - evaluate_option binds scores by criteria_id and reports ALL violations at once
    - Re-evaluating an option replaces its previous evaluation (one per option)

Design Decisions:
    - Load -> mutate -> save per call: last write wins, no locking
    - Blank reasoning surfaces in metadata.warnings instead of rejecting the call
"""

import logging

from deliberate.core.decision_session import (
    Criterion, CriterionScore, DecisionSession, Option, new_id,
)
from deliberate.core.enforce_session import (
    check_criteria_capacity, check_option_capacity, require_active,
)
from deliberate.core.errors import ResourceNotFoundError, ToolValidationError
from deliberate.core.scoring import build_evaluation, validate_scores
from deliberate.core.session_snapshot import (
    decision_to_snapshot, evaluation_to_dict,
)
from deliberate.infrastructure.service_context import ServiceContext
from deliberate.schemas.decision import (
    AddCriteriaInput, AddOptionInput, EvaluateOptionInput, StartDecisionInput,
)
from deliberate.schemas.tool_input import parse_input
from deliberate.services.session_access import load_decision
from deliberate.services.tool_envelope import tool_ok

logger = logging.getLogger(__name__)


class DecisionHandlers:
    """Decision building: start, criteria, options, evaluation."""

    def __init__(self, context: ServiceContext):
        self.repo = context.repository

    async def start_decision(self, input_data: dict) -> dict:
        args = parse_input(StartDecisionInput, input_data)
        session = DecisionSession(
            id=new_id(),
            context=args.context,
            description=args.description,
            deadline=args.deadline,
        )
        await self.repo.save(session)
        logger.info(
            "Decision session started",
            extra={"session_id": session.id, "session_type": "decision"},
        )
        return tool_ok(
            decision_to_snapshot(session),
            message="Decision session started",
        )

    async def add_criteria(self, input_data: dict) -> dict:
        args = parse_input(AddCriteriaInput, input_data)
        session = await load_decision(self.repo, args.session_id)
        require_active(session)
        check_criteria_capacity(session)

        criterion = Criterion(
            id=new_id(),
            name=args.name,
            description=args.description,
            weight=args.weight,
            type=args.type,
        )
        session.criteria.append(criterion)
        session.touch()
        await self.repo.save(session)

        return tool_ok(
            {
                "id": criterion.id,
                "name": criterion.name,
                "description": criterion.description,
                "weight": criterion.weight,
                "type": criterion.type.value,
            },
            message="Criterion added",
            total_criteria=len(session.criteria),
            total_weight=round(session.total_weight, 4),
        )

    async def add_option(self, input_data: dict) -> dict:
        args = parse_input(AddOptionInput, input_data)
        session = await load_decision(self.repo, args.session_id)
        require_active(session)
        check_option_capacity(session)

        option = Option(
            id=new_id(),
            name=args.name,
            description=args.description,
            pros=list(args.pros),
            cons=list(args.cons),
            risks=list(args.risks),
            estimated_cost=args.estimated_cost,
            estimated_time=args.estimated_time,
        )
        session.options.append(option)
        session.touch()
        await self.repo.save(session)

        return tool_ok(
            {
                "id": option.id,
                "name": option.name,
                "description": option.description,
                "pros": option.pros,
                "cons": option.cons,
                "risks": option.risks,
                "estimated_cost": option.estimated_cost,
                "estimated_time": option.estimated_time,
            },
            message="Option added",
            total_options=len(session.options),
        )

    async def evaluate_option(self, input_data: dict) -> dict:
        args = parse_input(EvaluateOptionInput, input_data)
        session = await load_decision(self.repo, args.session_id)
        require_active(session)
        if session.find_option(args.option_id) is None:
            raise ResourceNotFoundError("Option", args.option_id)

        scores = [
            CriterionScore(
                criteria_id=s.criteria_id, score=s.score, reasoning=s.reasoning,
            )
            for s in args.scores
        ]
        check = validate_scores(session.criteria, scores)
        if not check.ok:
            raise ToolValidationError(check.violations, field="scores")

        replaced = session.find_evaluation(args.option_id) is not None
        evaluation = build_evaluation(session, args.option_id, scores)
        session.upsert_evaluation(evaluation)
        await self.repo.save(session)

        logger.info(
            f"Option evaluated (weighted={evaluation.weighted_score:.2f}, "
            f"replaced={replaced})",
            extra={"session_id": session.id},
        )
        return tool_ok(
            evaluation_to_dict(evaluation),
            message="Option re-evaluated" if replaced else "Option evaluated",
            total_evaluations=len(session.evaluations),
            warnings=check.warnings or None,
        )
