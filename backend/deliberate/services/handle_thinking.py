"""Thinking Handlers — sequential-thinking tools (4 + 2 methods).

Invariants:
    - Every mutation requires an ACTIVE thinking session
    - add_thought rejects a full session with THOUGHT_LIMIT_REACHED and appends nothing
    - Unknown parent_id / branch_id / thought_id -> RESOURCE_NOT_FOUND
    - conclude_thinking is terminal (active -> completed)

Design Decisions:
    - Split in two classes (building vs review) to keep each handler class small
    - revise/branch locate the owning session by scanning when session_id is omitted
"""

import logging

from deliberate.core.decision_session import new_id
from deliberate.core.enforce_session import check_thought_capacity, require_active
from deliberate.core.errors import ResourceNotFoundError
from deliberate.core.session_snapshot import (
    branch_to_dict, thinking_to_snapshot, thought_to_dict,
)
from deliberate.core.thinking_progress import analyze_progress
from deliberate.core.thinking_session import ThinkingSession
from deliberate.infrastructure.service_context import ServiceContext
from deliberate.schemas.thinking import (
    AddThoughtInput, AnalyzeThinkingInput, BranchFromThoughtInput,
    ConcludeThinkingInput, ReviseThoughtInput, StartThinkingInput,
)
from deliberate.schemas.tool_input import parse_input
from deliberate.services.session_access import load_thinking, locate_thought
from deliberate.services.tool_envelope import tool_ok

logger = logging.getLogger(__name__)

SHORT_PROBLEM_CHARS: int = 10


class ThinkingHandlers:
    """Thought building: start, add, revise, branch."""

    def __init__(self, context: ServiceContext):
        self.repo = context.repository

    async def start_thinking(self, input_data: dict) -> dict:
        args = parse_input(StartThinkingInput, input_data)
        session = ThinkingSession(
            id=new_id(),
            problem=args.problem,
            context=args.context,
            max_thoughts=args.max_thoughts,
        )
        await self.repo.save(session)
        logger.info(
            "Thinking session started",
            extra={"session_id": session.id, "session_type": "thinking"},
        )
        warnings = None
        if len(args.problem) < SHORT_PROBLEM_CHARS:
            warnings = ["Problem statement is very short; consider adding detail"]
        return tool_ok(
            thinking_to_snapshot(session),
            message="Thinking session started",
            warnings=warnings,
        )

    async def add_thought(self, input_data: dict) -> dict:
        args = parse_input(AddThoughtInput, input_data)
        session = await load_thinking(self.repo, args.session_id)
        require_active(session)
        check_thought_capacity(session)
        if args.parent_id and session.find_thought(args.parent_id) is None:
            raise ResourceNotFoundError("Thought", args.parent_id)
        if args.branch_id and session.find_branch(args.branch_id) is None:
            raise ResourceNotFoundError("Branch", args.branch_id)

        thought = session.append_thought(
            args.thought, parent_id=args.parent_id, branch_id=args.branch_id,
        )
        await self.repo.save(session)
        return tool_ok(
            thought_to_dict(thought),
            message="Thought added",
            thought_number=len(session.thoughts),
            thoughts_remaining=session.thoughts_remaining,
        )

    async def revise_thought(self, input_data: dict) -> dict:
        args = parse_input(ReviseThoughtInput, input_data)
        session, thought = await locate_thought(
            self.repo, args.thought_id, args.session_id,
        )
        require_active(session)
        session.revise_thought(thought, args.new_thought, args.reason)
        await self.repo.save(session)
        return tool_ok(
            thought_to_dict(thought),
            message="Thought revised",
            session_id=session.id,
            reason=args.reason,
        )

    async def branch_from_thought(self, input_data: dict) -> dict:
        args = parse_input(BranchFromThoughtInput, input_data)
        session, thought = await locate_thought(
            self.repo, args.thought_id, args.session_id,
        )
        require_active(session)
        branch = session.add_branch(
            thought.id, args.description or args.new_direction,
        )
        await self.repo.save(session)
        return tool_ok(
            {**branch_to_dict(branch), "new_direction": args.new_direction},
            message="Branch created",
            session_id=session.id,
            from_thought=thought.content[:100],
        )


class ThinkingReviewHandlers:
    """Thought review: progress analysis and conclusion."""

    def __init__(self, context: ServiceContext):
        self.repo = context.repository

    async def analyze_thinking_progress(self, input_data: dict) -> dict:
        args = parse_input(AnalyzeThinkingInput, input_data)
        session = await load_thinking(self.repo, args.session_id)
        return tool_ok(
            analyze_progress(session, include_branches=args.include_branches),
            message="Progress analysis completed",
        )

    async def conclude_thinking(self, input_data: dict) -> dict:
        args = parse_input(ConcludeThinkingInput, input_data)
        session = await load_thinking(self.repo, args.session_id)
        require_active(session)
        session.conclude(args.conclusion, args.confidence)
        await self.repo.save(session)
        logger.info(
            "Thinking session concluded",
            extra={"session_id": session.id, "action": "session_completed"},
        )
        return tool_ok(
            thinking_to_snapshot(session),
            message="Thinking session concluded",
            total_thoughts=len(session.thoughts),
        )
