"""Tool Dispatch — explicit routing from tool_name to handler function.

Invariants:
    - Every tool->handler mapping is visible — no getattr magic, no auto-discovery
    - Unknown tools return an UNKNOWN_TOOL envelope (never raises)
    - Every call is rate-limited, then audited and logged
    - DeliberateError -> its tool envelope; any other exception -> INTERNAL_ERROR envelope
      (logged with traceback, never raised across the protocol boundary)

Design Decisions:
    - Explicit dict over getattr: adding a tool requires editing this dict
    - Handlers split by concern, each class kept small
    - Handlers instantiated once per dispatcher with the shared ServiceContext
"""

import logging
import time

from deliberate.core.errors import DeliberateError
from deliberate.infrastructure.service_context import ServiceContext
from deliberate.services.handle_decision import DecisionHandlers
from deliberate.services.handle_decision_analysis import DecisionAnalysisHandlers
from deliberate.services.handle_quality import QualityHandlers
from deliberate.services.handle_sessions import SessionHandlers
from deliberate.services.handle_thinking import (
    ThinkingHandlers, ThinkingReviewHandlers,
)
from deliberate.services.tool_envelope import tool_error
from deliberate.services.tools_registry import ANALYSIS_TOOLS

logger = logging.getLogger(__name__)

CREATING_TOOLS = frozenset({"start_decision", "start_thinking"})


def _session_id_of(input_data: dict) -> str | None:
    value = input_data.get("session_id") or input_data.get("sessionId")
    return value if isinstance(value, str) and value else None


def _session_id_of_result(tool_name: str, result: dict) -> str | None:
    """Session id for audit when the caller did not pass one."""
    metadata = result.get("metadata") or {}
    data = result.get("data")
    if not isinstance(data, dict):
        return metadata.get("session_id")
    if tool_name in CREATING_TOOLS:
        return data.get("id")
    return metadata.get("session_id") or data.get("session_id")


class ToolDispatch:
    """Routes tool_name -> handler. Explicit registration, no auto-discovery."""

    def __init__(self, context: ServiceContext):
        self._context = context
        sessions = SessionHandlers(context)
        decision = DecisionHandlers(context)
        analysis = DecisionAnalysisHandlers(context)
        quality = QualityHandlers(context)
        thinking = ThinkingHandlers(context)
        review = ThinkingReviewHandlers(context)

        self._handlers = {
            # Sessions (2 tools)
            "get_session": sessions.get_session,
            "list_sessions": sessions.list_sessions,

            # Decision building (4 tools)
            "start_decision": decision.start_decision,
            "add_criteria": decision.add_criteria,
            "add_option": decision.add_option,
            "evaluate_option": decision.evaluate_option,

            # Decision analysis (2 tools)
            "analyze_decision": analysis.analyze_decision,
            "make_recommendation": analysis.make_recommendation,

            # Quality (5 tools)
            "analyze_bias": quality.analyze_bias,
            "validate_logic": quality.validate_logic,
            "assess_risks": quality.assess_risks,
            "generate_alternatives": quality.generate_alternatives,
            "comprehensive_analysis": quality.comprehensive_analysis,

            # Thinking (6 tools)
            "start_thinking": thinking.start_thinking,
            "add_thought": thinking.add_thought,
            "revise_thought": thinking.revise_thought,
            "branch_from_thought": thinking.branch_from_thought,
            "analyze_thinking_progress": review.analyze_thinking_progress,
            "conclude_thinking": review.conclude_thinking,
        }

    @property
    def tool_names(self) -> list[str]:
        return list(self._handlers)

    async def execute(self, tool_name: str, input_data: dict | None) -> dict:
        """Route tool_name to handler. Always returns an envelope."""
        input_data = input_data or {}
        handler = self._handlers.get(tool_name)
        if not handler:
            logger.warning(
                f"Unknown tool requested: {tool_name}",
                extra={"tool_name": tool_name, "error_code": "UNKNOWN_TOOL"},
            )
            return tool_error(
                "UNKNOWN_TOOL", f"Tool '{tool_name}' does not exist.", "validation",
            )

        session_id = _session_id_of(input_data)
        started = time.perf_counter()
        try:
            self._context.rate_limiter.check(
                session_id, is_analysis=tool_name in ANALYSIS_TOOLS,
            )
            result = await handler(input_data)
        except DeliberateError as e:
            e.context.tool_name = tool_name
            e.context.session_id = e.context.session_id or session_id
            logger.warning(
                f"Tool '{tool_name}' failed: {e.message}",
                extra={
                    "tool_name": tool_name, "session_id": session_id,
                    "error_code": e.code,
                },
            )
            self._context.audit_log.record(
                f"{tool_name}_failed", session_id, {"error_code": e.code},
            )
            return e.to_tool_result()
        except Exception:
            logger.error(
                f"Unhandled error in tool '{tool_name}'",
                exc_info=True,
                extra={"tool_name": tool_name, "session_id": session_id},
            )
            return tool_error(
                "INTERNAL_ERROR", "An unexpected error occurred", "internal",
            )

        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        audited_session = session_id or _session_id_of_result(tool_name, result)
        self._context.audit_log.record(tool_name, audited_session)
        logger.info(
            f"Tool '{tool_name}' succeeded",
            extra={
                "tool_name": tool_name, "session_id": audited_session,
                "duration_ms": duration_ms,
            },
        )
        return result
