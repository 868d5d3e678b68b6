"""Service test fixtures — in-memory ServiceContext + ToolDispatch.

Invariants:
    - Every test gets a fresh repository, cache, limiter and audit log
    - No database: the in-memory repository sits behind the cached wrapper,
      the same layering build_context() produces
"""

import pytest

from deliberate.infrastructure.audit_log import AuditLog
from deliberate.infrastructure.cache import TTLCache
from deliberate.infrastructure.cached_session_repository import CachedSessionRepository
from deliberate.infrastructure.memory_session_repository import InMemorySessionRepository
from deliberate.infrastructure.rate_limiter import RateLimiter
from deliberate.infrastructure.service_context import ServiceContext
from deliberate.services.tool_dispatch import ToolDispatch


@pytest.fixture
def context():
    cache = TTLCache(max_size=100, ttl_seconds=60)
    return ServiceContext(
        repository=CachedSessionRepository(InMemorySessionRepository(), cache),
        rate_limiter=RateLimiter(),
        audit_log=AuditLog(),
        cache=cache,
    )


@pytest.fixture
def dispatch(context):
    return ToolDispatch(context)


@pytest.fixture
def run_tool(dispatch):
    """Execute a tool and return its envelope."""
    async def _run(tool_name: str, **arguments) -> dict:
        return await dispatch.execute(tool_name, arguments)
    return _run


@pytest.fixture
def build_decision(run_tool):
    """Drive the tool protocol: start, add criteria, add options. Returns ids."""
    async def _build(
        criteria=(("Cost", 0.5, "cost"), ("Features", 0.5, "benefit")),
        options=("A", "B"),
        context_text="Choose CRM vendor",
    ) -> dict:
        started = await run_tool("start_decision", context=context_text)
        session_id = started["data"]["id"]
        criteria_ids = []
        for name, weight, kind in criteria:
            added = await run_tool(
                "add_criteria", session_id=session_id, name=name,
                description=f"{name} of the solution", weight=weight, type=kind,
            )
            criteria_ids.append(added["data"]["id"])
        option_ids = []
        for name in options:
            added = await run_tool(
                "add_option", session_id=session_id, name=name,
                description=f"Vendor {name}",
            )
            option_ids.append(added["data"]["id"])
        return {
            "session_id": session_id,
            "criteria_ids": criteria_ids,
            "option_ids": option_ids,
        }
    return _build
