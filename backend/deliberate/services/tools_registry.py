"""Tools Registry — flat list and per-category lookup of Deliberate tools.

Invariants:
    - Every tool belongs to exactly one ToolCategory
    - ANALYSIS_TOOLS (analysis + quality categories) share the stricter rate-limit window
    - ALL_TOOLS names match the ToolDispatch handler map one-to-one

Design Decisions:
    - Explicit imports from each define_*_tools.py: no auto-discovery
"""

from deliberate.core.domain_types import ToolCategory
from deliberate.services.define_decision_tools import (
    TOOLS_DECISION, TOOLS_DECISION_ANALYSIS,
)
from deliberate.services.define_quality_tools import TOOLS_QUALITY
from deliberate.services.define_session_tools import TOOLS_SESSION
from deliberate.services.define_thinking_tools import TOOLS_THINKING

_CATEGORY_TOOLS = {
    ToolCategory.SESSION: TOOLS_SESSION,
    ToolCategory.DECISION: TOOLS_DECISION,
    ToolCategory.ANALYSIS: TOOLS_DECISION_ANALYSIS,
    ToolCategory.QUALITY: TOOLS_QUALITY,
    ToolCategory.THINKING: TOOLS_THINKING,
}

ALL_TOOLS: list[dict] = [
    *TOOLS_SESSION,            # 2 tools
    *TOOLS_DECISION,           # 4 tools
    *TOOLS_DECISION_ANALYSIS,  # 2 tools
    *TOOLS_QUALITY,            # 5 tools
    *TOOLS_THINKING,           # 6 tools
]
# Total: 19

TOOL_CATEGORY: dict[str, ToolCategory] = {
    tool["name"]: category
    for category, tools in _CATEGORY_TOOLS.items()
    for tool in tools
}

ANALYSIS_TOOLS: frozenset[str] = frozenset(
    name for name, category in TOOL_CATEGORY.items()
    if category in (ToolCategory.ANALYSIS, ToolCategory.QUALITY)
)


def get_category_tools(category: ToolCategory) -> list[dict]:
    return list(_CATEGORY_TOOLS[category])


def get_tool(name: str) -> dict | None:
    return next((t for t in ALL_TOOLS if t["name"] == name), None)
