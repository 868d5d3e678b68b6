"""Thinking Schemas — argument models for sequential-thinking tools.

Invariants:
    - problem: 1-5000 chars (short problems produce a warning, not an error)
    - thought / new_thought: 1-2000 chars
    - max_thoughts in [1, 1000]; confidence in [0, 1]
"""

from pydantic import Field

from deliberate.core.enforce_session import MAX_THOUGHTS_LIMIT
from deliberate.core.thinking_session import DEFAULT_MAX_THOUGHTS
from deliberate.schemas.tool_input import ToolInput


class StartThinkingInput(ToolInput):
    problem: str = Field(min_length=1, max_length=5000)
    context: str | None = Field(None, max_length=5000)
    max_thoughts: int = Field(DEFAULT_MAX_THOUGHTS, ge=1, le=MAX_THOUGHTS_LIMIT)


class AddThoughtInput(ToolInput):
    session_id: str = Field(min_length=1)
    thought: str = Field(min_length=1, max_length=2000)
    parent_id: str | None = None
    branch_id: str | None = None


class ReviseThoughtInput(ToolInput):
    thought_id: str = Field(min_length=1)
    new_thought: str = Field(min_length=1, max_length=2000)
    reason: str | None = Field(None, max_length=1000)
    session_id: str | None = None


class BranchFromThoughtInput(ToolInput):
    thought_id: str = Field(min_length=1)
    new_direction: str = Field(min_length=1, max_length=2000)
    description: str | None = Field(None, max_length=1000)
    session_id: str | None = None


class AnalyzeThinkingInput(ToolInput):
    session_id: str = Field(min_length=1)
    include_branches: bool = False


class ConcludeThinkingInput(ToolInput):
    session_id: str = Field(min_length=1)
    conclusion: str = Field(min_length=1, max_length=5000)
    confidence: float | None = Field(None, ge=0.0, le=1.0)
