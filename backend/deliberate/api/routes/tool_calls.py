"""Tool Calls — the tool-call protocol over HTTP.

Invariants:
    - GET /api/v1/tools lists every tool definition (name, description, input_schema)
    - POST /api/v1/tools/{tool_name} always answers 200 with the tool envelope;
      success/failure lives in the envelope, not the HTTP status
    - Request body is the tool's argument object (empty body == {})
"""

import logging

from fastapi import APIRouter, Body, Depends

from deliberate.api.dependencies import get_dispatch
from deliberate.services.tool_dispatch import ToolDispatch
from deliberate.services.tools_registry import ALL_TOOLS

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/tools", tags=["tools"])


@router.get("")
async def list_tools():
    """Tool definitions for clients that discover tools at runtime."""
    return {"tools": ALL_TOOLS, "total": len(ALL_TOOLS)}


@router.post("/{tool_name}")
async def call_tool(
    tool_name: str,
    arguments: dict | None = Body(default=None),
    dispatch: ToolDispatch = Depends(get_dispatch),
):
    """Invoke one tool. Returns {success, data?, error?, metadata?}."""
    return await dispatch.execute(tool_name, arguments or {})
