"""API Dependencies — FastAPI providers for the ServiceContext and ToolDispatch.

Invariants:
    - The ServiceContext lives on app.state (built in lifespan); routes never construct one
    - Tests swap it with app.dependency_overrides[get_context]
"""

from fastapi import Depends, Request

from deliberate.infrastructure.service_context import ServiceContext
from deliberate.services.tool_dispatch import ToolDispatch


def get_context(request: Request) -> ServiceContext:
    context = getattr(request.app.state, "context", None)
    if context is None:
        raise RuntimeError("Service context not initialized")
    return context


def get_dispatch(context: ServiceContext = Depends(get_context)) -> ToolDispatch:
    return ToolDispatch(context)
