"""Error Handlers — maps exceptions escaping REST routes onto the error bodies tools use.

Invariants:
    - DeliberateError -> its http_status with to_response(); 5xx logged as error, 4xx as warning
    - RequestValidationError -> re-raised as ToolValidationError, so REST and tool callers
      see the same VALIDATION_ERROR code and "loc: msg" violations
    - Anything else -> 500 with the INTERNAL_ERROR tool envelope, no exception text
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from deliberate.core.errors import DeliberateError, ToolValidationError
from deliberate.schemas.tool_input import format_violations
from deliberate.services.tool_envelope import tool_error

logger = logging.getLogger(__name__)


async def handle_deliberate_error(request: Request, exc: DeliberateError) -> JSONResponse:
    log = logger.error if exc.http_status >= 500 else logger.warning
    log(
        f"{exc.code} on {request.method} {request.url.path}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_request_validation(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    violations = format_violations(exc.errors())
    return await handle_deliberate_error(request, ToolValidationError(violations))


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=tool_error("INTERNAL_ERROR", "An unexpected error occurred"),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DeliberateError, handle_deliberate_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(Exception, handle_unexpected)
