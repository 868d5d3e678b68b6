"""Tool Input Base — shared config and the ValidationError -> ToolValidationError bridge.

Invariants:
    - Tool arguments accept snake_case and camelCase keys (sessionId == session_id)
    - Unknown keys are ignored (tool callers are lax)
    - parse_input reports EVERY violation, not just the first
"""

from typing import TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from deliberate.core.errors import ToolValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


class ToolInput(BaseModel):
    """Base for all tool argument models."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        str_strip_whitespace=True,
    )


def _format_error(error: dict) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    message = error.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


def format_violations(errors: list[dict]) -> list[str]:
    """One "loc: msg" line per pydantic error; shared by tool input and REST query checks."""
    return [_format_error(e) for e in errors]


def parse_input(model: type[ModelT], input_data: dict) -> ModelT:
    """Validate raw tool arguments into `model`, raising ToolValidationError."""
    try:
        return model.model_validate(input_data or {})
    except ValidationError as exc:
        raise ToolValidationError(format_violations(exc.errors())) from exc
