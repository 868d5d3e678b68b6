"""Define SESSION Tools — JSON schemas for session lookup.

Invariants:
    - Schemas follow the {name, description, input_schema} tool format
    - Property names are snake_case (camelCase aliases accepted at parse time)
"""

TOOLS_SESSION = [
    {
        "name": "get_session",
        "description": (
            "Return the full state of a decision or thinking session. "
            "Error: RESOURCE_NOT_FOUND if the id is unknown."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "session_id": {
                    "type": "string",
                    "description": "Id of the session to fetch",
                },
            },
            "required": ["session_id"],
        },
    },
    {
        "name": "list_sessions",
        "description": (
            "List stored sessions, newest activity first. "
            "Optionally filter by session type and status."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "type": {
                    "type": "string",
                    "enum": ["decision", "thinking"],
                    "description": "Only sessions of this kind",
                },
                "status": {
                    "type": "string",
                    "enum": ["active", "evaluating", "completed"],
                    "description": "Only sessions in this lifecycle state",
                },
            },
        },
    },
]
