"""Define THINKING Tools — JSON schemas for sequential thinking.

Invariants:
    - add_thought fails with THOUGHT_LIMIT_REACHED once max_thoughts is hit
    - revise_thought / branch_from_thought accept an optional session_id
"""

TOOLS_THINKING = [
    {
        "name": "start_thinking",
        "description": "Start a sequential thinking session for a problem.",
        "input_schema": {
            "type": "object",
            "properties": {
                "problem": {"type": "string", "description": "Problem to think through"},
                "context": {"type": "string", "description": "Optional background"},
                "max_thoughts": {
                    "type": "integer", "minimum": 1, "maximum": 1000,
                    "description": "Cap on thoughts for this session (default 50)",
                },
            },
            "required": ["problem"],
        },
    },
    {
        "name": "add_thought",
        "description": (
            "Append a thought. Optionally reply to a parent thought or "
            "continue an existing branch."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "session_id": {"type": "string", "description": "Thinking session id"},
                "thought": {"type": "string", "description": "Thought text (max 2000 chars)"},
                "parent_id": {"type": "string", "description": "Thought this one follows"},
                "branch_id": {"type": "string", "description": "Branch this thought belongs to"},
            },
            "required": ["session_id", "thought"],
        },
    },
    {
        "name": "revise_thought",
        "description": "Overwrite a thought's text and record why it was revised.",
        "input_schema": {
            "type": "object",
            "properties": {
                "thought_id": {"type": "string"},
                "new_thought": {"type": "string"},
                "reason": {"type": "string"},
                "session_id": {
                    "type": "string",
                    "description": "Owning session; searched for when omitted",
                },
            },
            "required": ["thought_id", "new_thought"],
        },
    },
    {
        "name": "branch_from_thought",
        "description": "Open a new branch of reasoning from an existing thought.",
        "input_schema": {
            "type": "object",
            "properties": {
                "thought_id": {"type": "string"},
                "new_direction": {"type": "string", "description": "Direction the branch explores"},
                "description": {"type": "string"},
                "session_id": {
                    "type": "string",
                    "description": "Owning session; searched for when omitted",
                },
            },
            "required": ["thought_id", "new_direction"],
        },
    },
    {
        "name": "analyze_thinking_progress",
        "description": (
            "Summarize progress: totals, key insights, suggested next steps "
            "and a progress confidence."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "session_id": {"type": "string", "description": "Thinking session id"},
                "include_branches": {"type": "boolean"},
            },
            "required": ["session_id"],
        },
    },
    {
        "name": "conclude_thinking",
        "description": "Record a conclusion and complete the thinking session.",
        "input_schema": {
            "type": "object",
            "properties": {
                "session_id": {"type": "string", "description": "Thinking session id"},
                "conclusion": {"type": "string"},
                "confidence": {"type": "number", "minimum": 0, "maximum": 1},
            },
            "required": ["session_id", "conclusion"],
        },
    },
]
