"""Define QUALITY Tools — JSON schemas for decision-quality checks.

Invariants:
    - analyze_bias accepts decision and thinking sessions; the rest need a decision session
"""

TOOLS_QUALITY = [
    {
        "name": "analyze_bias",
        "description": (
            "Flag heuristic bias patterns (confirmation, anchoring, availability, "
            "overconfidence) in a decision or thinking session."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "session_id": {"type": "string", "description": "Session id"},
                "include_mitigation": {
                    "type": "boolean",
                    "description": "Attach a mitigation hint to each flag",
                },
            },
            "required": ["session_id"],
        },
    },
    {
        "name": "validate_logic",
        "description": (
            "Check the decision's structure: weight sum, minimum criteria/options, "
            "duplicate names, evaluation coverage and score sanity."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "session_id": {"type": "string", "description": "Decision session id"},
                "strict_mode": {
                    "type": "boolean",
                    "description": "Treat warnings as failures",
                },
            },
            "required": ["session_id"],
        },
    },
    {
        "name": "assess_risks",
        "description": "List decision risks with probability, impact and monitoring guidance.",
        "input_schema": {
            "type": "object",
            "properties": {
                "session_id": {"type": "string", "description": "Decision session id"},
                "include_mitigation": {
                    "type": "boolean",
                    "description": "Attach mitigation actions to each risk",
                },
            },
            "required": ["session_id"],
        },
    },
    {
        "name": "generate_alternatives",
        "description": (
            "Suggest up to three alternative approaches "
            "(hybrid, phased, innovative) for the decision."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "session_id": {"type": "string", "description": "Decision session id"},
                "max_alternatives": {
                    "type": "integer", "minimum": 1, "maximum": 3,
                    "description": "How many alternatives to return",
                },
                "focus_areas": {
                    "type": "array", "items": {"type": "string"},
                    "description": "Areas the alternatives should emphasize",
                },
            },
            "required": ["session_id"],
        },
    },
    {
        "name": "comprehensive_analysis",
        "description": (
            "Run bias, logic and risk checks together and report an overall "
            "quality score with aggregated recommendations."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "session_id": {"type": "string", "description": "Decision session id"},
                "include_all": {
                    "type": "boolean",
                    "description": "Also include generated alternatives",
                },
            },
            "required": ["session_id"],
        },
    },
]
