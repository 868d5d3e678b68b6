"""Define DECISION Tools — JSON schemas for decision building, analysis and recommendation.

Invariants:
    - Scores are bound to criteria by criteria_id (one score per criterion, any order)
    - make_recommendation is terminal: the session is completed on success

Design Decisions:
    - Building tools (TOOLS_DECISION) and analysis tools (TOOLS_DECISION_ANALYSIS) kept
      as separate lists so the registry can rate-limit analysis on its own window
"""

TOOLS_DECISION = [
    {
        "name": "start_decision",
        "description": (
            "Start a new decision session. Provide the decision context; "
            "add criteria and options next, then evaluate each option."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "context": {
                    "type": "string",
                    "description": "What is being decided (1-5000 chars)",
                },
                "description": {
                    "type": "string",
                    "description": "Optional background for the decision",
                },
                "deadline": {
                    "type": "string",
                    "description": "Optional deadline, free text or ISO date",
                },
            },
            "required": ["context"],
        },
    },
    {
        "name": "add_criteria",
        "description": (
            "Add a weighted criterion to an active decision session. "
            "Weights across criteria should sum to about 1.0. "
            "Error: SESSION_NOT_ACTIVE once a recommendation was made."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "session_id": {"type": "string", "description": "Decision session id"},
                "name": {"type": "string", "description": "Criterion name (max 100 chars)"},
                "description": {"type": "string", "description": "What the criterion measures"},
                "weight": {
                    "type": "number", "minimum": 0, "maximum": 1,
                    "description": "Relative importance in [0, 1]",
                },
                "type": {
                    "type": "string",
                    "enum": ["benefit", "cost", "risk", "feasibility"],
                    "description": "Criterion kind",
                },
            },
            "required": ["session_id", "name", "weight"],
        },
    },
    {
        "name": "add_option",
        "description": "Add a candidate option to an active decision session.",
        "input_schema": {
            "type": "object",
            "properties": {
                "session_id": {"type": "string", "description": "Decision session id"},
                "name": {"type": "string", "description": "Option name (max 100 chars)"},
                "description": {"type": "string", "description": "Option summary (max 1000 chars)"},
                "pros": {"type": "array", "items": {"type": "string"}},
                "cons": {"type": "array", "items": {"type": "string"}},
                "risks": {"type": "array", "items": {"type": "string"}},
                "estimated_cost": {"type": "number", "minimum": 0},
                "estimated_time": {"type": "string"},
            },
            "required": ["session_id", "name"],
        },
    },
    {
        "name": "evaluate_option",
        "description": (
            "Score one option against every criterion of the session. "
            "Submit exactly one score per criterion, each tagged with its criteria_id. "
            "Scores range 0-10. Re-evaluating an option replaces the earlier evaluation. "
            "Error: VALIDATION_ERROR lists every problem with the submission."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "session_id": {"type": "string", "description": "Decision session id"},
                "option_id": {"type": "string", "description": "Option being scored"},
                "scores": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "criteria_id": {"type": "string"},
                            "score": {"type": "number", "minimum": 0, "maximum": 10},
                            "reasoning": {"type": "string"},
                        },
                        "required": ["criteria_id", "score"],
                    },
                },
            },
            "required": ["session_id", "option_id", "scores"],
        },
    },
]

TOOLS_DECISION_ANALYSIS = [
    {
        "name": "analyze_decision",
        "description": (
            "Rank evaluated options by weighted score and report confidence, "
            "key factors, risks and next steps. Does not change the session. "
            "Error: NO_EVALUATIONS before any option is evaluated."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "session_id": {"type": "string", "description": "Decision session id"},
                "include_alternatives": {
                    "type": "boolean",
                    "description": "Also list runner-up options scoring above 6.0",
                },
            },
            "required": ["session_id"],
        },
    },
    {
        "name": "make_recommendation",
        "description": (
            "Recommend the top-ranked option and complete the session. "
            "Error: CONFIDENCE_TOO_LOW when confidence is below min_confidence "
            "(the session stays active)."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "session_id": {"type": "string", "description": "Decision session id"},
                "min_confidence": {
                    "type": "number", "minimum": 0, "maximum": 1,
                    "description": "Minimum confidence required (default 0.3)",
                },
            },
            "required": ["session_id"],
        },
    },
]
