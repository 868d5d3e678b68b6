"""Services Layer — tool handlers, tool definitions, and tool dispatch.

Invariants:
    - Handlers split by concern (sessions, decision building, analysis, quality, thinking)
    - Tool dispatch uses explicit dict mapping (no auto-discovery)
"""
