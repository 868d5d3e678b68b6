"""Pydantic Schemas — tool argument validation at the protocol boundary.

Invariants:
    - Schemas validate at system boundary (tool arguments)
    - Domain types from core/ used for enum fields

Design Decisions:
    - Separate from core dataclasses: schemas are input contracts, core holds session state
"""
