"""Infrastructure Layer — persistence adapters and cross-cutting utilities.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Utilities (cache, rate limiter, audit log) are constructed explicitly, never module singletons
"""
