"""Infrastructure Layer — transport adapters and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/
    - Transport errors surface as OSError, never swallowed
"""
