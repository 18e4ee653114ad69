"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every response body goes through ResponseWriter

Design Decisions:
    - Thin routes delegate to services
"""
