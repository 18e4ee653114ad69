"""Services Layer — orchestration of pure core functions around request-scoped IO.

Invariants:
    - Services receive their IO boundary (ResponseSink) by injection
    - No FastAPI or Starlette imports here
"""
