"""Boundary Protocols — contracts between the response core and the transport.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - The output resource is accessed only through ResponseSink
    - A sink is owned by exactly one writer for the duration of a write

Design Decisions:
    - Protocol over ABC: structural subtyping, any transport with these four
      methods can receive a response
    - Synchronous methods: the terminal write is the only blocking call and the
      transport decides how it is scheduled
"""

from typing import Protocol


class ResponseSink(Protocol):
    """Request-scoped output resource, implemented by the transport adapter.

    write() and flush() raise OSError when the underlying stream is gone.
    """
    def set_status(self, status: int) -> None: ...
    def set_header(self, name: str, value: str) -> None: ...
    def write(self, data: bytes) -> None: ...
    def flush(self) -> None: ...
