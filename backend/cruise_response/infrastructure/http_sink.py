"""HTTP Sink — buffers one written response and hands it to Starlette.

Invariants:
    - Implements core.repository_protocols.ResponseSink
    - Headers reach the client exactly as the writer set them: Starlette never
      recomputes Content-Length or Content-Type for this response
    - to_response() requires a flushed sink

Design Decisions:
    - Buffer-then-return over streaming: FastAPI endpoints return a Response
      object, and the writer's single write + flush maps onto one body
"""

from fastapi.responses import Response


class BufferedResponseSink:
    """In-memory ResponseSink for one request."""

    def __init__(self):
        self.status: int | None = None
        self.headers: dict[str, str] = {}
        self._body = bytearray()
        self._flushed = False

    def set_status(self, status: int) -> None:
        self.status = status

    def set_header(self, name: str, value: str) -> None:
        self.headers[name] = value

    def write(self, data: bytes) -> None:
        self._body.extend(data)

    def flush(self) -> None:
        self._flushed = True

    @property
    def body(self) -> bytes:
        return bytes(self._body)

    @property
    def flushed(self) -> bool:
        return self._flushed

    def to_response(self) -> Response:
        """Starlette Response carrying the buffered status, headers and body."""
        if self.status is None or not self._flushed:
            raise RuntimeError("Response has not been written")
        return Response(
            content=self.body, status_code=self.status, headers=self.headers,
        )
