"""Response Writer — status, headers and body emission onto a ResponseSink.

Invariants:
    - Content-Length is the UTF-8 byte length of the body, never the char count
    - Encoding never fails: unencodable surrogates are written backslash-escaped
    - CORS headers are set as a complete set of three or not at all
    - Version and commit id headers are set on every response
    - Schema header exists iff is_json and wants_schema
    - Schema inference runs before the sink is touched: a body that is not JSON
      raises SchemaInferenceError and nothing is emitted
    - Sink OSError propagates unmodified; single attempt, no retry

Design Decisions:
    - Writer holds only frozen snapshots (CorsPolicy, ServiceIdentity), so one
      instance can serve concurrent requests; the sink is passed per call
    - Error path builds its body via core/response_envelope.py then reuses write()
"""

import logging

from cruise_response.core.domain_types import (
    CONTENT_LENGTH_HEADER, CONTENT_TYPE_HEADER, JSON_SCHEMA_HEADER,
    ContentType, CorsPolicy, ServiceIdentity,
)
from cruise_response.core.repository_protocols import ResponseSink
from cruise_response.core.response_envelope import render_error, render_success
from cruise_response.core.schema_inference import infer_schema_text

logger = logging.getLogger(__name__)


class ResponseWriter:
    """Writes one response per call onto a caller-owned sink."""

    def __init__(self, cors: CorsPolicy, identity: ServiceIdentity):
        self.cors = cors
        self.identity = identity

    def write(
        self,
        sink: ResponseSink,
        status: int,
        is_json: bool,
        wants_schema: bool,
        body: str,
    ) -> None:
        """Emit a response whose body is already built by the caller."""
        schema = infer_schema_text(body) if is_json and wants_schema else None
        # lone surrogates (e.g. surrogateescape-decoded paths) become \uXXXX text
        payload = body.encode("utf-8", errors="backslashreplace")

        sink.set_status(status)
        sink.set_header(CONTENT_TYPE_HEADER, ContentType.for_body(is_json).value)
        for name, value in self.cors.headers().items():
            sink.set_header(name, value)
        for name, value in self.identity.headers().items():
            sink.set_header(name, value)
        if schema is not None:
            sink.set_header(JSON_SCHEMA_HEADER, schema)
        sink.set_header(CONTENT_LENGTH_HEADER, str(len(payload)))

        sink.write(payload)
        sink.flush()
        logger.debug(
            "Response written",
            extra={"status_code": status, "content_length": len(payload)},
        )

    def write_success(
        self,
        sink: ResponseSink,
        message: str,
        is_json: bool,
        wants_schema: bool = False,
        status: int = 200,
    ) -> None:
        """Wrap message in the success envelope (JSON mode) and write it."""
        self.write(
            sink, status, is_json, wants_schema, render_success(message, is_json),
        )

    def write_error(
        self,
        sink: ResponseSink,
        exception: BaseException | None,
        error_message: str | None,
        status: int,
        is_json: bool,
        wants_schema: bool = False,
    ) -> None:
        """Build the error envelope and write it.

        The schema header is honoured here as well; the error envelope is
        always valid JSON so inference cannot fail on this path.
        """
        body = render_error(exception, error_message, is_json)
        logger.debug(
            f"Writing error response: {error_message}",
            extra={"status_code": status},
        )
        self.write(sink, status, is_json, wants_schema, body)
