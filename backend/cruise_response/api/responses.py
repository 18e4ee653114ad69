"""Response Builders — run ResponseWriter against a buffered sink for FastAPI.

Invariants:
    - Every endpoint and error handler response is produced here
    - SchemaInferenceError and OSError from the writer propagate to the caller
"""

from fastapi.responses import Response

from cruise_response.api.dependencies import ResponseFormat
from cruise_response.infrastructure.http_sink import BufferedResponseSink
from cruise_response.services.response_writer import ResponseWriter


def success_response(
    writer: ResponseWriter, fmt: ResponseFormat, message: str, status: int = 200,
) -> Response:
    """Success envelope (or raw text) for message."""
    sink = BufferedResponseSink()
    writer.write_success(sink, message, fmt.is_json, fmt.wants_schema, status)
    return sink.to_response()


def error_response(
    writer: ResponseWriter,
    fmt: ResponseFormat,
    exception: BaseException | None,
    error_message: str | None,
    status: int,
) -> Response:
    """Error envelope (or raw error text) for exception/error_message."""
    sink = BufferedResponseSink()
    writer.write_error(
        sink, exception, error_message, status, fmt.is_json, fmt.wants_schema,
    )
    return sink.to_response()
