"""Error Handlers — global exception handlers rendering error envelopes.

Invariants:
    - ResponseCoreError → error envelope with the error's own http_status
    - RequestValidationError → 400 error envelope with field-level message
    - Exception (catch-all) → 500 error envelope carrying the stack trace
    - Handlers honour the request's json / get_response_schema flags

Design Decisions:
    - Three-layer handler: domain (ResponseCoreError), validation (Pydantic), catch-all (Exception)
    - Catch-all message format matches the servlet's
      "Error processing <METHOD> request '<path>' due to: '<error>'."
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError

from cruise_response.api.dependencies import ResponseFormat, get_response_writer
from cruise_response.api.responses import error_response
from cruise_response.core.errors import ResponseCoreError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_core_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_core_error_handler(app: FastAPI) -> None:
    """Register response core / business error handler."""

    @app.exception_handler(ResponseCoreError)
    async def core_error_handler(request: Request, exc: ResponseCoreError):
        logger.error(
            f"ResponseCoreError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return error_response(
            get_response_writer(request), ResponseFormat.from_request(request),
            exc, exc.error_message(), exc.http_status,
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return error_response(
            get_response_writer(request), ResponseFormat.from_request(request),
            exc, _build_validation_error_message(exc),
            status.HTTP_400_BAD_REQUEST,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        message = (
            f"Error processing {request.method} request "
            f"'{request.url.path}' due to: '{exc}'."
        )
        return error_response(
            get_response_writer(request), ResponseFormat.from_request(request),
            exc, message, status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def _build_validation_error_message(exc: RequestValidationError) -> str:
    """One line per invalid field: "<loc>: <msg>"."""
    return "; ".join(
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    )
