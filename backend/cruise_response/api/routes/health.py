"""Health Probe — liveness endpoint rendered through the response envelope.

Invariants:
    - GET /kafkacruisecontrol/health always returns 200 if the process is up
    - json=true wraps the message in the success envelope; otherwise plain text
    - get_response_schema=true (with json=true) adds the schema header
"""

import logging

from fastapi import APIRouter, Depends

from cruise_response.api.dependencies import (
    ResponseFormat, get_response_format, get_response_writer,
)
from cruise_response.api.responses import success_response
from cruise_response.services.response_writer import ResponseWriter

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/kafkacruisecontrol", tags=["health"])

HEALTHY_MESSAGE = "Cruise Control is running."


@router.get("/health")
async def health_check(
    fmt: ResponseFormat = Depends(get_response_format),
    writer: ResponseWriter = Depends(get_response_writer),
):
    """Basic liveness probe."""
    return success_response(writer, fmt, HEALTHY_MESSAGE)
