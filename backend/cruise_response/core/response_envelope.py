"""Response Envelope — the versioned JSON wrapper around every response body.

Invariants:
    - Every envelope carries "version": JSON_VERSION
    - Success payload key is "message"; error payload keys are "stackTrace" and "errorMessage"
    - stackTrace is "" iff no exception was given
    - Plain-text mode bypasses the envelope entirely
    - errorMessage None -> key omitted in JSON mode, "" in plain-text mode

Design Decisions:
    - Compact separators and ensure_ascii=False: the body is sent as UTF-8 and its
      byte length is computed by the writer, not here
"""

import json
import traceback

from cruise_response.core.domain_types import (
    JSON_VERSION, VERSION, MESSAGE, STACK_TRACE, ERROR_MESSAGE,
)


def _dumps(payload: dict) -> str:
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def format_stack_trace(exception: BaseException | None) -> str:
    """Full traceback text of an exception, or "" when there is none.

    Includes the exception type, its message, the frame list and any
    chained causes. An exception that was never raised has no frames but
    still yields its type and message.
    """
    if exception is None:
        return ""
    return "".join(traceback.format_exception(
        type(exception), exception, exception.__traceback__,
    ))


def build_success(message: str) -> str:
    """{"version":1,"message":...}; message content is not validated."""
    return _dumps({VERSION: JSON_VERSION, MESSAGE: message})


def build_error(
    exception: BaseException | None, error_message: str | None,
) -> str:
    """{"version":1,"stackTrace":...,"errorMessage":...}.

    The errorMessage key is omitted when error_message is None; null
    entries are never serialized into the envelope.
    """
    envelope = {
        VERSION: JSON_VERSION,
        STACK_TRACE: format_stack_trace(exception),
    }
    if error_message is not None:
        envelope[ERROR_MESSAGE] = error_message
    return _dumps(envelope)


def render_success(message: str, is_json: bool) -> str:
    return build_success(message) if is_json else message


def render_error(
    exception: BaseException | None, error_message: str | None, is_json: bool,
) -> str:
    if is_json:
        return build_error(exception, error_message)
    return error_message if error_message is not None else ""
