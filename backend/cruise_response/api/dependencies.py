"""Request Dependencies — response format flags and per-request writer.

Invariants:
    - json / get_response_schema parse like Boolean.parseBoolean: only "true"
      (any case) is true, everything else (absent, "1", "yes") is false
    - Flag parsing never raises, so error handlers can reuse it on any request
    - The writer is built from app.state snapshots, never from module globals
"""

from dataclasses import dataclass

from fastapi import Request

from cruise_response.services.response_writer import ResponseWriter

JSON_PARAM = "json"
GET_RESPONSE_SCHEMA_PARAM = "get_response_schema"


def _parse_flag(value: str | None) -> bool:
    return value is not None and value.lower() == "true"


@dataclass(frozen=True)
class ResponseFormat:
    """How the caller asked for the body to be rendered."""
    is_json: bool = False
    wants_schema: bool = False

    @classmethod
    def from_request(cls, request: Request) -> "ResponseFormat":
        params = request.query_params
        return cls(
            is_json=_parse_flag(params.get(JSON_PARAM)),
            wants_schema=_parse_flag(params.get(GET_RESPONSE_SCHEMA_PARAM)),
        )


def get_response_format(request: Request) -> ResponseFormat:
    return ResponseFormat.from_request(request)


def get_response_writer(request: Request) -> ResponseWriter:
    """Writer over the settings snapshot taken at app construction."""
    state = request.app.state
    return ResponseWriter(
        cors=state.settings.cors_policy(), identity=state.identity,
    )
