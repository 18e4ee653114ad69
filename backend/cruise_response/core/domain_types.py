"""Domain Types — value objects and wire constants shared across the response core.

Invariants:
    - JSON_VERSION is the only envelope version ever emitted
    - CorsPolicy and ServiceIdentity are frozen: read per request, never mutated
    - Header names are defined once here and nowhere else
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - Frozen dataclasses over dicts: hashable snapshots, attribute access
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


# ─── JSON Values ─────────────────────────────────────────────────

# Recursive alias for json.loads output. Object key order is insertion order.
JSONValue = Union[
    None, bool, int, float, str, list["JSONValue"], dict[str, "JSONValue"],
]


# ─── Envelope Constants ──────────────────────────────────────────

JSON_VERSION = 1
VERSION = "version"
MESSAGE = "message"
STACK_TRACE = "stackTrace"
ERROR_MESSAGE = "errorMessage"


# ─── Header Names ────────────────────────────────────────────────

CONTENT_TYPE_HEADER = "Content-Type"
CONTENT_LENGTH_HEADER = "Content-Length"
ALLOW_ORIGIN_HEADER = "Access-Control-Allow-Origin"
EXPOSE_HEADERS_HEADER = "Access-Control-Expose-Headers"
ALLOW_CREDENTIALS_HEADER = "Access-Control-Allow-Credentials"
VERSION_HEADER = "Cruise-Control-Version"
COMMIT_ID_HEADER = "Cruise-Control-Commit_Id"
JSON_SCHEMA_HEADER = "Cruise-Control-JSON-Schema"


class ContentType(str, Enum):
    """Body media types; the writer picks one from the is_json flag."""
    JSON = "application/json; charset=utf-8"
    TEXT = "text/plain; charset=utf-8"

    @classmethod
    def for_body(cls, is_json: bool) -> "ContentType":
        return cls.JSON if is_json else cls.TEXT


class SchemaType(str, Enum):
    """Type names of the inferred schema dialect."""
    OBJECT = "object"
    ARRAY = "array"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    NULL = "null"


# ─── Request Snapshots ───────────────────────────────────────────

@dataclass(frozen=True)
class CorsPolicy:
    """Cross-origin policy snapshot taken from configuration."""
    enabled: bool = False
    allow_origin: str = "*"
    expose_headers: str = "User-Task-ID"

    def headers(self) -> dict[str, str]:
        """All three CORS headers when enabled, none otherwise."""
        if not self.enabled:
            return {}
        return {
            ALLOW_ORIGIN_HEADER: self.allow_origin,
            EXPOSE_HEADERS_HEADER: self.expose_headers,
            ALLOW_CREDENTIALS_HEADER: "true",
        }


@dataclass(frozen=True)
class ServiceIdentity:
    """Service version and commit id, resolved once at process start."""
    version: str
    commit_id: str

    def headers(self) -> dict[str, str]:
        return {
            VERSION_HEADER: self.version,
            COMMIT_ID_HEADER: self.commit_id,
        }
