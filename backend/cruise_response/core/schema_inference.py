"""Schema Inference — derive a structural schema from a live JSON response body.

Invariants:
    - Arrays: item schema comes from element 0 only; absent for empty arrays
    - Objects: properties follow the source object's key order
    - Booleans are matched before numbers (bool is an int subclass)
    - Null renders as {"type": "null"}
    - Same input text always renders the same schema text
    - Rendered text is ASCII-only so it is always a legal HTTP header value
    - Nesting beyond the interpreter recursion limit is a SchemaInferenceError

Design Decisions:
    - Build a SchemaNode tree first, serialize once: inference is testable
      without caring about text layout
    - Heterogeneous arrays are described by their first element only; this is
      a shape hint for clients, not a validator
"""

import json
from dataclasses import dataclass, field
from typing import Union

from cruise_response.core.domain_types import JSONValue, SchemaType
from cruise_response.core.errors import SchemaInferenceError


# ─── Schema Tree ─────────────────────────────────────────────────

@dataclass(frozen=True)
class PrimitiveSchema:
    """Leaf node: boolean, number, string or null."""
    type: SchemaType


@dataclass(frozen=True)
class ArraySchema:
    """Array node; items is None when the source array was empty."""
    items: "SchemaNode | None" = None


@dataclass(frozen=True)
class ObjectSchema:
    """Object node; properties keep source key order."""
    properties: dict[str, "SchemaNode"] = field(default_factory=dict)


SchemaNode = Union[PrimitiveSchema, ArraySchema, ObjectSchema]

_TOO_DEEP = "document is nested too deeply"


# ─── Inference ───────────────────────────────────────────────────

def parse_document(text: str) -> JSONValue:
    """Parse a response body, raising SchemaInferenceError if it is not JSON."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaInferenceError(exc.msg, position=exc.pos) from exc
    except RecursionError as exc:
        raise SchemaInferenceError(_TOO_DEEP) from exc


def infer(document: JSONValue) -> SchemaNode:
    """Infer the schema of a parsed JSON document."""
    try:
        return _infer(document)
    except RecursionError as exc:
        raise SchemaInferenceError(_TOO_DEEP) from exc


def _infer(document: JSONValue) -> SchemaNode:
    match document:
        case None:
            return PrimitiveSchema(SchemaType.NULL)
        case bool():
            return PrimitiveSchema(SchemaType.BOOLEAN)
        case int() | float():
            return PrimitiveSchema(SchemaType.NUMBER)
        case str():
            return PrimitiveSchema(SchemaType.STRING)
        case list():
            # first-element rule: the rest of the array is never inspected
            return ArraySchema(items=_infer(document[0]) if document else None)
        case dict():
            return ObjectSchema(properties={
                key: _infer(value) for key, value in document.items()
            })
        case _:
            raise TypeError(
                f"Not a JSON value: {type(document).__name__}",
            )


# ─── Rendering ───────────────────────────────────────────────────

def schema_to_dict(node: SchemaNode) -> dict:
    """Convert a schema tree into the header's dict shape."""
    match node:
        case PrimitiveSchema(type=schema_type):
            return {"type": schema_type.value}
        case ArraySchema(items=None):
            return {"type": SchemaType.ARRAY.value}
        case ArraySchema(items=items):
            return {"type": SchemaType.ARRAY.value, "items": [schema_to_dict(items)]}
        case ObjectSchema(properties=properties):
            return {
                "type": SchemaType.OBJECT.value,
                "properties": {
                    key: schema_to_dict(child) for key, child in properties.items()
                },
            }
    raise TypeError(f"Not a schema node: {type(node).__name__}")


def render_schema(node: SchemaNode) -> str:
    """Compact JSON text of a schema tree."""
    try:
        return json.dumps(schema_to_dict(node), separators=(",", ":"))
    except RecursionError as exc:
        raise SchemaInferenceError(_TOO_DEEP) from exc


def infer_schema_text(body: str) -> str:
    """Parse, infer and render in one step: the value of the schema header."""
    return render_schema(infer(parse_document(body)))
