"""JSON round-trip for analysis results.

Converts AnalysisResult, Lexeme and LineError to/from JSON-compatible
dicts. Useful for caching results, handing them to another process, and
the CLI's --format json output.

All output is deterministic (sorted keys).

Example:
    from arithlex import analyze
    from arithlex.serialization import to_json, from_json

    result = analyze(["x := 0x1F;"])
    assert from_json(to_json(result)) == result

"""

import json
from dataclasses import fields
from enum import Enum
from typing import Any

from arithlex.errors import ErrorKind
from arithlex.lexemes import Lexeme, LexemeKind
from arithlex.results import AnalysisResult, LineError

Serializable = AnalysisResult | Lexeme | LineError

_TYPES: dict[str, type] = {
    "AnalysisResult": AnalysisResult,
    "Lexeme": Lexeme,
    "LineError": LineError,
}

_ENUM_FIELDS: dict[str, type[Enum]] = {
    "Lexeme.kind": LexemeKind,
    "LineError.kind": ErrorKind,
}


def to_dict(obj: Serializable) -> dict[str, Any]:
    """Convert a result object to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    """
    result: dict[str, Any] = {"_type": type(obj).__name__}
    for f in fields(obj):
        result[f.name] = _serialize_value(getattr(obj, f.name))
    return result


def _serialize_value(value: Any) -> Any:
    if isinstance(value, (AnalysisResult, Lexeme, LineError)):
        return to_dict(value)
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, None
    return value


def from_dict(data: dict[str, Any]) -> Serializable:
    """Reconstruct a result object from a dict produced by to_dict().

    Raises:
        ValueError: If ``_type`` is missing or unknown.
    """
    type_name = data.get("_type")
    cls = _TYPES.get(type_name) if isinstance(type_name, str) else None
    if cls is None:
        raise ValueError(f"Unknown result type: {type_name!r}")

    kwargs: dict[str, Any] = {}
    for f in fields(cls):
        if f.name not in data:
            continue
        kwargs[f.name] = _deserialize_value(data[f.name], f"{type_name}.{f.name}")
    return cls(**kwargs)


def _deserialize_value(value: Any, field_key: str) -> Any:
    enum_cls = _ENUM_FIELDS.get(field_key)
    if enum_cls is not None:
        return enum_cls[value]
    if isinstance(value, dict) and "_type" in value:
        return from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item, field_key) for item in value)
    return value


def to_json(obj: Serializable, *, indent: int | None = None) -> str:
    """Serialize a result object to a JSON string (sorted keys)."""
    return json.dumps(to_dict(obj), sort_keys=True, indent=indent)


def from_json(text: str) -> Serializable:
    """Deserialize a JSON string produced by to_json()."""
    return from_dict(json.loads(text))
