"""Serialization of validation results to JSON-compatible dicts.

Converts tokens, nodes, mistakes and whole Parsed results to/from dicts.
Useful for:
- Storing validation results next to the segment in a database
- Sending mistakes to a web front end
- Debugging and inspection

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from prepis import check, compile_config
    from prepis.serialization import to_json, from_json

    parsed = check("foo (bar", compile_config(atoms=list("abfor")))
    restored = from_json(to_json(parsed))
    assert parsed == restored

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any

from prepis.mistakes import (
    BadAttr,
    BadSubstr,
    BadToken,
    ClosingUnopenedDelim,
    MissingAttrs,
    NestedDelim,
    UnclosedDelim,
)
from prepis.nodes import AttrList, CloseNode, OpenNode, TokenNode
from prepis.parser import Parsed
from prepis.tokens import DelimKind, Token, TokenKind

# Registry of type names to classes for deserialization
_TYPES: dict[str, type] = {
    "Parsed": Parsed,
    "Token": Token,
    "TokenNode": TokenNode,
    "OpenNode": OpenNode,
    "CloseNode": CloseNode,
    "AttrList": AttrList,
    "BadToken": BadToken,
    "BadSubstr": BadSubstr,
    "NestedDelim": NestedDelim,
    "ClosingUnopenedDelim": ClosingUnopenedDelim,
    "UnclosedDelim": UnclosedDelim,
    "MissingAttrs": MissingAttrs,
    "BadAttr": BadAttr,
}

# Enum-valued fields, stored by member name
_ENUM_FIELDS: dict[str, type[Enum]] = {
    "kind": TokenKind,
    "delim": DelimKind,
}


def to_dict(value: Any) -> dict[str, Any]:
    """Convert a result object to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    Args:
        value: Parsed, Token, any node or any mistake.

    Returns:
        Dict with ``_type`` and all fields.

    Raises:
        TypeError: If value is not a serializable prepis object.

    """
    type_name = type(value).__name__
    if not is_dataclass(value) or _TYPES.get(type_name) is not type(value):
        msg = f"Cannot serialize {type_name}"
        raise TypeError(msg)

    result: dict[str, Any] = {"_type": type_name}
    for f in fields(value):
        result[f.name] = _serialize_value(getattr(value, f.name))
    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    if is_dataclass(value):
        return to_dict(value)
    # Primitives: str, int, None
    return value


def from_dict(data: dict[str, Any]) -> Any:
    """Reconstruct a result object from a dict.

    Args:
        data: Dict with ``_type`` and fields (as produced by to_dict).

    Returns:
        Frozen dataclass instance.

    Raises:
        ValueError: If ``_type`` is missing or unknown, or an enum field
            holds an unknown member name.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized data"
        raise ValueError(msg)

    cls = _TYPES.get(type_name)
    if cls is None:
        msg = f"Unknown type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(cls):
        if f.name not in data:
            continue
        kwargs[f.name] = _deserialize_value(data[f.name], f.name)
    return cls(**kwargs)


def _deserialize_value(value: Any, field_name: str) -> Any:
    """Deserialize a single field value."""
    if isinstance(value, dict):
        return from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item, field_name) for item in value)
    enum_cls = _ENUM_FIELDS.get(field_name)
    if enum_cls is not None and value is not None:
        try:
            return enum_cls[value]
        except KeyError:
            msg = f"Unknown {enum_cls.__name__} member: {value!r}"
            raise ValueError(msg) from None
    return value


def to_json(parsed: Parsed, *, indent: int | None = None) -> str:
    """Serialize a Parsed result to a JSON string.

    Output is deterministic (sorted keys) for cache-key stability.

    Args:
        parsed: Result to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(to_dict(parsed), sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(data: str) -> Parsed:
    """Deserialize a Parsed result from a JSON string.

    Raises:
        ValueError: If the JSON doesn't represent a Parsed result.

    """
    raw = json.loads(data)
    result = from_dict(raw)
    if not isinstance(result, Parsed):
        msg = f"Expected Parsed, got {type(result).__name__}"
        raise ValueError(msg)
    return result


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
