"""
Decoding of canonical JSON bytes into the JSON value model.
"""

import json
from typing import Any, List, Tuple

from .types import (
    JSONArray, JSONBoolean, JSONNull, JSONNumber, JSONObject, JSONString,
    JSONValue, JSONxDecodeError
)

_WRAPPED = (JSONNull, JSONBoolean, JSONNumber, JSONString, JSONArray, JSONObject)


def _reject_constant(name: str) -> Any:
    raise JSONxDecodeError(f"Non-finite number {name} is not valid JSON")


def _wrap(value: Any) -> JSONValue:
    """Convert a value produced by the json module into the value model."""
    if isinstance(value, _WRAPPED):
        return value
    if value is None:
        return JSONNull()
    if isinstance(value, bool):
        return JSONBoolean(value)
    if isinstance(value, str):
        return JSONString(value)
    if isinstance(value, list):
        return JSONArray(tuple(_wrap(item) for item in value))

    raise JSONxDecodeError(f"Unexpected decoded value of type {type(value).__name__}")


def _object_from_pairs(pairs: List[Tuple[str, Any]]) -> JSONObject:
    return JSONObject(tuple((key, _wrap(value)) for key, value in pairs))


def decode_json(data: bytes) -> JSONValue:
    """
    Decode UTF-8 JSON text into a JSON value.

    Numbers keep their source literal, object members keep their order and
    duplicate keys are preserved.

    Args:
        data: UTF-8 encoded JSON document

    Returns:
        Decoded top-level value

    Raises:
        JSONxDecodeError: If the input is not well-formed JSON
    """
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise JSONxDecodeError(f"JSON input is not valid UTF-8: {e}") from e

    try:
        decoded = json.loads(
            text,
            object_pairs_hook=_object_from_pairs,
            parse_int=JSONNumber,
            parse_float=JSONNumber,
            parse_constant=_reject_constant,
        )
        return _wrap(decoded)
    except json.JSONDecodeError as e:
        raise JSONxDecodeError(f"Invalid JSON: {e}") from e
    except RecursionError as e:
        raise JSONxDecodeError("JSON document is nested too deeply") from e
