"""
JSON to JSONx transcoding.

JSONx is a self-describing XML rendering of a JSON document:
- Every element carries a type attribute (object, array, string, number,
  boolean, null)
- Object keys become element names, escaped into valid XML names
- Number literals and member order are kept exactly as in the source
- The document root declares the JSONx namespace
"""

from .converter import JSONxConverter, to_jsonx
from .decoder import decode_json
from .names import escape_name, unescape_name
from .types import (
    JSONArray,
    JSONBoolean,
    JSONNull,
    JSONNumber,
    JSONObject,
    JSONString,
    JSONValue,
    JSONxConfig,
    JSONxDecodeError,
    JSONxEncodingError,
    JSONxError,
    ValueKind,
)

__all__ = [
    # Core classes
    "JSONxConverter",
    "to_jsonx",
    "decode_json",
    "escape_name",
    "unescape_name",
    # Configuration
    "JSONxConfig",
    # Value model
    "ValueKind",
    "JSONValue",
    "JSONNull",
    "JSONBoolean",
    "JSONNumber",
    "JSONString",
    "JSONArray",
    "JSONObject",
    # Exceptions
    "JSONxError",
    "JSONxDecodeError",
    "JSONxEncodingError",
]
