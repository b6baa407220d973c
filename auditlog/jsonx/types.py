"""
Type definitions for the JSONx transcoder.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Tuple, Union


class JSONxError(Exception):
    """Base exception for JSONx transcoding errors."""
    pass


class JSONxDecodeError(JSONxError):
    """Input bytes are not well-formed JSON."""
    pass


class JSONxEncodingError(JSONxError):
    """A decoded value cannot be rendered as JSONx."""
    pass


class ValueKind(Enum):
    """Kinds of JSON value, also used as the JSONx type attribute."""
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


@dataclass(frozen=True)
class JSONNull:
    kind: ClassVar[ValueKind] = ValueKind.NULL


@dataclass(frozen=True)
class JSONBoolean:
    value: bool
    kind: ClassVar[ValueKind] = ValueKind.BOOLEAN


@dataclass(frozen=True)
class JSONNumber:
    """Number kept as the literal text it had in the source document."""

    literal: str
    kind: ClassVar[ValueKind] = ValueKind.NUMBER


@dataclass(frozen=True)
class JSONString:
    value: str
    kind: ClassVar[ValueKind] = ValueKind.STRING


@dataclass(frozen=True)
class JSONArray:
    items: Tuple["JSONValue", ...] = ()
    kind: ClassVar[ValueKind] = ValueKind.ARRAY


@dataclass(frozen=True)
class JSONObject:
    """Object members in source order; duplicate keys are kept."""

    members: Tuple[Tuple[str, "JSONValue"], ...] = ()
    kind: ClassVar[ValueKind] = ValueKind.OBJECT


JSONValue = Union[JSONNull, JSONBoolean, JSONNumber, JSONString, JSONArray, JSONObject]


@dataclass(frozen=True)
class JSONxConfig:
    """Configuration for JSONx document generation."""

    # Vocabulary
    namespace: str = "http://www.ibm.com/xmlns/prod/2009/jsonx"
    namespace_prefix: str = "json"
    root_tag: str = "document"
    value_tag: str = "value"
    type_attribute: str = "type"

    # Serialization
    xml_declaration: bool = True
    pretty_print: bool = False
    encoding: str = "UTF-8"

    @classmethod
    def for_debugging(cls) -> "JSONxConfig":
        """Create configuration with indented output."""
        return cls(pretty_print=True)
