"""
JSON to JSONx converter.
"""

import re
from typing import Callable, Dict, Optional

import structlog
from lxml import etree

from .decoder import decode_json
from .names import escape_name, is_valid_name
from .types import (
    JSONArray, JSONBoolean, JSONNull, JSONNumber, JSONObject, JSONString, JSONValue,
    JSONxConfig, JSONxEncodingError, JSONxError, ValueKind
)


logger = structlog.get_logger(__name__)

# Anything outside the XML 1.0 Char production
_INVALID_XML_CHARS = re.compile(
    "[^\t\n\r\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


class JSONxConverter:
    """
    Converts JSON documents into self-describing JSONx XML.

    Every element carries a type attribute naming the JSON kind it holds, so a
    consumer can rebuild the original shape without a schema. The converter
    keeps no state between calls and can be shared across threads.
    """

    def __init__(self, config: Optional[JSONxConfig] = None):
        """
        Initialize JSONx converter.

        Args:
            config: JSONx configuration

        Raises:
            JSONxError: If the namespace is empty or the configured vocabulary
                names are not valid XML names
        """
        self.config = config or JSONxConfig()
        self.logger = logger.bind(component="JSONxConverter")

        if not self.config.namespace.strip():
            raise JSONxError("Invalid namespace: an empty namespace URI cannot be bound to a prefix")

        for field_name in ("namespace_prefix", "root_tag", "value_tag", "type_attribute"):
            if not is_valid_name(getattr(self.config, field_name)):
                raise JSONxError(
                    f"Invalid {field_name} {getattr(self.config, field_name)!r}: not an XML name"
                )

        self._root_name = f"{{{self.config.namespace}}}{self.config.root_tag}"
        self._nsmap = {self.config.namespace_prefix: self.config.namespace}

        self._encoders: Dict[ValueKind, Callable[[etree.Element, JSONValue], None]] = {
            ValueKind.OBJECT: self._encode_object,
            ValueKind.ARRAY: self._encode_array,
            ValueKind.STRING: self._encode_string,
            ValueKind.NUMBER: self._encode_number,
            ValueKind.BOOLEAN: self._encode_boolean,
            ValueKind.NULL: self._encode_null,
        }
        missing = set(ValueKind) - set(self._encoders)
        if missing:
            raise JSONxError(f"No encoder for value kinds: {sorted(k.value for k in missing)}")

    def convert(self, data: bytes) -> bytes:
        """
        Convert JSON bytes to a JSONx document.

        Args:
            data: UTF-8 JSON document

        Returns:
            UTF-8 JSONx document

        Raises:
            JSONxDecodeError: If the input is not well-formed JSON
            JSONxEncodingError: If a decoded value cannot be rendered
        """
        value = decode_json(data)
        root = self.build_document(value)
        xml_bytes = self.serialize(root)

        self.logger.debug("JSONx conversion completed",
                          input_length=len(data),
                          output_length=len(xml_bytes),
                          top_level_kind=value.kind.value)

        return xml_bytes

    def build_document(self, value: JSONValue) -> etree.Element:
        """Create the JSONx root element wrapping the top-level value."""
        root = etree.Element(self._root_name, nsmap=self._nsmap)
        try:
            self._encode(root, self.config.value_tag, value)
        except RecursionError as e:
            raise JSONxEncodingError("JSON document is nested too deeply") from e
        return root

    def serialize(self, root: etree.Element) -> bytes:
        """Serialize a JSONx root element to bytes."""
        return etree.tostring(
            root,
            method="xml",
            xml_declaration=self.config.xml_declaration,
            encoding=self.config.encoding,
            pretty_print=self.config.pretty_print,
        )

    def _encode(self, parent: etree.Element, tag: str, value: JSONValue) -> None:
        try:
            element = etree.SubElement(parent, tag)
        except ValueError as e:
            raise JSONxEncodingError(f"Cannot create element {tag!r}: {e}") from e

        element.set(self.config.type_attribute, value.kind.value)
        self._encoders[value.kind](element, value)

    def _encode_object(self, element: etree.Element, value: JSONObject) -> None:
        """
        Append one child per member, named by the escaped key.

        Duplicate keys are rendered as separate children. Escaping is
        injective, so the collision check only guards against a future
        change to the escaper.
        """
        seen: Dict[str, str] = {}
        for key, member in value.members:
            name = escape_name(key)
            previous = seen.setdefault(name, key)
            if previous != key:
                raise JSONxEncodingError(
                    f"Keys {previous!r} and {key!r} both escape to element name {name!r}"
                )
            self._encode(element, name, member)

    def _encode_array(self, element: etree.Element, value: JSONArray) -> None:
        for item in value.items:
            self._encode(element, element.tag, item)

    def _encode_string(self, element: etree.Element, value: JSONString) -> None:
        invalid = _INVALID_XML_CHARS.search(value.value)
        if invalid:
            raise JSONxEncodingError(
                f"String contains character U+{ord(invalid.group()):04X} "
                f"which is not allowed in XML (offset {invalid.start()})"
            )
        element.text = value.value

    def _encode_number(self, element: etree.Element, value: JSONNumber) -> None:
        element.text = value.literal

    def _encode_boolean(self, element: etree.Element, value: JSONBoolean) -> None:
        element.text = "true" if value.value else "false"

    def _encode_null(self, element: etree.Element, value: JSONNull) -> None:
        pass


def to_jsonx(data: bytes, config: Optional[JSONxConfig] = None) -> bytes:
    """Convert JSON bytes to JSONx bytes with a one-off converter."""
    return JSONxConverter(config).convert(data)
