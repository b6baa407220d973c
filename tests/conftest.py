import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Optional

import pytest
from lxml import etree

from auditlog.events import AuditFormat, AuditSubtype, Event, new_audit_event
from auditlog.jsonx import JSONxConfig, unescape_name

JSONX_NAMESPACE = JSONxConfig().namespace


@dataclass(frozen=True)
class NumberLiteral:
    """Number compared by its source text."""

    text: str


def _read_element(element: etree._Element) -> Any:
    kind = element.get("type")
    if kind == "object":
        return [(unescape_name(child.tag), _read_element(child)) for child in element]
    if kind == "array":
        return [_read_element(child) for child in element]
    if kind == "string":
        return element.text or ""
    if kind == "number":
        return NumberLiteral(element.text)
    if kind == "boolean":
        return {"true": True, "false": False}[element.text]
    if kind == "null":
        assert element.text is None
        assert len(element) == 0
        return None
    raise AssertionError(f"Unknown JSONx type {kind!r} on <{element.tag}>")


@pytest.fixture
def jsonx_reader() -> Callable[[bytes], Any]:
    """Rebuild the JSON structure held by a JSONx document."""
    def read(xml_bytes: bytes) -> Any:
        root = etree.fromstring(xml_bytes)
        assert root.tag == f"{{{JSONX_NAMESPACE}}}document"
        assert len(root) == 1
        return _read_element(root[0])
    return read


@pytest.fixture
def json_reader() -> Callable[[str], Any]:
    """Decode JSON into the same shape ``jsonx_reader`` produces."""
    def read(text: str) -> Any:
        return json.loads(
            text,
            object_pairs_hook=list,
            parse_int=NumberLiteral,
            parse_float=NumberLiteral,
        )
    return read


@pytest.fixture
def fake_audit_event() -> Callable[..., Event]:
    """
    Build an audit event carrier.

    When ``data`` is given it is encoded and stored as the ``json`` format,
    standing in for the JSON formatter stage that runs before JSONx.
    """
    def build(subtype: AuditSubtype = AuditSubtype.REQUEST, data: Optional[dict] = None,
              event_id: str = "123") -> Event:
        date = datetime(2023, 7, 11, 15, 49, 10)
        audit_event = new_audit_event(
            id=event_id,
            subtype=subtype,
            format=AuditFormat.JSONX,
            now=date,
            data=data,
        )
        event = Event.for_audit(audit_event)
        if data is not None:
            event.formatted_as(AuditFormat.JSON.value, json.dumps(data).encode("utf-8"))
        return event
    return build


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")
