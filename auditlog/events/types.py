"""
Event carrier and audit payload types.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from auditlog.types import InvalidParameterError

AUDIT_EVENT_TYPE = "audit"
AUDIT_EVENT_VERSION = "v0.1"


class AuditSubtype(Enum):
    """Kinds of audit event."""
    REQUEST = "request"
    RESPONSE = "response"


class AuditFormat(Enum):
    """Rendered formats, used as keys in an event's format mapping."""
    JSON = "json"
    JSONX = "jsonx"


@dataclass(frozen=True)
class AuditEvent:
    """Audit payload carried by an event."""

    id: str
    subtype: AuditSubtype
    timestamp: datetime
    required_format: AuditFormat = AuditFormat.JSON
    version: str = AUDIT_EVENT_VERSION
    data: Optional[Mapping[str, Any]] = None


@dataclass(frozen=True)
class Event:
    """
    Record flowing through the pipeline.

    Identity and payload are fixed at construction. ``formatted`` accumulates
    one rendered blob per format name as stages run; stages write only their
    own entry and never remove another stage's.
    """

    id: str
    created_at: datetime
    type: str
    payload: Any
    formatted: Dict[str, bytes] = field(default_factory=dict)

    @classmethod
    def for_audit(cls, audit_event: AuditEvent) -> "Event":
        """Wrap an audit payload in a fresh carrier."""
        return cls(
            id=audit_event.id,
            created_at=audit_event.timestamp,
            type=AUDIT_EVENT_TYPE,
            payload=audit_event,
        )

    def formatted_as(self, name: str, data: bytes) -> None:
        """Store the rendering for a format, replacing any previous one."""
        self.formatted[name] = data

    def format(self, name: str) -> Optional[bytes]:
        """Get the rendering for a format, or None if no stage produced it."""
        return self.formatted.get(name)


def new_audit_event(
    subtype: Union[AuditSubtype, str],
    id: Optional[str] = None,
    format: Union[AuditFormat, str] = AuditFormat.JSON,
    now: Optional[datetime] = None,
    data: Optional[Mapping[str, Any]] = None,
) -> AuditEvent:
    """
    Create an audit payload.

    Args:
        subtype: Request or response
        id: Event identifier, generated when omitted
        format: Format the event must be rendered in
        now: Event timestamp, current UTC time when omitted
        data: Raw structured audit fields

    Returns:
        New audit payload

    Raises:
        InvalidParameterError: If the subtype, format or id is invalid
    """
    op = "new_audit_event"

    try:
        subtype = AuditSubtype(subtype)
    except ValueError:
        raise InvalidParameterError(op, f"unsupported audit subtype {subtype!r}") from None

    try:
        format = AuditFormat(format)
    except ValueError:
        raise InvalidParameterError(op, f"unsupported audit format {format!r}") from None

    if id is None:
        id = str(uuid.uuid4())
    elif not id.strip():
        raise InvalidParameterError(op, "audit event id cannot be blank")

    return AuditEvent(
        id=id,
        subtype=subtype,
        timestamp=now or datetime.now(timezone.utc),
        required_format=format,
        data=data,
    )
