"""
Pipeline event carrier and audit payload model.
"""

from .types import (
    AUDIT_EVENT_TYPE,
    AUDIT_EVENT_VERSION,
    AuditEvent,
    AuditFormat,
    AuditSubtype,
    Event,
    new_audit_event,
)

__all__ = [
    "AUDIT_EVENT_TYPE",
    "AUDIT_EVENT_VERSION",
    "AuditEvent",
    "AuditFormat",
    "AuditSubtype",
    "Event",
    "new_audit_event",
]
