"""
Types shared across auditlog packages.
"""

from .errors import (
    AuditPipelineError,
    EncodingError,
    ErrorKind,
    InvalidParameterError,
    ProcessCancelledError,
)

__all__ = [
    "AuditPipelineError",
    "EncodingError",
    "ErrorKind",
    "InvalidParameterError",
    "ProcessCancelledError",
]
