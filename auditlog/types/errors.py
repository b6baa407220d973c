"""
Audit pipeline error taxonomy, shared by the event model and pipeline stages
to avoid circular imports.
"""

from enum import Enum


class ErrorKind(Enum):
    """Categorical reason attached to every pipeline error."""
    INVALID_PARAMETER = "invalid parameter"
    ENCODING = "encoding failure"
    CANCELLED = "operation cancelled"


class AuditPipelineError(Exception):
    """
    Base exception for audit pipeline failures.

    The message is stable and has the form ``"<op>: <reason>: <kind>"`` so it
    can be used for log correlation. The underlying cause, if any, is chained
    as ``__cause__``.
    """

    kind: ErrorKind

    def __init__(self, op: str, reason: str):
        self.op = op
        self.reason = reason
        super().__init__(f"{op}: {reason}: {self.kind.value}")


class InvalidParameterError(AuditPipelineError):
    """A precondition was violated (missing input, null event, bad argument)."""
    kind = ErrorKind.INVALID_PARAMETER


class EncodingError(AuditPipelineError):
    """Input could not be decoded or rendered; retrying will not help."""
    kind = ErrorKind.ENCODING


class ProcessCancelledError(AuditPipelineError):
    """The caller's context was cancelled before work started."""
    kind = ErrorKind.CANCELLED
