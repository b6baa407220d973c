"""
Formatter stage rendering pre-formatted audit JSON as JSONx.
"""

from typing import Optional

from auditlog.core.logging import get_logger, log_stage_failure
from auditlog.events.types import AuditFormat, Event
from auditlog.jsonx.converter import JSONxConverter
from auditlog.jsonx.types import JSONxConfig, JSONxError
from auditlog.types import (
    AuditPipelineError, EncodingError, InvalidParameterError, ProcessCancelledError
)

from .types import NodeType, StageContext


logger = get_logger(__name__)


class AuditFormatterJSONx:
    """
    Pipeline formatter that converts an event's canonical JSON into JSONx.

    Must run after the stage that writes the ``json`` format. The formatter
    holds no mutable state, so one instance can process distinct events from
    several threads at once.
    """

    def __init__(self, config: Optional[JSONxConfig] = None):
        self._converter = JSONxConverter(config)
        self.logger = logger.bind(component="AuditFormatterJSONx")

    def type(self) -> NodeType:
        """Formatter stages are always classified as such."""
        return NodeType.FORMATTER

    def reopen(self) -> None:
        """No resources to reopen."""
        return None

    def process(self, ctx: Optional[StageContext], event: Optional[Event]) -> Event:
        """
        Render the event's JSON format as JSONx and store it on the event.

        Args:
            ctx: Cancellation context, None for no cancellation
            event: Event carrying pre-formatted JSON

        Returns:
            The same event, with the ``jsonx`` format added

        Raises:
            ProcessCancelledError: If the context was cancelled before starting
            InvalidParameterError: If the event or its JSON format is missing
            EncodingError: If the JSON cannot be decoded or rendered as JSONx
        """
        op = "AuditFormatterJSONx.process"
        event_id = event.id if event is not None else None

        try:
            if ctx is not None and ctx.is_cancelled:
                raise ProcessCancelledError(op, "context cancelled before formatting")

            if event is None:
                raise InvalidParameterError(op, "event is required")

            json_bytes = event.format(AuditFormat.JSON.value)
            if not json_bytes:
                raise InvalidParameterError(op, "pre-formatted JSON required but not found")

            try:
                jsonx_bytes = self._converter.convert(json_bytes)
            except JSONxError as e:
                raise EncodingError(op, "unable to encode JSONx using JSON data") from e

        except AuditPipelineError as e:
            context = {"op": op, "event_id": event_id, "error_kind": e.kind.value}
            if e.__cause__ is not None:
                context["cause"] = str(e.__cause__)
            log_stage_failure(self.logger, e, context)
            raise

        event.formatted_as(AuditFormat.JSONX.value, jsonx_bytes)

        self.logger.debug("Audit event formatted as JSONx",
                          event_id=event_id,
                          output_length=len(jsonx_bytes))

        return event
