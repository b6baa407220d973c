"""
Audit pipeline stage contract and formatter stages.
"""

from .formatter_jsonx import AuditFormatterJSONx
from .types import Node, NodeType, StageContext

__all__ = ["AuditFormatterJSONx", "Node", "NodeType", "StageContext"]
