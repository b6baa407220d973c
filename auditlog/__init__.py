"""
Audit event pipeline components: event carrier, JSON to JSONx transcoding and
the JSONx formatter stage.
"""

__version__ = "0.1.0"
