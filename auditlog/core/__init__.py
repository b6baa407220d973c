"""
Settings and logging for audit pipeline hosts.
"""

from .config import Settings, get_settings
from .logging import configure_logging, get_logger, log_stage_failure

__all__ = ["Settings", "get_settings", "configure_logging", "get_logger", "log_stage_failure"]
