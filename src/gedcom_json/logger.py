"""
Compatibility wrapper around the centralized logging package.

Prefer importing from ``gedcom_json.logging`` directly:
    from gedcom_json.logging import get_logger
"""

from gedcom_json.logging import (
    get_logger,
    list_active_loggers,
    set_debug,
)

__all__ = [
    "get_logger",
    "list_active_loggers",
    "set_debug",
]
