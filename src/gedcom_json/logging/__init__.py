"""
Logging package for ``gedcom_json``.

Use ``get_logger("<component>")`` in modules to inherit the shared handlers.
"""

from .logger import (
    get_logger,
    list_active_loggers,
    set_debug,
)

__all__ = [
    "get_logger",
    "list_active_loggers",
    "set_debug",
]
