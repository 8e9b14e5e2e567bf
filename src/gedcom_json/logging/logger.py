"""
Centralized logging configuration for the GEDCOM -> JSON converter.

Key behaviors
-------------
* Single entry point via ``get_logger`` to keep handlers/formatters consistent.
* Console logging that respects the configured debug flag.
* Optional master log file (default: ``logs/gedcom_json.log``), with rotation,
  controlled by ``config/gedcom_json.yml``.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List

from gedcom_json.config import get_config

# -----------------------------------------------------------------------------
# Paths and configuration
# -----------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[3]
BASE_LOGGER_NAME = "gedcom_json"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logger_cache: Dict[str, Logger] = {}
_base_configured: bool = False
_effective_level: int = logging.INFO


# -----------------------------------------------------------------------------
# Internal helpers
# -----------------------------------------------------------------------------

def _ensure_log_dir() -> Path:
    """Resolve and create the log directory from configuration."""
    cfg = get_config()

    log_dir_cfg = cfg.logging.get("dir") or cfg.paths.get("logs_dir") or "logs"
    log_dir = Path(log_dir_cfg)
    if not log_dir.is_absolute():
        log_dir = PROJECT_ROOT / log_dir

    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _build_file_handler(path: Path, level: int, rotate: bool) -> logging.Handler:
    """Create a file handler with optional rotation."""
    if rotate:
        handler = RotatingFileHandler(
            path,
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _configure_base_logger() -> Logger:
    """Configure the shared base logger once."""
    global _base_configured, _effective_level

    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    if _base_configured:
        return base_logger

    cfg = get_config()
    level_name = str(cfg.logging.get("level", "INFO")).upper()
    base_level = getattr(logging, level_name, logging.INFO)
    debug_enabled = bool(getattr(cfg, "debug", False))

    _effective_level = logging.DEBUG if debug_enabled else base_level

    base_logger.setLevel(_effective_level)
    base_logger.propagate = False

    if cfg.logging.get("to_file"):
        master_path = _ensure_log_dir() / cfg.logging.get("file", "gedcom_json.log")
        base_logger.addHandler(
            _build_file_handler(master_path, _effective_level, bool(cfg.logging.get("rotate")))
        )

    console = StreamHandler()
    console.setLevel(_effective_level)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base_logger.addHandler(console)

    _base_configured = True
    return base_logger


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def get_logger(name: str | None = None) -> Logger:
    """Return a logger configured with project-wide handlers.

    * Short names (``"pipeline"``) are nested under the ``gedcom_json`` base
      logger so they share its console and master-file handlers.
    * The debug flag in ``config/gedcom_json.yml`` forces DEBUG level output.
    """

    base_logger = _configure_base_logger()
    logger_name = name or BASE_LOGGER_NAME
    if logger_name != BASE_LOGGER_NAME and not logger_name.startswith(BASE_LOGGER_NAME + "."):
        logger_name = f"{BASE_LOGGER_NAME}.{logger_name}"

    logger = base_logger if logger_name == BASE_LOGGER_NAME else logging.getLogger(logger_name)
    if logger is not base_logger:
        logger.setLevel(logging.NOTSET)
        logger.propagate = True

    _logger_cache[logger_name] = logger
    return logger


def set_debug(enabled: bool) -> None:
    """Switch the base logger and its handlers between DEBUG and the configured level."""
    global _effective_level

    base_logger = _configure_base_logger()
    if enabled:
        _effective_level = logging.DEBUG
    else:
        level_name = str(get_config().logging.get("level", "INFO")).upper()
        _effective_level = getattr(logging, level_name, logging.INFO)

    base_logger.setLevel(_effective_level)
    for handler in base_logger.handlers:
        handler.setLevel(_effective_level)


def list_active_loggers() -> List[str]:
    """Helper for debugging configuration issues in tests."""
    return list(_logger_cache.keys())
