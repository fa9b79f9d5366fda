"""
Centralized logging configuration for gedcom_compare.

Key behaviors
-------------
* Single entry point via ``get_logger`` to keep handlers/formatters consistent.
* Master log file (default: ``logs/gedcom_compare.log``) plus per-module logs.
* Console logging on stderr that respects the configured debug flag.
* Optional log rotation controlled by ``config/gedcom_compare.yml``.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List

from gedcom_compare.config import PROJECT_ROOT, get_config

BASE_LOGGER_NAME = "gedcom_compare"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logger_cache: Dict[str, Logger] = {}
_base_configured: bool = False
_effective_level: int = logging.INFO
_log_dir: Path = PROJECT_ROOT / "logs"
_rotate_logs: bool = False


# -----------------------------------------------------------------------------
# Internal helpers
# -----------------------------------------------------------------------------

def _ensure_log_dir() -> Path:
    """Resolve and create the log directory from configuration."""
    global _log_dir
    cfg = get_config()

    log_dir = Path(cfg.logging.get("dir") or cfg.paths.get("logs_dir") or "logs")
    if not log_dir.is_absolute():
        log_dir = PROJECT_ROOT / log_dir

    log_dir.mkdir(parents=True, exist_ok=True)
    _log_dir = log_dir
    return log_dir


def _build_file_handler(path: Path, level: int) -> logging.Handler:
    """Create a file handler with optional rotation."""
    if _rotate_logs:
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
    global _base_configured, _effective_level, _rotate_logs

    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    if _base_configured:
        return base_logger

    cfg = get_config()
    _rotate_logs = bool(cfg.logging.get("rotate", False))
    master_log_name = cfg.logging.get("file", "gedcom_compare.log")

    level_name = str(cfg.logging.get("level", "INFO")).upper()
    base_level = getattr(logging, level_name, logging.INFO)
    _effective_level = logging.DEBUG if cfg.debug else base_level

    log_dir = _ensure_log_dir()
    base_logger.setLevel(_effective_level)
    base_logger.propagate = False

    base_logger.addHandler(_build_file_handler(log_dir / master_log_name, _effective_level))

    # Console goes to stderr so JSON written to stdout stays clean.
    console = StreamHandler()
    console.setLevel(logging.DEBUG if cfg.debug else logging.WARNING)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base_logger.addHandler(console)

    _base_configured = True
    return base_logger


def _module_handler_exists(logger: Logger) -> bool:
    return any(getattr(h, "is_module_handler", False) for h in logger.handlers)


def _attach_module_handler(logger: Logger, module_name: str) -> None:
    path = _ensure_log_dir() / f"{module_name.replace('.', '_')}.log"
    handler = _build_file_handler(path, _effective_level)
    handler.is_module_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def get_logger(name: str | None = None) -> Logger:
    """Return a logger configured with project-wide handlers.

    Short names are nested under the base logger, so ``get_logger("matcher")``
    returns ``gedcom_compare.matcher`` and inherits the console + master log
    handlers while also writing ``logs/gedcom_compare_matcher.log``.
    """
    base_logger = _configure_base_logger()

    logger_name = name or BASE_LOGGER_NAME
    if logger_name != BASE_LOGGER_NAME and not logger_name.startswith(BASE_LOGGER_NAME + "."):
        logger_name = f"{BASE_LOGGER_NAME}.{logger_name}"

    if logger_name == base_logger.name:
        _logger_cache[logger_name] = base_logger
        return base_logger

    logger = logging.getLogger(logger_name)
    logger.setLevel(_effective_level)
    if not _module_handler_exists(logger):
        _attach_module_handler(logger, logger_name)
    logger.propagate = True

    _logger_cache[logger_name] = logger
    return logger


def list_active_loggers() -> List[str]:
    """Helper for debugging configuration issues in tests."""
    return list(_logger_cache.keys())
