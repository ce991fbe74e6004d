"""
Centralized logging for famtree.

Every module asks ``get_logger(__name__)`` for its logger. All of them hang
below the ``famtree`` base logger, which owns two handlers:

* the master log file (``logs/famtree.log`` unless configured otherwise),
  optionally rotated;
* a stderr console handler, quiet (WARNING) by default so command output on
  stdout stays machine-readable. ``set_console_level`` lets the CLI turn it up
  for ``--verbose`` runs.

Module loggers additionally write their own file, ``logs/<module>.log``,
named after the module path below the package (``registry_link_entities.log``).
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List, Optional

from famtree.config import config_path, get_config

BASE_LOGGER_NAME = "famtree"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ROTATE_MAX_BYTES = 5 * 1024 * 1024
ROTATE_BACKUPS = 5

_logger_cache: Dict[str, Logger] = {}
_settings: Optional["LogSettings"] = None
_console: Optional[StreamHandler] = None


@dataclass(frozen=True, slots=True)
class LogSettings:
    level: int
    debug: bool
    log_dir: Path
    master_file: str
    rotate: bool

    @classmethod
    def from_config(cls) -> "LogSettings":
        cfg = get_config()
        section = cfg.logging

        level = getattr(logging, str(section.get("level", "INFO")).upper(), logging.INFO)
        if cfg.debug:
            level = logging.DEBUG

        return cls(
            level=level,
            debug=cfg.debug,
            log_dir=_resolve_log_dir(section.get("dir") or "logs"),
            master_file=str(section.get("file") or "famtree.log"),
            rotate=bool(section.get("rotate", False)),
        )


def _resolve_log_dir(configured: str) -> Path:
    log_dir = Path(configured)
    if not log_dir.is_absolute():
        # Next to config/ in a checkout, else the working directory
        cfg_file = config_path()
        base = cfg_file.parent.parent if cfg_file.exists() else Path.cwd()
        log_dir = base / log_dir
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


def _file_handler(settings: LogSettings, filename: str) -> logging.Handler:
    path = settings.log_dir / filename
    if settings.rotate:
        handler: logging.Handler = RotatingFileHandler(
            path, maxBytes=ROTATE_MAX_BYTES, backupCount=ROTATE_BACKUPS, encoding="utf-8"
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(settings.level)
    handler.setFormatter(_formatter())
    return handler


def _base_logger() -> Logger:
    """Set up the ``famtree`` logger and its shared handlers on first use."""
    global _settings, _console

    base = logging.getLogger(BASE_LOGGER_NAME)
    if _settings is not None:
        return base

    _settings = LogSettings.from_config()
    base.setLevel(_settings.level)
    base.propagate = False
    base.addHandler(_file_handler(_settings, _settings.master_file))

    _console = StreamHandler(sys.stderr)
    _console.setLevel(logging.DEBUG if _settings.debug else logging.WARNING)
    _console.setFormatter(_formatter())
    base.addHandler(_console)
    return base


def _qualified(name: Optional[str]) -> str:
    if not name or name == BASE_LOGGER_NAME:
        return BASE_LOGGER_NAME
    if name.startswith(BASE_LOGGER_NAME + "."):
        return name
    return f"{BASE_LOGGER_NAME}.{name}"


def _module_filename(logger_name: str) -> str:
    short = logger_name[len(BASE_LOGGER_NAME) + 1:]
    return f"{short.replace('.', '_')}.log"


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def get_logger(name: str | None = None) -> Logger:
    """
    Logger for ``name`` below the ``famtree`` base logger.

    Names outside the package namespace are nested under it, so scripts and
    tests share the same handlers. Module loggers get their own file handler
    once; records still propagate to the master file and the console.
    """
    base = _base_logger()
    logger_name = _qualified(name)
    if logger_name == BASE_LOGGER_NAME:
        return base

    cached = _logger_cache.get(logger_name)
    if cached is not None:
        return cached

    logger = logging.getLogger(logger_name)
    logger.setLevel(_settings.level)
    logger.addHandler(_file_handler(_settings, _module_filename(logger_name)))
    logger.propagate = True

    _logger_cache[logger_name] = logger
    return logger


def set_console_level(level: int) -> None:
    """Change what reaches stderr, e.g. ``logging.INFO`` for verbose CLI runs."""
    _base_logger()
    _console.setLevel(level)


def list_active_loggers() -> List[str]:
    """Names handed out by ``get_logger`` so far."""
    return list(_logger_cache.keys())
