# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Loguru setup with per-request correlation ids."""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path

from loguru import logger as _logger

from .sensitive_filter import sanitize_record

_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>{extra[correlation_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)
_NO_CORRELATION = "-"

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default=_NO_CORRELATION)

_logger.configure(extra={"correlation_id": _NO_CORRELATION})


class _StdlibBridge(logging.Handler):
    """Forward stdlib records (werkzeug, sqlalchemy) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = _logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        _logger.bind(correlation_id=_correlation_id.get()).opt(
            depth=6, exception=record.exc_info
        ).log(level, record.getMessage())


class ContextualLogger:
    """Loguru proxy binding the current correlation id on every call."""

    def __getattr__(self, name):  # pragma: no cover
        return getattr(_logger.bind(correlation_id=_correlation_id.get()), name)


def set_correlation_id(value: str | None) -> None:
    _correlation_id.set(value or _NO_CORRELATION)


def get_correlation_id() -> str:
    return _correlation_id.get()


def clear_correlation_id() -> None:
    _correlation_id.set(_NO_CORRELATION)


def setup_logging(level: str = "INFO", log_file: str | Path | None = None) -> None:
    level = level.upper()
    common = {
        "level": level,
        "format": _FORMAT,
        "backtrace": False,
        "diagnose": False,
        "filter": sanitize_record,
    }

    _logger.remove()
    _logger.add(sys.stderr, colorize=True, **common)
    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        _logger.add(path, colorize=False, enqueue=True, encoding="utf-8", **common)

    logging.basicConfig(handlers=[_StdlibBridge()], level=0, force=True)
    logging.getLogger("werkzeug").setLevel(logging.INFO)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


logger = ContextualLogger()

__all__ = [
    "ContextualLogger",
    "clear_correlation_id",
    "get_correlation_id",
    "logger",
    "set_correlation_id",
    "setup_logging",
]
