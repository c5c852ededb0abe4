"""Loguru sinks and the per-request correlation id."""

from __future__ import annotations

import logging
import sys
import uuid
from contextvars import ContextVar
from pathlib import Path

from loguru import logger as _logger

_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> "
    "<lvl>{level: <7}</lvl> "
    "[<magenta>{extra[correlation_id]}</magenta>] "
    "<cyan>{name}</cyan>:{line} - <lvl>{message}</lvl>"
)

_CORRELATION_ID: ContextVar[str] = ContextVar("correlation_id", default="-")


def _with_correlation_id(record) -> None:
    record["extra"]["correlation_id"] = _CORRELATION_ID.get()


logger = _logger.patch(_with_correlation_id)


class _StdlibHandler(logging.Handler):
    """Forwards stdlib records (werkzeug, third parties) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def set_correlation_id(value: str | None) -> None:
    _CORRELATION_ID.set(value or "-")


def clear_correlation_id() -> None:
    _CORRELATION_ID.set("-")


def new_correlation_id() -> str:
    return uuid.uuid4().hex[:16]


def setup_logging(level: str = "INFO", log_file: Path | None = None) -> None:
    sink_options = {
        "level": level.upper(),
        "format": _FORMAT,
        "backtrace": False,
        "diagnose": False,
    }

    _logger.remove()
    _logger.configure(extra={"correlation_id": "-"})
    _logger.add(sys.stderr, colorize=True, **sink_options)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _logger.add(log_file, colorize=False, enqueue=True, encoding="utf-8", **sink_options)

    logging.basicConfig(handlers=[_StdlibHandler()], level=0, force=True)


__all__ = [
    "clear_correlation_id",
    "logger",
    "new_correlation_id",
    "set_correlation_id",
    "setup_logging",
]
