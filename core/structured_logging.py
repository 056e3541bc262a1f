"""Structured logging helpers with run and script correlation context."""

from __future__ import annotations

import contextvars
import logging
import uuid
from contextlib import contextmanager
from typing import Iterator

_RUN_ID_VAR: contextvars.ContextVar[str] = contextvars.ContextVar(
    "run_id", default="-"
)
_SCRIPT_VAR: contextvars.ContextVar[str] = contextvars.ContextVar(
    "script", default="-"
)

LOG_FORMAT = (
    "%(asctime)s | %(levelname)s | run_id=%(run_id)s | script=%(script)s | "
    "%(name)s | %(message)s"
)


class _ScriptContextFilter(logging.Filter):
    """Inject run and script correlation fields into all log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = _RUN_ID_VAR.get("-")
        record.script = _SCRIPT_VAR.get("-")
        return True


def _ensure_filter_on_root_handlers() -> None:
    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        has_filter = any(isinstance(f, _ScriptContextFilter) for f in handler.filters)
        if not has_filter:
            handler.addFilter(_ScriptContextFilter())


def configure_structured_logging(level: int | str = logging.INFO) -> None:
    """Configure root logging format with run/script context."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    else:
        root_logger.setLevel(level)
        formatter = logging.Formatter(LOG_FORMAT)
        for handler in root_logger.handlers:
            handler.setFormatter(formatter)
    _ensure_filter_on_root_handlers()


def set_run_id(run_id: str | None = None) -> str:
    """Set or generate run correlation ID."""
    value = run_id or str(uuid.uuid4())
    _RUN_ID_VAR.set(value)
    return value


def get_run_id() -> str:
    """Get current run correlation ID."""
    return _RUN_ID_VAR.get("-")


@contextmanager
def script_scope(script: str) -> Iterator[None]:
    """Temporarily set script context for emitted logs."""
    token = _SCRIPT_VAR.set(script)
    try:
        yield
    finally:
        _SCRIPT_VAR.reset(token)
