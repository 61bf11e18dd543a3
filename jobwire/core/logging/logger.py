"""Structured JSON logging with job and trace propagation.

Every event is written as one JSON line carrying the trace id, the job id and
the error code of the failure being reported, with the remaining bound values
grouped under ``context``.
"""

from __future__ import annotations

import json
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime
from typing import TYPE_CHECKING, Any, Iterator
from uuid import uuid4

from loguru import logger

from jobwire.core.logging.config import LogConfig

if TYPE_CHECKING:
    from loguru import Logger

    from jobwire.core.models.job_error import JobErrorRecord

_LINE_KEY = "_json_line"
_TOP_LEVEL_KEYS = {"trace_id", "job_id", "error_code", _LINE_KEY}

_TRACE_ID_VAR: ContextVar[str | None] = ContextVar("jobwire_trace_id", default=None)
_CONTEXT_VAR: ContextVar[dict[str, Any]] = ContextVar("jobwire_log_context", default={})


def _attach_context(record: dict[str, Any]) -> None:
    extra = record["extra"]
    if not extra.get("trace_id"):
        trace_id = _TRACE_ID_VAR.get()
        if trace_id is None:
            trace_id = uuid4().hex
            _TRACE_ID_VAR.set(trace_id)
        extra["trace_id"] = trace_id

    for key, value in _CONTEXT_VAR.get().items():
        if key == "trace_id":
            continue
        if extra.get(key) is None:
            extra[key] = value

    extra.setdefault("job_id", None)
    extra.setdefault("error_code", None)


def _to_json(record: dict[str, Any]) -> str:
    extra = record["extra"]
    line: dict[str, Any] = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "message": record["message"],
        "trace_id": extra.get("trace_id"),
        "job_id": extra.get("job_id"),
        "error_code": extra.get("error_code"),
    }
    context = {key: value for key, value in extra.items() if key not in _TOP_LEVEL_KEYS}
    if context:
        line["context"] = context
    if record["exception"] is not None:
        line["exception"] = repr(record["exception"].value)
    return json.dumps(line, default=lambda value: value.isoformat() if isinstance(value, datetime) else str(value))


def _json_format(record: dict[str, Any]) -> str:
    # loguru formats after bound kwargs are merged, so the line is built here and not in the patcher
    record["extra"][_LINE_KEY] = _to_json(record)
    return "{extra[" + _LINE_KEY + "]}\n"


def configure_logging(config: LogConfig | None = None, **options: Any) -> Logger:
    """Route all jobwire logging through JSON line sinks.

    Args:
        config: Full logging configuration. Built from ``options`` when omitted.
        **options: ``LogConfig`` fields such as ``level`` or ``file_path``.

    Returns:
        The configured loguru logger.
    """

    if config is None:
        config = LogConfig(**options)
    level = config.level.upper()

    handlers: list[dict[str, Any]] = []
    if config.console_output:
        handlers.append(
            {"sink": config.console_stream or sys.stderr, "format": _json_format, "level": level, "colorize": False}
        )
    if config.file_output and config.file_path:
        handlers.append({"sink": config.file_path, "format": _json_format, "level": level, "encoding": "utf-8"})

    logger.configure(handlers=handlers, patcher=_attach_context, extra=config.extra)
    return logger


def get_logger(name: str | None = None) -> Logger:
    """Return the logger optionally bound to ``name``."""

    if name:
        return logger.bind(logger_name=name)
    return logger


@contextmanager
def log_context(*, trace_id: str | None = None, **extra: Any) -> Iterator[str]:
    """Propagate a trace id and metadata (``job_id`` etc.) to nested log events."""

    context_token = _CONTEXT_VAR.set({**_CONTEXT_VAR.get(), **extra})
    active_trace = trace_id or uuid4().hex
    trace_token = _TRACE_ID_VAR.set(active_trace)

    try:
        yield active_trace
    finally:
        _TRACE_ID_VAR.reset(trace_token)
        _CONTEXT_VAR.reset(context_token)


def log_job_error(record: JobErrorRecord, *, job_id: int | None = None, level: str = "ERROR") -> None:
    """Emit a reconstructed worker failure with its structured form as context."""

    payload = record.to_payload()
    stack = payload.pop("stack", None)
    bound = logger.bind(job_id=job_id, error_code=record.code, error=payload)
    if stack is not None:
        bound = bound.bind(stack=stack)
    bound.opt(depth=1).log(level, "Job failed with {}: {}", record.category, record.message)


configure_logging()


__all__ = [
    "configure_logging",
    "get_logger",
    "log_context",
    "log_job_error",
    "logger",
]
