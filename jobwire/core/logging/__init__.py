"""Logging utilities."""

from jobwire.core.logging.config import LogConfig
from jobwire.core.logging.logger import configure_logging, get_logger, log_context, log_job_error, logger

__all__ = [
    "LogConfig",
    "configure_logging",
    "get_logger",
    "log_context",
    "log_job_error",
    "logger",
]
