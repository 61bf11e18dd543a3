"""Classification of raised values into the failure shapes jobwire knows."""

from __future__ import annotations

import errno
from enum import Enum
from typing import Any


class FailureKind(str, Enum):
    """Recognised failure variants."""

    VALUE = "value"  # anything raised that is not an exception
    ERROR = "error"  # an exception with a name and a traceback
    SYSTEM = "system"  # an OS level exception carrying a platform errno


def classify_failure(value: Any) -> FailureKind:
    """Return the single :class:`FailureKind` that describes ``value``."""

    if isinstance(value, OSError) and isinstance(value.errno, int):
        return FailureKind.SYSTEM
    if isinstance(value, BaseException):
        return FailureKind.ERROR
    return FailureKind.VALUE


def platform_code(error: OSError) -> str:
    """Symbolic errno name for ``error``, e.g. ``ENOENT``."""

    return errno.errorcode.get(error.errno, str(error.errno))


__all__ = ["FailureKind", "classify_failure", "platform_code"]
