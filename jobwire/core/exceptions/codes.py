"""Canonical error codes raised by jobwire."""

from enum import Enum


class ErrorCode(str, Enum):
    """Stable codes carried by :class:`JobWireError` subclasses."""

    GENERAL_ERROR = "GENERAL_ERROR"
    MALFORMED_PAYLOAD = "MALFORMED_PAYLOAD"
    ENCODING_OVERFLOW = "ENCODING_OVERFLOW"
    UNKNOWN_MESSAGE_TYPE = "UNKNOWN_MESSAGE_TYPE"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    JOB_ERROR = "JOB_ERROR"
    JOB_ABORTED = "JOB_ABORTED"
