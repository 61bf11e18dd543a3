"""Exception handling module."""

from jobwire.core.exceptions.base import (
    EncodingOverflowError,
    JobAbortedError,
    JobError,
    JobWireError,
    MalformedPayloadError,
    UnknownMessageTypeError,
)
from jobwire.core.exceptions.codes import ErrorCode

__all__ = [
    "JobWireError",
    "MalformedPayloadError",
    "EncodingOverflowError",
    "UnknownMessageTypeError",
    "JobError",
    "JobAbortedError",
    "ErrorCode",
]
