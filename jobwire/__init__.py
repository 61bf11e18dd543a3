"""jobwire - transport worker failures to their coordinator.

A failure raised inside a worker is normalized into a
:class:`JobErrorRecord`, encoded into a compact binary payload, and rebuilt on
the other side of the process or thread boundary.

Examples:
    >>> import jobwire
    >>> try:
    ...     raise TypeError("bad arg")
    ... except TypeError as exc:
    ...     payload = jobwire.encode(jobwire.JobErrorRecord.from_raised(exc))
    >>> jobwire.decode(payload).code
    'TypeError'
"""

from jobwire.core.exceptions import (
    EncodingOverflowError,
    ErrorCode,
    JobAbortedError,
    JobError,
    JobWireError,
    MalformedPayloadError,
    UnknownMessageTypeError,
)
from jobwire.core.messages import SerializableJobError, WorkerMessageType, decode_message
from jobwire.core.models import JobAbortedRecord, JobErrorRecord
from jobwire.core.wire import JobErrorCodec
from jobwire.core.wire import decode_job_error as decode
from jobwire.core.wire import encode_job_error as encode
from jobwire.core.wire import estimate_job_error_size as estimate_size

__version__ = "0.1.0"

__all__ = [
    "EncodingOverflowError",
    "ErrorCode",
    "JobAbortedError",
    "JobAbortedRecord",
    "JobError",
    "JobErrorCodec",
    "JobErrorRecord",
    "JobWireError",
    "MalformedPayloadError",
    "SerializableJobError",
    "UnknownMessageTypeError",
    "WorkerMessageType",
    "decode",
    "decode_message",
    "encode",
    "estimate_size",
]
