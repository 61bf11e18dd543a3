"""Worker message glue for error payloads.

The transport frames every worker message with a job id and a
:class:`WorkerMessageType`; this module only supplies the body for job errors
and the lookup a receiver uses to pick a decoder for a body.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable

from jobwire.core.exceptions import UnknownMessageTypeError
from jobwire.core.models import JobErrorRecord
from jobwire.core.wire import JobErrorCodec


class WorkerMessageType(IntEnum):
    """Discriminant carried next to a worker message body."""

    JOB_ERROR = 1


class SerializableJobError:
    """A job failure addressed to the coordinator that owns ``job_id``."""

    type = WorkerMessageType.JOB_ERROR

    def __init__(self, job_id: int, error: Any = None, *, codec: JobErrorCodec | None = None) -> None:
        self.job_id = job_id
        if isinstance(error, JobErrorRecord):
            self.record = error
        else:
            self.record = JobErrorRecord.from_raised(error)
        self._codec = codec or JobErrorCodec()

    def __repr__(self) -> str:
        return f"SerializableJobError(job_id={self.job_id!r}, record={self.record!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SerializableJobError):
            return NotImplemented
        return self.job_id == other.job_id and self.record == other.record

    def serialize(self) -> bytes:
        return self._codec.encode(self.record)

    @classmethod
    def deserialize(cls, job_id: int, body: bytes, *, codec: JobErrorCodec | None = None) -> SerializableJobError:
        codec = codec or JobErrorCodec()
        return cls(job_id, codec.decode(body), codec=codec)

    def get_size(self) -> int:
        return self._codec.estimate_size(self.record)


_DECODERS: dict[WorkerMessageType, Callable[[int, bytes], Any]] = {
    WorkerMessageType.JOB_ERROR: SerializableJobError.deserialize,
}


def decode_message(message_type: int, job_id: int, body: bytes) -> Any:
    """Decode ``body`` with the decoder registered for ``message_type``."""

    try:
        decoder = _DECODERS[WorkerMessageType(message_type)]
    except (ValueError, KeyError) as exc:
        raise UnknownMessageTypeError(message_type) from exc
    return decoder(job_id, body)


__all__ = ["SerializableJobError", "WorkerMessageType", "decode_message"]
