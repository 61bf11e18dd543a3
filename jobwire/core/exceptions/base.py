"""jobwire core exception classes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from jobwire.core.exceptions.codes import ErrorCode

if TYPE_CHECKING:
    from jobwire.core.models.job_error import JobErrorRecord


class JobWireError(Exception):
    """Base exception for jobwire."""

    def __init__(
        self,
        message: str,
        error_code: str = ErrorCode.GENERAL_ERROR.value,
        details: dict[str, Any] | None = None,
    ):
        """Initialise the exception.

        Args:
            message: human readable message
            error_code: stable error code
            details: extra context
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class MalformedPayloadError(JobWireError):
    """A required field could not be read from an error payload."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        offset: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if field is not None:
            super_details["field"] = field
        if offset is not None:
            super_details["offset"] = offset
        super().__init__(message, ErrorCode.MALFORMED_PAYLOAD.value, super_details)
        self.field = field
        self.offset = offset


class EncodingOverflowError(JobWireError):
    """A field is too long for the var-string length prefix."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        size: int | None = None,
        limit: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if field is not None:
            super_details["field"] = field
        if size is not None:
            super_details["size"] = size
        if limit is not None:
            super_details["limit"] = limit
        super().__init__(message, ErrorCode.ENCODING_OVERFLOW.value, super_details)
        self.field = field
        self.size = size
        self.limit = limit


class UnknownMessageTypeError(JobWireError):
    """No decoder is registered for a worker message type."""

    def __init__(self, message_type: int, details: dict[str, Any] | None = None):
        super_details = details or {}
        super_details["message_type"] = message_type
        super().__init__(
            f"No decoder registered for worker message type {message_type}",
            ErrorCode.UNKNOWN_MESSAGE_TYPE.value,
            super_details,
        )
        self.message_type = message_type


class JobError(JobWireError):
    """A failure reconstructed from a worker, ready to be re-raised."""

    def __init__(self, record: JobErrorRecord, error_code: str = ErrorCode.JOB_ERROR.value):
        details: dict[str, Any] = {"type": record.category}
        if record.code is not None:
            details["code"] = record.code
        super().__init__(record.message, error_code, details)
        self.record = record

    def __str__(self) -> str:
        if self.message:
            return f"{self.record.category}: {self.message}"
        return self.record.category


class JobAbortedError(JobError):
    """The job was cancelled rather than failing on its own."""

    def __init__(self, record: JobErrorRecord | None = None):
        if record is None:
            from jobwire.core.models.job_error import JobAbortedRecord

            record = JobAbortedRecord()
        super().__init__(record, ErrorCode.JOB_ABORTED.value)
