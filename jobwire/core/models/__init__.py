"""Error record models."""

from jobwire.core.models.job_error import (
    ABORTED_CATEGORY,
    GENERIC_CATEGORY,
    UNKNOWN_CATEGORY,
    JobAbortedRecord,
    JobErrorRecord,
    record_class_for,
)
from jobwire.core.models.kinds import FailureKind, classify_failure, platform_code

__all__ = [
    "ABORTED_CATEGORY",
    "GENERIC_CATEGORY",
    "UNKNOWN_CATEGORY",
    "FailureKind",
    "JobAbortedRecord",
    "JobErrorRecord",
    "classify_failure",
    "platform_code",
    "record_class_for",
]
