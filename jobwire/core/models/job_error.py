"""Normalized error records exchanged between workers and their coordinator."""

from __future__ import annotations

import traceback
from typing import Any, Mapping, NoReturn

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from jobwire.core.exceptions.base import JobAbortedError, JobError
from jobwire.core.logging import get_logger
from jobwire.core.models.kinds import FailureKind, classify_failure, platform_code
from jobwire.core.render import render_error, utf8_safe

GENERIC_CATEGORY = "JobError"
ABORTED_CATEGORY = "JobAbortedError"
UNKNOWN_CATEGORY = "unknown"

logger = get_logger(__name__)


def _category_of(value: Any) -> str:
    name = getattr(type(value), "__name__", None)
    if isinstance(name, str) and name:
        return utf8_safe(name)
    return UNKNOWN_CATEGORY


def _format_stack(error: BaseException) -> str:
    return utf8_safe("".join(traceback.format_exception(type(error), error, error.__traceback__)))


class JobErrorRecord(BaseModel):
    """A flattened snapshot of a failure raised inside a worker.

    Records compare by their four fields, so an aborted record equals a plain
    record carrying the same values.
    """

    model_config = ConfigDict(frozen=True)

    category: str = GENERIC_CATEGORY
    message: str = ""
    code: str | None = None
    stack: str | None = None

    @field_validator("category", "message", "code", "stack")
    @classmethod
    def check_utf8(cls, value: str | None) -> str | None:
        if value is not None:
            try:
                value.encode("utf-8")
            except UnicodeEncodeError as exc:
                raise ValueError(f"text is not encodable as UTF-8 at position {exc.start}") from exc
        return value

    @model_validator(mode="after")
    def check_stack_has_code(self) -> JobErrorRecord:
        # code and stack are positional on the wire; a stack alone would be read back as the code
        if self.stack is not None and self.code is None:
            raise ValueError("an error record with a stack must also carry a code")
        return self

    def _fields(self) -> tuple[str, str, str | None, str | None]:
        return self.category, self.message, self.code, self.stack

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JobErrorRecord):
            return NotImplemented
        return self._fields() == other._fields()

    def __hash__(self) -> int:
        return hash(self._fields())

    @classmethod
    def from_raised(cls, value: Any = None) -> JobErrorRecord:
        """Normalize an arbitrary raised value.

        ``None`` means nothing was raised and yields the default record.
        Exceptions contribute their class name as ``code`` and their formatted
        traceback as ``stack``; OS errors carrying an errno replace the code
        with the symbolic errno name. A raised :class:`JobAbortedError` yields
        a :class:`JobAbortedRecord`.
        """

        if value is None:
            return cls()

        kind = classify_failure(value)
        category = _category_of(value)
        code: str | None = None
        stack: str | None = None

        if kind is not FailureKind.VALUE:
            code = category
            stack = _format_stack(value)
        if kind is FailureKind.SYSTEM:
            code = platform_code(value)

        record_class = JobAbortedRecord if isinstance(value, JobAbortedError) else JobErrorRecord
        logger.debug("Normalized {kind} failure", kind=kind.value, category=category, error_code=code)
        return record_class(
            category=category,
            message=render_error(value),
            code=code,
            stack=stack,
        )

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> JobErrorRecord:
        """Rebuild a record from the structured form produced by :meth:`to_payload`."""

        category = payload.get("type", GENERIC_CATEGORY)
        return record_class_for(category)(
            category=category,
            message=payload.get("message", ""),
            code=payload.get("code"),
            stack=payload.get("stack"),
        )

    def to_payload(self) -> dict[str, Any]:
        """Return the structured form used by logging sinks and JSON consumers."""

        payload: dict[str, Any] = {"type": self.category, "message": self.message}
        if self.code is not None:
            payload["code"] = self.code
        if self.stack is not None:
            payload["stack"] = self.stack
        return payload

    @property
    def is_aborted(self) -> bool:
        return isinstance(self, JobAbortedRecord)

    def to_exception(self) -> JobError:
        """Wrap the record in an exception suitable for re-raising."""

        if self.is_aborted:
            return JobAbortedError(self)
        return JobError(self)

    def raise_(self) -> NoReturn:
        raise self.to_exception()


class JobAbortedRecord(JobErrorRecord):
    """A record produced by explicit cancellation instead of an organic failure.

    Only the default ``JobAbortedError`` category is recognised by decoders;
    records normalized from subclasses of the exception keep their own class
    name and come back from the wire as plain records.
    """

    category: str = ABORTED_CATEGORY


def record_class_for(category: str) -> type[JobErrorRecord]:
    """Record type used when rebuilding a record with ``category``."""

    if category == ABORTED_CATEGORY:
        return JobAbortedRecord
    return JobErrorRecord


__all__ = [
    "ABORTED_CATEGORY",
    "GENERIC_CATEGORY",
    "UNKNOWN_CATEGORY",
    "JobAbortedRecord",
    "JobErrorRecord",
    "record_class_for",
]
