"""Binary encoding of :class:`JobErrorRecord`.

Layout, every field a var-string::

    category | message | code? | stack?

``code`` and ``stack`` are written only when present, with no presence flag.
A decoder that runs out of bytes (or hits a bad read) on either of them treats
the field as absent; the same failure on ``category`` or ``message`` is a
:class:`MalformedPayloadError`.
"""

from __future__ import annotations

from dataclasses import dataclass

from jobwire.core.config import get_settings
from jobwire.core.exceptions import EncodingOverflowError, MalformedPayloadError
from jobwire.core.logging import get_logger
from jobwire.core.models import JobErrorRecord, record_class_for
from jobwire.core.wire.buffer import MAX_U64, BufferReader, BufferWriter, varint_size

REQUIRED_FIELDS = ("category", "message")
OPTIONAL_FIELDS = ("code", "stack")

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class FieldSpan:
    """Location of one decoded field inside a payload."""

    name: str
    offset: int
    size: int
    value: str


class JobErrorCodec:
    """Encode, decode and size error payloads."""

    def __init__(self, max_field_bytes: int | None = None) -> None:
        if max_field_bytes is None:
            max_field_bytes = get_settings().wire.max_field_bytes
        if max_field_bytes is None:
            max_field_bytes = MAX_U64
        if not 0 <= max_field_bytes <= MAX_U64:
            raise ValueError(f"max_field_bytes must be between 0 and {MAX_U64}")
        self.max_field_bytes = max_field_bytes

    def _fields(self, record: JobErrorRecord) -> list[tuple[str, bytes]]:
        fields = [("category", record.category), ("message", record.message)]
        if record.code is not None:
            fields.append(("code", record.code))
        if record.stack is not None:
            fields.append(("stack", record.stack))

        encoded = []
        for name, value in fields:
            data = value.encode("utf-8")
            if len(data) > self.max_field_bytes:
                raise EncodingOverflowError(
                    f"Field '{name}' is {len(data)} bytes, limit is {self.max_field_bytes}",
                    field=name,
                    size=len(data),
                    limit=self.max_field_bytes,
                )
            encoded.append((name, data))
        return encoded

    def encode(self, record: JobErrorRecord) -> bytes:
        writer = BufferWriter()
        for _, data in self._fields(record):
            writer.write_var_bytes(data)
        return writer.render()

    def estimate_size(self, record: JobErrorRecord) -> int:
        """Exact length of :meth:`encode` for ``record``."""

        return sum(varint_size(len(data)) + len(data) for _, data in self._fields(record))

    def decode(self, data: bytes) -> JobErrorRecord:
        values = {span.name: span.value for span in self.describe(data)}
        return record_class_for(values["category"])(**values)

    def describe(self, data: bytes) -> list[FieldSpan]:
        """Decode ``data`` into the spans of the fields it carries."""

        reader = BufferReader(data)
        spans: list[FieldSpan] = []

        for name in REQUIRED_FIELDS:
            start = reader.offset
            try:
                value = reader.read_var_string(self.max_field_bytes)
            except MalformedPayloadError as exc:
                raise MalformedPayloadError(
                    f"Cannot read required field '{name}': {exc.message}",
                    field=name,
                    offset=exc.offset,
                ) from exc
            spans.append(FieldSpan(name, start, reader.offset - start, value))

        for name in OPTIONAL_FIELDS:
            start = reader.offset
            try:
                value = reader.read_var_string(self.max_field_bytes)
            except MalformedPayloadError as exc:
                if reader.left():
                    logger.debug("Treating unreadable field {} as absent: {}", name, exc.message, offset=start)
                # stack is positional after code, so nothing past a missing code can be read either
                break
            spans.append(FieldSpan(name, start, reader.offset - start, value))

        if reader.left():
            logger.debug("Ignoring {} trailing bytes in error payload", reader.left(), offset=reader.offset)
        return spans


def _codec(codec: JobErrorCodec | None) -> JobErrorCodec:
    return codec if codec is not None else JobErrorCodec()


def encode_job_error(record: JobErrorRecord, codec: JobErrorCodec | None = None) -> bytes:
    return _codec(codec).encode(record)


def decode_job_error(data: bytes, codec: JobErrorCodec | None = None) -> JobErrorRecord:
    return _codec(codec).decode(data)


def estimate_job_error_size(record: JobErrorRecord, codec: JobErrorCodec | None = None) -> int:
    return _codec(codec).estimate_size(record)


__all__ = [
    "FieldSpan",
    "JobErrorCodec",
    "decode_job_error",
    "encode_job_error",
    "estimate_job_error_size",
]
