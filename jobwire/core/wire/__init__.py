"""Wire encoding for error payloads."""

from jobwire.core.wire.buffer import BufferReader, BufferWriter, var_string_size, varint_size
from jobwire.core.wire.codec import (
    FieldSpan,
    JobErrorCodec,
    decode_job_error,
    encode_job_error,
    estimate_job_error_size,
)

__all__ = [
    "BufferReader",
    "BufferWriter",
    "FieldSpan",
    "JobErrorCodec",
    "decode_job_error",
    "encode_job_error",
    "estimate_job_error_size",
    "var_string_size",
    "varint_size",
]
