"""Tests for the worker message glue."""

from __future__ import annotations

import pytest

from jobwire.core.exceptions import UnknownMessageTypeError
from jobwire.core.messages import SerializableJobError, WorkerMessageType, decode_message
from jobwire.core.models import JobAbortedRecord, JobErrorRecord
from jobwire.core.wire import JobErrorCodec


def test_message_is_tagged_as_job_error() -> None:
    message = SerializableJobError(7, ValueError("bad"))

    assert message.type is WorkerMessageType.JOB_ERROR
    assert message.job_id == 7
    assert message.record.category == "ValueError"
    assert message.record.code == "ValueError"


def test_message_without_error_uses_default_record() -> None:
    assert SerializableJobError(1).record == JobErrorRecord()


def test_message_wraps_existing_record() -> None:
    record = JobAbortedRecord()

    assert SerializableJobError(3, record).record is record


def test_serialize_round_trip() -> None:
    message = SerializableJobError(42, "boom")

    body = message.serialize()
    restored = SerializableJobError.deserialize(42, body)

    assert restored == message
    assert message.get_size() == len(body)


def test_custom_codec_is_used() -> None:
    codec = JobErrorCodec(max_field_bytes=1024)
    message = SerializableJobError(5, "boom", codec=codec)

    restored = SerializableJobError.deserialize(5, message.serialize(), codec=codec)

    assert restored.record == message.record


def test_decode_message_dispatches_on_type() -> None:
    body = SerializableJobError(9, KeyError("k")).serialize()

    decoded = decode_message(int(WorkerMessageType.JOB_ERROR), 9, body)

    assert isinstance(decoded, SerializableJobError)
    assert decoded.job_id == 9
    assert decoded.record.category == "KeyError"


def test_decode_message_rejects_unknown_type() -> None:
    with pytest.raises(UnknownMessageTypeError) as info:
        decode_message(250, 1, b"")

    assert info.value.message_type == 250
    assert info.value.error_code == "UNKNOWN_MESSAGE_TYPE"
