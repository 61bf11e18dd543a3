"""Tests for failure classification."""

from __future__ import annotations

import errno

import pytest

from jobwire.core.models import FailureKind, classify_failure, platform_code


@pytest.mark.parametrize(
    ("value", "kind"),
    [
        ("boom", FailureKind.VALUE),
        (0, FailureKind.VALUE),
        (object(), FailureKind.VALUE),
        (ValueError("x"), FailureKind.ERROR),
        (KeyboardInterrupt(), FailureKind.ERROR),
        (OSError("no errno"), FailureKind.ERROR),
        (FileNotFoundError(errno.ENOENT, "No such file or directory"), FailureKind.SYSTEM),
        (PermissionError(errno.EACCES, "Permission denied"), FailureKind.SYSTEM),
    ],
)
def test_classify_failure(value: object, kind: FailureKind) -> None:
    assert classify_failure(value) is kind


def test_platform_code_uses_symbolic_name() -> None:
    assert platform_code(OSError(errno.ENOENT, "No such file or directory")) == "ENOENT"


def test_platform_code_falls_back_to_number() -> None:
    assert platform_code(OSError(99999, "weird")) == "99999"
