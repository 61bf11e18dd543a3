"""Tests for rendering raised values into text."""

from __future__ import annotations

import os

import pytest

from jobwire.core.render import render_error, utf8_safe


class Unprintable:
    def __str__(self) -> str:
        raise RuntimeError("no str")

    def __repr__(self) -> str:
        raise RuntimeError("no repr")


class ReprOnly:
    def __str__(self) -> str:
        raise RuntimeError("no str")

    def __repr__(self) -> str:
        return "<ReprOnly>"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("boom", "boom"),
        (42, "42"),
        (None, "None"),
        (b"caf\xc3\xa9", "café"),
        (b"\xff", "�"),
        (ValueError("bad value"), "bad value"),
        (KeyError("missing"), "'missing'"),
    ],
)
def test_render_error_values(value: object, expected: str) -> None:
    assert render_error(value) == expected


def test_exception_without_message_renders_class_name() -> None:
    assert render_error(RuntimeError()) == "RuntimeError"


def test_render_falls_back_to_repr() -> None:
    assert render_error(ReprOnly()) == "<ReprOnly>"


def test_render_never_raises() -> None:
    assert render_error(Unprintable()) == "<unrenderable Unprintable>"


def test_lone_surrogates_are_escaped() -> None:
    name = os.fsdecode(b"caf\xe9")

    assert render_error(name) == "caf\\udce9"
    assert render_error(FileNotFoundError(f"missing {name}")) == "missing caf\\udce9"
    assert utf8_safe("plain café") == "plain café"
