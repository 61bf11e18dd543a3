"""Tests for the CLI row printers."""

from __future__ import annotations

import io
import json

import pytest

from jobwire.cli.formatters import RowPrinter, create_formatter

ROWS = [{"field": "code", "offset": 9, "value": None}]


def test_jsonl_keeps_column_order_and_nulls() -> None:
    stream = io.StringIO()

    create_formatter(" JSONL ").print(ROWS, ["value", "field"], stream=stream)

    assert stream.getvalue().splitlines() == [json.dumps({"value": None, "field": "code"})]


def test_table_prints_placeholder_for_absent_values() -> None:
    stream = io.StringIO()

    RowPrinter(no_color=True).print(ROWS, ["field", "offset", "value"], stream=stream)

    output = stream.getvalue()
    assert "offset" in output
    assert "code" in output
    assert " - " in output or output.rstrip().endswith("-")


def test_unknown_format_is_rejected() -> None:
    with pytest.raises(ValueError, match="Available formats: table, jsonl"):
        create_formatter("yaml")
