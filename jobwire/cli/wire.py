"""Commands for building and inspecting error payloads."""

from __future__ import annotations

import binascii

import typer

from jobwire.core.exceptions import JobWireError
from jobwire.core.models import JobErrorRecord
from jobwire.core.wire import JobErrorCodec

from .constants import VALIDATION_EXIT_CODE
from .utils import emit_error, render_rows

RECORD_COLUMNS = ["type", "message", "code", "stack"]
SPAN_COLUMNS = ["field", "offset", "size", "value"]


def register(app: typer.Typer) -> None:
    """Register payload commands on the root CLI application."""

    app.command("encode")(encode_command)
    app.command("decode")(decode_command)
    app.command("inspect")(inspect_command)


def get_codec() -> JobErrorCodec:
    """Factory hook returning the codec used by the commands."""

    return JobErrorCodec()


def encode_command(
    ctx: typer.Context,
    category: str = typer.Option("JobError", "--category", help="Failure category."),
    message: str = typer.Option("", "--message", "-m", help="Failure message."),
    code: str | None = typer.Option(None, "--code", help="Short error code."),
    stack: str | None = typer.Option(None, "--stack", help="Stack trace text (requires --code)."),
) -> None:
    """Encode an error record and print the payload as hex."""

    try:
        record = JobErrorRecord(category=category, message=message, code=code, stack=stack)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--stack") from exc

    codec = get_codec()
    try:
        payload = codec.encode(record)
    except JobWireError as error:
        emit_error(error.message, error.error_code, details=error.details)
        raise typer.Exit(code=VALIDATION_EXIT_CODE) from error

    render_rows(ctx, [{"payload": payload.hex(), "size": len(payload)}], ["payload", "size"])


def decode_command(
    ctx: typer.Context,
    payload: str = typer.Argument(..., help="Hex encoded error payload."),
) -> None:
    """Decode a hex payload into its error record."""

    data = _parse_hex(payload)
    try:
        record = get_codec().decode(data)
    except JobWireError as error:
        emit_error(error.message, error.error_code, details=error.details)
        raise typer.Exit(code=VALIDATION_EXIT_CODE) from error

    render_rows(ctx, [record.to_payload()], RECORD_COLUMNS)


def inspect_command(
    ctx: typer.Context,
    payload: str = typer.Argument(..., help="Hex encoded error payload."),
) -> None:
    """Show where each field sits inside a hex payload."""

    data = _parse_hex(payload)
    try:
        spans = get_codec().describe(data)
    except JobWireError as error:
        emit_error(error.message, error.error_code, details=error.details)
        raise typer.Exit(code=VALIDATION_EXIT_CODE) from error

    rows = [{"field": span.name, "offset": span.offset, "size": span.size, "value": span.value} for span in spans]
    render_rows(ctx, rows, SPAN_COLUMNS)


def _parse_hex(value: str) -> bytes:
    try:
        return bytes.fromhex(value.strip())
    except (ValueError, binascii.Error) as exc:
        raise typer.BadParameter(f"Payload is not valid hex: {exc}", param_hint="PAYLOAD") from exc
