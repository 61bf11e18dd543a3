"""Utility helpers shared across CLI commands."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from typing import Mapping

import typer

from .formatters import RowPrinter, create_formatter


@dataclass(slots=True)
class CLIOptions:
    """Resolved options derived from the Typer context."""

    format: str = "table"
    no_color: bool = False


def get_cli_options(ctx: typer.Context) -> CLIOptions:
    """Extract :class:`CLIOptions` from the Typer context object."""

    ctx.ensure_object(dict)
    data = ctx.obj or {}
    return CLIOptions(
        format=str(data.get("format", "table")),
        no_color=bool(data.get("no_color", False)),
    )


def get_formatter(ctx: typer.Context) -> RowPrinter:
    options = get_cli_options(ctx)
    return create_formatter(options.format, no_color=options.no_color)


def emit_error(message: str, code: str, *, details: Mapping[str, object] | None = None) -> None:
    """Print a structured error payload to stderr."""

    payload: dict[str, object] = {"code": code, "message": message}
    if details:
        payload["details"] = dict(details)
    typer.echo(json.dumps(payload, ensure_ascii=False, default=str), err=True)


def render_rows(ctx: typer.Context, rows: list[dict[str, object]], columns: list[str]) -> None:
    get_formatter(ctx).print(rows, columns, stream=sys.stdout)


__all__ = ["CLIOptions", "emit_error", "get_cli_options", "get_formatter", "render_rows"]
