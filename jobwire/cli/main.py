"""Main entry point for the jobwire command line interface."""

from __future__ import annotations

import typer

from jobwire.core.config import get_settings
from jobwire.core.logging import configure_logging

from .formatters import create_formatter
from .wire import register as register_wire_commands


def create_app() -> typer.Typer:
    """Create a Typer application instance for jobwire."""

    app = typer.Typer(add_completion=False, help="Encode, decode and inspect worker error payloads")

    @app.callback()
    def main(
        ctx: typer.Context,
        format: str = typer.Option(
            "table",
            "--format",
            "-f",
            help="Output format (table or jsonl).",
            show_default=True,
        ),
        log_level: str | None = typer.Option(
            None,
            "--log-level",
            help="Logging level, defaults to the configured level.",
        ),
        no_color: bool = typer.Option(
            False,
            "--no-color",
            help="Disable colorized output for table format.",
        ),
    ) -> None:
        ctx.ensure_object(dict)
        normalized_format = format.strip().lower()
        try:
            create_formatter(normalized_format, no_color=no_color)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--format") from exc

        ctx.obj.update({"format": normalized_format, "no_color": no_color})
        _configure_logging(log_level)

    register_wire_commands(app)
    return app


def _configure_logging(level_name: str | None) -> None:
    settings = get_settings().logging
    file_path = str(settings.file_path) if settings.file_path is not None else None
    configure_logging(level=level_name or settings.level, file_output=file_path is not None, file_path=file_path)


app = create_app()
