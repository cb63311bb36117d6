"""CLI principal (Typer).

Uso:
    names-lookup apple,banana .ai,.com available-names.json
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from adapters.godaddy import GoDaddyAvailabilityChecker
from adapters.json_exporter import export_availability_json
from cli.ui_components import (
    build_console_hooks,
    build_invalid_entry_reporter,
    build_summary_table,
    print_banner,
    print_request_summary,
)
from core.config import AppSettings
from core.errors import ConfigurationError, InputError
from core.services.names_lookup import build_request, run_lookup

DEFAULT_TLDS = ".com"
DEFAULT_OUTPUT_FILE = "available-names.json"

app = typer.Typer(
    add_completion=False,
    help="Check domain-name availability across one or more TLDs.",
)

_console = Console()
_error_console = Console(stderr=True)


def build_checker(settings: AppSettings) -> GoDaddyAvailabilityChecker:
    return GoDaddyAvailabilityChecker(settings, on_invalid=build_invalid_entry_reporter(_error_console))


def _fail(message: str) -> typer.Exit:
    _error_console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    return typer.Exit(code=1)


@app.command()
def lookup(
    names: Optional[str] = typer.Argument(
        None,
        help="Comma-separated names, e.g. apple,banana.",
        show_default=False,
    ),
    tlds: str = typer.Argument(DEFAULT_TLDS, help="Comma-separated TLDs, e.g. .ai,.com."),
    output_file: Path = typer.Argument(
        Path(DEFAULT_OUTPUT_FILE),
        help="JSON file for the available domains (overwritten).",
    ),
    batch_size: Optional[int] = typer.Option(
        None,
        "--batch-size",
        min=1,
        max=500,
        help="Domains per registrar request (default 50).",
    ),
    delay_ms: Optional[int] = typer.Option(
        None,
        "--delay-ms",
        min=0,
        help="Pause between batches in milliseconds (default 2000).",
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Skip the banner and summary table."),
) -> None:
    """Look up every name under every TLD and save the available ones."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        raise _fail(f"Invalid configuration: {exc}") from exc
    missing = settings.missing_credentials()
    if missing:
        raise _fail(str(ConfigurationError(missing)))

    try:
        request = build_request(
            names,
            tlds,
            batch_size=batch_size or settings.batch_size,
            delay_ms=settings.delay_ms if delay_ms is None else delay_ms,
        )
    except InputError as exc:
        raise _fail(str(exc)) from exc

    if not quiet:
        print_banner(_console)
    print_request_summary(_console, request)

    hooks = build_console_hooks(_console, _error_console)
    with build_checker(settings) as checker:
        index = run_lookup(request, checker, hooks=hooks)

    export_availability_json(index=index, output_path=output_file)

    if not quiet:
        _console.print()
        _console.print(build_summary_table(index))
    _console.print(f"[green]Done![/green] Results saved to {escape(str(output_file))}")


def run() -> None:
    app()


def run_doctor() -> None:
    from cli.doctor import app as doctor_app  # noqa: PLC0415

    doctor_app()
