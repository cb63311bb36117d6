"""Doctor command for environment diagnostics."""

from __future__ import annotations

import httpx
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from adapters.http_client import build_client
from core.config import DEFAULT_REGISTRAR_URL, AppSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        with build_client(settings) as client:
            response = client.get(url)
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _console.print(f"[bold red]Invalid configuration:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    table = Table(title="names-lookup Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    missing = settings.missing_credentials()
    if missing:
        table.add_row("Credentials", "FAIL", "Missing: " + ", ".join(missing))
    else:
        table.add_row("Credentials", "OK", "API key and secret set")

    sandbox = settings.api_url.rstrip("/") == DEFAULT_REGISTRAR_URL
    table.add_row("API base_url", "OK", settings.api_url + (" (sandbox)" if sandbox else ""))
    table.add_row("Batching", "OK", f"{settings.batch_size} per request, {settings.delay_ms} ms apart")

    # Connectivity (best-effort)
    ok_http, detail_http = _check_http(settings.api_url, settings)
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if missing:
        _console.print("\n[yellow]Note:[/yellow] Run `names-lookup-doctor setup` to store credentials.")
        raise typer.Exit(code=1)


@app.command()
def setup() -> None:
    """Interactive credentials setup (stores config in the user config .env)."""

    base_url = typer.prompt("API base URL", default=DEFAULT_REGISTRAR_URL, show_default=True).strip()
    api_key = typer.prompt("API key").strip()
    api_secret = typer.prompt("API secret", hide_input=True, confirmation_prompt=False).strip()

    if not api_key or not api_secret:
        raise typer.BadParameter("API key and secret are required")

    env_path = write_user_env_vars(
        {
            "GODADDY_URL": base_url or DEFAULT_REGISTRAR_URL,
            "GODADDY_API_KEY": api_key,
            "GODADDY_API_SECRET": api_secret,
        }
    )

    _console.print(f"[green]Saved registrar config to:[/green] {env_path}")
