"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- El pipeline del Core solo emite hooks; aquí se decide cómo pintarlos.
"""

from __future__ import annotations

from typing import Callable

from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import AvailabilityIndex, LookupRequest, LookupResult
from core.errors import RegistrarError
from core.services.names_lookup import LookupHooks


def print_banner(console: Console) -> None:
    title = Text("names-lookup", style="bold cyan")
    subtitle = Text("Domain availability across TLDs", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def print_request_summary(console: Console, request: LookupRequest) -> None:
    count = len(request.names)
    plural = "s" if count > 1 else ""
    tlds = escape(", ".join(request.tlds))
    console.print(f"[bold]Config:[/bold] {count} name{plural} | TLDs: {tlds}")
    console.print(f"[bold]{request.total_combinations:,}[/bold] total domain combinations")


def build_console_hooks(console: Console, error_console: Console) -> LookupHooks:
    """Conecta los hooks del pipeline a la consola Rich."""

    def tld_start(tld: str, total: int) -> None:
        console.print(f"\n[cyan]Checking {escape(tld)} domains...[/cyan]")

    def result(tld: str, res: LookupResult) -> None:
        if res.available:
            console.print(f"[green]Available:[/green] {escape(res.label())}")
        else:
            console.print(f"[red]Taken:[/red] {escape(res.label())}")

    def batch_done(tld: str, processed: int, total: int) -> None:
        console.print(f"[dim]Processed {processed}/{total} for {escape(tld)}[/dim]")

    def batch_failed(tld: str, exc: RegistrarError) -> None:
        detail = exc.body or str(exc)
        error_console.print(f"[yellow]API Error:[/yellow] {escape(detail)}")

    return LookupHooks(
        tld_start=tld_start,
        result=result,
        batch_done=batch_done,
        batch_failed=batch_failed,
    )


def build_summary_table(index: AvailabilityIndex) -> Table:
    """Tabla final: candidatos reportados y disponibles por TLD."""

    table = Table(title="Availability")
    table.add_column("TLD", style="cyan", no_wrap=True)
    table.add_column("Checked", style="white", justify="right")
    table.add_column("Available", style="green", justify="right")
    for tld, entries in index.available.items():
        table.add_row(escape(tld), str(index.checked.get(tld, 0)), str(len(entries)))
    return table


def build_invalid_entry_reporter(error_console: Console) -> Callable[[object, str], None]:
    """Aviso por cada entrada del registrar descartada al validar."""

    def report(item: object, reason: str) -> None:
        error_console.print(
            f"[yellow]Skipped registrar entry:[/yellow] {escape(repr(item))} ({escape(reason)})"
        )

    return report
