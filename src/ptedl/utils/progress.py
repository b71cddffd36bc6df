"""Console reporting on stderr using Rich: log lines, summaries, parse errors."""

from __future__ import annotations

from datetime import datetime

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ptedl.errors import EDLParseError

console = Console(stderr=True)

ICONS = {
    "success": "[green]✓[/green]",
    "warning": "[yellow]⚠[/yellow]",
    "error": "[red]✗[/red]",
}


def _timestamp() -> str:
    return f"[dim]\\[{datetime.now():%H:%M:%S}][/dim]"


def log(message: str, *, style: str = "bold") -> None:
    console.print(f"{_timestamp()} {message}", style=style, highlight=False)


def log_step(step: str, message: str) -> None:
    """Log one parser step, e.g. the per-file track and event counts."""
    log(f"[bold cyan]{step}[/bold cyan] {message}", style="")


def log_success(message: str) -> None:
    log(f"{ICONS['success']} {message}", style="")


def log_warning(message: str) -> None:
    log(f"{ICONS['warning']} {message}", style="")


def log_error(message: str) -> None:
    log(f"{ICONS['error']} {message}", style="")


def _details_table(rows: dict) -> Table:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold")
    table.add_column()
    for key, value in rows.items():
        table.add_row(key, escape(str(value)))
    return table


def show_summary(title: str, details: dict) -> None:
    """Show a key/value panel, e.g. the header fields of a parsed session."""
    console.print(Panel(
        _details_table(details),
        title=f"[bold]{escape(title)}[/bold]",
        border_style="green",
    ))


def log_parse_error(err: EDLParseError, *, source: str | None = None) -> None:
    """Report a parse failure with where it happened and the offending input.

    Location rows are only shown when the error carries them; timecode errors
    raised outside a file have none.
    """
    rows: dict[str, object] = {"Error": err.message}
    if err.line_number is not None:
        rows["Line"] = f"{source}:{err.line_number}" if source else err.line_number
    elif source:
        rows["File"] = source
    if err.section:
        rows["Section"] = err.section
    if err.context:
        rows["Context"] = err.context
    if err.line is not None:
        rows["Input"] = repr(err.line)

    console.print(Panel(
        _details_table(rows),
        title=f"[bold red]{ICONS['error']} {escape(err.kind)}[/bold red]",
        border_style="red",
    ))
