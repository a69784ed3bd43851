"""Utility functions for CLI operations."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table

from clip_downloader.domain.models.download import BatchDownloadResult

console = Console()


def create_progress() -> Progress:
    """Create a Rich progress bar for operations."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
    )


def create_spinner() -> Progress:
    """Create a Rich spinner for operations of unknown length."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    )


def display_error_summary(errors: list[str]) -> None:
    """Display a list of errors in a panel."""
    if not errors:
        return

    console.print(Panel(
        "\n".join(f"• {error}" for error in errors),
        title="[red]❌ Errors Found[/red]",
        border_style="red"
    ))


def display_success_message(message: str) -> None:
    """Display a success message."""
    console.print(Panel(
        f"[green]{message}[/green]",
        title="[green]✅ Success[/green]",
        border_style="green"
    ))


def display_warning_message(message: str) -> None:
    """Display a warning message."""
    console.print(Panel(
        f"[yellow]{message}[/yellow]",
        title="[yellow]⚠️ Warning[/yellow]",
        border_style="yellow"
    ))


def format_bytes(size: int) -> str:
    """Format a byte count in human-readable form."""
    if size < 1024:
        return f"{size} B"
    elif size < 1024 * 1024:
        return f"{size / 1024:.1f} KiB"
    elif size < 1024 * 1024 * 1024:
        return f"{size / (1024 * 1024):.1f} MiB"
    else:
        return f"{size / (1024 * 1024 * 1024):.2f} GiB"


def create_download_table(batch_result: BatchDownloadResult, title: str = "📊 Download Results") -> Table:
    """Create a table summarizing a batch download."""
    total_bytes = sum(r.bytes_written for r in batch_result.succeeded)

    table = Table(title=title)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right", style="green")

    table.add_row("Clips", str(batch_result.total))
    table.add_row("Downloaded", str(len(batch_result.succeeded)))
    table.add_row("Failed", f"[red]{len(batch_result.failed)}[/red]" if batch_result.has_failures else "0")
    table.add_row("Success rate", f"{batch_result.success_rate:.1f}%")
    table.add_row("Data written", format_bytes(total_bytes))
    table.add_row("Elapsed", f"{batch_result.elapsed_seconds:.1f} seconds")

    return table
