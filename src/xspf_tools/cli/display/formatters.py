"""Display formatters and UI helpers for CLI."""

import logging
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from ...models import ExportJob, Playlist

console = Console()
logger = logging.getLogger(__name__)


def display_playlist_summary(
    playlist: Playlist, title: str, target: Optional[Console] = None
) -> None:
    """Display the tracks of a playlist and its totals.

    Args:
        playlist: Playlist to display
        title: Title to show above the track table
        target: Console to print to (defaults to the module console)
    """
    out = target or console
    width = playlist.track_index_width

    table = Table(show_header=True, header_style="bold magenta", title=title)
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Type", style="cyan")
    table.add_column("Idx", justify="right")
    table.add_column("Name", style="green")
    table.add_column("Ext")
    table.add_column("Date")
    table.add_column("Duration", justify="right")

    for ordinal, track in enumerate(playlist.tracks, start=1):
        info = track.info
        table.add_row(
            f"{ordinal:0{width}d}",
            info.track_type.shortname,
            str(info.index),
            info.name,
            str(info.extn),
            track.date,
            track.duration_formatted,
        )

    out.print(table)

    total = playlist.total_duration

    summary_table = Table(show_header=False)
    summary_table.add_column("Metric", style="cyan")
    summary_table.add_column("Value", style="green", justify="right")

    summary_table.add_row("Tracks", str(playlist.track_count))
    summary_table.add_row("Total Duration", total.duration.to_timecode())
    if total.uncounted > 0:
        summary_table.add_row(
            "Tracks Without Duration", f"[yellow]{total.uncounted}[/yellow]"
        )

    out.print(summary_table)
    out.print()


def display_export_results(
    jobs: List[ExportJob], dry_run: bool, target: Optional[Console] = None
) -> None:
    """Display export operation results.

    Args:
        jobs: Export jobs after running
        dry_run: Whether this was a dry run
        target: Console to print to (defaults to the module console)
    """
    out = target or console

    if dry_run:
        out.print("\n[bold cyan]📀 Export (DRY RUN)[/bold cyan]\n")
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Source", style="cyan")
        table.add_column("Target", style="green")
        for job in jobs:
            table.add_row(str(job.source_path), job.target_path.name)
        out.print(table)
        return

    out.print("\n[bold green]✓ Export complete[/bold green]\n")

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Metric", style="cyan")
    table.add_column("Count", style="green", justify="right")

    table.add_row("Tracks", str(len(jobs)))
    for status in ("completed", "skipped", "failed"):
        table.add_row(
            status.title(), str(sum(1 for job in jobs if job.status == status))
        )

    out.print(table)

    failed = [job for job in jobs if job.status == "failed"]
    if failed:
        out.print(f"\n[yellow]⚠️  {len(failed)} error(s) occurred:[/yellow]")
        for job in failed[:10]:
            out.print(f"  • {job.source_path}: {job.error_message}")
