"""Export command for copying playlist tracks under consistent filenames."""

import logging
from pathlib import Path
from typing import Any, Optional

import click
from rich.console import Console

from ...services import ExportService
from ..display import display_export_results
from .common import load_playlist_or_fail

console = Console()
logger = logging.getLogger(__name__)


@click.command("export")
@click.argument(
    "playlist_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.argument(
    "target_dir",
    required=False,
    type=click.Path(file_okay=False, path_type=Path),
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Show the planned copies without copying anything",
)
@click.option(
    "--overwrite",
    is_flag=True,
    help="Replace files that already exist in the target directory",
)
@click.pass_obj
def export_command(
    config: Any,
    playlist_file: Path,
    target_dir: Optional[Path],
    dry_run: bool,
    overwrite: bool,
) -> None:
    """Copy the playlist's tracks into TARGET_DIR with numbered filenames."""
    if target_dir is None:
        if config is None:
            raise click.UsageError("No target directory given")
        target_dir = config.export_directory
    if config is not None:
        overwrite = overwrite or config.overwrite_existing

    playlist = load_playlist_or_fail(playlist_file)
    console.print(
        f"[bold blue]Exporting {playlist.track_count} tracks from "
        f"{playlist.display_title(playlist_file.name)} to {target_dir}[/bold blue]"
    )

    service = ExportService(overwrite=overwrite)
    jobs = service.export(playlist, target_dir, dry_run=dry_run)

    display_export_results(jobs, dry_run)

    failed = sum(1 for job in jobs if job.status == "failed")
    if failed:
        raise click.ClickException(f"{failed} track(s) failed to export")
