"""Commands that read a playlist and print information about it."""

import logging
from pathlib import Path
from typing import Any, Optional, TextIO

import click

from ..display import display_playlist_summary
from .common import load_playlist_or_fail

logger = logging.getLogger(__name__)

PLAYLIST_ARGUMENT = click.argument(
    "playlist_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
OUTPUT_OPTION = click.option(
    "--output",
    "-o",
    type=click.File("w", encoding="utf-8"),
    default="-",
    help="File to write to (defaults to stdout)",
)


@click.command("list")
@PLAYLIST_ARGUMENT
@OUTPUT_OPTION
def list_command(playlist_file: Path, output: TextIO) -> None:
    """Write the filenames of all tracks in the playlist."""
    playlist = load_playlist_or_fail(playlist_file)

    for track in playlist.tracks:
        output.write(f"{track.filename}\n")

    logger.info(f"Listed {playlist.track_count} tracks from {playlist_file.name}")


@click.command("json")
@PLAYLIST_ARGUMENT
@OUTPUT_OPTION
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=None,
    help="Indentation of the JSON output (defaults to the configured value)",
)
@click.pass_obj
def json_command(
    config: Any, playlist_file: Path, output: TextIO, indent: Optional[int]
) -> None:
    """Dump the useful info out of the playlist in JSON format."""
    playlist = load_playlist_or_fail(playlist_file)

    if indent is None:
        indent = config.json_indent if config is not None else 2

    output.write(playlist.to_json(indent=indent or None))
    output.write("\n")


@click.command("summary")
@PLAYLIST_ARGUMENT
def summary_command(playlist_file: Path) -> None:
    """Show the tracks of the playlist with their totals."""
    playlist = load_playlist_or_fail(playlist_file)

    display_playlist_summary(playlist, playlist.display_title(playlist_file.name))
