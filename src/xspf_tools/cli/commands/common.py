"""Helpers shared by the CLI commands."""

import logging
from pathlib import Path

import click

from ...exceptions import PlaylistParseError
from ...models import Playlist
from ...services import load_playlist

logger = logging.getLogger(__name__)


def load_playlist_or_fail(path: Path) -> Playlist:
    """Load a playlist, turning document errors into a CLI error."""
    try:
        return load_playlist(path)
    except PlaylistParseError as e:
        logger.error("Failed to load playlist: %s", e)
        raise click.ClickException(str(e))
