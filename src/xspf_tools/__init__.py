"""XSPF playlist tools.

Extracts track metadata from XSPF playlists and from the naming scheme of the
track files, for listing, summarizing, JSON export and bulk copying.
"""

__version__ = "0.3.0"

from .config import Config
from .models import FilenameInfo, Playlist, Track, TrackDuration, TrackType
from .services import ExportService, FilenameParser, TrackBuilder, load_playlist

__all__ = [
    "Config",
    "ExportService",
    "FilenameInfo",
    "FilenameParser",
    "Playlist",
    "Track",
    "TrackBuilder",
    "TrackDuration",
    "TrackType",
    "load_playlist",
]
