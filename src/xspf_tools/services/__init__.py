"""Services for the XSPF tools."""

from .export_service import ExportService, safe_export_filename
from .filename_parser import (
    DEFAULT_PATTERNS,
    FilenameParser,
    FilenamePattern,
    StemInfo,
    decompose,
    parse_filename,
)
from .playlist_builder import build_playlist
from .track_builder import (
    TrackBuilder,
    TrackElement,
    TrackEntry,
    track_from_element,
    track_from_path,
    track_from_uri,
)
from .xspf_reader import XspfDocument, load_playlist, parse_xspf_string, read_xspf

__all__ = [
    "DEFAULT_PATTERNS",
    "ExportService",
    "FilenameParser",
    "FilenamePattern",
    "StemInfo",
    "TrackBuilder",
    "TrackElement",
    "TrackEntry",
    "XspfDocument",
    "build_playlist",
    "decompose",
    "load_playlist",
    "parse_filename",
    "parse_xspf_string",
    "read_xspf",
    "safe_export_filename",
    "track_from_element",
    "track_from_path",
    "track_from_uri",
]
