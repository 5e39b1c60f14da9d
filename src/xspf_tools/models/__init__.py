"""Models for the XSPF tools."""

from .duration import TrackDuration
from .extension import (
    Extension,
    KnownExtension,
    UnknownExtension,
    classify_extension,
    render_extension,
)
from .models import (
    UNTITLED,
    DurationTotal,
    ExportJob,
    FilenameInfo,
    Playlist,
    Track,
    TrackType,
)

__all__ = [
    "UNTITLED",
    "DurationTotal",
    "ExportJob",
    "Extension",
    "FilenameInfo",
    "KnownExtension",
    "Playlist",
    "Track",
    "TrackDuration",
    "TrackType",
    "UnknownExtension",
    "classify_extension",
    "render_extension",
]
