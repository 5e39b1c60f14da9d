"""Data models for tracks and playlists."""

from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator

from .duration import TrackDuration
from .extension import Extension

UNTITLED = "<Untitled>"


class TrackType(str, Enum):
    """Kind of recording, as inferred from the filename."""

    UNKNOWN = "Unknown"
    VIOLIN_LAYERING = "ViolinLayering"
    MUSE_SCORE = "MuseScore"
    PIANO = "Piano"
    VOICE = "Voice"

    @property
    def shortname(self) -> str:
        """Get an abbreviated name for more compact display."""
        return _SHORTNAMES[self]

    @property
    def safe_shortname(self) -> str:
        """Get an abbreviated name that is safe for use in filenames."""
        if self is TrackType.UNKNOWN:
            return "t"
        return self.shortname


_SHORTNAMES = {
    TrackType.UNKNOWN: "?",
    TrackType.VIOLIN_LAYERING: "VL",
    TrackType.MUSE_SCORE: "MS",
    TrackType.PIANO: "P",
    TrackType.VOICE: "V",
}


class FilenameInfo(BaseModel):
    """Metadata decomposed from a single track filename."""

    track_type: TrackType = TrackType.UNKNOWN
    index: int = 0  # Sequence index in that day's sessions
    name: str
    extn: Extension

    model_config = ConfigDict(frozen=True)

    @field_serializer("extn")
    def serialize_extn(self, extn: Extension) -> str:
        """Serialize the extension as it appears in filenames."""
        return str(extn)

    def __str__(self) -> str:
        return (
            f"[{self.track_type.shortname}]  idx={self.index}, "
            f"n='{self.name}', ext={self.extn}"
        )


class Track(BaseModel):
    """A track listed in a playlist."""

    path: str  # Full percent-decoded path
    filename: str
    date: str  # Parent directory of the file
    duration: Optional[TrackDuration] = None
    info: FilenameInfo

    model_config = ConfigDict(frozen=True)

    @field_serializer("duration")
    def serialize_duration(self, duration: Optional[TrackDuration]) -> Optional[int]:
        """Serialize the duration as raw milliseconds."""
        if duration is None:
            return None
        return duration.ms

    @property
    def duration_formatted(self) -> str:
        """Get formatted duration string (mm:ss)."""
        if self.duration is None:
            return "Unknown"
        return self.duration.to_timecode()


class DurationTotal(BaseModel):
    """Summed duration of a playlist."""

    duration: TrackDuration = TrackDuration(0)
    uncounted: int = 0  # Tracks without a known duration

    model_config = ConfigDict(frozen=True)

    @field_serializer("duration")
    def serialize_duration(self, duration: TrackDuration) -> int:
        """Serialize the duration as raw milliseconds."""
        return duration.ms


class Playlist(BaseModel):
    """Tracks of a playlist, in document order."""

    tracks: List[Track] = []
    title: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    def __len__(self) -> int:
        return len(self.tracks)

    @property
    def track_count(self) -> int:
        """Get number of tracks in playlist."""
        return len(self.tracks)

    @property
    def total_duration(self) -> DurationTotal:
        """Get total duration of all tracks, and how many had none."""
        total = TrackDuration(0)
        uncounted = 0
        for track in self.tracks:
            if track.duration is None:
                uncounted += 1
            else:
                total += track.duration
        return DurationTotal(duration=total, uncounted=uncounted)

    @property
    def track_index_width(self) -> int:
        """Get digit width for zero-padding 1-based track ordinals.

        Follows the fixed export naming convention rather than a log10
        computation: 2 digits up to 99 tracks, 3 up to 999, 4 beyond.
        """
        count = self.track_count
        if count <= 99:
            return 2
        if count <= 999:
            return 3
        return 4

    def display_title(self, source_name: str) -> str:
        """Get the title to show for this playlist, e.g. "Practice - 2017.xspf"."""
        if self.title is None:
            return source_name
        return f"{self.title} - {source_name}"

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize the playlist to JSON."""
        return self.model_dump_json(indent=indent)


class ExportJob(BaseModel):
    """A single track copy from a playlist to an export directory."""

    ordinal: int  # 1-based position in the playlist
    source_path: Path
    target_path: Path
    status: str = "pending"  # pending, completed, skipped, failed
    error_message: Optional[str] = None

    @field_validator("source_path", "target_path", mode="before")
    @classmethod
    def validate_paths(cls, v: Union[str, Path]) -> Path:
        """Validate file paths."""
        return Path(v)

    model_config = ConfigDict(arbitrary_types_allowed=True)
