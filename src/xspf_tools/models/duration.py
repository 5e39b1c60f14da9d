"""Millisecond-precision track duration value."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class TrackDuration:
    """Duration of a track, stored in milliseconds as read from the playlist."""

    ms: int

    def to_seconds(self) -> float:
        """Convert from milliseconds to seconds."""
        return self.ms / 1000.0

    def to_minutes(self) -> float:
        """Convert from milliseconds to minutes."""
        return self.to_seconds() / 60.0

    def to_timecode(self) -> str:
        """Get "mm:ss" timecode string.

        Leftover milliseconds are dropped, and minutes are not wrapped, so a
        100 minute track renders as "100:00".
        """
        total_secs = int(self.to_seconds())
        minutes, seconds = divmod(total_secs, 60)
        return f"{minutes:02d}:{seconds:02d}"

    def __add__(self, other: Union["TrackDuration", int]) -> "TrackDuration":
        if isinstance(other, TrackDuration):
            return TrackDuration(self.ms + other.ms)
        if isinstance(other, int) and not isinstance(other, bool):
            return TrackDuration(self.ms + other)
        return NotImplemented

    __radd__ = __add__

    def __str__(self) -> str:
        return self.to_timecode()
