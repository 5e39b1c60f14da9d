"""Build ``Track`` records from playlist locations and filesystem paths."""

import logging
import re
from dataclasses import dataclass
from typing import Optional, Protocol
from urllib.parse import unquote

from ..exceptions import (
    MissingExtensionError,
    MissingLocationError,
    NoExtensionError,
    TrackPathError,
    UnsupportedUriError,
)
from ..models import Track, TrackDuration
from .filename_parser import FilenameParser

logger = logging.getLogger(__name__)

FILE_URI_PREFIX = "file:///"

# "/C:/Music/..." as left over from "file:///C:/Music/..."
_DRIVE_PATH = re.compile(r"/[A-Za-z]:/")

_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+")


class TrackElement(Protocol):
    """Source data for one track, as exposed by a playlist reader."""

    @property
    def location(self) -> Optional[str]:
        """Text of the track's location element, if any."""
        ...

    @property
    def duration(self) -> Optional[str]:
        """Text of the track's duration element, if any."""
        ...


@dataclass(frozen=True)
class TrackEntry:
    """Plain ``TrackElement`` implementation."""

    location: Optional[str] = None
    duration: Optional[str] = None


def decode_path(path: str) -> str:
    """Percent-decode a path taken from a URI (UTF-8 escapes included)."""
    return unquote(path)


def parse_duration(text: Optional[str]) -> Optional[TrackDuration]:
    """Parse duration text in milliseconds.

    Durations are best-effort: missing or non-integer text gives None.
    """
    if text is None:
        return None
    text = text.strip()
    if not _INTEGER_TEXT.fullmatch(text):
        logger.debug(f"Ignoring unparsable duration: {text!r}")
        return None
    return TrackDuration(int(text))


class TrackBuilder:
    """Builds tracks from paths, URIs and playlist track elements."""

    def __init__(self, filename_parser: Optional[FilenameParser] = None) -> None:
        """Initialize builder.

        Args:
            filename_parser: Parser used to decompose filenames
        """
        self.filename_parser = filename_parser or FilenameParser()

    def from_path(
        self, path: str, duration: Optional[TrackDuration] = None
    ) -> Track:
        """Generate a track from a file path.

        The last path segment is the filename, the one before it the date
        (recordings are filed in per-day directories).

        Args:
            path: Path using "/" separators, possibly percent-encoded
            duration: Optional known duration of the track

        Returns:
            Track with its filename info filled out

        Raises:
            TrackPathError: If the path has no "<date>/<filename>" part
            MissingExtensionError: If the filename has no extension
        """
        # Split before decoding so an escaped "/" stays inside its segment
        segments = [decode_path(segment) for segment in path.split("/")]
        full_path = "/".join(segments)
        if len(segments) < 2:
            raise TrackPathError(
                f"Path needs a parent directory and a filename: {full_path!r}"
            )
        date, filename = segments[-2], segments[-1]
        if not filename:
            raise TrackPathError(f"Path has no filename: {full_path!r}")
        if not date:
            raise TrackPathError(f"Path has no parent directory: {full_path!r}")

        try:
            info = self.filename_parser.parse_filename(filename)
        except NoExtensionError as e:
            raise MissingExtensionError(str(e)) from e

        return Track(
            path=full_path,
            filename=filename,
            date=date,
            duration=duration,
            info=info,
        )

    def from_uri(self, uri: str, duration: Optional[TrackDuration] = None) -> Track:
        """Generate a track from a ``file:///`` URI.

        Raises:
            UnsupportedUriError: If the URI is not a ``file:///`` URI
            TrackPathError: See ``from_path``
            MissingExtensionError: See ``from_path``
        """
        if not uri.startswith(FILE_URI_PREFIX):
            raise UnsupportedUriError(
                f"Unsupported URI - Must start with '{FILE_URI_PREFIX}': {uri!r}"
            )

        # Keep the root slash of POSIX paths, drop it before a drive letter
        path = uri[len(FILE_URI_PREFIX) - 1 :]
        if _DRIVE_PATH.match(path):
            path = path[1:]

        return self.from_path(path, duration)

    def from_element(self, element: TrackElement) -> Track:
        """Generate and populate a track from a playlist track element.

        Raises:
            MissingLocationError: If the element has no location
            UnsupportedUriError: See ``from_uri``
            TrackPathError: See ``from_path``
            MissingExtensionError: See ``from_path``
        """
        location = element.location
        if location is None or not location.strip():
            raise MissingLocationError("Element skipped as no location info found")

        return self.from_uri(location.strip(), parse_duration(element.duration))


_default_builder = TrackBuilder()


def track_from_path(path: str) -> Track:
    """Generate a track from a file path using the default builder."""
    return _default_builder.from_path(path)


def track_from_uri(uri: str) -> Track:
    """Generate a track from a ``file:///`` URI using the default builder."""
    return _default_builder.from_uri(uri)


def track_from_element(element: TrackElement) -> Track:
    """Generate a track from a track element using the default builder."""
    return _default_builder.from_element(element)
