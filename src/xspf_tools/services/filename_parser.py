"""Filename parser for extracting track metadata from recording filenames.

Recording filenames follow one of a few naming schemes, for example::

    v05L-wild_west.mp3              violin layering take 5 (variant "L")
    vln_improv_01.flac              legacy violin improvisation take 1
    20170802-02-TouchedByAnAngel.mp3  MuseScore export 2 of that day

The schemes are told apart by the shape of their leading token, so the
patterns are tried in order and the first match wins.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ..exceptions import NoExtensionError
from ..models import UNTITLED, FilenameInfo, TrackType, classify_extension

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StemInfo:
    """Metadata decomposed from a filename stem (no extension yet)."""

    track_type: TrackType
    index: int
    name: str
    pattern: Optional[str] = None  # Name of the pattern that matched


@dataclass(frozen=True)
class FilenamePattern:
    """A named pattern recognizing one filename scheme.

    The regex must define an ``index`` group and may define a ``name`` group.
    Any other groups (``variant``, ``date``) are matched but not kept.
    """

    name: str
    regex: "re.Pattern[str]"
    track_type: TrackType

    def extract(self, stem: str) -> Optional[StemInfo]:
        """Extract metadata from the stem, or None if it does not match."""
        match = self.regex.fullmatch(stem)
        if match is None:
            return None

        try:
            index = int(match.group("index"))
        except (IndexError, TypeError, ValueError):
            index = 0

        groups = match.groupdict()
        name = groups.get("name") or UNTITLED

        return StemInfo(
            track_type=self.track_type,
            index=index,
            name=name,
            pattern=self.name,
        )


# Optional single-letter variant after the take number, e.g. "v05L"
_VARIANT = r"(?P<variant>[A-Za-z]?)"
_OPTIONAL_TITLE = r"(?:-(?P<name>.+))?"

DEFAULT_PATTERNS: Tuple[FilenamePattern, ...] = (
    FilenamePattern(
        name="violin_layering",
        regex=re.compile(rf"v(?P<index>\d+){_VARIANT}{_OPTIONAL_TITLE}"),
        track_type=TrackType.VIOLIN_LAYERING,
    ),
    FilenamePattern(
        name="violin_layering_legacy",
        regex=re.compile(rf"vln_layering-(?P<index>\d+){_VARIANT}{_OPTIONAL_TITLE}"),
        track_type=TrackType.VIOLIN_LAYERING,
    ),
    FilenamePattern(
        name="violin_improv_legacy",
        regex=re.compile(rf"vln_improv_(?P<index>\d+){_VARIANT}{_OPTIONAL_TITLE}"),
        track_type=TrackType.VIOLIN_LAYERING,
    ),
    FilenamePattern(
        name="muse_score",
        regex=re.compile(rf"(?P<date>\d{{8}}){_VARIANT}-(?P<index>\d+)-(?P<name>.+)"),
        track_type=TrackType.MUSE_SCORE,
    ),
)


def split_filename(filename: str) -> Tuple[str, str]:
    """Split a filename into its stem and final extension (without the dot).

    The filename is a single decoded segment and may itself contain "/".
    A lone leading dot (".hidden") does not start an extension.
    """
    stem, dot, extension = filename.rpartition(".")
    if not dot or not stem:
        return filename, ""
    return stem, extension


class FilenameParser:
    """Parser for decomposing track filenames into ``FilenameInfo``."""

    def __init__(self, patterns: Optional[Sequence[FilenamePattern]] = None) -> None:
        """Initialize parser.

        Args:
            patterns: Patterns to try, in order. Defaults to ``DEFAULT_PATTERNS``.
        """
        self.patterns: Tuple[FilenamePattern, ...] = tuple(
            DEFAULT_PATTERNS if patterns is None else patterns
        )

    def decompose(self, stem: str) -> StemInfo:
        """Decompose a filename stem.

        Never fails: if no pattern matches, the track type is unknown and the
        whole stem is used as the name.

        Args:
            stem: Filename without its extension

        Returns:
            StemInfo from the first matching pattern
        """
        for pattern in self.patterns:
            info = pattern.extract(stem)
            if info is not None:
                logger.debug(f"Stem '{stem}' matched pattern '{pattern.name}'")
                return info

        logger.debug(f"Stem '{stem}' matched no pattern")
        return StemInfo(track_type=TrackType.UNKNOWN, index=0, name=stem)

    def parse_filename(self, filename: str) -> FilenameInfo:
        """Parse a full filename (stem plus extension).

        Args:
            filename: Bare filename, e.g. "v01-tranquil.mp3"

        Returns:
            FilenameInfo with all fields filled out

        Raises:
            NoExtensionError: If the filename has no extension
        """
        stem, extension = split_filename(filename)
        if not extension:
            raise NoExtensionError(f"Filename has no extension: {filename!r}")

        info = self.decompose(stem)
        return FilenameInfo(
            track_type=info.track_type,
            index=info.index,
            name=info.name,
            extn=classify_extension(extension),
        )


_default_parser = FilenameParser()


def decompose(stem: str) -> StemInfo:
    """Decompose a filename stem using the default patterns."""
    return _default_parser.decompose(stem)


def parse_filename(filename: str) -> FilenameInfo:
    """Parse a full filename using the default patterns."""
    return _default_parser.parse_filename(filename)
